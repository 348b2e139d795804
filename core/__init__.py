"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           core/__init__.py
Version:        1.0.0
Description:    Core logic package for Zahlschein2QR. Contains identifier
                validation, GiroCode payload encoding and rendering, and the
                submission flow shared by the GUI and the command line.
------------------------------------------------------------------------------
"""
