"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           core/models/types.py
Version:        1.0.0
Description:    Centralized enumeration and type definitions.
------------------------------------------------------------------------------
"""

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Reasons a raw payment field can be rejected."""
    # 1. Account Identifier (IBAN)
    INVALID_CHARACTER = "InvalidCharacter"
    MALFORMED_LENGTH = "MalformedLength"
    CHECKSUM_MISMATCH = "ChecksumMismatch"

    # 2. Bank Identifier (BIC)
    MALFORMED_SHAPE = "MalformedShape"

    # 3. Generic
    EMPTY_REQUIRED_FIELD = "EmptyRequiredField"


class ErrorCorrectionLevel(str, Enum):
    """QR error-correction levels (recoverable share of code words)."""
    L = "L"  # ~7%
    M = "M"  # ~15%
    Q = "Q"  # ~25%
    H = "H"  # ~30%


class PaymentField(str, Enum):
    """The six raw input fields collected for one credit transfer."""
    RECIPIENT_NAME = "recipient_name"
    IBAN = "iban"
    BIC = "bic"
    AMOUNT = "amount"
    REFERENCE = "reference"
    REASON = "reason"
