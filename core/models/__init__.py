"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           core/models/__init__.py
Version:        1.0.0
Description:    Package initializer for core data models. Exports the payment
                instruction, payload and validation result types.
------------------------------------------------------------------------------
"""

from .types import ValidationErrorKind, ErrorCorrectionLevel, PaymentField
from .payment import NormalizedIban, Payload, PaymentInstruction, RawPaymentForm, ValidationResult
