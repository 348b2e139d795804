"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           core/utils/validation.py
Version:        1.0.0
Description:    Validation of payment identifiers: IBAN normalization and
                ISO 7064 mod-97-10 checksum, BIC shape check and the
                recipient name requirement.
------------------------------------------------------------------------------
"""

import re

from core.logger import get_logger
from core.models.payment import NormalizedIban, ValidationResult
from core.models.types import ValidationErrorKind

logger = get_logger("validation")

BIC_RE = re.compile(r"[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}(?:[A-Z0-9]{3})?")

# Country code + two check digits
IBAN_MIN_LENGTH = 4

# Largest decimal string folded at once; 9 digits stay far below 2**53
MOD97_CHUNK_SIZE = 9

CHECK_DIGIT_PLACEHOLDER = "00"


def normalize_iban(raw: str) -> ValidationResult[NormalizedIban]:
    """
    Strips spaces from an IBAN and rejects every other formatting character.

    Args:
        raw: The IBAN as typed by the user (e.g. "AT61 1904 3002 3457 3201").

    Returns:
        A successful result holding the NormalizedIban, or a failure of kind
        INVALID_CHARACTER if anything besides 0-9, A-Z or space occurs.
    """
    kept = []
    for char in raw:
        if "0" <= char <= "9" or "A" <= char <= "Z":
            kept.append(char)
        elif char != " ":
            return ValidationResult.failure(ValidationErrorKind.INVALID_CHARACTER)
    return ValidationResult.success(NormalizedIban(value="".join(kept)))


def expand_to_digits(text: str) -> str:
    """
    Replaces letters by their two-digit codes (A=10, B=11, ..., Z=35).
    Digits are kept as they are.
    """
    parts = []
    for char in text:
        if "0" <= char <= "9":
            parts.append(char)
        else:
            parts.append(str(ord(char) - ord("A") + 10))
    return "".join(parts)


def mod97(digits: str) -> int:
    """
    Computes int(digits) % 97 for decimal strings of any length.

    The running remainder is kept as text and topped up with as many digits
    as fit into a 9 character buffer before each reduction.
    """
    remainder = ""
    position = 0
    while position < len(digits):
        take = min(len(digits) - position, MOD97_CHUNK_SIZE - len(remainder))
        remainder += digits[position:position + take]
        position += take
        remainder = str(int(remainder) % 97)
    return int(remainder) if remainder else 0


def compute_check_digits(iban: NormalizedIban) -> str:
    """
    Calculates the two check digits an IBAN must carry.
    The existing check digits of the input are ignored.

    Returns:
        The expected check digits, zero padded (e.g. "05").
    """
    value = iban.value
    # AT61 1904 ... -> 1904 ... AT00
    reordered = value[4:] + value[0:2] + CHECK_DIGIT_PLACEHOLDER
    remainder = mod97(expand_to_digits(reordered))
    return f"{98 - remainder:02d}"


def check_iban(iban: str) -> ValidationResult[NormalizedIban]:
    """
    Validates an IBAN according to ISO 13616 / ISO 7064 mod-97-10.

    Args:
        iban: The raw IBAN string, spaces allowed.

    Returns:
        A successful result holding the NormalizedIban, or a failure of kind
        INVALID_CHARACTER, MALFORMED_LENGTH or CHECKSUM_MISMATCH.
    """
    normalized = normalize_iban(iban)
    if not normalized.ok:
        logger.debug("IBAN rejected: invalid character")
        return normalized

    if len(normalized.value) < IBAN_MIN_LENGTH:
        logger.debug(f"IBAN rejected: too short ({len(normalized.value)} chars)")
        return ValidationResult.failure(ValidationErrorKind.MALFORMED_LENGTH)

    expected = compute_check_digits(normalized.value)
    if expected != normalized.value.check_digits:
        logger.debug(f"IBAN rejected: check digits {normalized.value.check_digits}, expected {expected}")
        return ValidationResult.failure(ValidationErrorKind.CHECKSUM_MISMATCH)

    return normalized


def validate_iban(iban: str) -> bool:
    """
    Returns True if the IBAN is well formed and its checksum matches.
    Never raises; malformed input simply yields False.
    """
    return check_iban(iban).ok


def check_bic(bic: str) -> ValidationResult[str]:
    """
    Performs the structural BIC check (8 or 11 characters).
    An empty BIC is accepted because the field is optional.
    """
    if not bic:
        return ValidationResult.success(bic)
    if not BIC_RE.fullmatch(bic):
        logger.debug(f"BIC rejected: '{bic}' does not match bank/country/location shape")
        return ValidationResult.failure(ValidationErrorKind.MALFORMED_SHAPE)
    return ValidationResult.success(bic)


def validate_bic(bic: str) -> bool:
    """Returns True for an empty or correctly shaped BIC."""
    return check_bic(bic).ok


def check_recipient_name(name: str) -> ValidationResult[str]:
    """The recipient name is the only mandatory free-text field."""
    if len(name) == 0:
        return ValidationResult.failure(ValidationErrorKind.EMPTY_REQUIRED_FIELD)
    return ValidationResult.success(name)
