"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           core/utils/girocode.py
Version:        1.0.0
Description:    Utility to generate SEPA Credit Transfer (EPC-QR) payloads,
                commonly known as "GiroCode", and to render them as QR images.
------------------------------------------------------------------------------
"""

import qrcode
import qrcode.constants
from qrcode.image.pil import PilImage

from core.logger import get_logger, log_payload
from core.models.payment import Payload, PaymentInstruction, strip_line_breaks
from core.models.types import ErrorCorrectionLevel
from core.utils.validation import normalize_iban

logger = get_logger("girocode")

SERVICE_TAG = "BCD"
VERSION = "002"  # Version 2 allows an empty BIC
CHARACTER_SET = "1"  # UTF-8
IDENTIFICATION_CODE = "SCT"  # SEPA Credit Transfer

ERROR_CORRECTION_MAP = {
    ErrorCorrectionLevel.L: qrcode.constants.ERROR_CORRECT_L,
    ErrorCorrectionLevel.M: qrcode.constants.ERROR_CORRECT_M,
    ErrorCorrectionLevel.Q: qrcode.constants.ERROR_CORRECT_Q,
    ErrorCorrectionLevel.H: qrcode.constants.ERROR_CORRECT_H,
}


class GiroCodeGenerator:
    """
    Generates the payload string for EPC-QR codes (SEPA Credit Transfer).
    Reference: https://de.wikipedia.org/wiki/EPC-QR-Code
    """

    @staticmethod
    def generate_payload(instruction: PaymentInstruction) -> Payload:
        """
        Serializes an already validated instruction into the twelve EPC-QR lines.

        Args:
            instruction: Recipient name, IBAN and BIC must have passed validation.

        Returns:
            The payload; its text joins the lines with newlines.
        """
        normalized = normalize_iban(instruction.iban)
        if normalized.ok:
            iban = normalized.value.value
        else:
            iban = strip_line_breaks(instruction.iban.replace(" ", ""))

        # PaymentInstruction accepts any text; every field must stay on one line
        reference = strip_line_breaks(instruction.reference)
        reason = "" if reference else strip_line_breaks(instruction.reason)

        lines = [
            SERVICE_TAG,                                     # Service Tag
            VERSION,                                         # Version
            CHARACTER_SET,                                   # Character Set
            IDENTIFICATION_CODE,                             # Identification code
            strip_line_breaks(instruction.bic),              # BIC
            strip_line_breaks(instruction.recipient_name),   # Payee Name
            iban,                                            # Payee IBAN
            strip_line_breaks(instruction.amount),           # Amount, verbatim
            "",                                              # Purpose Code (unsupported)
            reference,                                       # Structured Reference
            reason,                                          # Unstructured Remittance text
            "",                                              # Information (left to the reader app)
        ]

        payload = Payload(lines=lines)
        logger.debug(f"Assembled GiroCode payload for IBAN {iban}")
        log_payload(payload.text)
        return payload

    @staticmethod
    def get_qr_image(
        payload: str,
        error_correction: ErrorCorrectionLevel = ErrorCorrectionLevel.M,
        box_size: int = 10,
        border: int = 4
    ) -> PilImage:
        """
        Generates a PIL Image for the QR code.

        Args:
            payload: The payload text.
            error_correction: QR error-correction level.
            box_size: Pixel size of a single module.
            border: Quiet zone width in modules.

        Returns:
            The Pillow-backed QR image.
        """
        qr = qrcode.QRCode(
            version=1,
            error_correction=ERROR_CORRECTION_MAP[ErrorCorrectionLevel(error_correction)],
            box_size=box_size,
            border=border,
            image_factory=PilImage,
        )
        qr.add_data(payload.encode("utf-8"))
        qr.make(fit=True)
        logger.debug(f"Rendered QR version {qr.version} (level {ErrorCorrectionLevel(error_correction).value})")
        return qr.make_image(fill_color="black", back_color="white")
