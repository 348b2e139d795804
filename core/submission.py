"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           core/submission.py
Version:        1.0.0
Description:    Runs one payment form submission: validates the raw fields in
                order, builds the payment instruction, encodes the GiroCode
                payload and hands it to an optional renderer.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from core.logger import get_logger
from core.models.payment import Payload, PaymentInstruction, RawPaymentForm
from core.models.types import ErrorCorrectionLevel, PaymentField, ValidationErrorKind
from core.utils.girocode import GiroCodeGenerator
from core.utils.validation import check_bic, check_iban, check_recipient_name

logger = get_logger("submission")

# Renderer collaborator: (payload text, error-correction level) -> rendered code
Renderer = Callable[[str, ErrorCorrectionLevel], Any]

# One generic message per field category
FIELD_MESSAGES = {
    PaymentField.RECIPIENT_NAME: "invalid recipient name",
    PaymentField.IBAN: "invalid IBAN",
    PaymentField.BIC: "invalid BIC",
}


@dataclass
class SubmissionResult:
    """
    Outcome of one submission attempt.
    On failure only field, kind and message are set.
    """

    ok: bool
    field: Optional[PaymentField] = None
    kind: Optional[ValidationErrorKind] = None
    message: str = ""
    payload: Optional[Payload] = None
    rendered: Any = None


class SubmissionOrchestrator:
    """
    Thin adapter between an input source (form window, CLI) and the core.
    Every submission is processed to completion before returning.
    """

    ERROR_CORRECTION: ErrorCorrectionLevel = ErrorCorrectionLevel.M

    def __init__(self, renderer: Optional[Renderer] = None) -> None:
        """
        Args:
            renderer: Called with the payload text once all checks pass.
                      Exceptions raised by it are not caught here.
        """
        self.renderer = renderer

    def _fail(self, field: PaymentField, kind: ValidationErrorKind) -> SubmissionResult:
        logger.info(f"Submission rejected: {field.value} ({kind.value})")
        return SubmissionResult(ok=False, field=field, kind=kind, message=FIELD_MESSAGES[field])

    def submit(self, form: RawPaymentForm) -> SubmissionResult:
        """
        Validates recipient name, IBAN and BIC (in that order) and stops at
        the first failure. No payload is built and no renderer is called
        unless all of them pass.

        Args:
            form: The raw field values.

        Returns:
            The SubmissionResult.
        """
        name_check = check_recipient_name(form.recipient_name)
        if not name_check.ok:
            return self._fail(PaymentField.RECIPIENT_NAME, name_check.kind)

        iban_check = check_iban(form.iban)
        if not iban_check.ok:
            return self._fail(PaymentField.IBAN, iban_check.kind)

        bic_check = check_bic(form.bic)
        if not bic_check.ok:
            return self._fail(PaymentField.BIC, bic_check.kind)

        instruction = PaymentInstruction(
            recipient_name=form.recipient_name,
            iban=iban_check.value.value,
            bic=form.bic,
            amount=form.amount,
            reference=form.reference,
            reason=form.reason,
        )
        payload = GiroCodeGenerator.generate_payload(instruction)

        rendered = None
        if self.renderer is not None:
            rendered = self.renderer(payload.text, self.ERROR_CORRECTION)

        logger.info(f"Submission accepted for IBAN {instruction.iban[:4]}...")
        return SubmissionResult(ok=True, payload=payload, rendered=rendered)
