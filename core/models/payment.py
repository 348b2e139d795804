"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           core/models/payment.py
Version:        1.0.0
Description:    Pydantic models for a single SEPA credit transfer: the raw form
                input, the validated payment instruction, the normalized IBAN
                view and the twelve-field EPC-QR payload.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.models.types import ValidationErrorKind

T = TypeVar("T")

PAYLOAD_FIELD_COUNT = 12


def strip_line_breaks(text: str) -> str:
    """Removes CR and LF characters; payload fields are newline separated."""
    return text.replace("\r", "").replace("\n", "")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """
    Tagged success/failure record returned by every checking function.
    A result is successful exactly when no error kind is set.
    """

    kind: Optional[ValidationErrorKind] = None
    value: Optional[T] = None

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ValidationResult[T]":
        return cls(kind=None, value=value)

    @classmethod
    def failure(cls, kind: ValidationErrorKind) -> "ValidationResult[T]":
        return cls(kind=kind, value=None)


class NormalizedIban(BaseModel):
    """
    Read-only copy of an IBAN with all spaces removed.
    Only produced by the normalizer, so every character is in [0-9A-Z].
    """
    model_config = ConfigDict(frozen=True)

    value: str

    @property
    def country_code(self) -> str:
        return self.value[0:2]

    @property
    def check_digits(self) -> str:
        return self.value[2:4]

    @property
    def bban(self) -> str:
        """Basic Bank Account Number (everything after the check digits)."""
        return self.value[4:]

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value


class RawPaymentForm(BaseModel):
    """
    The six untrusted text values supplied by an input adapter.
    None is accepted and treated as an empty field.
    """
    model_config = ConfigDict(extra="ignore")

    recipient_name: str = ""
    iban: str = ""
    bic: str = ""
    amount: str = ""
    reference: str = ""
    reason: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Form widgets and argparse report missing values as None."""
        return "" if v is None else v

    @field_validator("*", mode="after")
    @classmethod
    def drop_line_breaks(cls, v: str) -> str:
        """Single-line fields: CR/LF are removed like a text input does."""
        return strip_line_breaks(v)


class PaymentInstruction(BaseModel):
    """
    A payment instruction whose recipient name, IBAN and BIC have passed
    validation. Built per submission and discarded after encoding.
    """
    model_config = ConfigDict(frozen=True)

    recipient_name: str
    iban: str
    bic: str = ""
    amount: str = ""
    reference: str = ""
    reason: str = ""

    @property
    def effective_reason(self) -> str:
        """Structured reference and free-text reason are mutually exclusive."""
        return "" if self.reference else self.reason


class Payload(BaseModel):
    """Ordered EPC-QR text fields handed to the renderer."""
    model_config = ConfigDict(frozen=True)

    lines: List[str] = Field(min_length=PAYLOAD_FIELD_COUNT, max_length=PAYLOAD_FIELD_COUNT)

    @field_validator("lines")
    @classmethod
    def single_line_fields(cls, v: List[str]) -> List[str]:
        """A line break inside a field would shift every following field."""
        for index, line in enumerate(v, start=1):
            if "\n" in line or "\r" in line:
                raise ValueError(f"payload field {index} contains a line break")
        return v

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __str__(self) -> str:
        return self.text
