from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


class QuoteDeskError(Exception):
    """Base class for failures scoped to a single request."""


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ValidationError(QuoteDeskError):
    """Raw intake data was rejected. Nothing has been written."""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return self.errors[0].message if self.errors else "Invalid input"

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.errors]


class IntakeError(QuoteDeskError):
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class CustomerWriteError(IntakeError):
    """Customer insert failed; no quotation was created."""


class QuotationWriteError(IntakeError):
    """Quotation insert failed after its customer was persisted."""

    def __init__(self, message: str, customer_id: str, cause: Optional[Exception] = None):
        super().__init__(message, cause)
        self.customer_id = customer_id


class ListingReadError(QuoteDeskError):
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class CustomerLookupError(IntakeError):
    """Customer lookup or orphan cleanup could not reach the store."""
