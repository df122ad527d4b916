from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

from quote_desk.errors import IntakeError, ListingReadError, QuotationWriteError, ValidationError
from quote_desk.intake import create_quotation
from quote_desk.listing import get_quotation, list_quotations
from quote_desk.models import QuotationWithCustomer
from quote_desk.presentation import DisplayRow, present
from quote_desk.validation import validate_intake

logger = logging.getLogger(__name__)


# --- OUTCOMES -----------------------------------------------------------------

@dataclass(frozen=True)
class Created:
    quotation_id: str
    customer_id: str
    ok: bool = field(default=True, init=False)

    @property
    def message(self) -> str:
        return "Quotation created successfully"


@dataclass(frozen=True)
class ValidationFailed:
    messages: List[str]
    ok: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return self.messages[0] if self.messages else "Invalid input"


@dataclass(frozen=True)
class WriteFailed:
    reason: str
    # set when the customer was written but its quotation was not
    customer_id: Optional[str] = None
    ok: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return self.reason or "Failed to create quotation"


# --- CALLER-FACING OPERATIONS -------------------------------------------------

def submit_quotation(store, raw: Mapping[str, Any], owner_id: str):
    """Validate and persist one intake. Returns Created, ValidationFailed or WriteFailed."""
    try:
        validated = validate_intake(raw)
    except ValidationError as e:
        logger.info("Quotation intake rejected: %s", e.message)
        return ValidationFailed(messages=e.messages)

    try:
        receipt = create_quotation(store, owner_id, validated)
    except QuotationWriteError as e:
        return WriteFailed(reason=e.message, customer_id=e.customer_id)
    except IntakeError as e:
        return WriteFailed(reason=e.message)

    return Created(quotation_id=receipt.quotation_id, customer_id=receipt.customer_id)


def refresh_quotations(
    store,
    owner_id: str,
    previous: Sequence[DisplayRow] = (),
    currency_symbol: str = "$",
) -> List[DisplayRow]:
    """Re-fetch the owner's listing; keeps `previous` if the read fails."""
    try:
        items = list_quotations(store, owner_id)
    except ListingReadError as e:
        logger.warning("Quotation listing failed for owner %s: %s", owner_id, e.message)
        return list(previous)

    return [present(item, currency_symbol) for item in items]


def fetch_quotations(store, owner_id: str) -> List[QuotationWithCustomer]:
    """Best-effort listing for views that need the raw rows; empty on failure."""
    try:
        return list_quotations(store, owner_id)
    except ListingReadError as e:
        logger.warning("Quotation listing failed for owner %s: %s", owner_id, e.message)
        return []


def find_quotation(store, owner_id: str, quotation_id: str) -> Optional[QuotationWithCustomer]:
    try:
        return get_quotation(store, owner_id, quotation_id)
    except ListingReadError as e:
        logger.warning("Quotation %s could not be read for owner %s: %s", quotation_id, owner_id, e.message)
        return None
