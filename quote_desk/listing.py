from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from db.models import QUOTATIONS_TABLE, QUOTATION_WITH_CUSTOMER_COLUMNS
from db.store import StoreError
from quote_desk.errors import ListingReadError
from quote_desk.models import QuotationWithCustomer

logger = logging.getLogger(__name__)


def _fetch(store, filters: Dict[str, Any], ordered: bool) -> List[QuotationWithCustomer]:
    try:
        rows = store.query(
            QUOTATIONS_TABLE,
            columns=QUOTATION_WITH_CUSTOMER_COLUMNS,
            filters=filters,
            order_by="created_at" if ordered else None,
            descending=ordered,
        )
    except StoreError as e:
        raise ListingReadError(e.message, cause=e) from e

    try:
        return [QuotationWithCustomer.from_row(row) for row in rows]
    except (ValueError, TypeError, KeyError) as e:
        raise ListingReadError(f"Unreadable quotation row: {e}", cause=e) from e


def list_quotations(store, owner_id: str) -> List[QuotationWithCustomer]:
    """All quotations of the owner with their customer, most recent first."""
    items = _fetch(store, {"user_id": owner_id}, ordered=True)
    logger.debug("Fetched %d quotation(s) for owner %s", len(items), owner_id)
    return items


def get_quotation(store, owner_id: str, quotation_id: str) -> Optional[QuotationWithCustomer]:
    items = _fetch(store, {"id": quotation_id, "user_id": owner_id}, ordered=False)
    return items[0] if items else None
