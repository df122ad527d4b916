from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from db.models import CUSTOMERS_TABLE, QUOTATIONS_TABLE
from db.store import StoreError
from quote_desk.errors import CustomerLookupError, CustomerWriteError, QuotationWriteError
from quote_desk.models import Customer, STATUS_DRAFT
from quote_desk.validation import ValidatedIntake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntakeReceipt:
    quotation_id: str
    customer_id: str


# --- QUOTATION INTAKE ---------------------------------------------------------

def create_quotation(store, owner_id: str, validated: ValidatedIntake) -> IntakeReceipt:
    """
    Persist a Customer and then a draft Quotation referencing it.

    The two inserts are not atomic. If the quotation insert fails the
    customer stays behind and QuotationWriteError carries its id, so the
    caller can retry with insert_quotation() or discard_orphan_customer().
    """
    # 1. Insert customer
    try:
        customer_row = store.insert(
            CUSTOMERS_TABLE,
            {"user_id": owner_id, **validated.customer_record()},
        )
    except StoreError as e:
        logger.error("Customer insert failed for owner %s: %s", owner_id, e.message)
        raise CustomerWriteError(e.message, cause=e) from e

    customer_id = str(customer_row["id"])
    logger.info("Created customer %s for owner %s", customer_id, owner_id)

    # 2. Insert quotation
    quotation_id = insert_quotation(store, owner_id, customer_id, validated)
    return IntakeReceipt(quotation_id=quotation_id, customer_id=customer_id)


def insert_quotation(store, owner_id: str, customer_id: str, validated: ValidatedIntake) -> str:
    """Insert the quotation for an already persisted customer; returns its id."""
    record = {
        "user_id": owner_id,
        "customer_id": customer_id,
        "destination": validated.destination,
        "travel_start_date": validated.start_date.isoformat(),
        "travel_end_date": validated.end_date.isoformat(),
        "number_of_adults": validated.adults,
        "number_of_children": validated.children,
        "notes": validated.notes,
        "status": STATUS_DRAFT,
        "total_amount": 0,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }

    try:
        quotation_row = store.insert(QUOTATIONS_TABLE, record)
    except StoreError as e:
        logger.error(
            "Quotation insert failed for owner %s, customer %s left without quotation: %s",
            owner_id, customer_id, e.message,
        )
        raise QuotationWriteError(e.message, customer_id=customer_id, cause=e) from e

    quotation_id = str(quotation_row["id"])
    logger.info("Created quotation %s for customer %s", quotation_id, customer_id)
    return quotation_id


# --- CUSTOMER LOOKUP & ORPHAN CLEANUP ----------------------------------------

def get_customer(store, owner_id: str, customer_id: str) -> Optional[Customer]:
    try:
        rows = store.query(CUSTOMERS_TABLE, filters={"id": customer_id, "user_id": owner_id})
    except StoreError as e:
        raise CustomerLookupError(e.message, cause=e) from e

    if not rows:
        return None
    return Customer.from_row(rows[0])


def find_orphan_customers(store, owner_id: str) -> List[Customer]:
    """Customers of the owner that no quotation references."""
    try:
        customers = store.query(CUSTOMERS_TABLE, filters={"user_id": owner_id})
        quotations = store.query(QUOTATIONS_TABLE, columns="customer_id", filters={"user_id": owner_id})
    except StoreError as e:
        raise CustomerLookupError(e.message, cause=e) from e

    referenced = {str(q["customer_id"]) for q in quotations}
    return [Customer.from_row(c) for c in customers if str(c["id"]) not in referenced]


def discard_orphan_customer(store, owner_id: str, customer_id: str) -> bool:
    """Delete a customer left behind by a failed intake. Refuses referenced customers."""
    try:
        referencing = store.query(
            QUOTATIONS_TABLE,
            columns="id",
            filters={"user_id": owner_id, "customer_id": customer_id},
        )
        if referencing:
            logger.warning("Customer %s still has %d quotation(s); not deleting", customer_id, len(referencing))
            return False

        deleted = store.delete(CUSTOMERS_TABLE, {"id": customer_id, "user_id": owner_id})
    except StoreError as e:
        logger.error("Cleanup of customer %s failed: %s", customer_id, e.message)
        raise CustomerLookupError(e.message, cause=e) from e

    if deleted:
        logger.info("Discarded orphan customer %s for owner %s", customer_id, owner_id)
    return deleted > 0
