from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional


STATUS_DRAFT = "draft"
STATUS_SENT = "sent"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"

QUOTATION_STATUSES = (STATUS_DRAFT, STATUS_SENT, STATUS_APPROVED, STATUS_REJECTED)

_FRACTION = re.compile(r"^(.*[T ]\d{2}:\d{2}:\d{2})\.(\d+)(.*)$")


def _parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    # PostgREST emits "+00:00"; older rows may carry a trailing "Z"
    text = str(value).replace("Z", "+00:00")
    # Postgres trims trailing zeros from microseconds; fromisoformat before
    # 3.11 only takes exactly 3 or 6 fraction digits
    match = _FRACTION.match(text)
    if match:
        head, digits, tail = match.groups()
        text = f"{head}.{digits[:6].ljust(6, '0')}{tail}"
    return datetime.fromisoformat(text)


def _parse_amount(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


@dataclass(frozen=True)
class Customer:
    id: str
    user_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Customer":
        return cls(
            id=str(row["id"]),
            user_id=str(row.get("user_id", "")),
            name=row.get("name") or "",
            email=row.get("email") or None,
            phone=row.get("phone") or None,
        )


@dataclass(frozen=True)
class Quotation:
    id: str
    user_id: str
    customer_id: str
    destination: str
    travel_start_date: Optional[date]
    travel_end_date: Optional[date]
    number_of_adults: int
    number_of_children: int
    notes: Optional[str] = None
    status: str = STATUS_DRAFT
    total_amount: Decimal = Decimal("0")
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Quotation":
        return cls(
            id=str(row["id"]),
            user_id=str(row.get("user_id", "")),
            customer_id=str(row.get("customer_id", "")),
            destination=row.get("destination") or "",
            travel_start_date=_parse_date(row.get("travel_start_date")),
            travel_end_date=_parse_date(row.get("travel_end_date")),
            number_of_adults=int(row.get("number_of_adults") or 0),
            number_of_children=int(row.get("number_of_children") or 0),
            notes=row.get("notes") or None,
            status=row.get("status") or STATUS_DRAFT,
            total_amount=_parse_amount(row.get("total_amount")),
            created_at=_parse_timestamp(row.get("created_at")),
        )


@dataclass(frozen=True)
class QuotationWithCustomer:
    """A quotation row joined with the name and email of its customer."""

    quotation: Quotation
    customer_name: str
    customer_email: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "QuotationWithCustomer":
        customer = row.get("customer") or {}
        return cls(
            quotation=Quotation.from_row(row),
            customer_name=customer.get("name") or "",
            customer_email=customer.get("email") or None,
        )
