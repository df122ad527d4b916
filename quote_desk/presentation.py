from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from quote_desk.models import (
    QuotationWithCustomer,
    STATUS_APPROVED,
    STATUS_DRAFT,
    STATUS_REJECTED,
    STATUS_SENT,
)


STATUS_CLASSES = {
    STATUS_DRAFT: "neutral",
    STATUS_SENT: "accent",
    STATUS_APPROVED: "positive",
    STATUS_REJECTED: "negative",
}
DEFAULT_STATUS_CLASS = "neutral"

DATE_FORMAT = "%b %d"
_AMOUNT_STEP = Decimal("0.001")


@dataclass(frozen=True)
class DisplayRow:
    id: str
    destination: str
    customer_name: str
    status_label: str
    status_class: str
    start_date_label: str
    end_date_label: str
    party_size: str
    amount_label: str
    created_at_label: str


def status_class(status: str) -> str:
    return STATUS_CLASSES.get(status, DEFAULT_STATUS_CLASS)


def format_travel_date(value: Optional[date]) -> str:
    if value is None:
        return ""
    return value.strftime(DATE_FORMAT)


def format_party_size(adults: int, children: int) -> str:
    label = f"{adults}A"
    if children > 0:
        label += f", {children}C"
    return label


def format_amount(amount: Decimal, currency_symbol: str = "$") -> str:
    """Grouped decimal, at most three fraction digits, e.g. $1,234.5"""
    value = Decimal(amount).quantize(_AMOUNT_STEP, rounding=ROUND_HALF_UP)
    text = f"{value:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return f"{currency_symbol}{text}"


def present(item: QuotationWithCustomer, currency_symbol: str = "$") -> DisplayRow:
    q = item.quotation
    return DisplayRow(
        id=q.id,
        destination=q.destination,
        customer_name=item.customer_name,
        status_label=q.status,
        status_class=status_class(q.status),
        start_date_label=format_travel_date(q.travel_start_date),
        end_date_label=format_travel_date(q.travel_end_date),
        party_size=format_party_size(q.number_of_adults, q.number_of_children),
        amount_label=format_amount(q.total_amount, currency_symbol),
        created_at_label=q.created_at.strftime("%Y-%m-%d %H:%M") if q.created_at else "",
    )
