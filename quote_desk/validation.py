from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Mapping, Optional

from email_validator import validate_email as _validate_email, EmailNotValidError

from quote_desk.errors import FieldError, ValidationError


INTAKE_FIELDS = [
    "customer_name",
    "customer_email",
    "customer_phone",
    "destination",
    "start_date",
    "end_date",
    "adults",
    "children",
    "notes",
]

NAME_MAX = 200
EMAIL_MAX = 255
PHONE_MAX = 50
DESTINATION_MAX = 200
NOTES_MAX = 2000
PARTY_MAX = 100


@dataclass(frozen=True)
class ValidatedIntake:
    customer_name: str
    customer_email: Optional[str]
    customer_phone: Optional[str]
    destination: str
    start_date: date
    end_date: date
    adults: int
    children: int
    notes: Optional[str] = None

    def customer_record(self) -> dict:
        return {
            "name": self.customer_name,
            "email": self.customer_email,
            "phone": self.customer_phone,
        }


# ----------------- VALIDATORS ------------------------

def validate_email(email: str) -> bool:
    try:
        _validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def parse_date_str(val: str) -> Optional[date]:
    try:
        return datetime.strptime(val.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass but never a head count
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _check_date(raw: Mapping[str, Any], key: str, label: str, errors: List[FieldError]) -> Optional[date]:
    value = raw.get(key)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = _as_text(value).strip()
    if not text:
        errors.append(FieldError(key, f"{label} is required"))
        return None

    parsed = parse_date_str(text)
    if parsed is None:
        errors.append(FieldError(key, f"{label} must be a valid date (YYYY-MM-DD)"))
    return parsed


def _check_count(
    raw: Mapping[str, Any], key: str, minimum: int, too_low: str, too_high: str, errors: List[FieldError]
) -> Optional[int]:
    count = _as_int(raw.get(key))
    if count is None:
        errors.append(FieldError(key, f"{key.capitalize()} must be a whole number"))
    elif count < minimum:
        errors.append(FieldError(key, too_low))
    elif count > PARTY_MAX:
        errors.append(FieldError(key, too_high))
    return count


# ----------------- INTAKE ------------------------

def validate_intake(raw: Mapping[str, Any]) -> ValidatedIntake:
    """
    Validate a raw intake bag (form values) into a ValidatedIntake.

    Every field is checked independently and all violations are collected
    in field order; the raised ValidationError exposes the first one as its
    message. Empty email, phone and notes come back as None.
    """
    errors: List[FieldError] = []

    # --- Customer ---
    name = _as_text(raw.get("customer_name")).strip()
    if not name:
        errors.append(FieldError("customer_name", "Customer name is required"))
    elif len(name) > NAME_MAX:
        errors.append(FieldError("customer_name", f"Customer name must be at most {NAME_MAX} characters"))

    email = _as_text(raw.get("customer_email"))
    if email:
        if len(email) > EMAIL_MAX:
            errors.append(FieldError("customer_email", f"Email must be at most {EMAIL_MAX} characters"))
        elif not validate_email(email):
            errors.append(FieldError("customer_email", "Invalid email"))

    phone = _as_text(raw.get("customer_phone")).strip()
    if len(phone) > PHONE_MAX:
        errors.append(FieldError("customer_phone", f"Phone must be at most {PHONE_MAX} characters"))

    # --- Trip ---
    destination = _as_text(raw.get("destination")).strip()
    if not destination:
        errors.append(FieldError("destination", "Destination is required"))
    elif len(destination) > DESTINATION_MAX:
        errors.append(FieldError("destination", f"Destination must be at most {DESTINATION_MAX} characters"))

    start = _check_date(raw, "start_date", "Start date", errors)
    end = _check_date(raw, "end_date", "End date", errors)

    adults = _check_count(
        raw, "adults", 1,
        "At least 1 adult required",
        f"At most {PARTY_MAX} adults allowed",
        errors,
    )
    children = _check_count(
        raw, "children", 0,
        "Children cannot be negative",
        f"At most {PARTY_MAX} children allowed",
        errors,
    )

    notes = _as_text(raw.get("notes"))
    if len(notes) > NOTES_MAX:
        errors.append(FieldError("notes", f"Notes must be at most {NOTES_MAX} characters"))

    if errors:
        raise ValidationError(errors)

    return ValidatedIntake(
        customer_name=name,
        customer_email=email or None,
        customer_phone=phone or None,
        destination=destination,
        start_date=start,
        end_date=end,
        adults=adults,
        children=children,
        notes=notes or None,
    )
