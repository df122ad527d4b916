from datetime import date

import pytest

from quote_desk.errors import ValidationError
from quote_desk.validation import validate_intake


def _errors_for(raw):
    with pytest.raises(ValidationError) as exc:
        validate_intake(raw)
    return exc.value


def test_valid_intake_is_typed_and_normalised(raw_intake):
    v = validate_intake(raw_intake)
    assert v.customer_name == "Jane Doe"
    assert v.customer_email is None
    assert v.customer_phone is None
    assert v.notes is None
    assert v.destination == "Dubai, UAE"
    assert v.start_date == date(2025, 6, 1)
    assert v.end_date == date(2025, 6, 10)
    assert (v.adults, v.children) == (2, 1)


def test_name_and_destination_are_trimmed(raw_intake):
    raw_intake.update(customer_name="  Jane Doe  ", destination="\tParis ", customer_phone=" 555-0100 ")
    v = validate_intake(raw_intake)
    assert v.customer_name == "Jane Doe"
    assert v.destination == "Paris"
    assert v.customer_phone == "555-0100"


@pytest.mark.parametrize("field, message", [
    ("customer_name", "Customer name is required"),
    ("destination", "Destination is required"),
])
@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_required_text_fails(raw_intake, field, message, blank):
    raw_intake[field] = blank
    err = _errors_for(raw_intake)
    assert err.errors[0].field == field
    assert err.message == message


def test_name_longer_than_200_fails(raw_intake):
    raw_intake["customer_name"] = "x" * 201
    assert _errors_for(raw_intake).errors[0].field == "customer_name"


def test_adults_zero_reports_at_least_one(raw_intake):
    raw_intake["adults"] = 0
    err = _errors_for(raw_intake)
    assert err.errors[0].field == "adults"
    assert "at least 1" in err.message.lower()


@pytest.mark.parametrize("field, value", [
    ("adults", -1),
    ("adults", 101),
    ("children", -1),
    ("children", 101),
    ("adults", True),
    ("adults", 1.5),
    ("children", "many"),
])
def test_party_counts_out_of_range_fail(raw_intake, field, value):
    raw_intake[field] = value
    assert _errors_for(raw_intake).errors[0].field == field


def test_party_count_bounds_are_inclusive(raw_intake):
    raw_intake.update(adults=100, children=0)
    v = validate_intake(raw_intake)
    assert (v.adults, v.children) == (100, 0)
    raw_intake.update(adults=1, children=100)
    v = validate_intake(raw_intake)
    assert (v.adults, v.children) == (1, 100)


def test_integral_strings_from_forms_are_accepted(raw_intake):
    raw_intake.update(adults="3", children=" 0 ")
    v = validate_intake(raw_intake)
    assert (v.adults, v.children) == (3, 0)


def test_invalid_email_fails(raw_intake):
    raw_intake["customer_email"] = "not-an-email"
    err = _errors_for(raw_intake)
    assert err.errors[0].field == "customer_email"
    assert err.message == "Invalid email"


def test_valid_email_is_kept(raw_intake):
    raw_intake["customer_email"] = "jane@example.com"
    assert validate_intake(raw_intake).customer_email == "jane@example.com"


def test_email_longer_than_255_fails(raw_intake):
    raw_intake["customer_email"] = "a" * 250 + "@example.com"
    assert _errors_for(raw_intake).errors[0].field == "customer_email"


def test_phone_longer_than_50_fails(raw_intake):
    raw_intake["customer_phone"] = "1" * 51
    assert _errors_for(raw_intake).errors[0].field == "customer_phone"


def test_notes_longer_than_2000_fail(raw_intake):
    raw_intake["notes"] = "n" * 2001
    assert _errors_for(raw_intake).errors[0].field == "notes"


@pytest.mark.parametrize("value, message", [
    ("", "Start date is required"),
    ("2025-13-40", "Start date must be a valid date (YYYY-MM-DD)"),
    ("next week", "Start date must be a valid date (YYYY-MM-DD)"),
])
def test_bad_start_date_fails(raw_intake, value, message):
    raw_intake["start_date"] = value
    assert _errors_for(raw_intake).message == message


def test_date_objects_are_accepted(raw_intake):
    raw_intake.update(start_date=date(2025, 7, 1), end_date=date(2025, 7, 3))
    v = validate_intake(raw_intake)
    assert v.start_date == date(2025, 7, 1)


def test_end_before_start_is_not_rejected(raw_intake):
    raw_intake.update(start_date="2025-06-10", end_date="2025-06-01")
    v = validate_intake(raw_intake)
    assert v.end_date < v.start_date


def test_all_violations_are_collected_in_field_order(raw_intake):
    raw_intake.update(customer_name="", destination="", adults=0, end_date="")
    err = _errors_for(raw_intake)
    assert [e.field for e in err.errors] == ["customer_name", "destination", "end_date", "adults"]
    assert err.message == "Customer name is required"
    assert len(err.messages) == 4
