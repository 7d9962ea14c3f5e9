"""Tests for expense record validation."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.domain.errors import ValidationError
from src.domain.models import CategorySnapshot, ExpenseRecord
from src.domain.services.validation import (
    validate_expense,
    validate_expenses,
    validate_new_category,
)


def _record(**overrides) -> SimpleNamespace:
    values = {
        "id": "e1",
        "amount": Decimal("12.30"),
        "date": date(2024, 5, 2),
        "category": SimpleNamespace(name="Food", color="#ef4444", icon=None),
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_valid_record_passes() -> None:
    """A well-formed record should not raise."""
    record = ExpenseRecord(
        id="e1",
        amount=Decimal("1.00"),
        date=date(2024, 5, 2),
        category=CategorySnapshot(name="Food", color="#ef4444"),
    )

    validate_expense(record)


def test_iso_string_date_is_accepted() -> None:
    """ISO date strings from the store should be accepted."""
    validate_expense(_record(date="2024-05-02"))


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"category": None}, "category.name"),
        ({"category": SimpleNamespace(name="  ")}, "category.name"),
        ({"amount": None}, "amount"),
        ({"amount": "abc"}, "amount"),
        ({"amount": "NaN"}, "amount"),
        ({"amount": True}, "amount"),
        ({"amount": Decimal("-0.01")}, "amount"),
        ({"amount": Decimal("0.004")}, "amount"),
        ({"amount": Decimal("0.005")}, "amount"),
        ({"amount": "12.345"}, "amount"),
        ({"amount": Decimal("1e30")}, "amount"),
        ({"amount": Decimal("100000000.00")}, "amount"),
        ({"date": "02/05/2024"}, "date"),
        ({"date": "2024-03-01garbage"}, "date"),
        ({"date": "2024-03-01Tnoon"}, "date"),
        ({"date": None}, "date"),
    ],
)
def test_malformed_records_raise(overrides, field) -> None:
    """Each malformed field should be reported with the record id."""
    with pytest.raises(ValidationError) as excinfo:
        validate_expense(_record(**overrides))

    assert excinfo.value.record_id == "e1"
    assert excinfo.value.field == field
    assert "e1" in str(excinfo.value)


def test_validate_expenses_stops_at_first_violation() -> None:
    """The first offending record should be reported."""
    records = [
        _record(id="ok"),
        _record(id="first-bad", amount=0),
        _record(id="second-bad", amount=-5),
    ]

    with pytest.raises(ValidationError) as excinfo:
        validate_expenses(records)

    assert excinfo.value.record_id == "first-bad"


def test_validation_error_is_a_value_error() -> None:
    """Callers catching ValueError should also catch ValidationError."""
    assert issubclass(ValidationError, ValueError)


def test_largest_storable_amount_passes() -> None:
    """The store's maximum amount should still be valid."""
    validate_expense(_record(amount=Decimal("99999999.99")))


def test_trailing_zeros_beyond_cents_are_accepted() -> None:
    """``12.300`` is a whole number of cents and should pass."""
    validate_expense(_record(amount=Decimal("12.300")))


def test_iso_datetime_string_is_accepted() -> None:
    """A timestamp string from the store should reduce to its date."""
    validate_expense(_record(date="2024-05-02T08:15:00"))


def test_new_category_passes() -> None:
    """A named category with a hex color should pass."""
    validate_new_category("Pets", "#A1b2C3", "🐶")
    validate_new_category("Gym", "#000000")


@pytest.mark.parametrize(
    ("name", "color", "icon", "field"),
    [
        ("P", "#aabbcc", None, "name"),
        ("x" * 51, "#aabbcc", None, "name"),
        (None, "#aabbcc", None, "name"),
        ("Pets", "red", None, "color"),
        ("Pets", "#aabbc", None, "color"),
        ("Pets", "#aabbcc\n", None, "color"),
        ("Pets", "#aabbcc", "  ", "icon"),
    ],
)
def test_malformed_new_category_raises(name, color, icon, field) -> None:
    """Bad category input should name the offending field."""
    with pytest.raises(ValidationError) as excinfo:
        validate_new_category(name, color, icon)

    assert excinfo.value.field == field
    assert "category" in str(excinfo.value)
