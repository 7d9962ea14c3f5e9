"""Domain validation helpers for expense records and categories."""

import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from src.domain.constants import MAX_AMOUNT
from src.domain.errors import ValidationError
from src.domain.models import ExpenseRecord
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import CENT, coerce_decimal

HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")
CATEGORY_NAME_LENGTH = (2, 50)


def validate_expense(record: ExpenseRecord) -> None:
    """Fail fast when a record cannot be aggregated safely.

    Amounts must be whole cents: a value such as ``0.004`` is rejected
    rather than rounded, so the summary never differs from the records.

    Args:
        record: Expense record to check.

    Raises:
        ValidationError: If the category name, amount, or date is invalid.
    """
    record_id = getattr(record, "id", None)
    category = getattr(record, "category", None)
    name = getattr(category, "name", None)
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(
            record_id, "category.name", "category name is missing"
        )

    raw_amount = getattr(record, "amount", None)
    if raw_amount is None:
        raise ValidationError(record_id, "amount", "amount is missing")
    try:
        amount = coerce_decimal(raw_amount)
    except ValueError as exc:
        raise ValidationError(record_id, "amount", str(exc)) from exc
    if amount <= 0:
        raise ValidationError(
            record_id, "amount", f"amount must be positive, got {amount}"
        )
    if amount > MAX_AMOUNT:
        raise ValidationError(
            record_id, "amount", f"amount exceeds {MAX_AMOUNT}, got {amount}"
        )
    if not _is_whole_cents(amount):
        raise ValidationError(
            record_id,
            "amount",
            f"amount must have at most two decimal places, got {amount}",
        )

    try:
        coerce_date(getattr(record, "date", None))
    except ValueError as exc:
        raise ValidationError(record_id, "date", str(exc)) from exc


def validate_expenses(records: Iterable[ExpenseRecord]) -> None:
    """Validate records in order, stopping at the first violation."""
    for record in records:
        validate_expense(record)


def validate_new_category(name, color, icon=None) -> None:
    """Check a user-defined category before it is stored.

    Raises:
        ValidationError: If the name length or the ``#RRGGBB`` color is
            invalid, or the icon is blank.
    """
    low, high = CATEGORY_NAME_LENGTH
    if not isinstance(name, str) or not low <= len(name.strip()) <= high:
        raise ValidationError(
            None,
            "name",
            f"name must have {low} to {high} characters",
            kind="category",
        )
    if not isinstance(color, str) or not HEX_COLOR.fullmatch(color):
        raise ValidationError(
            None,
            "color",
            f"color must look like #RRGGBB, got {color!r}",
            kind="category",
        )
    if icon is not None and (not isinstance(icon, str) or not icon.strip()):
        raise ValidationError(
            None, "icon", "icon must not be blank", kind="category"
        )


def _is_whole_cents(amount: Decimal) -> bool:
    try:
        return amount == amount.quantize(CENT)
    except InvalidOperation:
        return False
