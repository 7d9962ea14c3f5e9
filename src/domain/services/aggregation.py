"""Aggregation engine deriving dashboard metrics from expense records.

Every function here is pure: it reads its input, allocates fresh output,
and never logs or performs I/O. Money is summed as integer cents and
exposed as two-place Decimals.
"""

from collections.abc import Sequence
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from src.domain.models import CategoryTotal, DashboardSummary, ExpenseRecord
from src.domain.services.validation import validate_expenses
from src.utils.date_utils import coerce_date, month_bounds
from src.utils.decimal_utils import (
    CENT,
    coerce_decimal,
    from_cents,
    percentage,
    to_cents,
)


def summarize(
    expenses: Sequence[ExpenseRecord],
    as_of: date,
) -> DashboardSummary:
    """Compute the dashboard summary for a snapshot of expense records.

    Args:
        expenses: Expense records in any order; may be empty.
        as_of: Reference "today" selecting the current month window.

    Returns:
        DashboardSummary: Totals, average and per-category aggregates.

    Raises:
        TypeError: If ``expenses`` is not a list/tuple or ``as_of`` is
            not a date.
        ValidationError: If any record is malformed.
    """
    records = _require_records(expenses)
    reference = _require_date(as_of)
    validate_expenses(records)

    total_cents = sum(_cents(record) for record in records)
    count = len(records)
    total_amount = from_cents(total_cents)
    if count:
        average_amount = (total_amount / count).quantize(
            CENT, rounding=ROUND_HALF_UP
        )
    else:
        average_amount = from_cents(0)

    return DashboardSummary(
        total_amount=total_amount,
        monthly_amount=monthly_total(records, reference),
        transaction_count=count,
        average_amount=average_amount,
        category_totals=tuple(group_by_category(records)),
        as_of=reference,
    )


def monthly_total(
    expenses: Sequence[ExpenseRecord],
    as_of: date,
) -> Decimal:
    """Sum amounts dated within the calendar month of ``as_of``.

    Both the first and last day of the month are included.
    """
    month_start, month_end = month_bounds(_require_date(as_of))
    cents = sum(
        _cents(record)
        for record in expenses
        if month_start <= coerce_date(record.date) <= month_end
    )
    return from_cents(cents)


def group_by_category(
    expenses: Sequence[ExpenseRecord],
) -> list[CategoryTotal]:
    """Group amounts by category name in first-occurrence order.

    The color and icon of the first record seen for a name are kept even
    when later records carry a different snapshot.
    """
    totals: dict[str, int] = {}
    counts: dict[str, int] = {}
    first_seen: dict[str, ExpenseRecord] = {}
    for record in expenses:
        name = record.category.name
        if name not in totals:
            first_seen[name] = record
            totals[name] = _cents(record)
            counts[name] = 1
        else:
            totals[name] += _cents(record)
            counts[name] += 1

    return [
        CategoryTotal(
            name=name,
            accumulated_amount=from_cents(cents),
            color=first_seen[name].category.color,
            icon=first_seen[name].category.icon,
            transaction_count=counts[name],
        )
        for name, cents in totals.items()
    ]


def category_share(amount: Decimal, total: Decimal) -> Decimal:
    """Return the percentage of ``total`` held by ``amount``."""
    return percentage(amount, total)


def _cents(record: ExpenseRecord) -> int:
    return to_cents(coerce_decimal(record.amount))


def _require_records(expenses) -> Sequence[ExpenseRecord]:
    if not isinstance(expenses, (list, tuple)):
        raise TypeError(
            "expenses must be a list or tuple of ExpenseRecord, "
            f"got {type(expenses).__name__}"
        )
    return expenses


def _require_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TypeError(
            f"as_of must be a datetime.date, got {type(value).__name__}"
        )
    return value


__all__ = [
    "summarize",
    "monthly_total",
    "group_by_category",
    "category_share",
]
