"""Domain models for expense records and dashboard aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.utils.decimal_utils import percentage


@dataclass(frozen=True)
class CategorySnapshot:
    """Category attributes as joined onto an expense at read time.

    Attributes:
        name: Display name, also the grouping key for totals.
        color: Hex color in ``#RRGGBB`` form.
        icon: Short glyph or token, may be empty.
        id: Stable category identifier when the store provides it.
    """

    name: str
    color: str
    icon: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class ExpenseRecord:
    """A single logged spending event."""

    id: str
    amount: Decimal
    date: date
    category: CategorySnapshot
    title: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class NewExpense:
    """Payload for inserting an expense."""

    title: str
    amount: Decimal
    category_id: str
    date: date
    notes: str | None = None


@dataclass(frozen=True)
class CategoryTotal:
    """Amount accumulated for one category name."""

    name: str
    accumulated_amount: Decimal
    color: str
    icon: str | None = None
    transaction_count: int = 0


@dataclass(frozen=True)
class DashboardSummary:
    """Derived metrics for the expense dashboard.

    Attributes:
        total_amount: Lifetime sum of all amounts.
        monthly_amount: Sum of amounts dated within the month of ``as_of``.
        transaction_count: Lifetime number of records.
        average_amount: ``total_amount / transaction_count``, zero when empty.
        category_totals: Per-category totals in first-occurrence order.
        as_of: Reference date used for the month window.
    """

    total_amount: Decimal
    monthly_amount: Decimal
    transaction_count: int
    average_amount: Decimal
    category_totals: tuple[CategoryTotal, ...]
    as_of: date | None = None

    def share_of(self, category_total: CategoryTotal) -> Decimal:
        """Return the percentage of the total held by a category."""
        return percentage(category_total.accumulated_amount, self.total_amount)

    def category_shares(self) -> list[tuple[CategoryTotal, Decimal]]:
        """Return each category total paired with its percentage share."""
        return [(item, self.share_of(item)) for item in self.category_totals]


__all__ = [
    "CategorySnapshot",
    "ExpenseRecord",
    "NewExpense",
    "CategoryTotal",
    "DashboardSummary",
]
