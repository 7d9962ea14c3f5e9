"""Domain services package."""

from .aggregation import (
    category_share,
    group_by_category,
    monthly_total,
    summarize,
)
from .validation import (
    validate_expense,
    validate_expenses,
    validate_new_category,
)

__all__ = [
    "category_share",
    "group_by_category",
    "monthly_total",
    "summarize",
    "validate_expense",
    "validate_expenses",
    "validate_new_category",
]
