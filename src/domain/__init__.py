"""Domain package for business rules and core models."""

from .constants import DEFAULT_CATEGORIES
from .errors import ValidationError
from .models import (
    CategorySnapshot,
    CategoryTotal,
    DashboardSummary,
    ExpenseRecord,
    NewExpense,
)
from .services import (
    category_share,
    group_by_category,
    monthly_total,
    summarize,
    validate_expense,
    validate_expenses,
    validate_new_category,
)

__all__ = [
    "CategorySnapshot",
    "CategoryTotal",
    "DashboardSummary",
    "ExpenseRecord",
    "NewExpense",
    "DEFAULT_CATEGORIES",
    "ValidationError",
    "category_share",
    "group_by_category",
    "monthly_total",
    "summarize",
    "validate_expense",
    "validate_expenses",
    "validate_new_category",
]
