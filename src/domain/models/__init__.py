"""Domain models package."""

from .expenses import (
    CategorySnapshot,
    CategoryTotal,
    DashboardSummary,
    ExpenseRecord,
    NewExpense,
)

__all__ = [
    "CategorySnapshot",
    "CategoryTotal",
    "DashboardSummary",
    "ExpenseRecord",
    "NewExpense",
]
