"""Application use cases package."""

from .get_dashboard_summary import (
    DashboardSummary,
    GetDashboardSummaryUseCase,
)
from .list_categories import ListCategoriesUseCase
from .list_expenses import ListExpensesUseCase
from .manage_categories import (
    AddCategoryResult,
    AddCategoryUseCase,
    DeleteCategoryResult,
    DeleteCategoryUseCase,
)
from .manage_expenses import (
    AddExpenseResult,
    AddExpenseUseCase,
    DeleteExpenseResult,
    DeleteExpenseUseCase,
)

__all__ = [
    "DashboardSummary",
    "GetDashboardSummaryUseCase",
    "ListCategoriesUseCase",
    "ListExpensesUseCase",
    "AddExpenseResult",
    "AddExpenseUseCase",
    "DeleteExpenseResult",
    "DeleteExpenseUseCase",
    "AddCategoryResult",
    "AddCategoryUseCase",
    "DeleteCategoryResult",
    "DeleteCategoryUseCase",
]
