"""Use cases mutating expenses and refreshing the dashboard.

After every insert or delete the full expense list is fetched again and
the summary recomputed from scratch; no incremental aggregation is kept.
"""

from dataclasses import dataclass

from src.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
    UserContext,
)
from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.domain.models import DashboardSummary, NewExpense
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AddExpenseResult:
    """Identifier of the inserted expense and the refreshed summary."""

    expense_id: str
    summary: DashboardSummary


@dataclass(frozen=True)
class DeleteExpenseResult:
    """Outcome of a delete and the refreshed summary."""

    deleted: bool
    summary: DashboardSummary


class AddExpenseUseCase:
    """Insert an expense, then recompute the dashboard."""

    def __init__(
        self,
        expenses_repository: ExpensesRepositoryPort,
        logger=None,
        summary_use_case: GetDashboardSummaryUseCase | None = None,
    ) -> None:
        self._expenses_repository = expenses_repository
        self._logger = logger or get_app_logger()
        self._summary_use_case = (
            summary_use_case
            or GetDashboardSummaryUseCase(
                expenses_repository,
                logger=self._logger,
            )
        )

    def execute(
        self,
        user: UserContext,
        expense: NewExpense,
    ) -> AddExpenseResult:
        """Insert ``expense`` for ``user`` and return the new summary."""
        expense_id = self._expenses_repository.add_expense(user, expense)
        self._logger.info(
            f"Added expense id={expense_id} amount={expense.amount} "
            f"for user={user.user_id}"
        )
        return AddExpenseResult(
            expense_id=expense_id,
            summary=self._summary_use_case.execute(user),
        )


class DeleteExpenseUseCase:
    """Delete an expense, then recompute the dashboard."""

    def __init__(
        self,
        expenses_repository: ExpensesRepositoryPort,
        logger=None,
        summary_use_case: GetDashboardSummaryUseCase | None = None,
    ) -> None:
        self._expenses_repository = expenses_repository
        self._logger = logger or get_app_logger()
        self._summary_use_case = (
            summary_use_case
            or GetDashboardSummaryUseCase(
                expenses_repository,
                logger=self._logger,
            )
        )

    def execute(
        self,
        user: UserContext,
        expense_id: str,
    ) -> DeleteExpenseResult:
        """Delete ``expense_id`` for ``user`` and return the new summary."""
        deleted = self._expenses_repository.delete_expense(user, expense_id)
        if not deleted:
            self._logger.warning(
                f"No expense id={expense_id} found for user={user.user_id}"
            )
        return DeleteExpenseResult(
            deleted=deleted,
            summary=self._summary_use_case.execute(user),
        )


__all__ = [
    "AddExpenseUseCase",
    "AddExpenseResult",
    "DeleteExpenseUseCase",
    "DeleteExpenseResult",
]
