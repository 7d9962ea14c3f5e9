"""Use case to compute the expense dashboard summary for a user."""

from datetime import date
from typing import Callable

from src.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
    UserContext,
)
from src.domain.models import DashboardSummary
from src.domain.services.aggregation import summarize
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardSummaryUseCase:
    """Fetch a user's expenses and derive the dashboard metrics."""

    def __init__(
        self,
        expenses_repository: ExpensesRepositoryPort,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            expenses_repository: Port providing the user's expenses.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
        """
        self._expenses_repository = expenses_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def execute(
        self,
        user: UserContext,
        as_of: date | None = None,
    ) -> DashboardSummary:
        """Return the dashboard summary.

        Args:
            user: Identity whose expenses are summarized.
            as_of: Reference date for the month window, defaults to today.

        Returns:
            DashboardSummary: Totals, average and per-category aggregates.
        """
        reference = as_of or self._clock()
        expenses = self._expenses_repository.list_expenses(user)
        self._logger.info(
            f"Fetched {len(expenses)} expenses for user={user.user_id}"
        )
        summary = summarize(expenses, reference)
        self._logger.info(
            f"Dashboard computed: total={summary.total_amount}, "
            f"monthly={summary.monthly_amount}, "
            f"categories={len(summary.category_totals)}, as_of={reference}"
        )
        return summary


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]
