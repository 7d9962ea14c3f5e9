"""CLI adapter printing the expense dashboard summary for one user."""

from datetime import date
import os
import sys

from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.domain.errors import ValidationError
from src.infrastructure.container import (
    build_expenses_repository,
    build_user_context,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Print totals and per-category shares for EXPENSES_USER_ID."""
    logger = get_app_logger()
    settings = DashboardSettings.from_env()
    as_of = _parse_date(os.getenv("DASHBOARD_AS_OF"), logger)

    user = build_user_context(settings)
    use_case = GetDashboardSummaryUseCase(
        expenses_repository=build_expenses_repository(),
        logger=logger,
    )
    try:
        summary = use_case.execute(user, as_of=as_of)
    except ValidationError as exc:
        logger.error(str(exc))
        print(f"Cannot build dashboard: {exc}")
        sys.exit(1)

    currency = settings.currency_code
    print(f"Expense dashboard (user={user.user_id}, as_of={summary.as_of})")
    print(
        f"total={summary.total_amount} {currency}, "
        f"this_month={summary.monthly_amount} {currency}, "
        f"transactions={summary.transaction_count}, "
        f"average={summary.average_amount} {currency}"
    )
    for item, share in summary.category_shares():
        print(
            f"{item.icon or '-'} {item.name}: {item.accumulated_amount} "
            f"{currency} ({share:.1f}%, {item.transaction_count} transactions)"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
