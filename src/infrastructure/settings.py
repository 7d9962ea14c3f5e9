"""Settings helpers for the dashboard adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.domain.constants import DEFAULT_CURRENCY
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_TOP_CATEGORIES = 5


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for running the dashboard adapters.

    Attributes:
        currency_code: Currency code used when formatting amounts.
        user_id: Identifier of the user whose expenses are summarized.
        top_categories: Number of categories shown in the bar chart.
    """

    currency_code: str = DEFAULT_CURRENCY
    user_id: Optional[str] = None
    top_categories: int = DEFAULT_TOP_CATEGORIES

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        currency_code = (
            os.getenv("DASHBOARD_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        user_id = (os.getenv("EXPENSES_USER_ID") or "").strip() or None
        top_categories = cls._parse_top_categories(
            os.getenv("DASHBOARD_TOP_CATEGORIES"),
            logger=logger,
        )
        return cls(
            currency_code=currency_code,
            user_id=user_id,
            top_categories=top_categories,
        )

    @staticmethod
    def _parse_top_categories(raw_value: str | None, logger) -> int:
        """Parse the bar-chart category limit.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Positive limit, or the default when missing or invalid.
        """
        if not raw_value:
            return DEFAULT_TOP_CATEGORIES
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid DASHBOARD_TOP_CATEGORIES '{raw_value}'. "
                f"Using {DEFAULT_TOP_CATEGORIES}."
            )
            return DEFAULT_TOP_CATEGORIES
        if value < 1:
            logger.warning(
                f"DASHBOARD_TOP_CATEGORIES must be positive, got {value}. "
                f"Using {DEFAULT_TOP_CATEGORIES}."
            )
            return DEFAULT_TOP_CATEGORIES
        return value


__all__ = ["DashboardSettings", "DEFAULT_TOP_CATEGORIES"]
