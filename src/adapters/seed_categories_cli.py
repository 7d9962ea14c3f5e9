"""CLI adapter preparing the expense tables and default categories.

This module wires the SQLAlchemy repository to the configured database and
seeds the default categories for EXPENSES_USER_ID.
"""

from src.infrastructure.container import (
    build_database_adapter,
    build_user_context,
)
from src.infrastructure.expenses_repository import (
    SqlAlchemyExpensesRepository,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create missing tables and default categories."""
    logger = get_app_logger()
    user = build_user_context()
    repository = SqlAlchemyExpensesRepository(build_database_adapter())

    repository.prepare_schema()
    inserted = repository.seed_default_categories(user)
    logger.info(f"Seeded {inserted} categories for user={user.user_id}")

    print(f"Created {inserted} default categories for {user.user_id}.")


if __name__ == "__main__":  # pragma: no cover
    main()
