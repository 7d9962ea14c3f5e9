"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
    UserContext,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.expenses_repository import (
    SqlAlchemyExpensesRepository,
)
from src.infrastructure.settings import DashboardSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_expenses_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ExpensesRepositoryPort:
    """Return the expense store repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyExpensesRepository(resolved_db)


def build_user_context(
    settings: DashboardSettings | None = None,
) -> UserContext:
    """Return the user context configured through EXPENSES_USER_ID."""
    resolved = settings or DashboardSettings.from_env()
    if not resolved.user_id:
        raise RuntimeError("Missing environment variable: EXPENSES_USER_ID")
    return UserContext(user_id=resolved.user_id)


__all__ = [
    "build_database_adapter",
    "build_expenses_repository",
    "build_user_context",
]
