"""Tests for the composition root."""

from unittest.mock import MagicMock

import pytest

from src.application.ports.expenses_repository import UserContext
from src.infrastructure.container import (
    build_expenses_repository,
    build_user_context,
)
from src.infrastructure.expenses_repository import (
    SqlAlchemyExpensesRepository,
)
from src.infrastructure.settings import DashboardSettings


def test_build_expenses_repository_uses_given_port() -> None:
    """The repository should be wired to the provided engine port."""
    db_port = MagicMock()

    repository = build_expenses_repository(db_port=db_port)

    assert isinstance(repository, SqlAlchemyExpensesRepository)
    repository.list_expenses(UserContext(user_id="u"))
    db_port.get_expenses_engine.assert_called_once()


def test_build_user_context_from_settings() -> None:
    """Configured user ids should become a UserContext."""
    context = build_user_context(DashboardSettings(user_id="abc"))

    assert context == UserContext(user_id="abc")


def test_build_user_context_requires_user_id() -> None:
    """A missing user id should raise a descriptive error."""
    with pytest.raises(RuntimeError, match="EXPENSES_USER_ID"):
        build_user_context(DashboardSettings(user_id=None))
