"""Use case to read the categories available to a user."""

from src.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
    UserContext,
)
from src.domain.models import CategorySnapshot


class ListCategoriesUseCase:
    """Fetch the user's categories ordered by name."""

    def __init__(self, expenses_repository: ExpensesRepositoryPort) -> None:
        self._expenses_repository = expenses_repository

    def execute(self, user: UserContext) -> list[CategorySnapshot]:
        """Return every category owned by the user."""
        return self._expenses_repository.list_categories(user)


__all__ = ["ListCategoriesUseCase"]
