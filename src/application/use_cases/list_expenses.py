"""Use case to list a user's expenses with light filtering."""

from src.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
    UserContext,
)
from src.domain.models import ExpenseRecord


class ListExpensesUseCase:
    """Return expenses filtered by free text and category."""

    def __init__(self, expenses_repository: ExpensesRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._expenses_repository = expenses_repository

    def execute(
        self,
        user: UserContext,
        search: str | None = None,
        category_id: str | None = None,
    ) -> list[ExpenseRecord]:
        """Return the user's expenses matching the filters.

        Args:
            user: Identity whose expenses are listed.
            search: Case-insensitive text matched against title and notes.
            category_id: Only keep expenses of this category.

        Returns:
            list[ExpenseRecord]: Matching expenses in repository order.
        """
        expenses = self._expenses_repository.list_expenses(user)
        query = (search or "").strip().lower()
        return [
            expense
            for expense in expenses
            if _matches_text(expense, query)
            and (category_id is None or expense.category.id == category_id)
        ]


def _matches_text(expense: ExpenseRecord, query: str) -> bool:
    if not query:
        return True
    title = (expense.title or "").lower()
    notes = (expense.notes or "").lower()
    return query in title or query in notes


__all__ = ["ListExpensesUseCase"]
