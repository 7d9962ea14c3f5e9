"""Port for reading and mutating a user's expense records."""

from dataclasses import dataclass
from typing import Protocol

from src.domain.models import CategorySnapshot, ExpenseRecord, NewExpense


@dataclass(frozen=True)
class UserContext:
    """Explicit identity of the user whose records are accessed."""

    user_id: str


class ExpensesRepositoryPort(Protocol):
    """Port exposing the expense store scoped to one user."""

    def list_expenses(self, user: UserContext) -> list[ExpenseRecord]:
        """Return the user's expenses joined to their category."""

    def add_expense(self, user: UserContext, expense: NewExpense) -> str:
        """Insert an expense and return its identifier."""

    def delete_expense(self, user: UserContext, expense_id: str) -> bool:
        """Delete an expense, returning whether a row was removed."""

    def list_categories(self, user: UserContext) -> list[CategorySnapshot]:
        """Return the categories visible to the user, ordered by name."""

    def seed_default_categories(self, user: UserContext) -> int:
        """Create the default categories the user does not have yet."""

    def add_category(
        self,
        user: UserContext,
        name: str,
        color: str,
        icon: str | None = None,
    ) -> str:
        """Insert a user-defined category and return its identifier."""

    def delete_category(self, user: UserContext, category_id: str) -> bool:
        """Delete a non-default category, returning whether it was removed."""


__all__ = ["UserContext", "ExpensesRepositoryPort"]
