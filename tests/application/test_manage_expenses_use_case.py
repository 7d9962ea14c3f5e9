"""Tests for the add/delete expense use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.ports.expenses_repository import UserContext
from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.application.use_cases.manage_expenses import (
    AddExpenseUseCase,
    DeleteExpenseUseCase,
)
from src.domain.models import CategorySnapshot, ExpenseRecord, NewExpense

FOOD = CategorySnapshot(name="Food", color="#ef4444", icon="🍔", id="food")


class _InMemoryRepository:
    def __init__(self) -> None:
        self.records: list[ExpenseRecord] = []
        self.list_calls = 0

    def list_expenses(self, user):
        self.list_calls += 1
        return list(self.records)

    def add_expense(self, user, expense):
        expense_id = f"id-{len(self.records) + 1}"
        self.records.append(
            ExpenseRecord(
                id=expense_id,
                amount=expense.amount,
                date=expense.date,
                category=FOOD,
                title=expense.title,
            )
        )
        return expense_id

    def delete_expense(self, user, expense_id):
        before = len(self.records)
        self.records = [r for r in self.records if r.id != expense_id]
        return len(self.records) < before


def _summary_use_case(repository) -> GetDashboardSummaryUseCase:
    return GetDashboardSummaryUseCase(
        repository,
        logger=MagicMock(),
        clock=lambda: date(2024, 7, 20),
    )


def test_add_expense_refetches_and_recomputes() -> None:
    """Adding should be followed by a full recompute."""
    repository = _InMemoryRepository()
    use_case = AddExpenseUseCase(
        repository,
        logger=MagicMock(),
        summary_use_case=_summary_use_case(repository),
    )
    user = UserContext(user_id="u")

    use_case.execute(
        user,
        NewExpense(
            title="Groceries",
            amount=Decimal("25.00"),
            category_id="food",
            date=date(2024, 7, 2),
        ),
    )
    result = use_case.execute(
        user,
        NewExpense(
            title="Bakery",
            amount=Decimal("5.00"),
            category_id="food",
            date=date(2024, 6, 30),
        ),
    )

    assert result.expense_id == "id-2"
    assert repository.list_calls == 2
    assert result.summary.total_amount == Decimal("30.00")
    assert result.summary.monthly_amount == Decimal("25.00")
    assert result.summary.transaction_count == 2


def test_delete_expense_refetches_and_recomputes() -> None:
    """Deleting should refresh the summary from the repository."""
    repository = _InMemoryRepository()
    repository.add_expense(
        None,
        NewExpense(
            title="Taxi",
            amount=Decimal("18.00"),
            category_id="food",
            date=date(2024, 7, 5),
        ),
    )
    use_case = DeleteExpenseUseCase(
        repository,
        logger=MagicMock(),
        summary_use_case=_summary_use_case(repository),
    )

    result = use_case.execute(UserContext(user_id="u"), "id-1")

    assert result.deleted is True
    assert result.summary.transaction_count == 0
    assert result.summary.category_totals == ()


def test_delete_missing_expense_warns() -> None:
    """A delete that removes nothing should log a warning."""
    repository = _InMemoryRepository()
    logger = MagicMock()
    use_case = DeleteExpenseUseCase(
        repository,
        logger=logger,
        summary_use_case=_summary_use_case(repository),
    )

    result = use_case.execute(UserContext(user_id="u"), "missing")

    assert result.deleted is False
    logger.warning.assert_called_once()
