"""Tests for the SQLAlchemy expenses repository."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.ports.expenses_repository import UserContext
from src.domain.constants import DEFAULT_CATEGORIES
from src.domain.models import CategorySnapshot, ExpenseRecord, NewExpense
from src.infrastructure import expenses_repository as repo_module
from src.infrastructure.expenses_repository import (
    SqlAlchemyExpensesRepository,
)


def _build_db_port(rows: list[SimpleNamespace] | None = None):
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    engine.begin.return_value = context
    conn.execute.return_value.all.return_value = rows or []

    db_port = MagicMock()
    db_port.get_expenses_engine.return_value = engine
    return db_port, conn


def test_list_expenses_maps_joined_rows() -> None:
    """Rows should become ExpenseRecord objects with category snapshots."""
    rows = [
        SimpleNamespace(
            id="e1",
            title="Bus",
            amount=3.2,
            date="2024-04-02",
            notes=None,
            category_id="c1",
            category_name="Transporte",
            category_color="#3b82f6",
            category_icon="🚗",
        ),
    ]
    db_port, conn = _build_db_port(rows)

    result = SqlAlchemyExpensesRepository(db_port).list_expenses(
        UserContext(user_id="user-7")
    )

    assert result == [
        ExpenseRecord(
            id="e1",
            amount=Decimal("3.2"),
            date=date(2024, 4, 2),
            category=CategorySnapshot(
                name="Transporte",
                color="#3b82f6",
                icon="🚗",
                id="c1",
            ),
            title="Bus",
            notes=None,
        )
    ]
    conn.execute.assert_called_once_with(
        repo_module.SELECT_EXPENSES_SQL,
        {"user_id": "user-7"},
    )


def test_add_expense_inserts_scoped_row(monkeypatch) -> None:
    """Inserts should carry the user id and a generated identifier."""
    db_port, conn = _build_db_port()
    monkeypatch.setattr(repo_module.uuid, "uuid4", lambda: "fixed-id")

    expense_id = SqlAlchemyExpensesRepository(db_port).add_expense(
        UserContext(user_id="u1"),
        NewExpense(
            title="Cinema",
            amount=Decimal("22.50"),
            category_id="c9",
            date=date(2024, 8, 9),
            notes="Friday",
        ),
    )

    assert expense_id == "fixed-id"
    statement, params = conn.execute.call_args.args
    assert statement is repo_module.INSERT_EXPENSE_SQL
    assert params == {
        "id": "fixed-id",
        "user_id": "u1",
        "category_id": "c9",
        "title": "Cinema",
        "amount": "22.50",
        "date": "2024-08-09",
        "notes": "Friday",
    }


def test_delete_expense_reports_rowcount() -> None:
    """Deletes should be scoped by user and report whether a row went."""
    db_port, conn = _build_db_port()
    conn.execute.return_value.rowcount = 1

    deleted = SqlAlchemyExpensesRepository(db_port).delete_expense(
        UserContext(user_id="u1"),
        "e5",
    )

    assert deleted is True
    conn.execute.assert_called_once_with(
        repo_module.DELETE_EXPENSE_SQL,
        {"id": "e5", "user_id": "u1"},
    )


def test_list_categories_maps_rows() -> None:
    """Categories should be returned as snapshots."""
    rows = [SimpleNamespace(id=1, name="Saúde", color="#10b981", icon="🏥")]
    db_port, _conn = _build_db_port(rows)

    result = SqlAlchemyExpensesRepository(db_port).list_categories(
        UserContext(user_id="u1")
    )

    assert result == [
        CategorySnapshot(name="Saúde", color="#10b981", icon="🏥", id="1")
    ]


def test_seed_default_categories_skips_existing_names() -> None:
    """Only missing defaults should be inserted."""
    existing_name, existing_color, existing_icon = DEFAULT_CATEGORIES[0]
    rows = [
        SimpleNamespace(
            id="c1",
            name=existing_name,
            color=existing_color,
            icon=existing_icon,
        )
    ]
    db_port, conn = _build_db_port(rows)

    inserted = SqlAlchemyExpensesRepository(db_port).seed_default_categories(
        UserContext(user_id="u1")
    )

    assert inserted == len(DEFAULT_CATEGORIES) - 1
    statement, payload = conn.execute.call_args.args
    assert statement is repo_module.INSERT_CATEGORY_SQL
    assert existing_name not in {row["name"] for row in payload}
    assert all(row["is_default"] is True for row in payload)
    assert all(row["user_id"] == "u1" for row in payload)


def test_prepare_schema_creates_tables() -> None:
    """Schema preparation should create both tables."""
    db_port, conn = _build_db_port()

    SqlAlchemyExpensesRepository(db_port).prepare_schema()

    executed = [call.args[0] for call in conn.exec_driver_sql.call_args_list]
    assert executed == [
        repo_module.CREATE_CATEGORIES_SQL,
        repo_module.CREATE_EXPENSES_SQL,
    ]


def test_add_category_inserts_non_default_row(monkeypatch) -> None:
    """User categories should be owned by the user and not be defaults."""
    db_port, conn = _build_db_port()
    monkeypatch.setattr(repo_module.uuid, "uuid4", lambda: "cat-id")

    category_id = SqlAlchemyExpensesRepository(db_port).add_category(
        UserContext(user_id="u1"),
        " Pets ",
        "#a855f7",
        "🐶",
    )

    assert category_id == "cat-id"
    statement, params = conn.execute.call_args.args
    assert statement is repo_module.INSERT_CATEGORY_SQL
    assert params == {
        "id": "cat-id",
        "user_id": "u1",
        "name": "Pets",
        "color": "#a855f7",
        "icon": "🐶",
        "is_default": False,
    }


def test_delete_category_is_scoped_to_user_and_non_defaults() -> None:
    """Deletes should only target the user's own non-default rows."""
    db_port, conn = _build_db_port()
    conn.execute.return_value.rowcount = 0

    deleted = SqlAlchemyExpensesRepository(db_port).delete_category(
        UserContext(user_id="u1"),
        "c3",
    )

    assert deleted is False
    conn.execute.assert_called_once_with(
        repo_module.DELETE_CATEGORY_SQL,
        {"id": "c3", "user_id": "u1"},
    )
    sql = str(repo_module.DELETE_CATEGORY_SQL)
    assert "user_id = :user_id" in sql
    assert "is_default = FALSE" in sql
