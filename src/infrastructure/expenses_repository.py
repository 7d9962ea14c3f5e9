"""SQLAlchemy-backed repository for user expenses and categories."""

import uuid

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
    UserContext,
)
from src.domain.constants import DEFAULT_CATEGORIES
from src.domain.models import CategorySnapshot, ExpenseRecord, NewExpense
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


SELECT_EXPENSES_SQL = text(
    """
    SELECT e.id AS id,
           e.title AS title,
           e.amount AS amount,
           e.date AS date,
           e.notes AS notes,
           c.id AS category_id,
           c.name AS category_name,
           c.color AS category_color,
           c.icon AS category_icon
    FROM expenses e
    JOIN categories c ON c.id = e.category_id
    WHERE e.user_id = :user_id
    ORDER BY e.date DESC
    """
)

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expenses (
        id,
        user_id,
        category_id,
        title,
        amount,
        date,
        notes
    )
    VALUES (
        :id,
        :user_id,
        :category_id,
        :title,
        :amount,
        :date,
        :notes
    )
    """
)

DELETE_EXPENSE_SQL = text(
    """
    DELETE FROM expenses
    WHERE id = :id AND user_id = :user_id
    """
)

SELECT_CATEGORIES_SQL = text(
    """
    SELECT id, name, color, icon
    FROM categories
    WHERE user_id = :user_id
    ORDER BY name
    """
)

INSERT_CATEGORY_SQL = text(
    """
    INSERT INTO categories (id, user_id, name, color, icon, is_default)
    VALUES (:id, :user_id, :name, :color, :icon, :is_default)
    """
)

DELETE_CATEGORY_SQL = text(
    """
    DELETE FROM categories
    WHERE id = :id AND user_id = :user_id AND is_default = FALSE
    """
)

CREATE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    user_id TEXT,
    name TEXT NOT NULL,
    color TEXT NOT NULL,
    icon TEXT,
    is_default BOOLEAN DEFAULT FALSE,
    UNIQUE (user_id, name)
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    category_id TEXT NOT NULL REFERENCES categories(id),
    title TEXT NOT NULL,
    amount NUMERIC(10, 2) NOT NULL CHECK (amount > 0),
    date DATE NOT NULL,
    notes TEXT
)
"""


class SqlAlchemyExpensesRepository(ExpensesRepositoryPort):
    """Expense store backed by SQLAlchemy, scoped by user id."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the expense store engine.
        """
        self._db_port = db_port

    def prepare_schema(self) -> None:
        """Ensure the categories and expenses tables exist."""
        engine = self._db_port.get_expenses_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_CATEGORIES_SQL)
            conn.exec_driver_sql(CREATE_EXPENSES_SQL)

    def list_expenses(self, user: UserContext) -> list[ExpenseRecord]:
        """Return the user's expenses, newest first.

        Args:
            user: Identity whose expenses are read.

        Returns:
            list[ExpenseRecord]: Expenses joined to their category.
        """
        engine = self._db_port.get_expenses_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_EXPENSES_SQL,
                {"user_id": user.user_id},
            ).all()
        return [
            ExpenseRecord(
                id=str(row.id),
                amount=coerce_decimal(row.amount),
                date=coerce_date(row.date),
                category=CategorySnapshot(
                    name=row.category_name,
                    color=row.category_color,
                    icon=row.category_icon,
                    id=str(row.category_id),
                ),
                title=row.title,
                notes=row.notes,
            )
            for row in rows
        ]

    def add_expense(self, user: UserContext, expense: NewExpense) -> str:
        """Insert an expense owned by the user.

        Args:
            user: Owner of the new expense.
            expense: Values of the expense to insert.

        Returns:
            str: Identifier of the inserted expense.
        """
        expense_id = str(uuid.uuid4())
        engine = self._db_port.get_expenses_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_EXPENSE_SQL,
                {
                    "id": expense_id,
                    "user_id": user.user_id,
                    "category_id": expense.category_id,
                    "title": expense.title,
                    "amount": str(coerce_decimal(expense.amount)),
                    "date": coerce_date(expense.date).isoformat(),
                    "notes": expense.notes,
                },
            )
        return expense_id

    def delete_expense(self, user: UserContext, expense_id: str) -> bool:
        """Delete one of the user's expenses.

        Returns:
            bool: True when a row was removed.
        """
        engine = self._db_port.get_expenses_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_EXPENSE_SQL,
                {"id": expense_id, "user_id": user.user_id},
            )
        return result.rowcount > 0

    def list_categories(self, user: UserContext) -> list[CategorySnapshot]:
        """Return the user's categories ordered by name."""
        engine = self._db_port.get_expenses_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_CATEGORIES_SQL,
                {"user_id": user.user_id},
            ).all()
        return [
            CategorySnapshot(
                name=row.name,
                color=row.color,
                icon=row.icon,
                id=str(row.id),
            )
            for row in rows
        ]

    def seed_default_categories(self, user: UserContext) -> int:
        """Insert the default categories missing for the user.

        Returns:
            int: Number of categories inserted.
        """
        existing = {category.name for category in self.list_categories(user)}
        payload = [
            {
                "id": str(uuid.uuid4()),
                "user_id": user.user_id,
                "name": name,
                "color": color,
                "icon": icon,
                "is_default": True,
            }
            for name, color, icon in DEFAULT_CATEGORIES
            if name not in existing
        ]
        if not payload:
            return 0
        engine = self._db_port.get_expenses_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_CATEGORY_SQL, payload)
        return len(payload)

    def add_category(
        self,
        user: UserContext,
        name: str,
        color: str,
        icon: str | None = None,
    ) -> str:
        """Insert a category owned by the user.

        User-defined categories are never flagged as defaults, so they stay
        deletable.

        Returns:
            str: Identifier of the inserted category.
        """
        category_id = str(uuid.uuid4())
        engine = self._db_port.get_expenses_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_CATEGORY_SQL,
                {
                    "id": category_id,
                    "user_id": user.user_id,
                    "name": name.strip(),
                    "color": color,
                    "icon": icon,
                    "is_default": False,
                },
            )
        return category_id

    def delete_category(self, user: UserContext, category_id: str) -> bool:
        """Delete one of the user's own, non-default categories.

        Returns:
            bool: True when a row was removed.
        """
        engine = self._db_port.get_expenses_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_CATEGORY_SQL,
                {"id": category_id, "user_id": user.user_id},
            )
        return result.rowcount > 0


__all__ = [
    "SqlAlchemyExpensesRepository",
    "SELECT_EXPENSES_SQL",
    "INSERT_EXPENSE_SQL",
    "DELETE_EXPENSE_SQL",
    "SELECT_CATEGORIES_SQL",
    "INSERT_CATEGORY_SQL",
    "DELETE_CATEGORY_SQL",
    "CREATE_CATEGORIES_SQL",
    "CREATE_EXPENSES_SQL",
]
