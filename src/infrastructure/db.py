"""Lazily built SQLAlchemy engine for the expense store.

The URL comes from ``EXPENSES_DB_URL`` (a ``.env`` file is honoured) and
the engine is created once per process, then shared by every repository.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a local ``.env`` file are loaded first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the expense database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_expenses_engine: Optional[Engine] = None


def get_expenses_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the expense store.

    Returns:
        Engine: Lazily initialized engine connected to EXPENSES_DB_URL.
    """
    global _expenses_engine
    if _expenses_engine is None:
        db_url = _get_env_var("EXPENSES_DB_URL")
        _expenses_engine = _create_engine(db_url)
    return _expenses_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so repositories can depend only on the protocol.
    """

    def get_expenses_engine(self) -> Engine:
        """Get the engine for the expense store.

        Returns:
            Engine: SQLAlchemy engine connected to the expense database.
        """
        return get_expenses_engine()


__all__ = [
    "get_expenses_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
