"""Database ports for the expense dashboard.

This module defines the application-layer protocol for accessing the
expense store engine. Infrastructure implementations are expected to
provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine backing the expense store.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_expenses_engine(self) -> Engine:
        """Get the engine for the expense store.

        Returns:
            Engine: SQLAlchemy engine connected to the expense database.
        """


__all__ = ["DatabaseEnginePort"]
