"""Application ports package."""

from .database import DatabaseEnginePort
from .expenses_repository import ExpensesRepositoryPort, UserContext

__all__ = [
    "DatabaseEnginePort",
    "ExpensesRepositoryPort",
    "UserContext",
]
