"""Simple CLI to validate the expense store connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the configured expense database.
"""

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against EXPENSES_DB_URL."""
    adapter = SqlAlchemyDatabaseEngineAdapter()
    logger = get_app_logger()

    engine = adapter.get_expenses_engine()
    logger.info(f"Expenses DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Connection is working.")


if __name__ == "__main__":
    main()
