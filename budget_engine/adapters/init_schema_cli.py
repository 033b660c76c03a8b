"""CLI adapter to create the storage tables and check connectivity.

This adapter is meant for local operations: it resolves the configured
engine, runs a basic health check and creates any missing table.
"""

from budget_engine.infrastructure.container import build_database_adapter
from budget_engine.infrastructure.logging.logger import get_app_logger
from budget_engine.infrastructure.schema import ensure_schema


def main() -> None:
    """Check the storage connection and ensure the schema exists."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_engine()
    logger.info(f"Budget DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
    ensure_schema(engine)

    logger.info("Connection is working and the schema is up to date.")


if __name__ == "__main__":  # pragma: no cover
    main()
