"""SQLAlchemy repository for transaction spending aggregates."""

from datetime import date

from sqlalchemy import bindparam, text

from budget_engine.application.ports.database import DatabaseEnginePort
from budget_engine.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from budget_engine.utils.money_utils import coerce_minor_units

SPENDING_BY_CATEGORY_SQL = text(
    """
    SELECT category_id,
           SUM(-amount_minor) AS spent_minor
    FROM transactions
    WHERE household_id = :household_id
      AND category_id IN :category_ids
      AND amount_minor < 0
      AND txn_date >= :start_date
      AND txn_date <= :end_date
    GROUP BY category_id
    """
).bindparams(bindparam("category_ids", expanding=True))


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository aggregating expenses from the transactions table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the storage engine.
        """
        self._db_port = db_port

    def fetch_spending_by_category(
        self,
        household_id: str,
        category_ids: list[str],
        start_date: date,
        end_date: date,
    ) -> dict[str, int]:
        """Return absolute expense totals per category in an inclusive range.

        Args:
            household_id: Household whose transactions are aggregated.
            category_ids: Categories to aggregate.
            start_date: Inclusive start date.
            end_date: Inclusive end date.

        Returns:
            dict[str, int]: Spent amount per category that has expenses.
        """
        if not category_ids:
            return {}
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SPENDING_BY_CATEGORY_SQL,
                {
                    "household_id": household_id,
                    "category_ids": list(category_ids),
                    "start_date": start_date.isoformat(),
                    "end_date": end_date.isoformat(),
                },
            ).all()
        return {
            row.category_id: coerce_minor_units(row.spent_minor) for row in rows
        }


__all__ = ["SqlAlchemyTransactionsRepository"]
