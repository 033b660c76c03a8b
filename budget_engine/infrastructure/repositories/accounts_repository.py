"""SQLAlchemy repository for accounts and ledger entries."""

from datetime import date

from sqlalchemy import text

from budget_engine.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from budget_engine.application.ports.database import DatabaseEnginePort
from budget_engine.domain.models.accounts import (
    Account,
    AccountType,
    EntryType,
    LedgerEntry,
)
from budget_engine.utils.money_utils import coerce_minor_units

SELECT_ACCOUNT_COLUMNS = """
    SELECT id,
           household_id,
           name,
           account_type,
           subtype,
           currency,
           balance_minor,
           is_active
    FROM accounts
"""

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (
        id,
        household_id,
        name,
        account_type,
        subtype,
        currency,
        balance_minor,
        is_active
    )
    VALUES (
        :id,
        :household_id,
        :name,
        :account_type,
        :subtype,
        :currency,
        :balance_minor,
        :is_active
    )
    """
)


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository reading accounts and their ledger from SQL tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the storage engine.
        """
        self._db_port = db_port

    def fetch_account(self, account_id: str) -> Account | None:
        query = text(SELECT_ACCOUNT_COLUMNS + " WHERE id = :account_id")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"account_id": account_id}).first()
        if row is None:
            return None
        return self._to_account(row)

    def fetch_accounts(
        self,
        household_id: str,
        is_active: bool | None = None,
    ) -> list[Account]:
        query = text(SELECT_ACCOUNT_COLUMNS + " WHERE household_id = :household_id")
        params = {"household_id": household_id}
        if is_active is not None:
            query = text(query.text + " AND is_active = :is_active")
            params["is_active"] = is_active
        query = text(query.text + " ORDER BY name, id")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_account(row) for row in rows]

    def fetch_ledger_entries(
        self,
        account_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LedgerEntry]:
        query = text(
            """
            SELECT id,
                   account_id,
                   transaction_id,
                   entry_type,
                   amount_minor,
                   currency,
                   entry_date
            FROM ledger_entries
            WHERE account_id = :account_id
            """
        )
        params = {"account_id": account_id}
        if start_date:
            query = text(query.text + " AND entry_date >= :start_date")
            params["start_date"] = start_date.isoformat()
        if end_date:
            query = text(query.text + " AND entry_date <= :end_date")
            params["end_date"] = end_date.isoformat()
        query = text(query.text + " ORDER BY entry_date, id")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            LedgerEntry(
                id=row.id,
                account_id=row.account_id,
                entry_type=EntryType(row.entry_type),
                amount=coerce_minor_units(row.amount_minor),
                currency=row.currency,
                entry_date=_parse_date(row.entry_date),
                transaction_id=row.transaction_id,
            )
            for row in rows
        ]

    def count_ledger_entries(self, account_id: str) -> int:
        query = text(
            "SELECT COUNT(*) AS total FROM ledger_entries "
            "WHERE account_id = :account_id"
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            result = conn.execute(query, {"account_id": account_id}).first()
        return int(result.total) if result else 0

    def update_stored_balance(self, account_id: str, balance: int) -> None:
        query = text(
            "UPDATE accounts SET balance_minor = :balance WHERE id = :account_id"
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(query, {"balance": balance, "account_id": account_id})

    def create_account(self, account: Account) -> Account:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_ACCOUNT_SQL,
                {
                    "id": account.id,
                    "household_id": account.household_id,
                    "name": account.name,
                    "account_type": account.account_type.value,
                    "subtype": account.subtype,
                    "currency": account.currency,
                    "balance_minor": account.stored_balance,
                    "is_active": account.is_active,
                },
            )
        return account

    def deactivate_account(self, account_id: str) -> None:
        query = text(
            "UPDATE accounts SET is_active = :is_active WHERE id = :account_id"
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(query, {"is_active": False, "account_id": account_id})

    def delete_account(self, account_id: str) -> None:
        query = text("DELETE FROM accounts WHERE id = :account_id")
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(query, {"account_id": account_id})

    @staticmethod
    def _to_account(row) -> Account:
        return Account(
            id=row.id,
            household_id=row.household_id,
            name=row.name,
            account_type=AccountType(row.account_type),
            subtype=row.subtype,
            currency=row.currency,
            stored_balance=coerce_minor_units(row.balance_minor),
            is_active=bool(row.is_active),
        )


def _parse_date(value) -> date | None:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = ["SqlAlchemyAccountsRepository"]
