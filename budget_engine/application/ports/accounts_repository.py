"""Port for account and ledger storage."""

from datetime import date
from typing import Protocol

from budget_engine.domain.models.accounts import Account, LedgerEntry


class AccountsRepositoryPort(Protocol):
    """Port exposing accounts and their ledger entries."""

    def fetch_account(self, account_id: str) -> Account | None:
        """Return the account, or None when it does not exist."""

    def fetch_accounts(
        self,
        household_id: str,
        is_active: bool | None = None,
    ) -> list[Account]:
        """Return the accounts of a household."""

    def fetch_ledger_entries(
        self,
        account_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LedgerEntry]:
        """Return ledger entries, optionally bounded by entry date.

        ``start_date`` and ``end_date`` are inclusive.
        """

    def count_ledger_entries(self, account_id: str) -> int:
        """Return how many ledger entries reference the account."""

    def update_stored_balance(self, account_id: str, balance: int) -> None:
        """Overwrite the cached balance of the account."""

    def create_account(self, account: Account) -> Account:
        """Persist a new account."""

    def deactivate_account(self, account_id: str) -> None:
        """Soft-delete the account."""

    def delete_account(self, account_id: str) -> None:
        """Hard-delete the account."""


__all__ = ["AccountsRepositoryPort"]
