"""Use case deriving account balances from the double-entry ledger."""

from datetime import date, timedelta

from budget_engine.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from budget_engine.domain.errors import AccountNotFoundError
from budget_engine.domain.models.accounts import Account, BalanceHistoryPoint
from budget_engine.domain.services.ledger import (
    build_balance_history,
    fold_ledger_entries,
)
from budget_engine.infrastructure.logging.logger import get_app_logger


class LedgerBalanceCalculator:
    """Compute authoritative balances and reconcile the stored ones.

    The stored balance on an account is a cache that may lag behind the
    ledger. ``calculate_balance`` is authoritative, ``stored_balance`` is
    the cached value and ``sync_balance`` is the only way to reconcile them.
    """

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port providing accounts and ledger entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()

    def calculate_balance(
        self,
        account_id: str,
        household_id: str | None = None,
    ) -> int:
        """Fold every ledger entry of the account into a balance.

        Args:
            account_id: Account to evaluate.
            household_id: Optional household the account must belong to.

        Returns:
            int: Balance in minor units.

        Raises:
            AccountNotFoundError: If the account cannot be resolved.
        """
        account = self._get_account(account_id, household_id)
        entries = self._accounts_repository.fetch_ledger_entries(account_id)
        return fold_ledger_entries(account.account_type, entries)

    def stored_balance(
        self,
        account_id: str,
        household_id: str | None = None,
    ) -> int:
        """Return the cached balance, which may be stale."""
        return self._get_account(account_id, household_id).stored_balance

    def validate_integrity(
        self,
        account_id: str,
        household_id: str | None = None,
    ) -> bool:
        """Return True when the stored balance matches the ledger."""
        account = self._get_account(account_id, household_id)
        calculated = self.calculate_balance(account_id)
        if calculated != account.stored_balance:
            self._logger.warning(
                f"Balance mismatch for account {account_id}: "
                f"stored={account.stored_balance} calculated={calculated}"
            )
            return False
        return True

    def sync_balance(
        self,
        account_id: str,
        household_id: str | None = None,
    ) -> int:
        """Write the calculated balance into the stored balance.

        Returns:
            int: The balance now stored on the account.
        """
        self._get_account(account_id, household_id)
        calculated = self.calculate_balance(account_id)
        self._accounts_repository.update_stored_balance(account_id, calculated)
        self._logger.info(
            f"Synced stored balance of account {account_id} to {calculated}"
        )
        return calculated

    def get_balance_history(
        self,
        account_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
        household_id: str | None = None,
    ) -> list[BalanceHistoryPoint]:
        """Return end-of-day balances for active days in a date window.

        Args:
            account_id: Account to evaluate.
            start_date: Inclusive start; defaults to 30 days before the end.
            end_date: Inclusive end; defaults to today.
            household_id: Optional household the account must belong to.

        Returns:
            list[BalanceHistoryPoint]: Balances, oldest first.
        """
        account = self._get_account(account_id, household_id)
        resolved_end = end_date or date.today()
        resolved_start = start_date or resolved_end - timedelta(days=30)

        opening_entries = self._accounts_repository.fetch_ledger_entries(
            account_id,
            end_date=resolved_start - timedelta(days=1),
        )
        opening_balance = fold_ledger_entries(
            account.account_type,
            opening_entries,
        )
        window_entries = self._accounts_repository.fetch_ledger_entries(
            account_id,
            start_date=resolved_start,
            end_date=resolved_end,
        )
        return build_balance_history(
            account.account_type,
            window_entries,
            opening_balance,
        )

    def _get_account(
        self,
        account_id: str,
        household_id: str | None,
    ) -> Account:
        account = self._accounts_repository.fetch_account(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        if household_id is not None and account.household_id != household_id:
            raise AccountNotFoundError(account_id)
        return account


__all__ = ["LedgerBalanceCalculator"]
