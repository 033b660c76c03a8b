"""Use case for the account lifecycle and net worth reporting."""

from uuid import uuid4

from budget_engine.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from budget_engine.domain.constants import DEFAULT_CURRENCY
from budget_engine.domain.errors import AccountNotFoundError, InvalidAccountError
from budget_engine.domain.models.accounts import (
    Account,
    AccountCreationData,
    AccountType,
    NetWorthSummary,
)
from budget_engine.domain.policies.accounts import (
    account_subtypes,
    is_valid_subtype,
)
from budget_engine.domain.services.ledger import fold_ledger_entries
from budget_engine.domain.services.net_worth import compute_net_worth_summary
from budget_engine.infrastructure.logging.logger import get_app_logger


class ManageAccountsUseCase:
    """Create, delete and summarize household accounts."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
        default_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port providing accounts and ledger entries.
            logger: Optional logger compatible with logging.Logger-like API.
            default_currency: Currency used by the net worth summary.
        """
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()
        self._default_currency = default_currency

    def create_account(
        self,
        household_id: str,
        data: AccountCreationData,
    ) -> Account:
        """Create an account after checking its subtype.

        The opening balance becomes the stored balance; the calculated
        balance still comes from the ledger alone.

        Raises:
            InvalidAccountError: If the subtype does not fit the account type.
        """
        account_type = AccountType(data.account_type)
        if not is_valid_subtype(account_type, data.subtype):
            valid = ", ".join(account_subtypes(account_type))
            raise InvalidAccountError(
                f"Invalid subtype '{data.subtype}' for account type "
                f"'{account_type.value}'. Valid subtypes: {valid}"
            )
        account = Account(
            id=str(uuid4()),
            household_id=household_id,
            name=data.name,
            account_type=account_type,
            subtype=data.subtype,
            currency=data.currency,
            stored_balance=data.opening_balance,
        )
        created = self._accounts_repository.create_account(account)
        self._logger.info(
            f"Created {account_type.value} account {created.id} "
            f"for household {household_id}"
        )
        return created

    def get_account(self, account_id: str, household_id: str) -> Account:
        account = self._accounts_repository.fetch_account(account_id)
        if account is None or account.household_id != household_id:
            raise AccountNotFoundError(account_id)
        return account

    def delete_account(self, account_id: str, household_id: str) -> bool:
        """Delete an account, keeping it as inactive when it has history.

        Returns:
            bool: True for a hard delete, False for a soft delete.
        """
        self.get_account(account_id, household_id)
        if self._accounts_repository.count_ledger_entries(account_id) > 0:
            self._accounts_repository.deactivate_account(account_id)
            self._logger.info(
                f"Deactivated account {account_id}; ledger history is kept"
            )
            return False
        self._accounts_repository.delete_account(account_id)
        self._logger.info(f"Deleted account {account_id}")
        return True

    def get_net_worth_summary(
        self,
        household_id: str,
        currency: str | None = None,
    ) -> NetWorthSummary:
        """Summarize calculated balances of the household's active accounts.

        Args:
            household_id: Household to summarize.
            currency: Currency of the summary; defaults to the configured one.

        Returns:
            NetWorthSummary: Asset, liability and net worth totals.
        """
        accounts = self._accounts_repository.fetch_accounts(
            household_id,
            is_active=True,
        )
        balances = []
        for account in accounts:
            entries = self._accounts_repository.fetch_ledger_entries(account.id)
            balances.append(
                (account, fold_ledger_entries(account.account_type, entries))
            )
        return compute_net_worth_summary(
            balances,
            currency=currency or self._default_currency,
            logger=self._logger,
        )


__all__ = ["ManageAccountsUseCase"]
