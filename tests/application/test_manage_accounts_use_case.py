"""Tests for the ManageAccountsUseCase."""

import pytest

from budget_engine.application.use_cases.manage_accounts import (
    ManageAccountsUseCase,
)
from budget_engine.domain.errors import AccountNotFoundError, InvalidAccountError
from budget_engine.domain.models.accounts import (
    Account,
    AccountCreationData,
    AccountType,
    EntryType,
    LedgerEntry,
)


def _entry(entry_id: str, account_id: str, entry_type: EntryType, amount: int):
    return LedgerEntry(
        id=entry_id,
        account_id=account_id,
        entry_type=entry_type,
        amount=amount,
        currency="IDR",
    )


def test_create_account_persists_valid_subtype(accounts_repository, logger):
    use_case = ManageAccountsUseCase(accounts_repository, logger=logger)

    account = use_case.create_account(
        "hh-1",
        AccountCreationData(
            name="Payroll",
            account_type=AccountType.ASSET,
            subtype="BANK",
            currency="IDR",
            opening_balance=2500,
        ),
    )

    assert accounts_repository.accounts[account.id] == account
    assert account.household_id == "hh-1"
    assert account.stored_balance == 2500
    assert account.is_active is True


def test_create_account_rejects_subtype_of_other_type(
    accounts_repository,
    logger,
) -> None:
    """A liability subtype on an asset account is rejected."""
    use_case = ManageAccountsUseCase(accounts_repository, logger=logger)

    with pytest.raises(InvalidAccountError) as excinfo:
        use_case.create_account(
            "hh-1",
            AccountCreationData(
                name="Card",
                account_type=AccountType.ASSET,
                subtype="CREDIT_CARD",
                currency="IDR",
            ),
        )

    assert "CREDIT_CARD" in excinfo.value.reason
    assert accounts_repository.accounts == {}


def test_delete_account_with_history_is_soft(accounts_repository, logger):
    accounts_repository.add(
        Account("acc-1", "hh-1", "Cash", AccountType.ASSET, "CASH", "IDR"),
        [_entry("e1", "acc-1", EntryType.DEBIT, 100)],
    )
    use_case = ManageAccountsUseCase(accounts_repository, logger=logger)

    assert use_case.delete_account("acc-1", "hh-1") is False
    assert accounts_repository.accounts["acc-1"].is_active is False


def test_delete_account_without_history_is_hard(accounts_repository, logger):
    accounts_repository.add(
        Account("acc-1", "hh-1", "Cash", AccountType.ASSET, "CASH", "IDR"),
    )
    use_case = ManageAccountsUseCase(accounts_repository, logger=logger)

    assert use_case.delete_account("acc-1", "hh-1") is True
    assert accounts_repository.deleted == ["acc-1"]


def test_delete_account_of_other_household_raises(accounts_repository, logger):
    accounts_repository.add(
        Account("acc-1", "hh-1", "Cash", AccountType.ASSET, "CASH", "IDR"),
    )
    use_case = ManageAccountsUseCase(accounts_repository, logger=logger)

    with pytest.raises(AccountNotFoundError):
        use_case.delete_account("acc-1", "hh-2")
    assert "acc-1" in accounts_repository.accounts


def test_net_worth_uses_calculated_balances(accounts_repository, logger):
    """Stored balances are ignored; inactive accounts are skipped."""
    accounts_repository.add(
        Account("bank", "hh-1", "Bank", AccountType.ASSET, "BANK", "IDR", 1),
        [_entry("e1", "bank", EntryType.DEBIT, 10000)],
    )
    accounts_repository.add(
        Account("cash", "hh-1", "Cash", AccountType.ASSET, "CASH", "IDR"),
        [_entry("e2", "cash", EntryType.DEBIT, 500)],
    )
    accounts_repository.add(
        Account("loan", "hh-1", "Loan", AccountType.LIABILITY, "LOAN", "IDR"),
        [_entry("e3", "loan", EntryType.CREDIT, 4000)],
    )
    accounts_repository.add(
        Account(
            "old",
            "hh-1",
            "Old",
            AccountType.ASSET,
            "BANK",
            "IDR",
            is_active=False,
        ),
        [_entry("e4", "old", EntryType.DEBIT, 777)],
    )
    use_case = ManageAccountsUseCase(accounts_repository, logger=logger)

    summary = use_case.get_net_worth_summary("hh-1")

    assert summary.total_assets == 10500
    assert summary.total_liabilities == 4000
    assert summary.net_worth == 6500
    assert summary.assets_by_subtype == {"BANK": 10000, "CASH": 500}
    assert summary.liabilities_by_subtype == {"LOAN": 4000}
    assert summary.currency == "IDR"
