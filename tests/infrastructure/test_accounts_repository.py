"""Tests for the SQLAlchemy accounts repository."""

from datetime import date

from budget_engine.domain.models.accounts import Account, AccountType, EntryType
from budget_engine.infrastructure.repositories.accounts_repository import (
    SqlAlchemyAccountsRepository,
)


def _account(account_id: str, household_id: str = "hh-1", **overrides):
    values = {
        "id": account_id,
        "household_id": household_id,
        "name": account_id.title(),
        "account_type": AccountType.ASSET,
        "subtype": "BANK",
        "currency": "IDR",
        "stored_balance": 0,
    }
    values.update(overrides)
    return Account(**values)


def _ledger(entry_id, account_id, entry_type, amount, entry_date):
    return {
        "id": entry_id,
        "account_id": account_id,
        "transaction_id": None,
        "entry_type": entry_type,
        "amount_minor": amount,
        "currency": "IDR",
        "entry_date": entry_date,
    }


def test_create_and_fetch_account(db_port):
    repository = SqlAlchemyAccountsRepository(db_port)
    account = _account("acc-1", stored_balance=1500)

    repository.create_account(account)

    assert repository.fetch_account("acc-1") == account
    assert repository.fetch_account("missing") is None


def test_fetch_accounts_filters_household_and_activity(db_port):
    repository = SqlAlchemyAccountsRepository(db_port)
    repository.create_account(_account("acc-a"))
    repository.create_account(_account("acc-b"))
    repository.create_account(_account("acc-c", household_id="hh-2"))
    repository.deactivate_account("acc-b")

    assert [a.id for a in repository.fetch_accounts("hh-1")] == ["acc-a", "acc-b"]
    assert [a.id for a in repository.fetch_accounts("hh-1", is_active=True)] == [
        "acc-a"
    ]
    assert repository.fetch_account("acc-b").is_active is False


def test_ledger_entries_are_filtered_by_inclusive_dates(db_port, insert_rows):
    repository = SqlAlchemyAccountsRepository(db_port)
    repository.create_account(_account("acc-1"))
    insert_rows(
        "ledger_entries",
        [
            _ledger("e1", "acc-1", "DEBIT", 100, "2024-01-01"),
            _ledger("e2", "acc-1", "CREDIT", 40, "2024-01-15"),
            _ledger("e3", "acc-1", "DEBIT", 10, "2024-01-31"),
            _ledger("e4", "acc-1", "DEBIT", 5, "2024-02-01"),
        ],
    )

    window = repository.fetch_ledger_entries(
        "acc-1",
        start_date=date(2024, 1, 15),
        end_date=date(2024, 1, 31),
    )

    assert [e.id for e in window] == ["e2", "e3"]
    assert window[0].entry_type == EntryType.CREDIT
    assert window[0].entry_date == date(2024, 1, 15)
    assert len(repository.fetch_ledger_entries("acc-1")) == 4
    assert repository.count_ledger_entries("acc-1") == 4
    assert repository.count_ledger_entries("acc-2") == 0


def test_update_stored_balance_and_delete(db_port):
    repository = SqlAlchemyAccountsRepository(db_port)
    repository.create_account(_account("acc-1"))

    repository.update_stored_balance("acc-1", 4200)
    assert repository.fetch_account("acc-1").stored_balance == 4200

    repository.delete_account("acc-1")
    assert repository.fetch_account("acc-1") is None
