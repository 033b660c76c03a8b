"""Double-entry ledger folding."""

from collections.abc import Iterable

from budget_engine.domain.models.accounts import (
    AccountType,
    BalanceHistoryPoint,
    EntryType,
    LedgerEntry,
)


def entry_delta(account_type: AccountType, entry: LedgerEntry) -> int:
    """Return the signed effect of one entry on an account balance.

    Assets grow on the debit side, liabilities on the credit side.

    Args:
        account_type: Type of the account the entry is posted to.
        entry: Ledger entry to evaluate.

    Returns:
        int: Signed delta in minor units.
    """
    increasing_side = (
        EntryType.DEBIT
        if account_type == AccountType.ASSET
        else EntryType.CREDIT
    )
    if entry.entry_type == increasing_side:
        return entry.amount
    return -entry.amount


def fold_ledger_entries(
    account_type: AccountType,
    entries: Iterable[LedgerEntry],
    opening_balance: int = 0,
) -> int:
    """Fold ledger entries into a balance.

    Args:
        account_type: Type of the account the entries belong to.
        entries: Entries posted to the account.
        opening_balance: Balance to start from.

    Returns:
        int: Resulting balance in minor units.
    """
    balance = opening_balance
    for entry in entries:
        balance += entry_delta(account_type, entry)
    return balance


def build_balance_history(
    account_type: AccountType,
    entries: Iterable[LedgerEntry],
    opening_balance: int = 0,
) -> list[BalanceHistoryPoint]:
    """Return the end-of-day balance for every day with ledger activity.

    Args:
        account_type: Type of the account the entries belong to.
        entries: Dated entries inside the reporting window.
        opening_balance: Balance before the first entry.

    Returns:
        list[BalanceHistoryPoint]: One point per active day, oldest first.
    """
    dated = sorted(
        (entry for entry in entries if entry.entry_date is not None),
        key=lambda entry: entry.entry_date,
    )
    points: list[BalanceHistoryPoint] = []
    balance = opening_balance
    for entry in dated:
        balance += entry_delta(account_type, entry)
        if points and points[-1].date == entry.entry_date:
            points[-1] = BalanceHistoryPoint(date=entry.entry_date, balance=balance)
        else:
            points.append(BalanceHistoryPoint(date=entry.entry_date, balance=balance))
    return points


__all__ = ["entry_delta", "fold_ledger_entries", "build_balance_history"]
