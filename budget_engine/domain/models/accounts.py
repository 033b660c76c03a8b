"""Domain models for household accounts and their ledger."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class AccountType(str, Enum):
    """Top-level account classification driving ledger polarity."""

    ASSET = "ASSET"
    LIABILITY = "LIABILITY"


class EntryType(str, Enum):
    """Side of a double-entry ledger line."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


@dataclass(frozen=True)
class Account:
    """Household account with its cached (stored) balance.

    Attributes:
        id: Account identifier.
        household_id: Owning household.
        name: Display name.
        account_type: ASSET or LIABILITY.
        subtype: Type-dependent subtype such as BANK or LOAN.
        currency: ISO 4217 currency code.
        stored_balance: Cached balance in minor units, possibly stale.
        is_active: False once the account has been soft-deleted.
    """

    id: str
    household_id: str
    name: str
    account_type: AccountType
    subtype: str
    currency: str
    stored_balance: int = 0
    is_active: bool = True


@dataclass(frozen=True)
class AccountCreationData:
    """Input for creating an account."""

    name: str
    account_type: AccountType
    subtype: str
    currency: str
    opening_balance: int = 0


@dataclass(frozen=True)
class LedgerEntry:
    """Immutable ledger line posted against a single account."""

    id: str
    account_id: str
    entry_type: EntryType
    amount: int
    currency: str
    entry_date: date | None = None
    transaction_id: str | None = None


@dataclass(frozen=True)
class BalanceHistoryPoint:
    """End-of-day balance of an account."""

    date: date
    balance: int


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures over calculated balances.

    Attributes:
        total_assets: Sum of asset balances.
        total_liabilities: Sum of liability balances.
        net_worth: Assets minus liabilities.
        assets_by_subtype: Asset totals keyed by subtype.
        liabilities_by_subtype: Liability totals keyed by subtype.
        currency: Currency of the figures.
    """

    total_assets: int
    total_liabilities: int
    net_worth: int
    assets_by_subtype: dict[str, int]
    liabilities_by_subtype: dict[str, int]
    currency: str


__all__ = [
    "AccountType",
    "EntryType",
    "Account",
    "AccountCreationData",
    "LedgerEntry",
    "BalanceHistoryPoint",
    "NetWorthSummary",
]
