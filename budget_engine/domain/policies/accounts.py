"""Policies for account definitions."""

from budget_engine.domain.constants import ASSET_SUBTYPES, LIABILITY_SUBTYPES
from budget_engine.domain.models.accounts import AccountType


def account_subtypes(account_type: AccountType) -> tuple[str, ...]:
    """Return the subtypes allowed for an account type."""
    if AccountType(account_type) == AccountType.ASSET:
        return ASSET_SUBTYPES
    return LIABILITY_SUBTYPES


def is_valid_subtype(account_type: AccountType, subtype: str) -> bool:
    return subtype in account_subtypes(account_type)


__all__ = ["account_subtypes", "is_valid_subtype"]
