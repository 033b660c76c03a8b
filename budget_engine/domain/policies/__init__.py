"""Domain policies package."""

from .accounts import account_subtypes, is_valid_subtype
from .spending import budget_tracks, is_expense, spend_amount

__all__ = [
    "account_subtypes",
    "is_valid_subtype",
    "budget_tracks",
    "is_expense",
    "spend_amount",
]
