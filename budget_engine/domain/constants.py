"""Domain constants for budget accounting."""

DEFAULT_CURRENCY = "IDR"

ASSET_SUBTYPES = (
    "BANK",
    "CASH",
    "INVESTMENT",
    "CRYPTO",
    "RECEIVABLE",
    "PREPAID",
    "OTHER_ASSET",
)

LIABILITY_SUBTYPES = (
    "CREDIT_CARD",
    "LOAN",
    "MORTGAGE",
    "PAYABLE",
    "ACCRUED",
    "OTHER_LIABILITY",
)

# Inclusive day-span tolerance per budget period.
PERIOD_LENGTH_BOUNDS = {
    "WEEKLY": (6, 8),
    "MONTHLY": (28, 32),
    "YEARLY": (360, 370),
}

MAX_CATEGORY_ALLOCATION = 100_000_000
MIN_TOTAL_ALLOCATION = 1_000_000
MAX_TOTAL_ALLOCATION = 100_000_000_000

WARNING_THRESHOLD = 75
CRITICAL_THRESHOLD = 90


__all__ = [
    "DEFAULT_CURRENCY",
    "ASSET_SUBTYPES",
    "LIABILITY_SUBTYPES",
    "PERIOD_LENGTH_BOUNDS",
    "MAX_CATEGORY_ALLOCATION",
    "MIN_TOTAL_ALLOCATION",
    "MAX_TOTAL_ALLOCATION",
    "WARNING_THRESHOLD",
    "CRITICAL_THRESHOLD",
]
