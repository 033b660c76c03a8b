"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from budget_engine.domain.constants import (
    CRITICAL_THRESHOLD,
    DEFAULT_CURRENCY,
    MAX_CATEGORY_ALLOCATION,
    MAX_TOTAL_ALLOCATION,
    MIN_TOTAL_ALLOCATION,
    WARNING_THRESHOLD,
)
from budget_engine.domain.models.alerts import AlertThresholds
from budget_engine.domain.models.budgets import BudgetLimits
from budget_engine.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BudgetSettings:
    """Household-level knobs for validation, alerting and reporting.

    Attributes:
        default_currency: Currency used for net worth and formatting.
        min_total_allocation: Smallest accepted budget total, minor units.
        max_total_allocation: Largest accepted budget total, minor units.
        max_category_allocation: Largest accepted category allocation.
        warning_threshold: Utilization percentage raising a warning.
        critical_threshold: Utilization percentage raising a critical alert.
    """

    default_currency: str = DEFAULT_CURRENCY
    min_total_allocation: int = MIN_TOTAL_ALLOCATION
    max_total_allocation: int = MAX_TOTAL_ALLOCATION
    max_category_allocation: int = MAX_CATEGORY_ALLOCATION
    warning_threshold: int = WARNING_THRESHOLD
    critical_threshold: int = CRITICAL_THRESHOLD

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables.

        Returns:
            BudgetSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        currency = os.getenv("BUDGET_DEFAULT_CURRENCY", "").strip().upper()
        return cls(
            default_currency=currency or DEFAULT_CURRENCY,
            min_total_allocation=cls._read_int(
                "BUDGET_MIN_TOTAL_ALLOCATION",
                MIN_TOTAL_ALLOCATION,
                logger=logger,
            ),
            max_total_allocation=cls._read_int(
                "BUDGET_MAX_TOTAL_ALLOCATION",
                MAX_TOTAL_ALLOCATION,
                logger=logger,
            ),
            max_category_allocation=cls._read_int(
                "BUDGET_MAX_CATEGORY_ALLOCATION",
                MAX_CATEGORY_ALLOCATION,
                logger=logger,
            ),
            warning_threshold=cls._read_int(
                "BUDGET_WARNING_THRESHOLD",
                WARNING_THRESHOLD,
                logger=logger,
            ),
            critical_threshold=cls._read_int(
                "BUDGET_CRITICAL_THRESHOLD",
                CRITICAL_THRESHOLD,
                logger=logger,
            ),
        )

    @property
    def limits(self) -> BudgetLimits:
        return BudgetLimits(
            min_total_allocation=self.min_total_allocation,
            max_total_allocation=self.max_total_allocation,
            max_category_allocation=self.max_category_allocation,
        )

    @property
    def thresholds(self) -> AlertThresholds:
        return AlertThresholds(
            warning=self.warning_threshold,
            critical=self.critical_threshold,
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read a non-negative integer variable, falling back on bad input.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid integer for {name}: {raw!r}; using {default}")
            return default
        if value < 0:
            logger.warning(f"Negative value for {name}: {value}; using {default}")
            return default
        return value


__all__ = ["BudgetSettings"]
