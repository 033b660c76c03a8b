"""Domain aggregates package."""

from .budget import BudgetAggregate

__all__ = ["BudgetAggregate"]
