"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .budgets_repository import BudgetsRepositoryPort
from .database import DatabaseEnginePort
from .events import (
    AlertSinkPort,
    EventBusPort,
    EventHandler,
    EventPublisherPort,
)
from .transactions_repository import TransactionsRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "BudgetsRepositoryPort",
    "DatabaseEnginePort",
    "AlertSinkPort",
    "EventBusPort",
    "EventHandler",
    "EventPublisherPort",
    "TransactionsRepositoryPort",
]
