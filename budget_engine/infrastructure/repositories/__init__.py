"""SQLAlchemy repositories implementing the application ports."""

from .accounts_repository import SqlAlchemyAccountsRepository
from .budgets_repository import SqlAlchemyBudgetsRepository
from .transactions_repository import SqlAlchemyTransactionsRepository

__all__ = [
    "SqlAlchemyAccountsRepository",
    "SqlAlchemyBudgetsRepository",
    "SqlAlchemyTransactionsRepository",
]
