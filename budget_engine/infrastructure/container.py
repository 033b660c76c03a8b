"""Composition root for wiring infrastructure adapters."""

from budget_engine.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from budget_engine.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from budget_engine.application.ports.database import DatabaseEnginePort
from budget_engine.application.ports.events import EventBusPort
from budget_engine.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from budget_engine.application.use_cases.budget_alerts import (
    BudgetAlertsUseCase,
)
from budget_engine.application.use_cases.end_budget_periods import (
    EndBudgetPeriodsUseCase,
)
from budget_engine.application.use_cases.ledger_balance import (
    LedgerBalanceCalculator,
)
from budget_engine.application.use_cases.manage_accounts import (
    ManageAccountsUseCase,
)
from budget_engine.application.use_cases.manage_budgets import (
    ManageBudgetsUseCase,
)
from budget_engine.application.use_cases.track_spending import SpendTracker
from budget_engine.infrastructure.audit_listener import BudgetAuditListener
from budget_engine.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from budget_engine.infrastructure.event_bus import InProcessEventBus
from budget_engine.infrastructure.logging.logger import get_app_logger
from budget_engine.infrastructure.notifications import LoggingAlertSink
from budget_engine.infrastructure.repositories import (
    SqlAlchemyAccountsRepository,
    SqlAlchemyBudgetsRepository,
    SqlAlchemyTransactionsRepository,
)
from budget_engine.infrastructure.settings import BudgetSettings


def build_database_adapter(db_url: str | None = None) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(db_url)


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the accounts and ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_budgets_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BudgetsRepositoryPort:
    """Return the budgets repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBudgetsRepository(resolved_db)


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the transactions spending repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionsRepository(resolved_db)


def build_event_bus() -> EventBusPort:
    """Return an event bus with the audit listener attached."""
    bus = InProcessEventBus()
    BudgetAuditListener().register(bus)
    return bus


def build_alerts_use_case(
    bus: EventBusPort,
    db_port: DatabaseEnginePort | None = None,
    settings: BudgetSettings | None = None,
) -> BudgetAlertsUseCase:
    """Return the alert use case publishing on ``bus``."""
    resolved_settings = settings or BudgetSettings.from_env()
    return BudgetAlertsUseCase(
        build_budgets_repository(db_port),
        bus,
        LoggingAlertSink(),
        thresholds=resolved_settings.thresholds,
        logger=get_app_logger(),
    )


def build_spend_tracker(
    bus: EventBusPort,
    db_port: DatabaseEnginePort | None = None,
    settings: BudgetSettings | None = None,
) -> SpendTracker:
    """Return a spend tracker subscribed to the transaction events of ``bus``."""
    tracker = SpendTracker(
        build_budgets_repository(db_port),
        build_transactions_repository(db_port),
        alerts=build_alerts_use_case(bus, db_port, settings),
        logger=get_app_logger(),
    )
    tracker.register(bus)
    return tracker


def build_manage_budgets_use_case(
    bus: EventBusPort,
    db_port: DatabaseEnginePort | None = None,
    settings: BudgetSettings | None = None,
) -> ManageBudgetsUseCase:
    """Return the budget lifecycle use case."""
    resolved_settings = settings or BudgetSettings.from_env()
    return ManageBudgetsUseCase(
        build_budgets_repository(db_port),
        bus,
        limits=resolved_settings.limits,
        logger=get_app_logger(),
    )


def build_manage_accounts_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: BudgetSettings | None = None,
) -> ManageAccountsUseCase:
    """Return the account lifecycle use case."""
    resolved_settings = settings or BudgetSettings.from_env()
    return ManageAccountsUseCase(
        build_accounts_repository(db_port),
        logger=get_app_logger(),
        default_currency=resolved_settings.default_currency,
    )


def build_ledger_balance_calculator(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerBalanceCalculator:
    """Return the ledger balance calculator."""
    return LedgerBalanceCalculator(
        build_accounts_repository(db_port),
        logger=get_app_logger(),
    )


def build_end_budget_periods_use_case(
    bus: EventBusPort,
    db_port: DatabaseEnginePort | None = None,
) -> EndBudgetPeriodsUseCase:
    """Return the period-end job."""
    return EndBudgetPeriodsUseCase(
        build_budgets_repository(db_port),
        bus,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_accounts_repository",
    "build_budgets_repository",
    "build_transactions_repository",
    "build_event_bus",
    "build_alerts_use_case",
    "build_spend_tracker",
    "build_manage_budgets_use_case",
    "build_manage_accounts_use_case",
    "build_ledger_balance_calculator",
    "build_end_budget_periods_use_case",
]
