"""CLI adapter to reconcile the stored balance of an account with its ledger."""

import os

from budget_engine.domain.errors import AccountNotFoundError
from budget_engine.infrastructure.container import (
    build_database_adapter,
    build_ledger_balance_calculator,
)
from budget_engine.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Check SYNC_ACCOUNT_ID and sync it when the balances diverge."""
    logger = get_app_logger()
    account_id = os.getenv("SYNC_ACCOUNT_ID", "").strip()
    if not account_id:
        logger.warning("SYNC_ACCOUNT_ID is required.")
        return

    calculator = build_ledger_balance_calculator(build_database_adapter())
    try:
        if calculator.validate_integrity(account_id):
            balance = calculator.stored_balance(account_id)
            print(f"Account {account_id} is consistent: {balance}")
            return
        balance = calculator.sync_balance(account_id)
    except AccountNotFoundError as exc:
        logger.error(str(exc))
        return

    print(f"Account {account_id} synced to {balance}")


if __name__ == "__main__":  # pragma: no cover
    main()
