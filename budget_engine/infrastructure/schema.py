"""DDL for the budget storage tables."""

from sqlalchemy.engine import Engine

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id TEXT PRIMARY KEY,
    household_id TEXT NOT NULL,
    name TEXT NOT NULL,
    account_type TEXT NOT NULL,
    subtype TEXT NOT NULL,
    currency TEXT NOT NULL,
    balance_minor BIGINT NOT NULL DEFAULT 0,
    is_active BOOLEAN NOT NULL DEFAULT TRUE
)
"""

CREATE_LEDGER_ENTRIES_SQL = """
CREATE TABLE IF NOT EXISTS ledger_entries (
    id TEXT PRIMARY KEY,
    account_id TEXT NOT NULL REFERENCES accounts (id),
    transaction_id TEXT,
    entry_type TEXT NOT NULL,
    amount_minor BIGINT NOT NULL,
    currency TEXT NOT NULL,
    entry_date TEXT
)
"""

CREATE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    household_id TEXT NOT NULL,
    name TEXT NOT NULL
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    household_id TEXT NOT NULL,
    category_id TEXT,
    amount_minor BIGINT NOT NULL,
    currency TEXT NOT NULL,
    txn_date TEXT NOT NULL
)
"""

CREATE_BUDGETS_SQL = """
CREATE TABLE IF NOT EXISTS budgets (
    id TEXT PRIMARY KEY,
    household_id TEXT NOT NULL,
    name TEXT NOT NULL,
    period TEXT NOT NULL,
    total_allocated_minor BIGINT NOT NULL,
    currency TEXT NOT NULL,
    start_date TEXT NOT NULL,
    end_date TEXT NOT NULL,
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    created_at TEXT,
    updated_at TEXT
)
"""

CREATE_BUDGET_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS budget_categories (
    id TEXT PRIMARY KEY,
    budget_id TEXT NOT NULL REFERENCES budgets (id),
    category_id TEXT NOT NULL,
    allocated_minor BIGINT NOT NULL,
    carry_over_minor BIGINT NOT NULL DEFAULT 0,
    spent_minor BIGINT NOT NULL DEFAULT 0,
    UNIQUE (budget_id, category_id)
)
"""

SCHEMA_STATEMENTS = (
    CREATE_ACCOUNTS_SQL,
    CREATE_LEDGER_ENTRIES_SQL,
    CREATE_CATEGORIES_SQL,
    CREATE_TRANSACTIONS_SQL,
    CREATE_BUDGETS_SQL,
    CREATE_BUDGET_CATEGORIES_SQL,
)


def ensure_schema(engine: Engine) -> None:
    """Create every storage table that does not exist yet."""
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)


__all__ = [
    "CREATE_ACCOUNTS_SQL",
    "CREATE_LEDGER_ENTRIES_SQL",
    "CREATE_CATEGORIES_SQL",
    "CREATE_TRANSACTIONS_SQL",
    "CREATE_BUDGETS_SQL",
    "CREATE_BUDGET_CATEGORIES_SQL",
    "SCHEMA_STATEMENTS",
    "ensure_schema",
]
