"""SQLite-backed fixtures for repository tests."""

import pytest
from sqlalchemy import create_engine, text

from budget_engine.infrastructure.schema import ensure_schema


class SqliteDatabasePort:
    def __init__(self, engine) -> None:
        self._engine = engine

    def get_engine(self):
        return self._engine


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path}/budget.db",
        future=True,
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    ensure_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(engine) -> SqliteDatabasePort:
    return SqliteDatabasePort(engine)


@pytest.fixture
def insert_rows(engine):
    def _insert(table: str, rows: list[dict]) -> None:
        columns = list(rows[0])
        statement = text(
            f"INSERT INTO {table} ({', '.join(columns)}) "
            f"VALUES ({', '.join(':' + c for c in columns)})"
        )
        with engine.begin() as conn:
            conn.execute(statement, rows)

    return _insert
