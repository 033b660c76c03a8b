"""Tests for the init_schema_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from budget_engine.adapters import init_schema_cli


def test_main_checks_connection_and_creates_schema(monkeypatch):
    fake_logger = MagicMock()
    conn = MagicMock()
    engine = MagicMock(url="sqlite:///budget.db")
    engine.connect.return_value.__enter__.return_value = conn
    ensured = []

    monkeypatch.setattr(init_schema_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        init_schema_cli,
        "build_database_adapter",
        lambda: SimpleNamespace(get_engine=lambda: engine),
    )
    monkeypatch.setattr(init_schema_cli, "ensure_schema", ensured.append)

    init_schema_cli.main()

    conn.exec_driver_sql.assert_called_once_with("SELECT 1")
    assert ensured == [engine]
    assert "sqlite:///budget.db" in fake_logger.info.call_args_list[0].args[0]
