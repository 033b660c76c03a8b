"""Tests for the end_budget_periods_cli adapter."""

from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from budget_engine.adapters import end_budget_periods_cli


@pytest.fixture
def use_case(monkeypatch):
    fake_use_case = MagicMock()
    fake_use_case.run.return_value = SimpleNamespace(
        processed_count=2,
        budget_ids=["b-1", "b-2"],
    )
    monkeypatch.setattr(end_budget_periods_cli, "build_event_bus", object)
    monkeypatch.setattr(end_budget_periods_cli, "build_database_adapter", object)
    monkeypatch.setattr(
        end_budget_periods_cli,
        "build_end_budget_periods_use_case",
        lambda bus, db_port: fake_use_case,
    )
    return fake_use_case


def test_main_runs_job_with_configured_date(monkeypatch, capsys, use_case):
    monkeypatch.setattr(
        end_budget_periods_cli,
        "get_app_logger",
        lambda: MagicMock(),
    )
    monkeypatch.setenv("PERIOD_END_AS_OF", "2024-02-01")

    end_budget_periods_cli.main()

    use_case.run.assert_called_once_with(date(2024, 2, 1))
    assert "Closed 2 ended budget(s)." in capsys.readouterr().out


def test_main_falls_back_to_today_on_invalid_date(monkeypatch, use_case):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        end_budget_periods_cli,
        "get_app_logger",
        lambda: fake_logger,
    )
    monkeypatch.setenv("PERIOD_END_AS_OF", "02/01/2024")

    end_budget_periods_cli.main()

    use_case.run.assert_called_once_with(None)
    fake_logger.warning.assert_called_once()


def test_parse_date_handles_empty_values():
    logger = MagicMock()

    assert end_budget_periods_cli._parse_date(None, logger) is None
    assert end_budget_periods_cli._parse_date("", logger) is None
    logger.warning.assert_not_called()
