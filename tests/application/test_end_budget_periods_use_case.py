"""Tests for the EndBudgetPeriodsUseCase."""

from datetime import date

from budget_engine.application.use_cases.end_budget_periods import (
    EndBudgetPeriodsUseCase,
)
from budget_engine.domain.models.budgets import (
    Budget,
    BudgetCategory,
    BudgetPeriod,
)


def _budget(budget_id: str, end: date, spent: int = 0) -> Budget:
    return Budget(
        id=budget_id,
        household_id="hh-1",
        name=budget_id.title(),
        period=BudgetPeriod.WEEKLY,
        total_allocated=1_000_000,
        currency="IDR",
        start_date=date(end.year, end.month, end.day - 6),
        end_date=end,
        categories=(
            BudgetCategory(
                f"{budget_id}-1",
                budget_id,
                "cat-food",
                "Food",
                1_000_000,
                spent_amount=spent,
            ),
        ),
    )


def test_run_closes_only_ended_budgets(budgets_repository, publisher, logger):
    budgets_repository.create_budget(_budget("week-1", date(2024, 1, 7), 400_000))
    budgets_repository.create_budget(_budget("week-2", date(2024, 1, 14)))
    use_case = EndBudgetPeriodsUseCase(budgets_repository, publisher, logger=logger)

    result = use_case.run(as_of=date(2024, 1, 14))

    assert result.processed_count == 1
    assert result.budget_ids == ["week-1"]
    assert budgets_repository.budgets["week-1"].is_active is False
    assert budgets_repository.budgets["week-2"].is_active is True
    event = publisher.events[0]
    assert event.name == "budget.period.ended"
    assert event.total_spent == 400_000
    assert event.unused_amount == 600_000
    assert event.end_date == date(2024, 1, 7)


def test_run_is_a_no_op_once_closed(budgets_repository, publisher, logger):
    budgets_repository.create_budget(_budget("week-1", date(2024, 1, 7)))
    use_case = EndBudgetPeriodsUseCase(budgets_repository, publisher, logger=logger)

    use_case.run(as_of=date(2024, 2, 1))
    second = use_case.run(as_of=date(2024, 2, 1))

    assert second.processed_count == 0
    assert publisher.names() == ["budget.period.ended"]
