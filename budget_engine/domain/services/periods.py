"""Calendar helpers for budget periods."""

import calendar
from datetime import date, timedelta

from budget_engine.domain.constants import PERIOD_LENGTH_BOUNDS
from budget_engine.domain.models.budgets import BudgetPeriod


def _add_months(value: date, months: int) -> date:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _calendar_end(period: BudgetPeriod, start: date) -> date:
    if period == BudgetPeriod.WEEKLY:
        return start + timedelta(days=6)
    if period == BudgetPeriod.MONTHLY:
        return _add_months(start, 1) - timedelta(days=1)
    try:
        next_year = start.replace(year=start.year + 1)
    except ValueError:
        next_year = start.replace(year=start.year + 1, day=28)
    return next_year - timedelta(days=1)


def next_period_range(period: BudgetPeriod, end_date: date) -> tuple[date, date]:
    """Return the inclusive range of the period following ``end_date``.

    The range follows the calendar (day after ``end_date`` up to the day
    before the same date one period later). A range shorter than the
    period's minimum span, such as February in a non-leap year, is
    stretched to that minimum so the next budget passes period validation.

    Args:
        period: Period of the budget being rolled over.
        end_date: Inclusive end of the current budget.

    Returns:
        tuple[date, date]: Start and end of the next period.
    """
    period = BudgetPeriod(period)
    start = end_date + timedelta(days=1)
    end = _calendar_end(period, start)
    min_span, _ = PERIOD_LENGTH_BOUNDS[period.value]
    if (end - start).days < min_span:
        end = start + timedelta(days=min_span)
    return start, end


__all__ = ["next_period_range"]
