"""SQLAlchemy repository for budgets and their category line items."""

from collections import defaultdict
from datetime import date, datetime

from sqlalchemy import bindparam, text

from budget_engine.application.ports.budgets_repository import (
    BudgetsRepositoryPort,
)
from budget_engine.application.ports.database import DatabaseEnginePort
from budget_engine.domain.models.budgets import (
    Budget,
    BudgetCategory,
    BudgetPeriod,
)
from budget_engine.utils.money_utils import coerce_minor_units

SELECT_BUDGET_COLUMNS = """
    SELECT id,
           household_id,
           name,
           period,
           total_allocated_minor,
           currency,
           start_date,
           end_date,
           is_active,
           created_at,
           updated_at
    FROM budgets
"""

SELECT_CATEGORIES_SQL = text(
    """
    SELECT bc.id,
           bc.budget_id,
           bc.category_id,
           c.name AS category_name,
           bc.allocated_minor,
           bc.carry_over_minor,
           bc.spent_minor
    FROM budget_categories bc
    LEFT JOIN categories c ON c.id = bc.category_id
    WHERE bc.budget_id IN :budget_ids
    ORDER BY bc.budget_id, bc.category_id
    """
).bindparams(bindparam("budget_ids", expanding=True))

INSERT_BUDGET_SQL = text(
    """
    INSERT INTO budgets (
        id,
        household_id,
        name,
        period,
        total_allocated_minor,
        currency,
        start_date,
        end_date,
        is_active,
        created_at,
        updated_at
    )
    VALUES (
        :id,
        :household_id,
        :name,
        :period,
        :total_allocated_minor,
        :currency,
        :start_date,
        :end_date,
        :is_active,
        :created_at,
        :updated_at
    )
    """
)

UPDATE_BUDGET_SQL = text(
    """
    UPDATE budgets
    SET name = :name,
        period = :period,
        total_allocated_minor = :total_allocated_minor,
        currency = :currency,
        start_date = :start_date,
        end_date = :end_date,
        is_active = :is_active,
        updated_at = :updated_at
    WHERE id = :id AND household_id = :household_id
    """
)

INSERT_CATEGORY_SQL = text(
    """
    INSERT INTO budget_categories (
        id,
        budget_id,
        category_id,
        allocated_minor,
        carry_over_minor,
        spent_minor
    )
    VALUES (
        :id,
        :budget_id,
        :category_id,
        :allocated_minor,
        :carry_over_minor,
        :spent_minor
    )
    """
)

DELETE_CATEGORIES_SQL = text(
    "DELETE FROM budget_categories WHERE budget_id = :budget_id"
)

INCREMENT_SPENT_SQL = text(
    """
    UPDATE budget_categories
    SET spent_minor = spent_minor + :delta
    WHERE budget_id = :budget_id AND category_id = :category_id
    """
)

SET_SPENT_SQL = text(
    """
    UPDATE budget_categories
    SET spent_minor = :spent
    WHERE budget_id = :budget_id AND category_id = :category_id
    """
)


class SqlAlchemyBudgetsRepository(BudgetsRepositoryPort):
    """Repository persisting budgets with SQLAlchemy Core statements.

    Every multi-row write runs inside a single ``engine.begin()`` block so a
    budget and its categories are never persisted partially.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the storage engine.
        """
        self._db_port = db_port

    def fetch_budget(self, budget_id: str, household_id: str) -> Budget | None:
        query = text(
            SELECT_BUDGET_COLUMNS
            + " WHERE id = :budget_id AND household_id = :household_id"
        )
        budgets = self._fetch(
            query,
            {"budget_id": budget_id, "household_id": household_id},
        )
        return budgets[0] if budgets else None

    def fetch_budgets(
        self,
        household_id: str,
        is_active: bool | None = None,
    ) -> list[Budget]:
        query = text(SELECT_BUDGET_COLUMNS + " WHERE household_id = :household_id")
        params = {"household_id": household_id}
        if is_active is not None:
            query = text(query.text + " AND is_active = :is_active")
            params["is_active"] = is_active
        return self._fetch(query, params)

    def fetch_active_budgets(self, household_id: str | None = None) -> list[Budget]:
        query = text(SELECT_BUDGET_COLUMNS + " WHERE is_active = :is_active")
        params = {"is_active": True}
        if household_id is not None:
            query = text(query.text + " AND household_id = :household_id")
            params["household_id"] = household_id
        return self._fetch(query, params)

    def fetch_ended_budgets(self, as_of: date) -> list[Budget]:
        query = text(
            SELECT_BUDGET_COLUMNS
            + " WHERE is_active = :is_active AND end_date < :as_of"
        )
        return self._fetch(query, {"is_active": True, "as_of": as_of.isoformat()})

    def create_budget(self, budget: Budget) -> Budget:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_BUDGET_SQL, self._budget_params(budget))
            if budget.categories:
                conn.execute(
                    INSERT_CATEGORY_SQL,
                    [self._category_params(c) for c in budget.categories],
                )
        return budget

    def update_budget(self, budget: Budget, replace_categories: bool) -> Budget:
        params = self._budget_params(budget)
        params.pop("created_at")
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(UPDATE_BUDGET_SQL, params)
            if replace_categories:
                conn.execute(DELETE_CATEGORIES_SQL, {"budget_id": budget.id})
                if budget.categories:
                    conn.execute(
                        INSERT_CATEGORY_SQL,
                        [self._category_params(c) for c in budget.categories],
                    )
        return budget

    def delete_budget(self, budget_id: str, household_id: str) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_CATEGORIES_SQL, {"budget_id": budget_id})
            conn.execute(
                text(
                    "DELETE FROM budgets "
                    "WHERE id = :budget_id AND household_id = :household_id"
                ),
                {"budget_id": budget_id, "household_id": household_id},
            )

    def set_budget_active(self, budget_id: str, is_active: bool) -> None:
        query = text(
            "UPDATE budgets SET is_active = :is_active WHERE id = :budget_id"
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(query, {"is_active": is_active, "budget_id": budget_id})

    def increment_spent_amount(
        self,
        budget_id: str,
        category_id: str,
        delta: int,
    ) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INCREMENT_SPENT_SQL,
                {
                    "delta": delta,
                    "budget_id": budget_id,
                    "category_id": category_id,
                },
            )

    def replace_spent_amounts(
        self,
        budget_id: str,
        spent_by_category: dict[str, int],
    ) -> None:
        if not spent_by_category:
            return
        payload = [
            {"spent": spent, "budget_id": budget_id, "category_id": category_id}
            for category_id, spent in spent_by_category.items()
        ]
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(SET_SPENT_SQL, payload)

    def _fetch(self, query, params: dict) -> list[Budget]:
        query = text(query.text + " ORDER BY start_date, id")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            budget_rows = conn.execute(query, params).all()
            if not budget_rows:
                return []
            category_rows = conn.execute(
                SELECT_CATEGORIES_SQL,
                {"budget_ids": [row.id for row in budget_rows]},
            ).all()

        categories_by_budget = defaultdict(list)
        for row in category_rows:
            categories_by_budget[row.budget_id].append(
                BudgetCategory(
                    id=row.id,
                    budget_id=row.budget_id,
                    category_id=row.category_id,
                    category_name=row.category_name or row.category_id,
                    allocated_amount=coerce_minor_units(row.allocated_minor),
                    carry_over_amount=coerce_minor_units(row.carry_over_minor),
                    spent_amount=coerce_minor_units(row.spent_minor),
                )
            )
        return [
            Budget(
                id=row.id,
                household_id=row.household_id,
                name=row.name,
                period=BudgetPeriod(row.period),
                total_allocated=coerce_minor_units(row.total_allocated_minor),
                currency=row.currency,
                start_date=_parse_date(row.start_date),
                end_date=_parse_date(row.end_date),
                is_active=bool(row.is_active),
                categories=tuple(categories_by_budget.get(row.id, [])),
                created_at=_parse_datetime(row.created_at),
                updated_at=_parse_datetime(row.updated_at),
            )
            for row in budget_rows
        ]

    @staticmethod
    def _budget_params(budget: Budget) -> dict:
        return {
            "id": budget.id,
            "household_id": budget.household_id,
            "name": budget.name,
            "period": BudgetPeriod(budget.period).value,
            "total_allocated_minor": budget.total_allocated,
            "currency": budget.currency,
            "start_date": budget.start_date.isoformat(),
            "end_date": budget.end_date.isoformat(),
            "is_active": budget.is_active,
            "created_at": _format_datetime(budget.created_at),
            "updated_at": _format_datetime(budget.updated_at),
        }

    @staticmethod
    def _category_params(category: BudgetCategory) -> dict:
        return {
            "id": category.id,
            "budget_id": category.budget_id,
            "category_id": category.category_id,
            "allocated_minor": category.allocated_amount,
            "carry_over_minor": category.carry_over_amount,
            "spent_minor": category.spent_amount,
        }


def _parse_date(value) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _parse_datetime(value) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


__all__ = ["SqlAlchemyBudgetsRepository"]
