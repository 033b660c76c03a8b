"""Audit trail of budget lifecycle and alert events."""

from dataclasses import asdict

from budget_engine.application.ports.events import EventBusPort
from budget_engine.domain.models.events import BUDGET_EVENT_NAMES, BudgetEvent
from budget_engine.infrastructure.logging.logger import get_audit_logger


class BudgetAuditListener:
    """Write every budget event to the audit log."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_audit_logger()

    def register(self, bus: EventBusPort) -> None:
        """Subscribe to every budget event name on the bus."""
        for event_name in BUDGET_EVENT_NAMES:
            bus.subscribe(event_name, self.handle)

    def handle(self, event: BudgetEvent) -> None:
        payload = asdict(event)
        household_id = payload.pop("household_id", None)
        self._logger.info(
            f"{event.name} household={household_id} payload={payload}"
        )


__all__ = ["BudgetAuditListener"]
