"""Ports for publishing domain events and delivering alerts."""

from collections.abc import Callable
from typing import Any, Protocol

from budget_engine.domain.models.alerts import BudgetAlert
from budget_engine.domain.models.events import DomainEvent

EventHandler = Callable[[Any], None]


class EventPublisherPort(Protocol):
    """Port used by use cases to announce domain events."""

    def publish(self, event: DomainEvent) -> None:
        """Deliver the event to every subscriber of ``event.name``."""


class EventBusPort(EventPublisherPort, Protocol):
    """Publisher that also accepts subscriptions."""

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Register a handler for an event name."""


class AlertSinkPort(Protocol):
    """Port receiving alerts for user-facing surfacing."""

    def notify(
        self,
        budget_id: str,
        household_id: str,
        alerts: list[BudgetAlert],
    ) -> None:
        """Hand over the alerts computed for a budget."""


__all__ = [
    "EventHandler",
    "EventPublisherPort",
    "EventBusPort",
    "AlertSinkPort",
]
