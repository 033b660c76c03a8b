"""In-process synchronous event bus."""

from collections import defaultdict

from budget_engine.application.ports.events import EventBusPort, EventHandler
from budget_engine.domain.models.events import DomainEvent
from budget_engine.infrastructure.logging.logger import get_app_logger


class InProcessEventBus(EventBusPort):
    """Deliver events to subscribers synchronously, in subscription order.

    Handlers run on the publisher's thread. A handler that raises stops the
    delivery and the error reaches the publisher.
    """

    def __init__(self, logger=None) -> None:
        self._subscribers: dict[str, list[EventHandler]] = defaultdict(list)
        self._logger = logger or get_app_logger()

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        self._subscribers[event_name].append(handler)

    def unsubscribe(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._subscribers.get(event_name, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: DomainEvent) -> None:
        handlers = list(self._subscribers.get(event.name, []))
        self._logger.debug(
            f"Publishing {event.name} to {len(handlers)} handler(s)"
        )
        for handler in handlers:
            handler(event)


__all__ = ["InProcessEventBus"]
