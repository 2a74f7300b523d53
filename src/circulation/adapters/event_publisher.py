"""In-process, synchronous event publisher."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable

from circulation.domain.events import DOMAIN_EVENT_REGISTRY, DomainEvent
from circulation.interfaces.event_publisher import HoldEventPublisher

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class UnknownEventTypeError(ValueError):
    """Raised when subscribing to or publishing an unregistered event type."""

    def __init__(self, event_type: type) -> None:
        super().__init__(f"Unknown event type: {event_type.__name__}")
        self.event_type = event_type


class InProcessEventPublisher(HoldEventPublisher):
    """Publishes events by calling subscribers directly on the calling thread.

    Subscribers run in registration order. An exception raised by a subscriber
    stops delivery and propagates to the code that published the event, so the
    surrounding unit of work is rolled back.
    """

    def __init__(self) -> None:
        self._subscribers: defaultdict[type[DomainEvent], list[EventHandler]] = (
            defaultdict(list)
        )

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Register a handler for an event type.

        Raises:
            UnknownEventTypeError: If the event type is not a registered domain event.
        """
        if DOMAIN_EVENT_REGISTRY.get(event_type.__name__) is not event_type:
            raise UnknownEventTypeError(event_type)
        self._subscribers[event_type].append(handler)

    def publish(self, event: DomainEvent) -> DomainEvent:
        event_type = type(event)
        if DOMAIN_EVENT_REGISTRY.get(event_type.__name__) is not event_type:
            raise UnknownEventTypeError(event_type)

        handlers = self._subscribers.get(event_type, [])
        if not handlers:
            logger.debug("Publishing %s: no subscribers", event_type.__name__)
        for handler in handlers:
            logger.debug("Delivering %s to %r", event, handler)
            handler(event)
        return event
