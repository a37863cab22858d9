"""
Message Bus

Routes committed domain events (reservation created, attendee registered,
...) to in-process subscribers. Each app subscribes from its
``AppConfig.ready()``; today the subscribers write audit log lines.
"""

from collections import defaultdict
from typing import Callable, DefaultDict, List, Type
import logging

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)

Subscriber = Callable[[DomainEvent], None]


class MessageBus:
    """
    Fan-out of events to subscribers (1:N)

    Subscribers match on the exact event class. A failing subscriber is
    logged and skipped; delivery is best effort because the triggering
    transaction has already committed.
    """

    def __init__(self):
        self._subscribers: DefaultDict[Type[DomainEvent], List[Subscriber]] = defaultdict(list)

    def register_event_handler(self, event_type: Type[DomainEvent], handler: Subscriber):
        """Subscribe ``handler``; repeated registration (e.g. ready() running twice) is ignored."""
        subscribers = self._subscribers[event_type]
        if handler not in subscribers:
            subscribers.append(handler)
            logger.debug(f"{getattr(handler, '__name__', handler)} subscribed to {event_type.__name__}")

    def handlers_for(self, event_type: Type[DomainEvent]) -> List[Subscriber]:
        return list(self._subscribers.get(event_type, ()))

    def publish_events(self, events: List[DomainEvent]):
        for event in events:
            subscribers = self.handlers_for(type(event))
            if not subscribers:
                logger.debug(f"Nobody listens to {type(event).__name__}")
                continue

            for subscriber in subscribers:
                try:
                    subscriber(event)
                except Exception:
                    logger.exception(
                        f"Subscriber {getattr(subscriber, '__name__', subscriber)} failed on "
                        f"{type(event).__name__} {event.event_id}"
                    )


message_bus = MessageBus()
