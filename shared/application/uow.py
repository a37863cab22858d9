"""
Unit of Work

One ``DjangoUnitOfWork`` brackets every check-then-write section of the
reservation core: the availability or capacity check, the write, and the
domain events describing it either all take effect or none do.
"""

from typing import List
import logging

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork:
    """
    Atomic section that publishes its domain events after commit

    Entering opens ``transaction.atomic()`` (a savepoint when already inside
    one). Events passed to ``record`` are handed to the message bus through
    ``transaction.on_commit``, so subscribers never observe a write that was
    later rolled back. Leaving with an exception rolls the writes back and
    drops the recorded events.

    Usage:
        with key_lock("room", room_id), DjangoUnitOfWork() as uow:
            room = lock_room(room_id)
            reservation = Reservation.objects.create(...)
            uow.record(ReservationCreated(...))
    """

    def __init__(self, using: str | None = None):
        self.using = using
        self._atomic = None
        self._pending: List[DomainEvent] = []

    @property
    def pending_events(self) -> List[DomainEvent]:
        return list(self._pending)

    def __enter__(self):
        self._atomic = transaction.atomic(using=self.using)
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self._schedule_publication()
            else:
                self._discard(exc_val)
        finally:
            self._atomic.__exit__(exc_type, exc_val, exc_tb)
            self._atomic = None

    def record(self, event: DomainEvent):
        self._pending.append(event)
        logger.debug(f"{event.__class__.__name__} recorded for aggregate {event.aggregate_id}")

    def _schedule_publication(self):
        if not self._pending:
            return
        batch, self._pending = self._pending, []
        transaction.on_commit(lambda: _publish(batch), using=self.using)

    def _discard(self, reason):
        if self._pending:
            logger.info(
                f"Dropping {len(self._pending)} unpublished events: "
                f"{reason.__class__.__name__}"
            )
        self._pending = []


def _publish(events: List[DomainEvent]):
    """on_commit callback; the rows are already durable when this runs."""
    from shared.application.message_bus import message_bus

    try:
        message_bus.publish_events(events)
    except Exception:
        logger.exception(f"Publishing {len(events)} committed events failed")
