"""Capacity guard for event enrollment.

Every path that can change the attendee count, or the ceiling it is
checked against, runs under the event's key lock inside one unit of work
with the event row locked. ``count(attendees) <= max_capacity`` therefore
holds even when registrations race. The unique ``(event, user)``
constraint backs up the duplicate check at the storage level.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore

from shared.application.locks import key_lock, lock_queryset_if_possible
from shared.application.retry import retry_on_transient_errors
from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import CapacityExceeded, Conflict, InvalidInput, InvalidState, NotFound

from .domain.events import AttendeeRegistered, AttendeeWithdrawn
from .models import Event, EventAttendee

logger = logging.getLogger(__name__)

# Columns an administrator may rewrite through update_event.
EDITABLE_FIELDS = ("title", "description", "date", "time", "location", "max_capacity")


def lock_event(event_id) -> Event:
    event = lock_queryset_if_possible(Event.objects.filter(pk=event_id)).first()
    if event is None:
        raise NotFound(f"Event {event_id} not found")
    return event


@retry_on_transient_errors
def register_attendee(event_id, caller) -> EventAttendee:
    """Enroll ``caller`` in the event.

    Raises:
        NotFound: event does not exist
        Conflict: caller is already enrolled
        CapacityExceeded: every place is taken
    """
    with key_lock("event", event_id), DjangoUnitOfWork() as uow:
        event = lock_event(event_id)

        if event.attendees.filter(user=caller).exists():
            raise Conflict("Already registered for this event")

        taken = event.attendees.count()
        if taken >= event.max_capacity:
            raise CapacityExceeded(f"Event {event.pk} is full ({taken}/{event.max_capacity})")

        try:
            with transaction.atomic():
                attendee = EventAttendee.objects.create(event=event, user=caller)
        except IntegrityError as exc:
            raise Conflict("Already registered for this event") from exc

        uow.record(AttendeeRegistered(
            aggregate_id=event.pk,
            user_id=caller.pk,
            attendees_count=taken + 1,
            max_capacity=event.max_capacity,
        ))

    logger.info("User %s registered for event %s (%s/%s)", caller.pk, event.pk, taken + 1, event.max_capacity)
    return attendee


@retry_on_transient_errors
def withdraw_attendee(event_id, caller) -> None:
    """Remove the caller's enrollment; NotFound when there is none."""

    with key_lock("event", event_id), DjangoUnitOfWork() as uow:
        deleted, _ = EventAttendee.objects.filter(event_id=event_id, user=caller).delete()
        if not deleted:
            raise NotFound("Not registered for this event")

        uow.record(AttendeeWithdrawn(aggregate_id=int(event_id), user_id=caller.pk))

    logger.info("User %s withdrew from event %s", caller.pk, event_id)


def create_event(**fields) -> Event:
    event = Event.objects.create(**fields)
    logger.info("Event %s created with %s places", event.pk, event.max_capacity)
    return event


@retry_on_transient_errors
def update_event(event_id, **fields) -> Event:
    """Rewrite event details; the ceiling may not drop below current enrollment."""

    unknown = set(fields) - set(EDITABLE_FIELDS)
    if unknown:
        raise InvalidInput(f"Unknown event fields: {sorted(unknown)}")

    with key_lock("event", event_id), DjangoUnitOfWork():
        event = lock_event(event_id)

        new_capacity = fields.get("max_capacity")
        if new_capacity is not None:
            enrolled = event.attendees.count()
            if new_capacity < enrolled:
                raise InvalidState(
                    f"Event {event.pk} already has {enrolled} attendees; capacity cannot drop to {new_capacity}"
                )

        for name, value in fields.items():
            setattr(event, name, value)
        event.save()

    logger.info("Event %s updated", event.pk)
    return event


@retry_on_transient_errors
def delete_event(event_id) -> None:
    with key_lock("event", event_id), DjangoUnitOfWork():
        event = lock_event(event_id)
        event.delete()

    logger.info("Event %s deleted", event_id)
