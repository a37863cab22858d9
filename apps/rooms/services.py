"""Availability checking and room administration services.

The overlap policy is read from the ``SAME_DAY_TURNOVER`` setting and
applied through the same helpers everywhere: availability checks, the
reservation write path and the directory's occupancy derivation.
"""

from __future__ import annotations

import logging
from datetime import date

from django.conf import settings  # type: ignore
from django.db.models import Q  # type: ignore

from shared.application.locks import key_lock, lock_queryset_if_possible
from shared.application.retry import retry_on_transient_errors
from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import InvalidState, NotFound
from shared.domain.value_objects import DateRange

from .models import Room

logger = logging.getLogger(__name__)


def same_day_turnover_allowed() -> bool:
    """Whether a checkout day may be reused as the next check-in day."""

    return bool(getattr(settings, "SAME_DAY_TURNOVER", False))


def overlap_filter(start: date, end: date, prefix: str = "") -> Q:
    """ORM rendition of the overlap oracle against ``start_date``/``end_date`` columns."""

    if same_day_turnover_allowed():
        return Q(**{f"{prefix}start_date__lt": end}) & Q(**{f"{prefix}end_date__gt": start})
    return Q(**{f"{prefix}start_date__lte": end}) & Q(**{f"{prefix}end_date__gte": start})


def occupancy_filter(on: date, prefix: str = "") -> Q:
    """Reservations whose window contains ``on``."""

    if same_day_turnover_allowed():
        return Q(**{f"{prefix}start_date__lte": on}) & Q(**{f"{prefix}end_date__gt": on})
    return Q(**{f"{prefix}start_date__lte": on}) & Q(**{f"{prefix}end_date__gte": on})


def overlapping_reservations(room_id, start: date, end: date, *, exclude_reservation_id=None):
    """Confirmed reservations of ``room_id`` that collide with the window."""

    from apps.reservations.models import Reservation  # Local import to prevent circular dependency

    qs = Reservation.objects.filter(
        room_id=room_id,
        status=Reservation.Status.CONFIRMED,
    ).filter(overlap_filter(start, end))

    if exclude_reservation_id is not None:
        qs = qs.exclude(pk=exclude_reservation_id)
    return qs


def is_room_available(room_id, start: date, end: date, *, exclude_reservation_id=None) -> bool:
    """False if any confirmed reservation of the room overlaps the window."""

    return not overlapping_reservations(
        room_id,
        start,
        end,
        exclude_reservation_id=exclude_reservation_id,
    ).exists()


def check_availability(room_id, start: date | None, end: date | None) -> bool:
    """Public availability check; both dates are required."""

    window = DateRange(start, end)
    return is_room_available(room_id, window.start_date, window.end_date)


def lock_room(room_id) -> Room:
    """Load the room row, locking it for the rest of the transaction."""

    room = lock_queryset_if_possible(Room.objects.filter(pk=room_id)).first()
    if room is None:
        raise NotFound(f"Room {room_id} not found")
    return room


@retry_on_transient_errors
def delete_room(room_id) -> None:
    """Delete a room unless it still carries confirmed reservations."""

    from apps.reservations.models import Reservation

    with key_lock("room", room_id), DjangoUnitOfWork():
        room = lock_room(room_id)
        if room.reservations.filter(status=Reservation.Status.CONFIRMED).exists():
            raise InvalidState("Room has confirmed reservations and cannot be deleted")
        room.delete()

    logger.info("Room %s deleted", room_id)
