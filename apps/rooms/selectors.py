"""Read-side projections over rooms.

Effective status is computed per query for a reference date: maintenance
wins, otherwise a room is occupied when a confirmed reservation covers the
date, otherwise it is available. Reads take no locks.
"""

from __future__ import annotations

from datetime import date, timedelta

from django.conf import settings  # type: ignore
from django.db.models import Case, CharField, Exists, OuterRef, Value, When  # type: ignore
from django.utils import timezone  # type: ignore

from .models import Room
from .services import occupancy_filter

UPCOMING_EVENTS_DAYS = 30


def reference_date() -> date:
    return timezone.localdate()


def effective_status_expression(on: date):
    from apps.reservations.models import Reservation

    occupied = Exists(
        Reservation.objects.filter(
            room=OuterRef("pk"),
            status=Reservation.Status.CONFIRMED,
        ).filter(occupancy_filter(on))
    )
    return Case(
        When(status=Room.Status.MAINTENANCE, then=Value(Room.EffectiveStatus.MAINTENANCE.value)),
        When(occupied, then=Value(Room.EffectiveStatus.OCCUPIED.value)),
        default=Value(Room.EffectiveStatus.AVAILABLE.value),
        output_field=CharField(),
    )


def room_directory(on: date | None = None):
    """Every room annotated with ``effective_status`` for ``on`` (default: today)."""

    on = on or reference_date()
    return Room.objects.annotate(effective_status=effective_status_expression(on)).order_by("number")


def public_room_directory(on: date | None = None):
    """Directory for anonymous visitors: rooms under maintenance are hidden."""

    return room_directory(on).exclude(status=Room.Status.MAINTENANCE)


def hotel_summary(on: date | None = None) -> dict:
    """Public hotel card.

    ``rooms_available`` counts rooms whose administrative status is
    available, ignoring current occupancy. ``upcoming_events`` counts events
    dated from ``on`` through ``on`` + 30 days, both ends included.
    """

    from apps.events.models import Event

    on = on or reference_date()
    return {
        "hotel_name": settings.HOTEL_NAME,
        "description": settings.HOTEL_DESCRIPTION,
        "rooms_available": Room.objects.filter(status=Room.Status.AVAILABLE).count(),
        "upcoming_events": Event.objects.filter(
            date__gte=on,
            date__lte=on + timedelta(days=UPCOMING_EVENTS_DAYS),
        ).count(),
    }
