"""Read-side projections over events."""

from __future__ import annotations

from datetime import date

from django.db.models import BooleanField, Count, Exists, ExpressionWrapper, F, IntegerField, OuterRef, Value  # type: ignore
from django.utils import timezone  # type: ignore

from .models import Event, EventAttendee


def event_directory(user=None):
    """Events with ``attendees_count``, ``spots_left`` and ``user_registered``.

    ``user_registered`` is always False for anonymous callers.
    """
    qs = Event.objects.annotate(attendees_count=Count("attendees", distinct=True)).annotate(
        spots_left=ExpressionWrapper(F("max_capacity") - F("attendees_count"), output_field=IntegerField()),
    )
    if user is not None and user.is_authenticated:
        registered = Exists(EventAttendee.objects.filter(event=OuterRef("pk"), user=user))
    else:
        registered = Value(False, output_field=BooleanField())
    return qs.annotate(user_registered=registered).order_by("date", "time", "id")


def upcoming_event_directory(on: date | None = None):
    """Events taking place on or after ``on`` (default: today)."""

    on = on or timezone.localdate()
    return event_directory().filter(date__gte=on)


def event_attendees(event_id):
    """Enrollments of an event in registration order."""

    return (
        EventAttendee.objects.filter(event_id=event_id)
        .select_related("user")
        .order_by("created_at", "id")
    )
