"""FilterSet definitions for reservation listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Reservation


class ReservationFilterSet(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(field_name="status", choices=Reservation.Status.choices)
    room = django_filters.NumberFilter(field_name="room_id", lookup_expr="exact")
    # Reservations touching [date_from, date_to]
    date_from = django_filters.DateFilter(field_name="end_date", lookup_expr="gte")
    date_to = django_filters.DateFilter(field_name="start_date", lookup_expr="lte")

    class Meta:
        model = Reservation
        fields = ["status", "room"]
