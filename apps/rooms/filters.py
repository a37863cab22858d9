"""FilterSet definitions for room listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Room


class RoomFilterSet(django_filters.FilterSet):
    """FilterSet for Room used by the directory endpoints."""

    room_type = django_filters.ChoiceFilter(field_name="room_type", choices=Room.RoomType.choices)
    status = django_filters.ChoiceFilter(field_name="status", choices=Room.Status.choices)
    rate_min = django_filters.NumberFilter(field_name="nightly_rate", lookup_expr="gte")
    rate_max = django_filters.NumberFilter(field_name="nightly_rate", lookup_expr="lte")
    guests = django_filters.NumberFilter(field_name="capacity", lookup_expr="gte")
    effective_status = django_filters.ChoiceFilter(
        field_name="effective_status",
        choices=Room.EffectiveStatus.choices,
    )

    class Meta:
        model = Room
        fields = ["room_type", "status"]
