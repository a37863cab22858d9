"""FilterSet definitions for event listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Event


class EventFilterSet(django_filters.FilterSet):
    date_from = django_filters.DateFilter(field_name="date", lookup_expr="gte")
    date_to = django_filters.DateFilter(field_name="date", lookup_expr="lte")
    location = django_filters.CharFilter(field_name="location", lookup_expr="icontains")
    has_spots = django_filters.BooleanFilter(method="filter_has_spots")

    class Meta:
        model = Event
        fields = ["date"]

    def filter_has_spots(self, queryset, name, value):  # type: ignore
        if value is None:
            return queryset
        if value:
            return queryset.filter(spots_left__gt=0)
        return queryset.filter(spots_left__lte=0)
