"""API views for the reservations domain."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsClientOrAdmin

from .filters import ReservationFilterSet
from .serializers import (
    ReservationCreateSerializer,
    ReservationSerializer,
    ReservationUpdateSerializer,
)
from .services import (
    cancel_reservation,
    create_reservation,
    get_reservation,
    list_reservations,
    update_reservation,
)


class ReservationViewSet(viewsets.GenericViewSet):
    """Create, modify and cancel reservations.

    Clients only ever see their own reservations; a reservation owned by
    someone else is reported as not found. DELETE cancels and keeps the row.
    """

    permission_classes = [IsClientOrAdmin]
    lookup_value_regex = r"\d+"
    filter_backends = [DjangoFilterBackend]
    filterset_class = ReservationFilterSet
    serializer_class = ReservationSerializer

    def get_queryset(self):  # type: ignore
        return list_reservations(self.request.user)

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return ReservationCreateSerializer
        if self.action in {"update", "partial_update"}:
            return ReservationUpdateSerializer
        return ReservationSerializer

    def _read(self, reservation, status_code: int = status.HTTP_200_OK) -> Response:
        serializer = ReservationSerializer(reservation, context=self.get_serializer_context())
        return Response(serializer.data, status=status_code)

    def list(self, request, *args, **kwargs):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = ReservationSerializer(page, many=True, context=self.get_serializer_context())
            return self.get_paginated_response(serializer.data)
        serializer = ReservationSerializer(queryset, many=True, context=self.get_serializer_context())
        return Response(serializer.data)

    def retrieve(self, request, pk=None):  # type: ignore
        return self._read(get_reservation(pk, request.user))

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        reservation = create_reservation(
            data["room_id"],
            request.user,
            serializer.guest_info(),
            data["start_date"],
            data["end_date"],
            data["notes"],
        )
        return self._read(reservation, status.HTTP_201_CREATED)

    def update(self, request, pk=None, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = update_reservation(pk, request.user, serializer.changes())
        return self._read(reservation)

    def partial_update(self, request, pk=None, *args, **kwargs):  # type: ignore
        return self.update(request, pk, *args, **kwargs)

    def destroy(self, request, pk=None):  # type: ignore
        return self._read(cancel_reservation(pk, request.user))
