"""Room API views."""

from __future__ import annotations

from django.shortcuts import get_object_or_404  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import generics, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.permissions import IsAdminRoleOrReadOnly

from .filters import RoomFilterSet
from .models import Room
from .selectors import hotel_summary, public_room_directory, room_directory
from .serializers import (
    AvailabilityQuerySerializer,
    PublicRoomSerializer,
    RoomSerializer,
    RoomWriteSerializer,
)
from .services import check_availability, delete_room


def _availability_response(room: Room, request) -> Response:  # type: ignore
    query = AvailabilityQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    start = query.validated_data["start_date"]
    end = query.validated_data["end_date"]
    available = check_availability(room.pk, start, end)
    return Response(
        {
            "room_id": room.pk,
            "available": available,
            "start_date": start,
            "end_date": end,
        }
    )


class RoomViewSet(viewsets.ModelViewSet):
    """Room directory for authenticated users, administration for admins."""

    permission_classes = [IsAdminRoleOrReadOnly]
    lookup_value_regex = r"\d+"
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = RoomFilterSet
    ordering_fields = ["number", "nightly_rate", "capacity"]

    def get_queryset(self):  # type: ignore
        return room_directory()

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return RoomWriteSerializer
        return RoomSerializer

    def _read_response(self, room: Room, status_code: int = status.HTTP_200_OK) -> Response:
        room = room_directory().get(pk=room.pk)
        serializer = RoomSerializer(room, context=self.get_serializer_context())
        return Response(serializer.data, status=status_code)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        room = serializer.save()
        return self._read_response(room, status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        room = serializer.save()
        return self._read_response(room)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        room = self.get_object()
        delete_room(room.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"])
    def availability(self, request, pk=None):  # type: ignore
        return _availability_response(self.get_object(), request)


class PublicRoomListView(generics.ListAPIView):
    """Rooms visible to anonymous visitors, with their effective status."""

    permission_classes = [permissions.AllowAny]
    serializer_class = PublicRoomSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = RoomFilterSet

    def get_queryset(self):  # type: ignore
        return public_room_directory()


class PublicRoomAvailabilityView(APIView):
    """Availability check without authentication."""

    permission_classes = [permissions.AllowAny]

    def get(self, request, room_id):  # type: ignore
        room = get_object_or_404(Room, pk=room_id)
        return _availability_response(room, request)


class HotelInfoView(APIView):
    """Hotel name, description and headline counts for the landing page."""

    permission_classes = [permissions.AllowAny]

    def get(self, request):  # type: ignore
        return Response(hotel_summary())
