"""Event API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import generics, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsAdminRole, IsAdminRoleOrReadOnly, IsClientOrAdmin

from .filters import EventFilterSet
from .selectors import event_attendees, event_directory, upcoming_event_directory
from .serializers import (
    EventAttendeeSerializer,
    EventSerializer,
    EventWriteSerializer,
    PublicEventSerializer,
)
from .services import (
    create_event,
    delete_event,
    register_attendee,
    update_event,
    withdraw_attendee,
)


class EventViewSet(viewsets.ModelViewSet):
    """Event directory, administration and enrollment."""

    lookup_value_regex = r"\d+"
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = EventFilterSet
    ordering_fields = ["date", "max_capacity"]

    def get_permissions(self):  # type: ignore
        if self.action == "register":
            return [IsClientOrAdmin()]
        if self.action == "attendees":
            return [IsAdminRole()]
        return [IsAdminRoleOrReadOnly()]

    def get_queryset(self):  # type: ignore
        return event_directory(self.request.user)

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return EventWriteSerializer
        return EventSerializer

    def _read_response(self, event_id, status_code: int = status.HTTP_200_OK) -> Response:
        event = event_directory(self.request.user).get(pk=event_id)
        serializer = EventSerializer(event, context=self.get_serializer_context())
        return Response(serializer.data, status=status_code)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = create_event(**serializer.validated_data)
        return self._read_response(event.pk, status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        event = update_event(instance.pk, **serializer.validated_data)
        return self._read_response(event.pk)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        delete_event(self.get_object().pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post", "delete"])
    def register(self, request, pk=None):  # type: ignore
        event = self.get_object()
        if request.method == "DELETE":
            withdraw_attendee(event.pk, request.user)
            return Response(status=status.HTTP_204_NO_CONTENT)
        attendee = register_attendee(event.pk, request.user)
        return Response(EventAttendeeSerializer(attendee).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["get"])
    def attendees(self, request, pk=None):  # type: ignore
        event = self.get_object()
        serializer = EventAttendeeSerializer(event_attendees(event.pk), many=True)
        return Response(serializer.data)


class PublicEventListView(generics.ListAPIView):
    """Upcoming events for anonymous visitors, with places left."""

    permission_classes = [permissions.AllowAny]
    serializer_class = PublicEventSerializer

    def get_queryset(self):  # type: ignore
        return upcoming_event_directory()
