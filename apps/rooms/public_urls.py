"""Unauthenticated room routes."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import HotelInfoView, PublicRoomAvailabilityView, PublicRoomListView

urlpatterns = [
    path("rooms/", PublicRoomListView.as_view(), name="public-room-list"),
    path(
        "rooms/<int:room_id>/availability/",
        PublicRoomAvailabilityView.as_view(),
        name="public-room-availability",
    ),
    path("hotel-info/", HotelInfoView.as_view(), name="public-hotel-info"),
]
