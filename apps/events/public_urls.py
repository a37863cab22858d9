"""Unauthenticated event routes."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import PublicEventListView

urlpatterns = [
    path("events/", PublicEventListView.as_view(), name="public-event-list"),
]
