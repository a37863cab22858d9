"""Admin registration for rooms."""

from __future__ import annotations

from django.contrib import admin

from .models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("number", "room_type", "nightly_rate", "capacity", "status", "created_at")
    list_filter = ("room_type", "status")
    search_fields = ("number",)
    readonly_fields = ("created_at", "updated_at")
