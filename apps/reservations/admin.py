"""Admin registration for reservations."""

from __future__ import annotations

from django.contrib import admin

from .models import Reservation


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "room",
        "guest",
        "guest_name",
        "status",
        "start_date",
        "end_date",
        "total_price",
        "created_at",
    )
    list_filter = ("status", "start_date", "end_date")
    search_fields = ("guest_name", "guest_email", "guest__email", "room__number")
    readonly_fields = (
        "status",
        "total_price",
        "cancelled_at",
        "created_at",
        "updated_at",
    )
