"""Admin registration for events."""

from __future__ import annotations

from django.contrib import admin

from .models import Event, EventAttendee


class EventAttendeeInline(admin.TabularInline):
    model = EventAttendee
    extra = 0
    readonly_fields = ("user", "created_at")


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("title", "date", "time", "location", "max_capacity")
    list_filter = ("date",)
    search_fields = ("title", "location")
    inlines = [EventAttendeeInline]


@admin.register(EventAttendee)
class EventAttendeeAdmin(admin.ModelAdmin):
    list_display = ("event", "user", "created_at")
    search_fields = ("event__title", "user__email")
    readonly_fields = ("created_at",)
