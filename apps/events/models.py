"""Event models for Hotel Paradise."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Event(models.Model):
    """An activity hosted by the hotel with a fixed number of places."""

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    date = models.DateField()
    time = models.TimeField()
    location = models.CharField(max_length=200)
    max_capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Event")
        verbose_name_plural = _("Events")
        ordering = ["date", "time"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(max_capacity__gt=0),
                name="event_positive_capacity",
            ),
        ]
        indexes = [
            models.Index(fields=["date", "time"], name="event_schedule_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.date:%Y-%m-%d})"


class EventAttendee(models.Model):
    """Enrollment of a user in an event; removed outright on withdrawal."""

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name="attendees",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="event_registrations",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Event attendee")
        verbose_name_plural = _("Event attendees")
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["event", "user"], name="unique_event_attendee"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.event_id}"
