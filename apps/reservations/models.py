"""Reservation models for Hotel Paradise."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import DateRange


class Reservation(models.Model):
    """A guest's reservation of a room for a date window."""

    class Status(models.TextChoices):
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")

    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.CASCADE,
        related_name="reservations",
    )
    guest = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reservations",
    )
    guest_name = models.CharField(max_length=255)
    guest_email = models.CharField(max_length=254)
    guest_phone = models.CharField(max_length=30)
    start_date = models.DateField()
    end_date = models.DateField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    notes = models.TextField(blank=True)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.CONFIRMED,
    )
    cancelled_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Reservation")
        verbose_name_plural = _("Reservations")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date")),
                name="reservation_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "start_date", "end_date"], name="reservation_room_window_idx"),
            models.Index(fields=["status"], name="reservation_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Reservation #{self.pk} for room {self.room_id}"

    @property
    def window(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    @property
    def nights(self) -> int:
        return self.window.nights

    @property
    def is_confirmed(self) -> bool:
        return self.status == self.Status.CONFIRMED
