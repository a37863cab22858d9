"""Room models for Hotel Paradise."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Room(models.Model):
    """A bookable hotel room."""

    class RoomType(models.TextChoices):
        STANDARD = "standard", _("Standard")
        DOUBLE = "double", _("Double")
        TRIPLE = "triple", _("Triple")
        MATRIMONIAL = "matrimonial", _("Matrimonial")
        SUITE = "suite", _("Suite")

    class Status(models.TextChoices):
        AVAILABLE = "available", _("Available")
        MAINTENANCE = "maintenance", _("Under maintenance")

    class EffectiveStatus(models.TextChoices):
        """Derived on read, never stored."""

        AVAILABLE = "available", _("Available")
        OCCUPIED = "occupied", _("Occupied")
        MAINTENANCE = "maintenance", _("Under maintenance")

    number = models.CharField(max_length=20, unique=True)
    room_type = models.CharField(
        max_length=20,
        choices=RoomType.choices,
        default=RoomType.STANDARD,
    )
    nightly_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    capacity = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.AVAILABLE,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["number"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(nightly_rate__gt=0),
                name="room_positive_rate",
            ),
            models.CheckConstraint(
                condition=models.Q(capacity__gt=0),
                name="room_positive_capacity",
            ),
        ]
        indexes = [
            models.Index(fields=["status"], name="rooms_room_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Room {self.number} ({self.get_room_type_display()})"

    @property
    def is_under_maintenance(self) -> bool:
        return self.status == self.Status.MAINTENANCE
