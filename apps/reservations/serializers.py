"""Serializers for the reservations domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Reservation
from .services import GuestInfo, ReservationChanges


class ReservationCreateSerializer(serializers.Serializer):
    """Reservation request; the service decides whether it can be honoured."""

    room_id = serializers.IntegerField(min_value=1)
    guest_name = serializers.CharField(min_length=2, max_length=255)
    guest_email = serializers.EmailField()
    guest_phone = serializers.CharField(min_length=10, max_length=30)
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    notes = serializers.CharField(allow_blank=True, default="")

    def guest_info(self) -> GuestInfo:
        data = self.validated_data
        return GuestInfo(
            name=data["guest_name"],
            email=data["guest_email"],
            phone=data["guest_phone"],
        )


class ReservationUpdateSerializer(serializers.Serializer):
    """Every field is optional; an absent field is left unchanged."""

    room_id = serializers.IntegerField(min_value=1, required=False)
    guest_name = serializers.CharField(min_length=2, max_length=255, required=False)
    guest_email = serializers.EmailField(required=False)
    guest_phone = serializers.CharField(min_length=10, max_length=30, required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)

    def changes(self) -> ReservationChanges:
        return ReservationChanges(**self.validated_data)


class ReservationSerializer(serializers.ModelSerializer):
    """Detailed reservation representation."""

    room_id = serializers.ReadOnlyField(source="room.id")
    room_number = serializers.ReadOnlyField(source="room.number")
    room_type = serializers.ReadOnlyField(source="room.room_type")
    nightly_rate = serializers.ReadOnlyField(source="room.nightly_rate")
    guest_id = serializers.ReadOnlyField(source="guest.id")
    guest_account_email = serializers.ReadOnlyField(source="guest.email")
    nights = serializers.ReadOnlyField()

    class Meta:
        model = Reservation
        fields = [
            "id",
            "room_id",
            "room_number",
            "room_type",
            "nightly_rate",
            "guest_id",
            "guest_account_email",
            "guest_name",
            "guest_email",
            "guest_phone",
            "start_date",
            "end_date",
            "nights",
            "total_price",
            "notes",
            "status",
            "cancelled_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
