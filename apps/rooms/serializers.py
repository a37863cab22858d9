"""Serializers for the rooms domain."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from .models import Room


class RoomSerializer(serializers.ModelSerializer):
    effective_status = serializers.SerializerMethodField()

    class Meta:
        model = Room
        fields = [
            "id",
            "number",
            "room_type",
            "nightly_rate",
            "capacity",
            "status",
            "effective_status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_effective_status(self, obj: Room) -> str:
        # Rooms loaded outside the directory queryset carry no annotation
        return getattr(obj, "effective_status", None) or obj.status


class PublicRoomSerializer(serializers.ModelSerializer):
    effective_status = serializers.ReadOnlyField()

    class Meta:
        model = Room
        fields = ["id", "number", "room_type", "nightly_rate", "capacity", "effective_status"]


class RoomWriteSerializer(serializers.ModelSerializer):
    nightly_rate = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0.01"))
    capacity = serializers.IntegerField(min_value=1)

    class Meta:
        model = Room
        fields = ["number", "room_type", "nightly_rate", "capacity", "status"]


class AvailabilityQuerySerializer(serializers.Serializer):
    """Query string of the availability check; presence is checked by the service."""

    start_date = serializers.DateField(allow_null=True, default=None)
    end_date = serializers.DateField(allow_null=True, default=None)
