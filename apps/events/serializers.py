"""Serializers for the events domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Event, EventAttendee


class EventSerializer(serializers.ModelSerializer):
    attendees_count = serializers.IntegerField(read_only=True, default=0)
    spots_left = serializers.IntegerField(read_only=True, default=None)
    user_registered = serializers.BooleanField(read_only=True, default=False)

    class Meta:
        model = Event
        fields = [
            "id",
            "title",
            "description",
            "date",
            "time",
            "location",
            "max_capacity",
            "attendees_count",
            "spots_left",
            "user_registered",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PublicEventSerializer(serializers.ModelSerializer):
    attendees_count = serializers.IntegerField(read_only=True)
    spots_left = serializers.IntegerField(read_only=True)

    class Meta:
        model = Event
        fields = [
            "id",
            "title",
            "description",
            "date",
            "time",
            "location",
            "max_capacity",
            "attendees_count",
            "spots_left",
        ]


class EventWriteSerializer(serializers.ModelSerializer):
    title = serializers.CharField(min_length=3, max_length=200)
    max_capacity = serializers.IntegerField(min_value=1)

    class Meta:
        model = Event
        fields = ["title", "description", "date", "time", "location", "max_capacity"]


class EventAttendeeSerializer(serializers.ModelSerializer):
    user_id = serializers.ReadOnlyField(source="user.id")
    name = serializers.SerializerMethodField()
    email = serializers.ReadOnlyField(source="user.email")
    registered_at = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = EventAttendee
        fields = ["id", "event", "user_id", "name", "email", "registered_at"]
        read_only_fields = fields

    def get_name(self, obj: EventAttendee) -> str:
        return obj.user.get_full_name() or obj.user.username or obj.user.email
