"""
Event Enrollment Domain Events

``aggregate_id`` is the primary key of the hotel event.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class AttendeeRegistered(DomainEvent):
    """A user took one of the event's places"""
    user_id: int
    attendees_count: int
    max_capacity: int


@dataclass(kw_only=True)
class AttendeeWithdrawn(DomainEvent):
    """A user released their place"""
    user_id: int
