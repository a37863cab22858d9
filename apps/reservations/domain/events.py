"""
Reservation Domain Events

Published after the transaction that produced them commits.
"""

from dataclasses import dataclass
from decimal import Decimal

from shared.domain.base import DomainEvent
from shared.domain.value_objects import DateRange


@dataclass(kw_only=True)
class ReservationCreated(DomainEvent):
    """A confirmed reservation was created"""
    reservation_id: int
    room_id: int
    guest_id: int
    dates: DateRange
    total_price: Decimal


@dataclass(kw_only=True)
class ReservationUpdated(DomainEvent):
    """Room, dates or guest details of a reservation changed"""
    reservation_id: int
    room_id: int
    guest_id: int
    dates: DateRange
    total_price: Decimal


@dataclass(kw_only=True)
class ReservationCancelled(DomainEvent):
    """A confirmed reservation was cancelled (confirmed -> cancelled)"""
    reservation_id: int
    room_id: int
    guest_id: int
    dates: DateRange
