"""
Domain building blocks

- ValueObject: immutable, compared by value (DateRange)
- DomainEvent: a fact about a reservation or an enrollment, published
  once the transaction that produced it has committed
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ValueObject(ABC):
    """Marker base for frozen dataclasses without identity."""


@dataclass(kw_only=True)
class DomainEvent:
    """
    Base class for domain events

    ``aggregate_id`` is the primary key of the row the event is about
    (a reservation or a hotel event). Subclasses add their own keyword-only
    fields.
    """
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    aggregate_id: int | None = None

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        """Envelope shared by every event; used by the audit log."""
        return {
            'event_id': str(self.event_id),
            'event_type': self.name,
            'occurred_at': self.occurred_at.isoformat(),
            'aggregate_id': self.aggregate_id,
        }
