"""Subscribers for reservation domain events."""

from __future__ import annotations

import logging

from shared.application.message_bus import MessageBus, message_bus

from .domain.events import ReservationCancelled, ReservationCreated, ReservationUpdated

audit_logger = logging.getLogger("apps.reservations.audit")


def log_reservation_event(event) -> None:  # type: ignore
    payload = event.to_dict()
    payload.update(
        reservation_id=event.reservation_id,
        room_id=event.room_id,
        guest_id=event.guest_id,
        start_date=event.dates.start_date.isoformat(),
        end_date=event.dates.end_date.isoformat(),
    )
    total_price = getattr(event, "total_price", None)
    if total_price is not None:
        payload["total_price"] = str(total_price)
    audit_logger.info("reservation audit", extra={"audit": payload})


def register_handlers(bus: MessageBus = message_bus) -> None:
    for event_type in (ReservationCreated, ReservationUpdated, ReservationCancelled):
        bus.register_event_handler(event_type, log_reservation_event)
