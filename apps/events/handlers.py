"""Subscribers for enrollment domain events."""

from __future__ import annotations

import logging

from shared.application.message_bus import MessageBus, message_bus

from .domain.events import AttendeeRegistered, AttendeeWithdrawn

audit_logger = logging.getLogger("apps.events.audit")


def log_enrollment_event(event) -> None:  # type: ignore
    payload = event.to_dict()
    payload["user_id"] = event.user_id
    if isinstance(event, AttendeeRegistered):
        payload["attendees_count"] = event.attendees_count
        payload["max_capacity"] = event.max_capacity
    audit_logger.info("enrollment audit", extra={"audit": payload})


def register_handlers(bus: MessageBus = message_bus) -> None:
    bus.register_event_handler(AttendeeRegistered, log_enrollment_event)
    bus.register_event_handler(AttendeeWithdrawn, log_enrollment_event)
