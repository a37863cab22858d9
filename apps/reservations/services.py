"""Reservation lifecycle services.

State machine: ``confirmed -> cancelled`` (terminal). Re-booking after a
cancellation creates a new reservation.

Create and update re-validate the non-overlap invariant and write the row
inside one unit of work serialised on the target room (in-process key lock
plus a row lock on the room). Cancellation is a single conditional UPDATE
that only matches rows still confirmed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from datetime import date

from django.utils import timezone  # type: ignore

from apps.rooms.services import is_room_available, lock_room
from apps.users.models import role_grants_full_access
from shared.application.locks import key_lock, lock_queryset_if_possible
from shared.application.retry import retry_on_transient_errors
from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import Conflict, InvalidState, NotFound
from shared.domain.value_objects import DateRange

from .domain.events import ReservationCancelled, ReservationCreated, ReservationUpdated
from .domain.pricing import calculate_price
from .models import Reservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuestInfo:
    """Contact details of the person staying; opaque to the core."""

    name: str
    email: str
    phone: str


@dataclass(frozen=True)
class ReservationChanges:
    """Optionally-present changes to a reservation.

    ``None`` means "leave unchanged"; no field can be cleared through an
    update.
    """

    room_id: int | None = None
    guest_name: str | None = None
    guest_email: str | None = None
    guest_phone: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    notes: str | None = None

    def present(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


# Columns an update may rewrite; total_price is always recomputed.
UPDATABLE_COLUMNS = (
    "room",
    "guest_name",
    "guest_email",
    "guest_phone",
    "start_date",
    "end_date",
    "notes",
    "total_price",
    "updated_at",
)


def _visible_reservations(caller):
    qs = Reservation.objects.select_related("room", "guest")
    if role_grants_full_access(caller.role):
        return qs
    return qs.filter(guest=caller)


def list_reservations(caller):
    """All reservations for admins, the caller's own otherwise; newest first."""

    return _visible_reservations(caller).order_by("-created_at", "-id")


def get_reservation(reservation_id, caller) -> Reservation:
    reservation = _visible_reservations(caller).filter(pk=reservation_id).first()
    if reservation is None:
        raise NotFound(f"Reservation {reservation_id} not found")
    return reservation


@retry_on_transient_errors
def create_reservation(
    room_id,
    caller,
    guest: GuestInfo,
    start: date,
    end: date,
    notes: str = "",
) -> Reservation:
    """Create a confirmed reservation.

    Raises:
        InvalidInput: missing or reversed window, or zero nights
        NotFound: room does not exist
        InvalidState: room is under maintenance
        Conflict: another confirmed reservation overlaps the window
    """
    window = DateRange(start, end)
    logger.info(
        "Creating reservation for room %s, guest %s, dates %s",
        room_id,
        caller.pk,
        window,
    )

    with key_lock("room", room_id), DjangoUnitOfWork() as uow:
        room = lock_room(room_id)

        if room.is_under_maintenance:
            raise InvalidState(f"Room {room.number} is under maintenance")

        if not is_room_available(room.pk, window.start_date, window.end_date):
            raise Conflict(f"Room {room.number} is not available for {window}")

        total = calculate_price(room.nightly_rate, window.start_date, window.end_date)

        reservation = Reservation.objects.create(
            room=room,
            guest=caller,
            guest_name=guest.name,
            guest_email=guest.email,
            guest_phone=guest.phone,
            start_date=window.start_date,
            end_date=window.end_date,
            total_price=total,
            notes=notes or "",
        )

        uow.record(ReservationCreated(
            aggregate_id=reservation.pk,
            reservation_id=reservation.pk,
            room_id=room.pk,
            guest_id=caller.pk,
            dates=window,
            total_price=total,
        ))

    logger.info("Reservation %s created (total %s)", reservation.pk, reservation.total_price)
    return reservation


@retry_on_transient_errors
def update_reservation(reservation_id, caller, changes: ReservationChanges) -> Reservation:
    """Rewrite a confirmed reservation, re-validating availability and price.

    Raises:
        NotFound: reservation missing or not visible to the caller, or the
            requested room does not exist
        InvalidState: reservation already cancelled, or moving it to a room
            under maintenance
        InvalidInput: resulting window is reversed or has zero nights
        Conflict: resulting window overlaps another confirmed reservation
    """
    current = get_reservation(reservation_id, caller)
    target_room_id = changes.room_id if changes.room_id is not None else current.room_id

    with key_lock("room", target_room_id), DjangoUnitOfWork() as uow:
        reservation = lock_queryset_if_possible(
            _visible_reservations(caller).filter(pk=reservation_id)
        ).first()
        if reservation is None:
            raise NotFound(f"Reservation {reservation_id} not found")

        if not reservation.is_confirmed:
            raise InvalidState(f"Reservation {reservation_id} is cancelled")

        if changes.room_id is None and reservation.room_id != target_room_id:
            raise Conflict(f"Reservation {reservation_id} was moved to another room concurrently")

        room = lock_room(target_room_id)
        if room.pk != reservation.room_id and room.is_under_maintenance:
            raise InvalidState(f"Room {room.number} is under maintenance")

        start = changes.start_date if changes.start_date is not None else reservation.start_date
        end = changes.end_date if changes.end_date is not None else reservation.end_date
        window = DateRange(start, end)

        if not is_room_available(
            room.pk,
            window.start_date,
            window.end_date,
            exclude_reservation_id=reservation.pk,
        ):
            raise Conflict(f"Room {room.number} is not available for {window}")

        total = calculate_price(room.nightly_rate, window.start_date, window.end_date)

        for name, value in changes.present().items():
            if name != "room_id":
                setattr(reservation, name, value)
        reservation.room = room
        reservation.total_price = total
        reservation.save(update_fields=list(UPDATABLE_COLUMNS))

        uow.record(ReservationUpdated(
            aggregate_id=reservation.pk,
            reservation_id=reservation.pk,
            room_id=room.pk,
            guest_id=reservation.guest_id,
            dates=window,
            total_price=total,
        ))

    logger.info("Reservation %s updated", reservation.pk)
    return reservation


@retry_on_transient_errors
def cancel_reservation(reservation_id, caller) -> Reservation:
    """Transition a confirmed reservation to cancelled.

    The lookup ignores status, but only a still-confirmed row is mutated;
    cancelling twice reports NotFound because there is nothing to cancel.
    """
    with DjangoUnitOfWork() as uow:
        reservation = get_reservation(reservation_id, caller)

        now = timezone.now()
        updated = Reservation.objects.filter(
            pk=reservation.pk,
            status=Reservation.Status.CONFIRMED,
        ).update(
            status=Reservation.Status.CANCELLED,
            cancelled_at=now,
            updated_at=now,
        )
        if not updated:
            raise NotFound(f"Reservation {reservation_id} is already cancelled")

        reservation.refresh_from_db()

        uow.record(ReservationCancelled(
            aggregate_id=reservation.pk,
            reservation_id=reservation.pk,
            room_id=reservation.room_id,
            guest_id=reservation.guest_id,
            dates=reservation.window,
        ))

    logger.info("Reservation %s cancelled", reservation.pk)
    return reservation

