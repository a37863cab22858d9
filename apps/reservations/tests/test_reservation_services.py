"""Service-level tests for the reservation lifecycle."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest import mock

from django.test import TestCase, override_settings

from apps.reservations.domain.events import ReservationCancelled, ReservationCreated
from apps.reservations.models import Reservation
from apps.reservations.services import (
    GuestInfo,
    ReservationChanges,
    cancel_reservation,
    create_reservation,
    get_reservation,
    list_reservations,
    update_reservation,
)
from apps.rooms.models import Room
from apps.users.models import User
from shared.application.message_bus import message_bus
from shared.domain.errors import Conflict, InvalidInput, InvalidState, NotFound

GUEST = GuestInfo(name="Ana Torres", email="ana@example.com", phone="+5491122334455")


def jan(day: int) -> date:
    return date(2030, 1, day)


class ReservationServiceTests(TestCase):
    def setUp(self) -> None:
        self.client_user = User.objects.create_user(email="client@example.com", password="ClientPass123")
        self.other_client = User.objects.create_user(email="other@example.com", password="OtherPass123")
        self.admin = User.objects.create_user(
            email="admin@example.com",
            password="AdminPass123",
            role=User.RoleChoices.ADMIN,
        )
        self.room = Room.objects.create(number="101", nightly_rate=Decimal("100.00"), capacity=2)
        self.suite = Room.objects.create(
            number="501",
            room_type=Room.RoomType.SUITE,
            nightly_rate=Decimal("250.00"),
            capacity=4,
        )

    def _book(self, start: date, end: date, room: Room | None = None, caller=None) -> Reservation:
        return create_reservation((room or self.room).pk, caller or self.client_user, GUEST, start, end)

    def test_create_prices_by_nights(self) -> None:
        reservation = self._book(jan(1), jan(3))

        self.assertEqual(reservation.status, Reservation.Status.CONFIRMED)
        self.assertEqual(reservation.total_price, Decimal("200.00"))
        self.assertEqual(reservation.guest, self.client_user)
        self.assertEqual(reservation.guest_name, "Ana Torres")

    def test_checkout_day_collides_with_checkin_by_default(self) -> None:
        self._book(jan(1), jan(5))

        with self.assertRaises(Conflict):
            self._book(jan(5), jan(8))
        self.assertEqual(Reservation.objects.count(), 1)

    @override_settings(SAME_DAY_TURNOVER=True)
    def test_same_day_turnover_allows_back_to_back(self) -> None:
        self._book(jan(1), jan(5))
        second = self._book(jan(5), jan(8))

        self.assertEqual(second.total_price, Decimal("300.00"))
        with self.assertRaises(Conflict):
            self._book(jan(4), jan(6))

    def test_other_rooms_are_independent(self) -> None:
        self._book(jan(1), jan(5))
        reservation = self._book(jan(1), jan(5), room=self.suite)
        self.assertEqual(reservation.total_price, Decimal("1000.00"))

    def test_reversed_window_rejected_before_anything_is_written(self) -> None:
        with self.assertRaises(InvalidInput):
            self._book(jan(5), jan(1))
        self.assertFalse(Reservation.objects.exists())

    def test_zero_night_stay_rejected(self) -> None:
        with self.assertRaises(InvalidInput):
            self._book(jan(3), jan(3))
        self.assertFalse(Reservation.objects.exists())

    def test_unknown_room(self) -> None:
        with self.assertRaises(NotFound):
            create_reservation(999_999, self.client_user, GUEST, jan(1), jan(2))

    def test_room_under_maintenance(self) -> None:
        self.room.status = Room.Status.MAINTENANCE
        self.room.save()

        with self.assertRaises(InvalidState):
            self._book(jan(1), jan(2))

    def test_cancelled_reservation_frees_the_window(self) -> None:
        first = self._book(jan(1), jan(5))
        cancel_reservation(first.pk, self.client_user)

        again = self._book(jan(2), jan(4))
        self.assertEqual(again.status, Reservation.Status.CONFIRMED)

    def test_update_excludes_itself_and_reprices(self) -> None:
        reservation = self._book(jan(1), jan(3))

        updated = update_reservation(
            reservation.pk,
            self.client_user,
            ReservationChanges(start_date=jan(2), end_date=jan(6)),
        )

        self.assertEqual((updated.start_date, updated.end_date), (jan(2), jan(6)))
        self.assertEqual(updated.total_price, Decimal("400.00"))

    def test_update_leaves_absent_fields_untouched(self) -> None:
        reservation = self._book(jan(1), jan(3))

        updated = update_reservation(reservation.pk, self.client_user, ReservationChanges(notes="late arrival"))

        updated.refresh_from_db()
        self.assertEqual(updated.notes, "late arrival")
        self.assertEqual(updated.guest_name, GUEST.name)
        self.assertEqual((updated.start_date, updated.end_date), (jan(1), jan(3)))
        self.assertEqual(updated.total_price, Decimal("200.00"))

    def test_update_into_conflict_leaves_reservation_unchanged(self) -> None:
        self._book(jan(10), jan(12))
        reservation = self._book(jan(1), jan(3))

        with self.assertRaises(Conflict):
            update_reservation(reservation.pk, self.client_user, ReservationChanges(end_date=jan(10)))

        reservation.refresh_from_db()
        self.assertEqual(reservation.end_date, jan(3))

    def test_update_moves_to_another_room_at_its_rate(self) -> None:
        reservation = self._book(jan(1), jan(3))

        updated = update_reservation(reservation.pk, self.client_user, ReservationChanges(room_id=self.suite.pk))

        self.assertEqual(updated.room, self.suite)
        self.assertEqual(updated.total_price, Decimal("500.00"))

    def test_update_to_room_under_maintenance(self) -> None:
        reservation = self._book(jan(1), jan(3))
        self.suite.status = Room.Status.MAINTENANCE
        self.suite.save()

        with self.assertRaises(InvalidState):
            update_reservation(reservation.pk, self.client_user, ReservationChanges(room_id=self.suite.pk))

    def test_update_reversed_window(self) -> None:
        reservation = self._book(jan(5), jan(8))
        with self.assertRaises(InvalidInput):
            update_reservation(reservation.pk, self.client_user, ReservationChanges(end_date=jan(1)))

    def test_update_cancelled_reservation(self) -> None:
        reservation = self._book(jan(1), jan(3))
        cancel_reservation(reservation.pk, self.client_user)

        with self.assertRaises(InvalidState):
            update_reservation(reservation.pk, self.client_user, ReservationChanges(notes="x"))

    def test_clients_cannot_touch_other_reservations(self) -> None:
        reservation = self._book(jan(1), jan(3))

        with self.assertRaises(NotFound):
            get_reservation(reservation.pk, self.other_client)
        with self.assertRaises(NotFound):
            update_reservation(reservation.pk, self.other_client, ReservationChanges(notes="x"))
        with self.assertRaises(NotFound):
            cancel_reservation(reservation.pk, self.other_client)

        updated = update_reservation(reservation.pk, self.admin, ReservationChanges(notes="by admin"))
        self.assertEqual(updated.notes, "by admin")

    def test_cancel_keeps_row_and_second_cancel_is_not_found(self) -> None:
        reservation = self._book(jan(1), jan(3))

        cancelled = cancel_reservation(reservation.pk, self.client_user)
        self.assertEqual(cancelled.status, Reservation.Status.CANCELLED)
        self.assertIsNotNone(cancelled.cancelled_at)

        with self.assertRaises(NotFound):
            cancel_reservation(reservation.pk, self.client_user)
        self.assertTrue(Reservation.objects.filter(pk=reservation.pk).exists())

    def test_listing_scoped_by_role_newest_first(self) -> None:
        first = self._book(jan(1), jan(2))
        second = self._book(jan(3), jan(4))
        foreign = self._book(jan(5), jan(6), caller=self.other_client)

        self.assertEqual(list(list_reservations(self.client_user)), [second, first])
        self.assertEqual(list(list_reservations(self.other_client)), [foreign])
        self.assertEqual(list(list_reservations(self.admin)), [foreign, second, first])

    def test_domain_events_published_after_commit(self) -> None:
        with mock.patch.object(message_bus, "publish_events") as publish:
            with self.captureOnCommitCallbacks(execute=True):
                reservation = self._book(jan(1), jan(3))
            with self.captureOnCommitCallbacks(execute=True):
                cancel_reservation(reservation.pk, self.client_user)

        published = [type(events[0]) for (events,), _ in publish.call_args_list]
        self.assertEqual(published, [ReservationCreated, ReservationCancelled])

    def test_failed_create_publishes_nothing(self) -> None:
        self._book(jan(1), jan(5))
        with mock.patch.object(message_bus, "publish_events") as publish:
            with self.captureOnCommitCallbacks(execute=True):
                with self.assertRaises(Conflict):
                    self._book(jan(2), jan(3))
        publish.assert_not_called()
