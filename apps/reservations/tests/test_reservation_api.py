"""Integration tests for reservation API endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.reservations.models import Reservation
from apps.rooms.models import Room
from apps.users.models import User


class ReservationAPITests(APITestCase):
    def setUp(self) -> None:
        self.guest = User.objects.create_user(email="guest@example.com", password="GuestPass123")
        self.stranger = User.objects.create_user(email="stranger@example.com", password="StrangerPass123")
        self.admin = User.objects.create_user(
            email="admin@example.com",
            password="AdminPass123",
            role=User.RoleChoices.ADMIN,
        )
        self.room = Room.objects.create(number="101", nightly_rate=Decimal("100.00"), capacity=2)
        self.client.force_authenticate(self.guest)
        self.list_url = reverse("reservation-list")

    def _payload(self, start: date, end: date, **overrides) -> dict:
        payload = {
            "room_id": self.room.pk,
            "guest_name": "Ana Torres",
            "guest_email": "ana@example.com",
            "guest_phone": "+5491122334455",
            "start_date": str(start),
            "end_date": str(end),
        }
        payload.update(overrides)
        return payload

    def _create(self, start: date, end: date):
        return self.client.post(self.list_url, self._payload(start, end), format="json")

    def test_guest_creates_reservation(self) -> None:
        response = self._create(date(2030, 1, 1), date(2030, 1, 3))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "confirmed")
        self.assertEqual(response.data["total_price"], "200.00")
        self.assertEqual(response.data["nights"], 2)
        self.assertEqual(response.data["room_number"], "101")
        reservation = Reservation.objects.get()
        self.assertEqual(reservation.guest, self.guest)

    def test_boundary_overlap_is_a_conflict(self) -> None:
        self.assertEqual(self._create(date(2030, 1, 1), date(2030, 1, 5)).status_code, status.HTTP_201_CREATED)

        response = self._create(date(2030, 1, 5), date(2030, 1, 8))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["code"], "conflict")
        self.assertEqual(Reservation.objects.count(), 1)

    def test_request_validation(self) -> None:
        response = self.client.post(
            self.list_url,
            self._payload(date(2030, 1, 1), date(2030, 1, 3), guest_phone="123", guest_email="nope"),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("guest_phone", response.data["errors"])
        self.assertIn("guest_email", response.data["errors"])

    def test_zero_night_stay_is_invalid_input(self) -> None:
        response = self._create(date(2030, 1, 1), date(2030, 1, 1))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "invalid_input")

    def test_unknown_room_is_not_found(self) -> None:
        response = self.client.post(
            self.list_url,
            self._payload(date(2030, 1, 1), date(2030, 1, 3), room_id=999_999),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_listing_is_scoped_to_the_caller(self) -> None:
        self._create(date(2030, 1, 1), date(2030, 1, 3))

        self.client.force_authenticate(self.stranger)
        self.assertEqual(self.client.get(self.list_url).data, [])

        self.client.force_authenticate(self.admin)
        self.assertEqual(len(self.client.get(self.list_url).data), 1)

    def test_listing_filters_by_status(self) -> None:
        first = self._create(date(2030, 1, 1), date(2030, 1, 3)).data["id"]
        self._create(date(2030, 2, 1), date(2030, 2, 3))
        self.client.delete(reverse("reservation-detail", args=[first]))

        response = self.client.get(self.list_url, {"status": "cancelled"})

        self.assertEqual([item["id"] for item in response.data], [first])

    def test_partial_update_reprices(self) -> None:
        reservation_id = self._create(date(2030, 1, 1), date(2030, 1, 3)).data["id"]
        url = reverse("reservation-detail", args=[reservation_id])

        response = self.client.patch(url, {"end_date": "2030-01-05"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total_price"], "400.00")
        self.assertEqual(response.data["guest_name"], "Ana Torres")

    def test_stranger_sees_not_found(self) -> None:
        reservation_id = self._create(date(2030, 1, 1), date(2030, 1, 3)).data["id"]
        url = reverse("reservation-detail", args=[reservation_id])
        self.client.force_authenticate(self.stranger)

        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_cancel_retains_row_and_cannot_repeat(self) -> None:
        reservation_id = self._create(date(2030, 1, 1), date(2030, 1, 3)).data["id"]
        url = reverse("reservation-detail", args=[reservation_id])

        response = self.client.delete(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "cancelled")
        self.assertEqual(Reservation.objects.get(pk=reservation_id).status, Reservation.Status.CANCELLED)

        again = self.client.delete(url)
        self.assertEqual(again.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(again.data["code"], "not_found")

    def test_cancelled_window_can_be_rebooked(self) -> None:
        reservation_id = self._create(date(2030, 1, 1), date(2030, 1, 3)).data["id"]
        self.client.delete(reverse("reservation-detail", args=[reservation_id]))

        response = self._create(date(2030, 1, 1), date(2030, 1, 3))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_anonymous_rejected(self) -> None:
        self.client.force_authenticate(None)
        response = self._create(date(2030, 1, 1), date(2030, 1, 3))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
