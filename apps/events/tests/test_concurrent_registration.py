"""Racing registrations against an event's capacity ceiling."""

from __future__ import annotations

import threading
from datetime import date, time

from django.db import connection
from django.test import TransactionTestCase

from apps.events.models import Event, EventAttendee
from apps.events.services import register_attendee
from apps.users.models import User
from shared.domain.errors import CapacityExceeded, Conflict


class ConcurrentRegistrationTests(TransactionTestCase):
    def setUp(self) -> None:
        self.event = Event.objects.create(
            title="Wine tasting",
            date=date(2030, 6, 1),
            time=time(19, 0),
            location="Terrace",
            max_capacity=5,
        )
        self.users = [
            User.objects.create_user(email=f"guest{i}@example.com", password="GuestPass123")
            for i in range(8)
        ]

    def _register_all(self, users) -> tuple[list, list]:
        barrier = threading.Barrier(len(users))
        successes: list = []
        failures: list = []
        guard = threading.Lock()

        def run(user):
            try:
                barrier.wait()
                attendee = register_attendee(self.event.pk, user)
                with guard:
                    successes.append(attendee)
            except Exception as exc:  # collected and asserted on below
                with guard:
                    failures.append(exc)
            finally:
                connection.close()

        threads = [threading.Thread(target=run, args=(user,)) for user in users]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return successes, failures

    def test_exactly_capacity_registrations_succeed(self) -> None:
        successes, failures = self._register_all(self.users)

        self.assertEqual(len(successes), 5)
        self.assertEqual(len(failures), 3)
        self.assertTrue(all(isinstance(exc, CapacityExceeded) for exc in failures), failures)
        self.assertEqual(EventAttendee.objects.filter(event=self.event).count(), 5)

    def test_same_user_racing_registers_once(self) -> None:
        successes, failures = self._register_all([self.users[0]] * 3)

        self.assertEqual(len(successes), 1)
        self.assertTrue(all(isinstance(exc, Conflict) for exc in failures), failures)
        self.assertEqual(EventAttendee.objects.filter(event=self.event).count(), 1)
