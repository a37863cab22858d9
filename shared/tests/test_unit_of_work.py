"""Tests for the unit of work and the in-process message bus."""

from __future__ import annotations

from dataclasses import dataclass
from unittest import mock

from django.test import TestCase

from shared.application.message_bus import MessageBus, message_bus
from shared.application.uow import DjangoUnitOfWork
from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class SomethingHappened(DomainEvent):
    what: str


class MessageBusTests(TestCase):
    def test_handlers_receive_events_and_failures_are_isolated(self) -> None:
        bus = MessageBus()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.register_event_handler(SomethingHappened, broken)
        bus.register_event_handler(SomethingHappened, received.append)
        bus.register_event_handler(SomethingHappened, received.append)

        bus.publish_events([SomethingHappened(aggregate_id=1, what="x")])

        self.assertEqual(len(bus.handlers_for(SomethingHappened)), 2)
        self.assertEqual([e.what for e in received], ["x"])

    def test_event_serialises_common_fields(self) -> None:
        event = SomethingHappened(aggregate_id=7, what="x")
        payload = event.to_dict()
        self.assertEqual(payload["event_type"], "SomethingHappened")
        self.assertEqual(payload["aggregate_id"], 7)


class UnitOfWorkTests(TestCase):
    def test_events_published_only_after_commit(self) -> None:
        with mock.patch.object(message_bus, "publish_events") as publish:
            with self.captureOnCommitCallbacks(execute=True):
                with DjangoUnitOfWork() as uow:
                    uow.record(SomethingHappened(aggregate_id=1, what="committed"))
                    publish.assert_not_called()

        publish.assert_called_once()
        (events,), _ = publish.call_args
        self.assertEqual([e.what for e in events], ["committed"])

    def test_rollback_discards_events(self) -> None:
        with mock.patch.object(message_bus, "publish_events") as publish:
            with self.captureOnCommitCallbacks(execute=True) as callbacks:
                with self.assertRaises(ValueError):
                    with DjangoUnitOfWork() as uow:
                        uow.record(SomethingHappened(aggregate_id=1, what="lost"))
                        raise ValueError("abort")

        self.assertEqual(callbacks, [])
        publish.assert_not_called()
