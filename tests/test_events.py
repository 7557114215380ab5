"""Tests for the synchronous EventBus."""

from dataclasses import dataclass
from unittest.mock import Mock

from annolist.events import AnnotationsUpdatedEvent, DomainEvent, EventBus, FiltersChangedEvent


@dataclass(frozen=True)
class _FakeEvent(DomainEvent):
    payload: str = ""


def test_publish_reaches_subscribers_in_order():
    bus = EventBus()
    received = []
    bus.subscribe(_FakeEvent, lambda e: received.append(("a", e.payload)))
    bus.subscribe(_FakeEvent, lambda e: received.append(("b", e.payload)))

    bus.publish(_FakeEvent(payload="x"))

    assert received == [("a", "x"), ("b", "x")]


def test_only_matching_type_is_delivered():
    bus = EventBus()
    handler = Mock()
    bus.subscribe(FiltersChangedEvent, handler)

    bus.publish(AnnotationsUpdatedEvent())

    handler.assert_not_called()


def test_cancelled_subscription_skipped():
    bus = EventBus()
    handler = Mock()
    sub = bus.subscribe(_FakeEvent, handler)

    sub.cancel()
    bus.publish(_FakeEvent())

    handler.assert_not_called()
    assert bus.subscriber_count(_FakeEvent) == 0


def test_unsubscribe_removes_handler():
    bus = EventBus()
    sub = bus.subscribe(_FakeEvent, Mock())

    bus.unsubscribe(sub)

    assert bus.subscriber_count(_FakeEvent) == 0


def test_failing_handler_does_not_stop_others():
    logger = Mock()
    bus = EventBus(logger=logger)
    received = []

    def bad(event):
        raise RuntimeError("boom")

    bus.subscribe(_FakeEvent, bad)
    bus.subscribe(_FakeEvent, received.append)

    bus.publish(_FakeEvent(payload="y"))

    assert len(received) == 1
    logger.error.assert_called_once()


def test_handler_may_subscribe_during_publish():
    bus = EventBus()
    late = Mock()
    bus.subscribe(_FakeEvent, lambda e: bus.subscribe(_FakeEvent, late))

    bus.publish(_FakeEvent())
    late.assert_not_called()

    bus.publish(_FakeEvent())
    late.assert_called_once()
