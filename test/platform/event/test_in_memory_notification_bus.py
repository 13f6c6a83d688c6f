"""
Unit tests for InMemoryNotificationBusImpl

Synchronous fan-out of booking events to the registered observers.
"""

from typing import List, Tuple
from unittest.mock import Mock

import pytest

from src.platform.event.in_memory_notification_bus import InMemoryNotificationBusImpl


class RecordingObserver:
    def __init__(self, name: str, calls: List[Tuple[str, str, str]]) -> None:
        self.name = name
        self.calls = calls

    def on_booking_success(self, username: str, movie_title: str) -> None:
        self.calls.append((self.name, username, movie_title))


class ExplodingObserver:
    def on_booking_success(self, username: str, movie_title: str) -> None:
        raise RuntimeError('smtp down')


class TestInMemoryNotificationBus:
    @pytest.fixture
    def bus(self):
        return InMemoryNotificationBusImpl()

    def test_publish_with_no_subscribers(self, bus):
        assert bus.publish(username='customer', movie_title='Inception') == 0

    def test_subscribe_returns_distinct_ids(self, bus):
        observer = Mock()

        first = bus.subscribe(observer)
        second = bus.subscribe(Mock())

        assert first != second

    def test_delivers_in_registration_order(self, bus):
        calls: List[Tuple[str, str, str]] = []
        bus.subscribe(RecordingObserver('email', calls))
        bus.subscribe(RecordingObserver('revenue', calls))

        delivered = bus.publish(username='customer', movie_title='Inception')

        assert delivered == 2
        assert calls == [
            ('email', 'customer', 'Inception'),
            ('revenue', 'customer', 'Inception'),
        ]

    def test_duplicate_subscription_delivers_twice(self, bus):
        observer = Mock()
        bus.subscribe(observer)
        bus.subscribe(observer)

        bus.publish(username='customer', movie_title='Inception')

        assert observer.on_booking_success.call_count == 2
        assert bus.subscribers() == [observer, observer]

    def test_failing_subscriber_does_not_block_later_ones(self, bus):
        calls: List[Tuple[str, str, str]] = []
        bus.subscribe(ExplodingObserver())
        bus.subscribe(RecordingObserver('revenue', calls))

        delivered = bus.publish(username='customer', movie_title='Inception')

        assert delivered == 1
        assert calls == [('revenue', 'customer', 'Inception')]
