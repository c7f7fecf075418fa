"""Tests for events: synchronous EventEmitter."""

import pytest

from markercluster.events import EventEmitter


class TestEventEmitter:

    @pytest.mark.unit
    def test_publish_in_order_with_args(self):
        bus = EventEmitter()
        got = []
        bus.subscribe("x", lambda v: got.append(("a", v)))
        bus.subscribe("x", lambda v: got.append(("b", v)))
        bus.publish("x", 1)
        assert got == [("a", 1), ("b", 1)]

    @pytest.mark.unit
    def test_unsubscribe(self):
        bus = EventEmitter()
        got = []
        handle = bus.subscribe("x", got.append)
        assert bus.unsubscribe(handle) is True
        assert bus.unsubscribe(handle) is False
        bus.publish("x", 1)
        assert got == []
        assert bus.subscriber_count() == 0

    @pytest.mark.unit
    def test_self_unsubscribe_during_publish(self):
        bus = EventEmitter()
        got = []

        def once():
            got.append("once")
            bus.unsubscribe(handle)

        handle = bus.subscribe("x", once)
        bus.subscribe("x", lambda: got.append("always"))
        bus.publish("x")
        bus.publish("x")
        assert got == ["once", "always", "always"]

    @pytest.mark.unit
    def test_unknown_event_is_noop(self):
        EventEmitter().publish("nothing")
