"""
Tests for mytrader core: PriceUpdate, PriceFeed, Order.
"""

from datetime import datetime
from unittest.mock import Mock

import pytest

from mytrader import Order, PriceFeed, PriceListener, PriceUpdate, Side


class RecordingListener(PriceListener):
    def __init__(self, name: str, log: list) -> None:
        self.name = name
        self.log = log

    def price_update(self, security, price):
        self.log.append((self.name, security, price))


# --- PriceUpdate ---


def test_price_update_creation():
    ts = datetime(2024, 1, 15, 10, 0, 0)
    u = PriceUpdate(security="IBM", price=54.9, timestamp=ts)
    assert u.security == "IBM"
    assert u.price == 54.9
    assert u.timestamp == ts


def test_price_update_parses_timestamp_string():
    u = PriceUpdate(security="IBM", price=1.0, timestamp="2024-01-15T10:00:00")
    assert u.timestamp == datetime(2024, 1, 15, 10, 0, 0)


def test_price_update_allows_malformed_values():
    u = PriceUpdate(security=None, price=None)
    assert u.security is None
    assert u.timestamp is None


def test_price_update_immutable():
    u = PriceUpdate(security="IBM", price=1.0)
    with pytest.raises(AttributeError):
        u.price = 2.0


# --- PriceFeed ---


def test_price_listener_is_abstract():
    with pytest.raises(TypeError):
        PriceListener()


def test_feed_publish_order():
    log = []
    feed = PriceFeed()
    feed.add_price_listener(RecordingListener("a", log))
    feed.add_price_listener(RecordingListener("b", log))
    feed.publish("IBM", 55.0)
    assert log == [("a", "IBM", 55.0), ("b", "IBM", 55.0)]


def test_feed_duplicate_registration_notifies_twice():
    log = []
    feed = PriceFeed()
    listener = RecordingListener("a", log)
    feed.add_price_listener(listener)
    feed.add_price_listener(listener)
    feed.publish("IBM", 1.0)
    assert len(log) == 2


def test_feed_remove_listener():
    log = []
    feed = PriceFeed()
    a = RecordingListener("a", log)
    b = RecordingListener("b", log)
    feed.add_price_listener(a)
    feed.add_price_listener(b)
    feed.remove_price_listener(a)
    feed.publish("IBM", 1.0)
    assert log == [("b", "IBM", 1.0)]
    assert feed.listeners == [b]


def test_feed_remove_unknown_listener_is_noop():
    feed = PriceFeed()
    feed.remove_price_listener(RecordingListener("a", []))
    assert feed.listeners == []


def test_feed_passes_malformed_updates_through():
    listener = Mock(spec=PriceListener)
    feed = PriceFeed()
    feed.add_price_listener(listener)
    feed.publish(None, 10.0)
    listener.price_update.assert_called_once_with(None, 10.0)


def test_feed_listener_error_propagates_and_stops_dispatch():
    first = Mock(spec=PriceListener)
    first.price_update.side_effect = RuntimeError("boom")
    second = Mock(spec=PriceListener)
    feed = PriceFeed()
    feed.add_price_listener(first)
    feed.add_price_listener(second)
    with pytest.raises(RuntimeError):
        feed.publish("IBM", 1.0)
    second.price_update.assert_not_called()


def test_feed_run():
    log = []
    feed = PriceFeed()
    feed.add_price_listener(RecordingListener("a", log))
    count = feed.run([PriceUpdate("IBM", 1.0), PriceUpdate("GOOG", 2.0)])
    assert count == 2
    assert log == [("a", "IBM", 1.0), ("a", "GOOG", 2.0)]


# --- Order ---


def test_order_creation():
    o = Order(security="IBM", side=Side.BUY, volume=55, price=54.9)
    assert o.security == "IBM"
    assert o.side == Side.BUY
    assert o.volume == 55
    assert o.price == 54.9
    assert o.timestamp is None
