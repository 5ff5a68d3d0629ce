"""Tests for :mod:`routegraph.obs.events`."""

from __future__ import annotations

from routegraph.obs.events import EventBus, utc_now


def test_event_bus_emit_and_history():
    bus = EventBus()
    event = bus.emit(level="info", msg="Test", action="act", target_ids=["node"], extras={"detail": 1})

    assert event.msg == "Test"
    assert event.target_ids == ["node"]
    history = list(bus.history())
    assert history == [event]


def test_event_bus_filters_by_level():
    bus = EventBus()
    bus.emit(level="info", msg="one")
    warning = bus.emit(level="warning", msg="two")

    assert bus.by_level("warning") == (warning,)


def test_utc_now_returns_iso_format():
    timestamp = utc_now()
    assert "T" in timestamp and timestamp.endswith("+00:00")
