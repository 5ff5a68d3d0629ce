"""Observability helpers for reporting rejected graph calls."""

from .events import Event, EventBus, utc_now

__all__ = ["Event", "EventBus", "utc_now"]
