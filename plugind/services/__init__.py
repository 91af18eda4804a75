"""Daemon services for plugind."""

from .cache_events import EventStreamObserver

__all__ = [
    "EventStreamObserver",
]
