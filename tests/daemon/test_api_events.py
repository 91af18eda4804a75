"""Tests for cache events published to SSE subscribers."""

import pytest

from plugin_library.models.registries import PluginRegistry
from plugind.dependencies import get_event_emitter
from plugind.main import app
from plugind.services.cache_events import EventStreamObserver
from plugind.streaming import EventQueueEmitter


@pytest.fixture
def emitter() -> EventQueueEmitter:
    return EventQueueEmitter()


class TestCacheEvents:
    """Test the SSE cache observer."""

    def test_events_router_registered(self) -> None:
        assert "/api/v1/events" in app.openapi()["paths"]

    def test_shared_emitter(self) -> None:
        assert get_event_emitter() is get_event_emitter()

    async def test_observer_emits_events_in_order(self, emitter: EventQueueEmitter) -> None:
        queue = emitter.subscribe()
        observer = EventStreamObserver(emitter)

        await observer.on_cache_size_changed(0)
        await observer.on_invalid_registry(PluginRegistry(name="B", uri="http://reg/b"))
        await observer.on_plugin_cached(1)
        await observer.on_invalid_plugin("http://reg/a/plugins/x/")
        await observer.on_caching_complete()

        events = [queue.get_nowait() for _ in range(queue.qsize())]
        assert [event["event"] for event in events] == [
            "cache:size_changed",
            "cache:invalid_registry",
            "cache:plugin_cached",
            "cache:invalid_plugin",
            "cache:complete",
        ]
        assert events[0]["data"]["size"] == 0
        assert events[1]["data"]["registry"]["publicUri"] == "http://reg/b"
        assert events[3]["data"]["uri"] == "http://reg/a/plugins/x/"

    async def test_every_subscriber_receives_events(self, emitter: EventQueueEmitter) -> None:
        first = emitter.subscribe()
        second = emitter.subscribe()

        await EventStreamObserver(emitter).on_plugin_cached(3)

        assert first.get_nowait()["data"]["cached"] == 3
        assert second.get_nowait()["data"]["cached"] == 3

    async def test_unsubscribed_queue_receives_nothing(self, emitter: EventQueueEmitter) -> None:
        queue = emitter.subscribe()
        emitter.unsubscribe(queue)

        await EventStreamObserver(emitter).on_caching_complete()

        assert queue.empty()
