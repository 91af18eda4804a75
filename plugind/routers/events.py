"""SSE endpoint for plugin cache events.

Streams plugin cache rebuild progress to connected clients.
"""

import asyncio
import json
import logging
from datetime import UTC
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from sse_starlette import ServerSentEvent
from sse_starlette.sse import EventSourceResponse

from ..dependencies import get_event_emitter
from ..streaming import EventQueueEmitter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/events", tags=["events"])


@router.get("")
async def cache_event_stream(
    emitter: Annotated[EventQueueEmitter, Depends(get_event_emitter)],
) -> EventSourceResponse:
    """SSE stream for plugin cache events.

    Returns:
        SSE EventSourceResponse streaming cache events

    Events:
        - connected: Initial connection established
        - keepalive: Periodic heartbeat (every 30s)
        - cache:size_changed: Number of discovered plugins changed
        - cache:plugin_cached: A plugin was added to the cache
        - cache:invalid_registry: A registry was skipped
        - cache:invalid_plugin: A plugin was skipped
        - cache:complete: Cache rebuild finished
        - error: Stream error occurred
    """

    async def event_generator():
        queue = emitter.subscribe()

        try:
            yield ServerSentEvent(
                data=json.dumps({"timestamp": datetime.now(UTC).isoformat()}),
                event="connected",
            )
            logger.info("Cache event stream connected")

            while True:
                try:
                    # Timeout allows keepalive + cancellation
                    event = await asyncio.wait_for(queue.get(), timeout=30.0)
                    yield ServerSentEvent(
                        data=json.dumps(event["data"]),
                        event=event["event"],
                    )

                except TimeoutError:
                    yield ServerSentEvent(
                        data=json.dumps({"timestamp": datetime.now(UTC).isoformat()}),
                        event="keepalive",
                    )

        except asyncio.CancelledError:
            logger.info("Cache event stream disconnected")

        except Exception as e:
            logger.error(f"Cache event stream error: {e}")
            yield ServerSentEvent(
                data=json.dumps({"error": str(e), "timestamp": datetime.now(UTC).isoformat()}),
                event="error",
            )

        finally:
            emitter.unsubscribe(queue)
            logger.info("Unsubscribed from cache events")

    return EventSourceResponse(event_generator())
