"""Event queue utilities for SSE streaming."""

import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)


class EventQueueEmitter:
    """Emitter that queues events for async consumption.

    Each subscriber gets its own queue so a slow consumer never blocks
    the others.
    """

    def __init__(self) -> None:
        self.queues: list[asyncio.Queue[dict[str, Any]]] = []
        self._lock = asyncio.Lock()

    def subscribe(self) -> asyncio.Queue[dict[str, Any]]:
        """Create new subscriber queue.

        Returns:
            asyncio.Queue that will receive all emitted events
        """
        queue: asyncio.Queue[dict[str, Any]] = asyncio.Queue()
        self.queues.append(queue)
        return queue

    async def emit(self, event_type: str, data: dict[str, Any]) -> None:
        """Emit event to all subscriber queues.

        Args:
            event_type: Event type identifier (e.g., "cache:plugin_cached")
            data: Event payload
        """
        event = {"event": event_type, "data": data}
        async with self._lock:
            for queue in self.queues:
                try:
                    await queue.put(event)
                except Exception as e:
                    logger.error(f"Failed to emit event to queue: {e}")

    def unsubscribe(self, queue: asyncio.Queue[dict[str, Any]]) -> None:
        """Remove subscriber queue."""
        if queue in self.queues:
            self.queues.remove(queue)
