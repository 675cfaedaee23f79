"""
WebSocket fan-out for live sale updates.

Clients viewing an event day connect to `/ws/days/{event_day_id}` and receive
a small JSON message whenever a sale of that day changes:

    {"event": "SaleCreated", "event_day_id": 5, "sale_id": 42}

The message is a signal to refetch, not a copy of the sale.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections import defaultdict
from typing import Any, Dict, List, Mapping, Optional, Set

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from services.notifications import NotificationSink, channel_for_day

logger = logging.getLogger(__name__)


class SalesHub(NotificationSink):
    """
    In-process registry of WebSocket subscribers keyed by day channel.

    `publish` may be called from worker threads (sync endpoints); delivery is
    scheduled on the event loop and never awaited by the caller.
    """

    def __init__(self) -> None:
        self._channels: Dict[str, Set[WebSocket]] = defaultdict(set)
        self._lock = threading.Lock()
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    async def join(self, event_day_id: int, websocket: WebSocket) -> None:
        await websocket.accept()
        self._loop = asyncio.get_running_loop()
        with self._lock:
            self._channels[channel_for_day(event_day_id)].add(websocket)
        logger.info("WebSocket joined %s", channel_for_day(event_day_id))

    def leave(self, event_day_id: int, websocket: WebSocket) -> None:
        self._discard(channel_for_day(event_day_id), websocket)
        logger.info("WebSocket left %s", channel_for_day(event_day_id))

    def subscriber_count(self, topic: str) -> int:
        with self._lock:
            return len(self._channels.get(topic, ()))

    def publish(self, topic: str, payload: Mapping[str, Any]) -> None:
        with self._lock:
            sockets = list(self._channels.get(topic, ()))
        if not sockets or self._loop is None or self._loop.is_closed():
            return
        asyncio.run_coroutine_threadsafe(self._send_all(topic, sockets, dict(payload)), self._loop)

    async def _send_all(self, topic: str, sockets: List[WebSocket], payload: Dict[str, Any]) -> None:
        for websocket in sockets:
            try:
                await websocket.send_json(payload)
            except Exception:
                logger.info("Dropping unreachable WebSocket from %s", topic, exc_info=True)
                self._discard(topic, websocket)

    def _discard(self, topic: str, websocket: WebSocket) -> None:
        with self._lock:
            subscribers = self._channels.get(topic)
            if subscribers is None:
                return
            subscribers.discard(websocket)
            if not subscribers:
                del self._channels[topic]


_hub = SalesHub()


def get_sales_hub() -> SalesHub:
    return _hub


router = APIRouter()


@router.websocket("/ws/days/{event_day_id}")
async def day_updates(
    websocket: WebSocket,
    event_day_id: int,
    hub: SalesHub = Depends(get_sales_hub),
):
    """Subscribe to sale changes of one event day until the client disconnects."""

    await hub.join(event_day_id, websocket)
    try:
        while True:
            # Incoming messages are ignored; the loop only detects disconnects.
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        hub.leave(event_day_id, websocket)
