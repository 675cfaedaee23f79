"""
Change notifications for event-day subscribers.

After a sale is created, updated or deleted, subscribers of that sale's event
day are told to refetch. Delivery is best-effort:
- The notification is sent only after the store has committed the change.
- A failing sink never fails the mutation; the error is logged and dropped.
- The payload carries identifiers only, never the sale itself.

Transports implement `NotificationSink.publish(topic, payload)`; this module
does not know about WebSockets or any other transport vocabulary.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# Message name kept stable for connected clients; sent for every kind of change.
SALE_CHANGED_EVENT = "SaleCreated"


def channel_for_day(event_day_id: int) -> str:
    """Topic name subscribers of one event day listen on."""

    return f"day-{event_day_id}"


class NotificationSink(ABC):
    """Fan-out transport: deliver a payload to every subscriber of a topic."""

    @abstractmethod
    def publish(self, topic: str, payload: Mapping[str, Any]) -> None:
        ...


class NullNotificationSink(NotificationSink):
    """Sink for contexts without live subscribers (scripts, batch jobs)."""

    def publish(self, topic: str, payload: Mapping[str, Any]) -> None:
        logger.debug("Dropping notification for %s: %s", topic, dict(payload))


class ChangeBroadcaster:
    """Originates "sale changed" notifications addressed by event-day channel."""

    def __init__(self, sink: NotificationSink) -> None:
        self._sink = sink

    def notify_sale_changed(self, event_day_id: int, sale_id: int) -> None:
        topic = channel_for_day(event_day_id)
        payload = {
            "event": SALE_CHANGED_EVENT,
            "event_day_id": event_day_id,
            "sale_id": sale_id,
        }
        try:
            self._sink.publish(topic, payload)
        except Exception:
            logger.warning(
                "Failed to notify %s about sale %s; subscribers will see it on next refresh",
                topic, sale_id, exc_info=True,
            )


__all__ = [
    "SALE_CHANGED_EVENT",
    "channel_for_day",
    "NotificationSink",
    "NullNotificationSink",
    "ChangeBroadcaster",
]
