"""
Event service for creating events and managing their days.

Creating an event validates the name and date range against existing events
of the same year, then persists the event with one EventDay per calendar date
in [start_date, end_date].
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from domain.event import Event, EventDay, NewEvent, generate_date_range, validate_create_event
from repositories.interfaces import EventStore
from services.results import ServiceResult

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, store: EventStore) -> None:
        self._store = store

    def get_all_events(self) -> List[Event]:
        """All events with their days, most recent first."""

        try:
            return self._store.list_events()
        except Exception:
            logger.exception("Failed to retrieve events")
            raise

    def create_event(self, name: str, start_date: date, end_date: date) -> ServiceResult[Event]:
        """
        Create an event and its days.

        Returns:
            ServiceResult with the saved Event on success, or the validation
            message (empty name, end before start, duplicate) on failure.

        Example:
            result = service.create_event("Summer Fair", date(2025, 6, 1), date(2025, 6, 3))
            # result.data.days -> three EventDay entries: 06-01, 06-02, 06-03
        """

        try:
            existing = self._store.list_event_headers_by_year(start_date.year)
        except Exception:
            logger.exception("Failed to retrieve events for %s", start_date.year)
            raise

        validation = validate_create_event(name, start_date, end_date, existing)
        if not validation.is_valid:
            logger.warning("Event creation validation failed: %s", validation.error_message)
            return ServiceResult.fail(validation.error_message or "Invalid event")

        logger.info("Creating event '%s' from %s to %s", name, start_date, end_date)

        new_event = NewEvent(
            name=name.strip(),
            start_date=start_date,
            end_date=end_date,
            day_dates=tuple(generate_date_range(start_date, end_date)),
        )
        try:
            saved = self._store.create_event(new_event)
        except Exception:
            logger.exception("Failed to create event '%s'", name)
            raise

        logger.info("Successfully created event %s with %s days", saved.event_id, len(saved.days))
        return ServiceResult.ok(saved)

    def get_event_day(self, event_day_id: int) -> Optional[EventDay]:
        try:
            event_day = self._store.get_event_day(event_day_id)
        except Exception:
            logger.exception("Database error while retrieving EventDay %s", event_day_id)
            raise

        if event_day is None:
            logger.warning("EventDay with ID %s not found", event_day_id)
        return event_day

    def update_starting_petty_cash(
        self, event_day_id: int, amount: Optional[Decimal]
    ) -> ServiceResult[EventDay]:
        """Set (or clear, with None) the cash float a day started with."""

        try:
            event_day = self._store.update_starting_petty_cash(event_day_id, amount)
        except Exception as exc:
            logger.exception("Error while updating StartingPettyCash for EventDay %s", event_day_id)
            return ServiceResult.fail(f"Failed to update: {exc}")

        if event_day is None:
            logger.warning("EventDay %s cannot be found", event_day_id)
            return ServiceResult.fail("Event day not found")

        logger.info("Updated StartingPettyCash for EventDay %s", event_day_id)
        return ServiceResult.ok(event_day, "Starting petty cash saved")


__all__ = ["EventService"]
