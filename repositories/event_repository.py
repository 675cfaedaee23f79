"""
Event repository (persistence).

Events own their days; days are inserted in bulk right after the event row.
Full-event reads embed every day's sales (with product) and payments so that
event-wide summaries need a single round trip.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional

from supabase import Client  # type: ignore[import-not-found]

from domain.event import Event, EventDay, EventHeader, NewEvent
from domain.time import parse_date
from repositories.interfaces import EventStore
from repositories.rows import (
    EVENT_DAYS_TABLE,
    EVENTS_TABLE,
    execute,
    row_to_event,
    row_to_event_day,
)

_EVENT_WITH_DAYS: str = "*, event_days(*)"
_EVENT_WITH_ALL_DATA: str = "*, event_days(*, sales(*, products(*)), payments(*))"


class SupabaseEventRepository(EventStore):
    """events / event_days access through the Supabase client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def list_event_headers_by_year(self, year: int) -> List[EventHeader]:
        first, last = f"{year:04d}-01-01", f"{year:04d}-12-31"
        rows = execute(
            self._client.table(EVENTS_TABLE)
            .select("name, start_date, end_date")
            .or_(
                f"and(start_date.gte.{first},start_date.lte.{last}),"
                f"and(end_date.gte.{first},end_date.lte.{last})"
            ),
            "list events by year",
        )
        return [
            EventHeader(
                name=str(row["name"]),
                start_date=parse_date(row["start_date"]),
                end_date=parse_date(row["end_date"]),
            )
            for row in rows
        ]

    def list_events(self) -> List[Event]:
        rows = execute(
            self._client.table(EVENTS_TABLE)
            .select(_EVENT_WITH_DAYS)
            .order("event_id", desc=True),
            "list events",
        )
        return [row_to_event(row) for row in rows]

    def create_event(self, new_event: NewEvent) -> Event:
        event_payload: dict[str, Any] = {
            "name": new_event.name,
            "start_date": new_event.start_date.isoformat(),
            "end_date": new_event.end_date.isoformat(),
        }
        event_rows = execute(
            self._client.table(EVENTS_TABLE).insert(event_payload), "create event"
        )
        if not event_rows:
            raise RuntimeError("Failed to create event: insert returned no row")
        event_id = int(event_rows[0]["event_id"])

        day_payload = [
            {"event_id": event_id, "date": day.isoformat()} for day in new_event.day_dates
        ]
        day_rows = (
            execute(self._client.table(EVENT_DAYS_TABLE).insert(day_payload), "create event days")
            if day_payload
            else []
        )

        return Event(
            event_id=event_id,
            name=new_event.name,
            start_date=new_event.start_date,
            end_date=new_event.end_date,
            days=tuple(sorted((row_to_event_day(r) for r in day_rows), key=lambda d: d.date)),
        )

    def get_event_day(self, event_day_id: int) -> Optional[EventDay]:
        rows = execute(
            self._client.table(EVENT_DAYS_TABLE)
            .select("*")
            .eq("event_day_id", event_day_id)
            .limit(1),
            "get event day",
        )
        if not rows:
            return None
        return row_to_event_day(rows[0])

    def get_event_with_all_data(self, event_id: int) -> Optional[Event]:
        rows = execute(
            self._client.table(EVENTS_TABLE)
            .select(_EVENT_WITH_ALL_DATA)
            .eq("event_id", event_id)
            .limit(1),
            "get event with all data",
        )
        if not rows:
            return None
        return row_to_event(rows[0])

    def update_starting_petty_cash(
        self, event_day_id: int, amount: Optional[Decimal]
    ) -> Optional[EventDay]:
        rows = execute(
            self._client.table(EVENT_DAYS_TABLE)
            .update({"starting_petty_cash": None if amount is None else str(amount)})
            .eq("event_day_id", event_day_id),
            "update starting petty cash",
        )
        if not rows:
            return None
        return row_to_event_day(rows[0])


__all__ = ["SupabaseEventRepository"]
