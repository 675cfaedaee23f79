"""
Domain: Events and their days.

An Event is a multi-day sales occasion with an inclusive date range
[start_date, end_date]. It owns exactly one EventDay per calendar date in that
range; days are created in bulk together with the event.

EventDay is the unit of payment reconciliation: sales and counted payments
belong to a day.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from domain.errors import ValidationResult
from domain.payment import Payment
from domain.sale import SaleRecord

MAX_EVENT_NAME_LENGTH = 50


@dataclass(frozen=True, slots=True)
class EventDay:
    event_day_id: int
    event_id: int
    date: date
    starting_petty_cash: Optional[Decimal] = None
    sales: Tuple[SaleRecord, ...] = ()
    payments: Tuple[Payment, ...] = ()


@dataclass(frozen=True, slots=True)
class Event:
    event_id: int
    name: str
    start_date: date
    end_date: date
    days: Tuple[EventDay, ...] = ()

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise ValueError("end_date must be >= start_date")


@dataclass(frozen=True, slots=True)
class NewEvent:
    """Validated input for persisting an event with its generated days."""

    name: str
    start_date: date
    end_date: date
    day_dates: Tuple[date, ...]


@dataclass(frozen=True, slots=True)
class EventHeader:
    """Name and date range of an existing event, used for duplicate checks."""

    name: str
    start_date: date
    end_date: date


def validate_create_event(
    name: str,
    start_date: date,
    end_date: date,
    existing_events: Iterable[EventHeader],
) -> ValidationResult:
    """
    Validate a new event's name and date range.

    Rejects an empty or whitespace name, an over-long name, an end date before
    the start date, and an exact duplicate (same name ignoring case, same
    start and end dates).
    """

    if name is None or not name.strip():
        return ValidationResult.invalid("Event name cannot be empty")

    if len(name) > MAX_EVENT_NAME_LENGTH:
        return ValidationResult.invalid(
            f"Event name cannot be longer than {MAX_EVENT_NAME_LENGTH} characters"
        )

    if end_date < start_date:
        return ValidationResult.invalid("End date cannot be before start date")

    for existing in existing_events:
        if (
            existing.name.strip().casefold() == name.strip().casefold()
            and existing.start_date == start_date
            and existing.end_date == end_date
        ):
            return ValidationResult.invalid(
                f"An event named '{name}' for {start_date.isoformat()} -> "
                f"{end_date.isoformat()} already exists"
            )

    return ValidationResult.valid()


def generate_date_range(start_date: date, end_date: date) -> List[date]:
    """Every calendar date from start_date to end_date, inclusive. Empty if reversed."""

    days = (end_date - start_date).days
    return [start_date + timedelta(days=offset) for offset in range(days + 1)]


def calculate_event_duration(start_date: date, end_date: date) -> int:
    """Number of days in the inclusive range."""

    return (end_date - start_date).days + 1
