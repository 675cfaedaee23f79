"""
Events API Endpoints.

Endpoints for creating events, reading event days and event-wide statistics.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_aggregation_engine, get_event_service
from api.models import (
    CreateEventRequest,
    EventDayResponse,
    EventResponse,
    EventSummaryResponse,
    PettyCashRequest,
)
from services.event_service import EventService
from services.summary_service import AggregationEngine

router = APIRouter()


@router.get(
    "/events",
    response_model=List[EventResponse],
    summary="List Events",
    description="All events with their days, most recent first."
)
def list_events(service: EventService = Depends(get_event_service)):
    try:
        return [EventResponse.from_domain(e) for e in service.get_all_events()]
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to list events: {str(e)}")


@router.post(
    "/events",
    response_model=EventResponse,
    status_code=201,
    summary="Create Event",
    description="Create an event and one event day per date in [start_date, end_date]."
)
def create_event(request: CreateEventRequest, service: EventService = Depends(get_event_service)):
    """
    Create a multi-day event.

    **Validation:**
    - Name must not be empty
    - end_date must not be before start_date
    - An event with the same name and dates must not already exist

    **Example request:**
    ```json
    {"name": "Summer Craft Fair", "start_date": "2025-06-01", "end_date": "2025-06-03"}
    ```
    Creates three event days: 2025-06-01, 2025-06-02, 2025-06-03.
    """
    try:
        result = service.create_event(request.name, request.start_date, request.end_date)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to create event: {str(e)}")

    if not result.success or result.data is None:
        raise HTTPException(status_code=400, detail=result.error_message)
    return EventResponse.from_domain(result.data)


@router.get(
    "/events/{event_id}/summary",
    response_model=EventSummaryResponse,
    summary="Event Summary",
    description="Revenue, unit counts and payment totals across every day of an event."
)
def get_event_summary(event_id: int, engine: AggregationEngine = Depends(get_aggregation_engine)):
    result = engine.get_event_summary(event_id)
    if not result.success or result.data is None:
        status = 404 if result.error_message == "Event not found" else 500
        raise HTTPException(status_code=status, detail=result.error_message)
    return EventSummaryResponse.from_domain(result.data)


@router.get(
    "/event-days/{event_day_id}",
    response_model=EventDayResponse,
    summary="Get Event Day"
)
def get_event_day(event_day_id: int, service: EventService = Depends(get_event_service)):
    try:
        event_day = service.get_event_day(event_day_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get event day: {str(e)}")

    if event_day is None:
        raise HTTPException(status_code=404, detail=f"Event day not found: {event_day_id}")
    return EventDayResponse.from_domain(event_day)


@router.put(
    "/event-days/{event_day_id}/petty-cash",
    response_model=EventDayResponse,
    summary="Set Starting Petty Cash",
    description="Set or clear (null) the cash float the day started with."
)
def update_petty_cash(
    event_day_id: int,
    request: PettyCashRequest,
    service: EventService = Depends(get_event_service),
):
    result = service.update_starting_petty_cash(event_day_id, request.amount)
    if not result.success or result.data is None:
        status = 404 if result.error_message == "Event day not found" else 500
        raise HTTPException(status_code=status, detail=result.error_message)
    return EventDayResponse.from_domain(result.data)
