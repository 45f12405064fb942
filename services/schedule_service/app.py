"""
FastAPI service for schedule parsing and calendar registration.

This service exposes the schedule parser and the in-memory calendar from
schedule_parser/ and calendar_server/ as REST API endpoints. Parsing is a fast,
pure operation; a sentence that cannot be parsed is a normal 200 response
with ``ok: false``.
"""
from __future__ import annotations

import os
import typing as t
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException

from calendar_server.server import (create_event, create_event_from_text, format_calendar_events, get_calendar_events,
                                    get_calendars)
from calendar_server.store import CalendarError
from schedule_parser import ParseOptions, parse_korean_schedule
from schedule_parser.server import _preview_schedule
from services.shared.models import (
    CalendarEvent as PydanticCalendarEvent,
    CalendarInfo as PydanticCalendarInfo,
    CreateCalendarEventRequest,
    CreateScheduleEventRequest,
    CreateScheduleEventResponse,
    ParsedSchedule as PydanticParsedSchedule,
    ParseScheduleRequest,
    ParseScheduleResponse,
    PreviewScheduleResponse,
    ShowCalendarEventsResponse,
)


# Event length used when a request does not carry one
DEFAULT_DURATION_MINUTES = int(os.getenv("DEFAULT_DURATION_MINUTES", "60"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Announce startup and shutdown; the parser needs no initialization."""
    print(f"🗓️  Schedule Service starting - default duration {DEFAULT_DURATION_MINUTES} minutes")
    yield
    print("🗓️  Schedule Service shutting down")


app = FastAPI(
    title="Schedule Service",
    description="REST API for Korean schedule sentence parsing and calendar registration",
    version="1.0.0",
    lifespan=lifespan,
)


def _options(now: t.Optional[str], default_duration_minutes: t.Optional[int]) -> ParseOptions:
    """Build parse options, turning a malformed ``now`` into a 422."""
    try:
        return ParseOptions.from_wire(now, default_duration_minutes or DEFAULT_DURATION_MINUTES)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid 'now' value: {str(e)}")


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "healthy", "service": "schedule-service"}


@app.post("/schedule:parse", response_model=ParseScheduleResponse)
async def parse_schedule(request: ParseScheduleRequest) -> ParseScheduleResponse:
    """
    Parse a Korean schedule sentence.

    Returns the parsed schedule, or ``ok: false`` with the reason the
    sentence was rejected.
    """
    options = _options(request.now, request.default_duration_minutes)
    result = parse_korean_schedule(request.sentence, options)
    if not result.ok:
        return ParseScheduleResponse(ok=False, error=result.error)
    return ParseScheduleResponse(ok=True, value=PydanticParsedSchedule(**result.value.to_dict()))


@app.post("/schedule:preview", response_model=PreviewScheduleResponse)
async def preview_schedule(request: ParseScheduleRequest) -> PreviewScheduleResponse:
    """Render the Korean preview of a sentence."""
    options = _options(request.now, request.default_duration_minutes)
    return PreviewScheduleResponse(
        preview=_preview_schedule(request.sentence, request.now or "", options.default_duration_minutes)
    )


@app.get("/calendars", response_model=list[PydanticCalendarInfo])
async def list_calendars() -> list[PydanticCalendarInfo]:
    """List calendars and whether they accept new events."""
    return [PydanticCalendarInfo(**asdict(calendar)) for calendar in get_calendars()]


@app.post("/calendar/event", response_model=PydanticCalendarEvent)
async def create_calendar_event(request: CreateCalendarEventRequest) -> PydanticCalendarEvent:
    """
    Create a calendar event with explicit ISO start and end times.

    Returns 409 when no calendar accepts new events.
    """
    try:
        event = create_event(
            request.title,
            request.start,
            request.end,
            request.location,
            request.all_day,
            request.calendar_name,
        )
    except CalendarError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error creating calendar event: {str(e)}")

    return PydanticCalendarEvent(**asdict(event))


@app.post("/calendar/event-from-sentence", response_model=CreateScheduleEventResponse)
async def create_event_from_sentence(request: CreateScheduleEventRequest) -> CreateScheduleEventResponse:
    """
    Parse a sentence and register it into the preferred (or first writable) calendar.

    Parse and calendar failures are reported with ``ok: false``.
    """
    options = _options(request.now, request.default_duration_minutes)
    try:
        result = create_event_from_text(
            request.sentence,
            request.preferred_calendar_name or "",
            request.now or "",
            options.default_duration_minutes,
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error creating calendar event: {str(e)}")

    return CreateScheduleEventResponse(
        ok=result.ok,
        event=PydanticCalendarEvent(**asdict(result.event)) if result.event else None,
        calendar_name=result.calendar_name,
        error=result.error,
    )


@app.get("/calendar/events", response_model=list[PydanticCalendarEvent])
async def list_calendar_events() -> list[PydanticCalendarEvent]:
    """
    List all calendar events.

    Returns the raw list of calendar events as JSON objects.
    """
    return [PydanticCalendarEvent(**asdict(event)) for event in get_calendar_events()]


@app.get("/calendar/events:show", response_model=ShowCalendarEventsResponse)
async def show_calendar_events() -> ShowCalendarEventsResponse:
    """
    Show all calendar events in a formatted display.

    Returns a formatted table view of all calendar events.
    """
    try:
        return ShowCalendarEventsResponse(formatted_events=format_calendar_events())
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error formatting calendar events: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8004)
