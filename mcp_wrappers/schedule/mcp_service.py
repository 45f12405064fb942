"""
MCP wrapper for the schedule service.

This module keeps the MCP tool signatures of schedule_parser/server.py and
calendar_server/server.py but makes HTTP calls to the schedule service. It
handles serialization/deserialization between the dataclass and Pydantic
models for parsed schedules, calendars and calendar events.
"""
from __future__ import annotations

import os
import typing as t
from datetime import datetime

import httpx
from fastmcp import FastMCP

# Import original dataclass models for MCP interface compatibility
from calendar_server.models import CalendarEvent, CalendarInfo, EventCreationResult
from schedule_parser import ParsedSchedule, ParseFailure, ParseResult, ParseSuccess
# Import Pydantic models for HTTP serialization
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


mcp = FastMCP("ScheduleMCPWrapper")

# Service URL - configurable via environment variable
SCHEDULE_SERVICE_URL = os.getenv("SCHEDULE_SERVICE_URL", "http://localhost:8004")

# Timeout settings for fast operations (in seconds)
STANDARD_TIMEOUT = 30.0


def _client() -> httpx.Client:
    """HTTP client for the schedule service."""
    return httpx.Client(base_url=SCHEDULE_SERVICE_URL, timeout=STANDARD_TIMEOUT)


def _call(method: str, path: str, action: str, payload: t.Optional[dict] = None) -> t.Any:
    """
    Call the schedule service and return the decoded JSON body.

    Transport failures are re-raised as RuntimeError with ``action`` in the message.
    """
    try:
        with _client() as client:
            response = client.request(method, path, json=payload)
            response.raise_for_status()
        return response.json()

    except httpx.TimeoutException:
        raise RuntimeError(f"{action} timed out after {STANDARD_TIMEOUT} seconds")
    except httpx.HTTPStatusError as e:
        raise RuntimeError(f"HTTP error from schedule service: {e.response.status_code} {e.response.text}")
    except Exception as e:
        raise RuntimeError(f"Error calling schedule service: {str(e)}")


def _parse_schedule(sentence: str, now: str = "", default_duration_minutes: int = 0) -> ParseResult:
    """
    Parse a Korean schedule sentence.

    This maintains the same signature as the original MCP tool
    but makes an HTTP call to the schedule service.
    """
    request = ParseScheduleRequest(
        sentence=sentence,
        now=now or None,
        default_duration_minutes=default_duration_minutes or None,
    )
    data = _call("POST", "/schedule:parse", "Schedule parsing", request.model_dump())

    # Convert response back to original dataclass format
    response = ParseScheduleResponse(**data)
    if not response.ok or response.value is None:
        return ParseFailure(response.error or "")
    return ParseSuccess(_pydantic_to_dataclass_parsed_schedule(response.value))


def _preview_schedule(sentence: str, now: str = "", default_duration_minutes: int = 0) -> str:
    """Render the Korean preview of a sentence through the schedule service."""
    request = ParseScheduleRequest(
        sentence=sentence,
        now=now or None,
        default_duration_minutes=default_duration_minutes or None,
    )
    data = _call("POST", "/schedule:preview", "Schedule preview", request.model_dump())
    return PreviewScheduleResponse(**data).preview


def _list_calendars() -> list[CalendarInfo]:
    """List calendars through the schedule service."""
    data = _call("GET", "/calendars", "List calendars")
    return [CalendarInfo(**PydanticCalendarInfo(**item).model_dump()) for item in data]


def _create_calendar_event(
    title: str,
    start: str,
    end: str,
    location: str = "",
    all_day: bool = False,
    calendar_name: str = ""
) -> CalendarEvent:
    """
    Create a calendar event with explicit times.

    This maintains the same signature as the original MCP tool
    but makes an HTTP call to the schedule service.
    """
    request = CreateCalendarEventRequest(
        title=title,
        start=start,
        end=end,
        location=location,
        all_day=all_day,
        calendar_name=calendar_name,
    )
    data = _call("POST", "/calendar/event", "Calendar event creation", request.model_dump())
    return _pydantic_to_dataclass_calendar_event(PydanticCalendarEvent(**data))


def _create_event_from_sentence(
    sentence: str,
    preferred_calendar_name: str = "",
    now: str = "",
    default_duration_minutes: int = 0
) -> EventCreationResult:
    """
    Parse a sentence and register it as a calendar event.

    This maintains the same signature as the original MCP tool
    but makes an HTTP call to the schedule service.
    """
    request = CreateScheduleEventRequest(
        sentence=sentence,
        preferred_calendar_name=preferred_calendar_name or None,
        now=now or None,
        default_duration_minutes=default_duration_minutes or None,
    )
    data = _call("POST", "/calendar/event-from-sentence", "Calendar event creation", request.model_dump())

    response = CreateScheduleEventResponse(**data)
    return EventCreationResult(
        ok=response.ok,
        event=_pydantic_to_dataclass_calendar_event(response.event) if response.event else None,
        calendar_name=response.calendar_name,
        error=response.error,
    )


def _list_calendar_events() -> list[CalendarEvent]:
    """List all calendar events through the schedule service."""
    data = _call("GET", "/calendar/events", "List calendar events")
    return [_pydantic_to_dataclass_calendar_event(PydanticCalendarEvent(**item)) for item in data]


def _show_calendar_events() -> str:
    """Show all calendar events in a formatted display."""
    data = _call("GET", "/calendar/events:show", "Show calendar events")
    return ShowCalendarEventsResponse(**data).formatted_events


def _pydantic_to_dataclass_parsed_schedule(pydantic_schedule: PydanticParsedSchedule) -> ParsedSchedule:
    """Convert Pydantic ParsedSchedule to dataclass ParsedSchedule."""
    return ParsedSchedule(
        title=pydantic_schedule.title,
        start=datetime.fromisoformat(pydantic_schedule.start),
        end=datetime.fromisoformat(pydantic_schedule.end),
        all_day=pydantic_schedule.all_day,
        location=pydantic_schedule.location,
        source=pydantic_schedule.source,
    )


def _pydantic_to_dataclass_calendar_event(pydantic_event: PydanticCalendarEvent) -> CalendarEvent:
    """Convert Pydantic CalendarEvent to dataclass CalendarEvent."""
    return CalendarEvent(**pydantic_event.model_dump())


# MCP tool wrappers that call the raw functions
@mcp.tool()
def parse_schedule(sentence: str, now: str = "", default_duration_minutes: int = 0) -> dict[str, t.Any]:
    """Parses a Korean schedule sentence into title, start, end and location."""
    return _parse_schedule(sentence, now, default_duration_minutes).to_dict()


@mcp.tool()
def preview_schedule(sentence: str, now: str = "", default_duration_minutes: int = 0) -> str:
    """Shows how a Korean schedule sentence would be registered."""
    return _preview_schedule(sentence, now, default_duration_minutes)


@mcp.tool()
def list_calendars() -> list[CalendarInfo]:
    """Lists the available calendars."""
    return _list_calendars()


@mcp.tool()
def create_calendar_event(
    title: str,
    start: str,
    end: str,
    location: str = "",
    all_day: bool = False,
    calendar_name: str = ""
) -> CalendarEvent:
    """Creates a calendar event with ISO start and end times."""
    return _create_calendar_event(title, start, end, location, all_day, calendar_name)


@mcp.tool()
def create_event_from_sentence(
    sentence: str,
    preferred_calendar_name: str = "",
    now: str = "",
    default_duration_minutes: int = 0
) -> EventCreationResult:
    """Parses a Korean schedule sentence and registers it as a calendar event."""
    return _create_event_from_sentence(sentence, preferred_calendar_name, now, default_duration_minutes)


@mcp.tool()
def list_calendar_events() -> list[CalendarEvent]:
    """Lists all calendar events."""
    return _list_calendar_events()


@mcp.tool()
def show_calendar_events() -> str:
    """Displays all calendar events in a nicely formatted view."""
    return _show_calendar_events()
