"""
Shared Pydantic models for REST API serialization.

This module contains Pydantic equivalents of the dataclass models used throughout
the system, ensuring consistent JSON serialization across the service and the
MCP wrapper.
"""
from __future__ import annotations

import typing as t
from pydantic import BaseModel, Field


class ParsedSchedule(BaseModel):
    """A parsed schedule with ISO 8601 timestamps."""
    title: str
    start: str
    end: str
    all_day: bool = False
    location: t.Optional[str] = None
    source: str = ""


class CalendarInfo(BaseModel):
    """A calendar and whether it accepts new events."""
    name: str
    writable: bool = True


class CalendarEvent(BaseModel):
    """Represents a calendar event with title, dates, and location."""
    title: str
    start: str
    end: str
    all_day: bool = False
    location: str = ""
    calendar_name: str = ""


# Request/Response Models for API endpoints
class ParseScheduleRequest(BaseModel):
    """Request model for parsing a schedule sentence."""
    sentence: str
    now: t.Optional[str] = None                     # ISO datetime; current time if omitted
    default_duration_minutes: t.Optional[int] = Field(default=None, gt=0)


class ParseScheduleResponse(BaseModel):
    """Response model for a parse: either ``value`` or ``error`` is set."""
    ok: bool
    value: t.Optional[ParsedSchedule] = None
    error: t.Optional[str] = None


class CreateCalendarEventRequest(BaseModel):
    """Request model for creating a calendar event with explicit times."""
    title: str
    start: str
    end: str
    location: str = ""
    all_day: bool = False
    calendar_name: str = ""


class CreateScheduleEventRequest(BaseModel):
    """Request model for registering a schedule sentence into a calendar."""
    sentence: str
    preferred_calendar_name: t.Optional[str] = None
    now: t.Optional[str] = None
    default_duration_minutes: t.Optional[int] = Field(default=None, gt=0)


class CreateScheduleEventResponse(BaseModel):
    """Response model for a registration attempt."""
    ok: bool
    event: t.Optional[CalendarEvent] = None
    calendar_name: str = ""
    error: str = ""


class PreviewScheduleResponse(BaseModel):
    """Response model for the Korean preview text."""
    preview: str


class ShowCalendarEventsResponse(BaseModel):
    """Response model for formatted calendar events display."""
    formatted_events: str
