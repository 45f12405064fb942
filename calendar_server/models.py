"""
Data models for the in-memory calendar collaborator.

This module contains the dataclasses used to represent calendars and the
events registered into them from parsed schedules.
"""
from __future__ import annotations

from dataclasses import dataclass
import typing as t


@dataclass
class CalendarInfo:
    """A calendar that events can be registered into."""
    name: str
    writable: bool = True


@dataclass
class CalendarEvent:
    """Represents a calendar event with title, dates, and location."""
    title: str
    start: str          # ISO datetime
    end: str            # ISO datetime
    all_day: bool = False
    location: str = ""
    calendar_name: str = ""


@dataclass
class EventCreationResult:
    """Confirmation (or error) returned after registering a sentence."""
    ok: bool
    event: t.Optional[CalendarEvent] = None
    calendar_name: str = ""
    error: str = ""
