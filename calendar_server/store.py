# -*- coding: utf-8 -*-
import os
import typing as t

from schedule_parser import ParsedSchedule

from .models import CalendarEvent, CalendarInfo


class CalendarError(RuntimeError):
    """Raised when an event cannot be registered."""


# Comma-separated calendar names; a trailing "!" marks a read-only calendar
CALENDAR_NAMES = os.getenv("CALENDAR_NAMES", "캘린더,업무,대한민국 공휴일!")


def load_calendars(spec: str) -> list[CalendarInfo]:
    """Parses a CALENDAR_NAMES value into calendars.

    :param spec: e.g. "캘린더,업무,대한민국 공휴일!".
    :return: A list of CalendarInfo objects, in order.
    """
    result = []
    for raw in spec.split(","):
        name = raw.strip()
        if not name:
            continue
        if name.endswith("!"):
            result.append(CalendarInfo(name=name[:-1].strip(), writable=False))
        else:
            result.append(CalendarInfo(name=name))
    return result


# In-memory storage for calendars and events
# In a real application, this would be backed by the OS calendar
calendars: list[CalendarInfo] = load_calendars(CALENDAR_NAMES)
calendar_events: list[CalendarEvent] = []


def reset(calendar_spec: t.Optional[str] = None) -> None:
    """Clears all events and reloads the calendars.

    :param calendar_spec: Optional CALENDAR_NAMES-style value to load instead of the configured one.
    """
    calendars[:] = load_calendars(calendar_spec if calendar_spec is not None else CALENDAR_NAMES)
    calendar_events.clear()


def resolve_calendar(preferred_name: t.Optional[str] = None) -> CalendarInfo:
    """Picks the calendar an event goes into.

    The writable calendar named ``preferred_name`` wins; otherwise the first
    writable calendar is used.

    :param preferred_name: Calendar name hint (optional).
    :return: The target CalendarInfo.
    :raises CalendarError: If no calendar is writable.
    """
    writable = [calendar for calendar in calendars if calendar.writable]
    if not writable:
        raise CalendarError("No writable calendar found")
    if preferred_name:
        for calendar in writable:
            if calendar.name == preferred_name.strip():
                return calendar
    return writable[0]


def add_event(event: CalendarEvent) -> CalendarEvent:
    """Adds an event to the calendar named by ``event.calendar_name``.

    :param event: The event; an empty calendar name means the default calendar.
    :return: The stored event.
    """
    event.calendar_name = resolve_calendar(event.calendar_name).name
    calendar_events.append(event)
    return event


def add_schedule(parsed: ParsedSchedule, preferred_calendar_name: t.Optional[str] = None) -> CalendarEvent:
    """Registers a parsed schedule.

    :param parsed: The parsed schedule.
    :param preferred_calendar_name: Calendar name hint (optional).
    :return: The stored CalendarEvent, carrying the calendar it went into.
    """
    calendar = resolve_calendar(preferred_calendar_name)
    event = CalendarEvent(
        title=parsed.title,
        start=parsed.start.isoformat(),
        end=parsed.end.isoformat(),
        all_day=parsed.all_day,
        location=parsed.location or "",
        calendar_name=calendar.name,
    )
    calendar_events.append(event)
    return event
