# -*- coding: utf-8 -*-
import typing as t
from datetime import datetime

from fastmcp import FastMCP

from calendar_server.models import CalendarEvent, CalendarInfo, EventCreationResult
from calendar_server.store import CalendarError, add_event, add_schedule, calendar_events, calendars
from schedule_parser import ParseOptions, parse_korean_schedule
from schedule_parser.formatting import format_korean_datetime

mcp = FastMCP("CalendarServer")


def get_calendars() -> list[CalendarInfo]:
    """Internal function to get calendars as dataclass objects.

    :return: A list of CalendarInfo objects.
    """
    return calendars


def get_calendar_events() -> list[CalendarEvent]:
    """Internal function to get calendar events as dataclass objects.

    :return: A list of CalendarEvent objects.
    """
    return calendar_events


def create_event(
        title: str,
        start: str,
        end: str,
        location: str = "",
        all_day: bool = False,
        calendar_name: str = ""
) -> CalendarEvent:
    """Internal function to store an event whose times are already known.

    :raises CalendarError: If no calendar is writable.
    """
    event = CalendarEvent(
        title=title,
        start=start,
        end=end,
        all_day=all_day,
        location=location,
        calendar_name=calendar_name
    )
    return add_event(event)


def create_event_from_text(
        sentence: str,
        preferred_calendar_name: str = "",
        now: str = "",
        default_duration_minutes: int = 0
) -> EventCreationResult:
    """Internal function that parses a sentence and registers the schedule.

    Parse failures and calendar failures are reported in the result instead of
    being raised.

    :param sentence: Korean schedule sentence.
    :param preferred_calendar_name: Calendar name hint (optional).
    :param now: Reference time in ISO format (optional).
    :param default_duration_minutes: Event length when a time is given (optional).
    :return: An EventCreationResult.
    """
    result = parse_korean_schedule(sentence, ParseOptions.from_wire(now, default_duration_minutes))
    if not result.ok:
        return EventCreationResult(ok=False, error=result.error)
    try:
        event = add_schedule(result.value, preferred_calendar_name or None)
    except CalendarError as e:
        return EventCreationResult(ok=False, error=f"캘린더에 일정을 추가하지 못했습니다: {e}")
    return EventCreationResult(ok=True, event=event, calendar_name=event.calendar_name)


def _format_datetime(iso_string: str, all_day: bool) -> str:
    """Formats an ISO datetime string for the event table.

    If parsing fails, returns the original string.

    :param iso_string: ISO 8601 formatted datetime string.
    :param all_day: Whether to leave out the time of day.
    :return: e.g. '2026. 02. 17. (화) 15:00'.
    """
    try:
        return format_korean_datetime(datetime.fromisoformat(iso_string), all_day)
    except (ValueError, TypeError):
        return iso_string


def format_calendar_events() -> str:
    """Internal function to format calendar events as a clean table.

    :return: Formatted table string of all calendar events.
    """
    if not calendar_events:
        return "📅 등록된 일정이 없습니다."

    lines = []
    lines.append("📅 CALENDAR EVENTS")
    lines.append("=" * 110)
    lines.append(f"{'#':<4} {'Title':<28} {'Start':<22} {'End':<22} {'Location':<16} {'Calendar':<12}")
    lines.append("-" * 110)

    for idx, event in enumerate(calendar_events, 1):
        title = event.title[:27] if len(event.title) > 27 else event.title
        location = event.location[:15] if event.location and len(event.location) > 15 else (event.location or "—")
        lines.append(
            f"{idx:<4} {title:<28} {_format_datetime(event.start, event.all_day):<22} "
            f"{_format_datetime(event.end, event.all_day):<22} {location:<16} {event.calendar_name:<12}"
        )

    lines.append("=" * 110)
    lines.append(f"Total: {len(calendar_events)} event(s)")
    return "\n".join(lines)


@mcp.tool()
def list_calendars() -> list[CalendarInfo]:
    """Lists the available calendars and whether they accept new events.

    :return: A list of calendars.
    """
    return get_calendars()


@mcp.tool()
def create_calendar_event(
        title: str,
        start: str,
        end: str,
        location: str = "",
        all_day: bool = False,
        calendar_name: str = ""
) -> CalendarEvent:
    """Creates a calendar event.

    :param title: Title of the event.
    :param start: Start time in ISO format.
    :param end: End time in ISO format.
    :param location: Location of the event (optional).
    :param all_day: Whether the event spans whole days (optional).
    :param calendar_name: Preferred calendar (optional, defaults to the first writable one).
    :return: A CalendarEvent object.
    """
    return create_event(title, start, end, location, all_day, calendar_name)


@mcp.tool()
def create_event_from_sentence(
        sentence: str,
        preferred_calendar_name: str = "",
        now: str = "",
        default_duration_minutes: int = 0
) -> EventCreationResult:
    """Parses a Korean schedule sentence and registers it as a calendar event.

    :param sentence: e.g. "다음주 화요일 오후 3시 반에 강남에서 팀 미팅".
    :param preferred_calendar_name: Calendar name (optional, falls back to the first writable one).
    :param now: Reference time in ISO format (optional).
    :param default_duration_minutes: Event length when a time is given (optional, defaults to 60).
    :return: The created event and calendar name, or an error message.
    """
    return create_event_from_text(sentence, preferred_calendar_name, now, default_duration_minutes)


@mcp.tool()
def list_calendar_events() -> list[CalendarEvent]:
    """Lists all calendar events.

    :return: A list of calendar events.
    """
    return get_calendar_events()


@mcp.tool()
def show_calendar_events() -> str:
    """Displays all calendar events as a formatted table.

    :return: Formatted table of all calendar events, or a message if no events exist.
    """
    return format_calendar_events()


if __name__ == "__main__":
    mcp.run()
