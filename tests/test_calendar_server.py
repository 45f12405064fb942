"""Tests for the in-memory calendar and the calendar server functions."""
import pytest

from calendar_server import store
from calendar_server.models import CalendarInfo
from calendar_server.server import (create_event, create_event_from_text, format_calendar_events, get_calendar_events,
                                    get_calendars)
from calendar_server.store import CalendarError, load_calendars, resolve_calendar


NOW = "2026-02-17T09:00:00"


def test_load_calendars() -> None:
    """Test parsing of the calendar list, including read-only markers."""
    assert load_calendars(" 캘린더 , 업무,, 대한민국 공휴일! ") == [
        CalendarInfo(name="캘린더"),
        CalendarInfo(name="업무"),
        CalendarInfo(name="대한민국 공휴일", writable=False),
    ]
    assert load_calendars("") == []


def test_resolve_preferred_calendar() -> None:
    """Test that a writable preferred calendar wins."""
    assert resolve_calendar("업무").name == "업무"


@pytest.mark.parametrize("preferred", [None, "", "없는 캘린더", "대한민국 공휴일"])
def test_resolve_falls_back_to_first_writable(preferred) -> None:
    """Test fallback for missing, unknown and read-only names."""
    assert resolve_calendar(preferred).name == "캘린더"


def test_no_writable_calendar() -> None:
    """Test the error when every calendar is read-only."""
    store.reset("대한민국 공휴일!")

    with pytest.raises(CalendarError, match="No writable calendar found"):
        resolve_calendar("대한민국 공휴일")


def test_create_event_from_text() -> None:
    """Test parsing and registering in one call."""
    result = create_event_from_text("다음주 화요일 오후 3시 반에 강남에서 팀 미팅", "업무", NOW)

    assert result.ok
    assert result.calendar_name == "업무"
    assert result.event.title == "팀 미팅"
    assert result.event.start == "2026-02-24T15:30:00"
    assert result.event.end == "2026-02-24T16:30:00"
    assert result.event.location == "강남"
    assert result.event.all_day is False
    assert get_calendar_events() == [result.event]


def test_create_all_day_event_with_duration() -> None:
    """Test that the duration only affects timed events."""
    timed = create_event_from_text("내일 오전 10시 회의", now=NOW, default_duration_minutes=90)
    all_day = create_event_from_text("모레 워크숍", now=NOW, default_duration_minutes=90)

    assert timed.event.end == "2026-02-18T11:30:00"
    assert all_day.event.start == "2026-02-19T00:00:00"
    assert all_day.event.end == "2026-02-20T00:00:00"
    assert all_day.event.location == ""


def test_create_event_parse_failure() -> None:
    """Test that a parse failure is reported and nothing is stored."""
    result = create_event_from_text("회의 잡아줘", now=NOW)

    assert not result.ok
    assert result.event is None
    assert result.error
    assert get_calendar_events() == []


def test_create_event_without_writable_calendar() -> None:
    """Test that a calendar failure is reported, not raised."""
    store.reset("대한민국 공휴일!")

    result = create_event_from_text("내일 회의", now=NOW)

    assert not result.ok
    assert result.error == "캘린더에 일정을 추가하지 못했습니다: No writable calendar found"


def test_get_calendars() -> None:
    """Test the configured calendars."""
    assert [calendar.name for calendar in get_calendars()] == ["캘린더", "업무", "대한민국 공휴일"]


def test_format_calendar_events() -> None:
    """Test the event table."""
    assert format_calendar_events() == "📅 등록된 일정이 없습니다."

    create_event_from_text("내일 오후 3시에 강남에서 회의", now=NOW)
    create_event_from_text("모레 휴가", now=NOW)
    table = format_calendar_events()

    assert table.startswith("📅 CALENDAR EVENTS")
    assert "2026. 02. 18. (수) 15:00" in table
    assert "2026. 02. 19. (목)" in table
    assert "강남" in table
    assert table.endswith("Total: 2 event(s)")


def test_create_event_with_explicit_times() -> None:
    """Test storing an event whose times are already known."""
    event = create_event("분기 리뷰", "2026-03-02T13:00:00", "2026-03-02T14:00:00", "본사", False, "업무")

    assert event.calendar_name == "업무"
    assert event.location == "본사"
    assert get_calendar_events() == [event]


def test_create_event_falls_back_from_read_only_calendar() -> None:
    """Test that a read-only calendar name falls back to the first writable one."""
    event = create_event("휴가", "2026-03-02T00:00:00", "2026-03-03T00:00:00", all_day=True, calendar_name="대한민국 공휴일")

    assert event.calendar_name == "캘린더"
    assert event.all_day is True


def test_create_event_without_writable_calendar_raises() -> None:
    """Test that direct creation propagates the calendar error."""
    store.reset("대한민국 공휴일!")

    with pytest.raises(CalendarError):
        create_event("휴가", "2026-03-02T00:00:00", "2026-03-03T00:00:00")
