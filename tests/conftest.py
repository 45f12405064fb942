"""
Pytest configuration and shared fixtures.
"""
from datetime import datetime

import pytest

from calendar_server import store
from schedule_parser import ParseOptions


DEFAULT_CALENDARS = "캘린더,업무,대한민국 공휴일!"


@pytest.fixture
def base_now() -> datetime:
    """Tuesday, 2026-02-17 09:00 local time."""
    return datetime(2026, 2, 17, 9, 0)


@pytest.fixture
def options(base_now: datetime) -> ParseOptions:
    """Parse options pinned to ``base_now``."""
    return ParseOptions(now=base_now)


@pytest.fixture(autouse=True)
def reset_calendar_store():
    """Start every test with the default calendars and no events."""
    store.reset(DEFAULT_CALENDARS)
    yield
    store.reset(DEFAULT_CALENDARS)
