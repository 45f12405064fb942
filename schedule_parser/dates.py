# -*- coding: utf-8 -*-
"""Date arithmetic helpers for the schedule parser.

All helpers work on local wall-clock values: adding days keeps the time of
day, so an all-day event always spans exactly one calendar day.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def start_of_day(value: datetime) -> datetime:
    """Return midnight of the same day, keeping ``tzinfo``."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def add_days(value: datetime, days: int) -> datetime:
    return value + timedelta(days=days)


def add_months(value: date, months: int) -> tuple[int, int]:
    """Shift ``value`` by whole months.

    :param value: Reference date; only its year and month are used.
    :param months: Number of months to add (may be negative).
    :return: ``(year, month)`` of the target month.
    """
    index = value.year * 12 + (value.month - 1) + months
    return index // 12, index % 12 + 1


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def is_valid_day_of_month(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)


def sunday_based_weekday(value: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (value.weekday() + 1) % 7


def next_year_with_day(value: datetime) -> datetime:
    """Move ``value`` to the next year that has the same month/day.

    Feb 29 skips ahead to the next leap year instead of drifting to Feb 28
    or Mar 1.
    """
    year = value.year + 1
    while not is_valid_day_of_month(year, value.month, value.day):
        year += 1
    return value.replace(year=year)
