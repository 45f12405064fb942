# -*- coding: utf-8 -*-
"""
Field resolver: turns matched tokens into year/month/day and hour/minute.

Date rules are tried in order and the first one that applies wins. The rule
that fired is recorded as the date-expression kind, because the roll-forward
policy of the timestamp builder depends on it.
"""
from __future__ import annotations

import typing as t
from dataclasses import dataclass
from datetime import date

from .dates import add_days, add_months, is_valid_day_of_month, sunday_based_weekday
from .grammar import GrammarMatch
from .models import DateExpressionKind


MIN_YEAR = 1
MAX_YEAR = 9999

# Failure messages
ERROR_INVALID_DATE = "유효하지 않은 날짜입니다. 월/일 조합을 확인해 주세요."
ERROR_YEAR_RANGE = "연도는 1년부터 9999년 사이로 입력해 주세요."
ERROR_MONTH_RANGE = "월은 1부터 12 사이로 입력해 주세요."
ERROR_DAY_RANGE = "일은 1 이상의 값으로 입력해 주세요."
ERROR_HOUR_12_RANGE = "오전/오후 시간은 1시부터 12시 사이로 입력해 주세요."
ERROR_HOUR_24_RANGE = "시간은 0시부터 23시 사이로 입력해 주세요."
ERROR_MINUTE_RANGE = "분은 0부터 59 사이로 입력해 주세요."


@dataclass
class ResolvedDate:
    kind: DateExpressionKind
    year: int
    month: int
    day: int


@dataclass
class ResolvedTime:
    """Time of day in 24-hour form."""
    hour: int
    minute: int


@dataclass
class DateRule:
    """One date-expression family: when it applies and how it resolves."""
    kind: DateExpressionKind
    applies: t.Callable[[GrammarMatch], bool]
    resolve: t.Callable[[GrammarMatch, date], ResolvedDate]


def _resolve_absolute_with_year(match: GrammarMatch, today: date) -> ResolvedDate:
    year = today.year + 1 if match.next_year else match.year
    return ResolvedDate("absolute-with-year", year, match.month, match.day)


def _resolve_absolute_month_day(match: GrammarMatch, today: date) -> ResolvedDate:
    month = match.month if match.month is not None else today.month
    return ResolvedDate("absolute-month-day", today.year, month, match.day)


def _resolve_month_modifier(match: GrammarMatch, today: date) -> ResolvedDate:
    year, month = add_months(today, match.month_modifier)
    return ResolvedDate("month-modifier", year, month, match.day)


def _resolve_weekday(match: GrammarMatch, today: date) -> ResolvedDate:
    # Sunday counts as the last day of the week, so "이번주 일요일" lies ahead.
    weekday = match.weekday or 7
    offset = (match.week_modifier or 0) - sunday_based_weekday(today) + weekday
    target = add_days(today, offset)
    return ResolvedDate("weekday", target.year, target.month, target.day)


def _resolve_day_modifier(match: GrammarMatch, today: date) -> ResolvedDate:
    target = add_days(today, match.day_modifier)
    return ResolvedDate("day-modifier", target.year, target.month, target.day)


DATE_RULES: list[DateRule] = [
    DateRule(
        "absolute-with-year",
        lambda m: m.has_year and m.month is not None and m.day is not None,
        _resolve_absolute_with_year,
    ),
    DateRule(
        "absolute-month-day",
        lambda m: m.day is not None and m.month_modifier is None,
        _resolve_absolute_month_day,
    ),
    DateRule(
        "month-modifier",
        lambda m: m.month_modifier is not None and m.day is not None,
        _resolve_month_modifier,
    ),
    DateRule("weekday", lambda m: m.weekday is not None, _resolve_weekday),
    DateRule("day-modifier", lambda m: m.day_modifier is not None, _resolve_day_modifier),
]


def resolve_date(match: GrammarMatch, today: date) -> t.Optional[ResolvedDate]:
    """Apply the first matching date rule.

    :return: The resolved date, or ``None`` if no rule applies.
    """
    for rule in DATE_RULES:
        if rule.applies(match):
            return rule.resolve(match, today)
    return None


def validate_date(resolved: ResolvedDate) -> t.Optional[str]:
    """Range-check a resolved date.

    :return: A failure message, or ``None`` if the date exists.
    """
    if resolved.kind == "month-modifier":
        # The month is computed, so any bad day is a bad combination.
        if not is_valid_day_of_month(resolved.year, resolved.month, resolved.day):
            return ERROR_INVALID_DATE
        return None
    if not MIN_YEAR <= resolved.year <= MAX_YEAR:
        return ERROR_YEAR_RANGE
    if not 1 <= resolved.month <= 12:
        return ERROR_MONTH_RANGE
    if resolved.day < 1:
        return ERROR_DAY_RANGE
    if not is_valid_day_of_month(resolved.year, resolved.month, resolved.day):
        return ERROR_INVALID_DATE
    return None


def resolve_time(match: GrammarMatch) -> tuple[t.Optional[ResolvedTime], t.Optional[str]]:
    """Range-check the time tokens and convert them to 24-hour form.

    :return: ``(time, None)`` on success, ``(None, None)`` if the sentence has
        no time of day, or ``(None, message)`` on a range violation.
    """
    if not match.has_time:
        return None, None

    hour = match.hour
    minute = match.minute or 0
    if match.period is not None:
        if not 1 <= hour <= 12:
            return None, ERROR_HOUR_12_RANGE
    elif not 0 <= hour <= 23:
        return None, ERROR_HOUR_24_RANGE
    if not 0 <= minute <= 59:
        return None, ERROR_MINUTE_RANGE

    if match.period == "am" and hour == 12:
        hour = 0
    elif match.period == "pm" and hour < 12:
        hour += 12
    return ResolvedTime(hour, minute), None
