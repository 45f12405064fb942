# -*- coding: utf-8 -*-
"""
Korean schedule sentence parser.

    >>> result = parse_korean_schedule("내일 오후 3시에 회의", ParseOptions(now=datetime(2026, 2, 17, 9)))
    >>> result.ok, result.value.title, result.value.start
    (True, '회의', datetime.datetime(2026, 2, 18, 15, 0))

Malformed sentences never raise: they come back as a ParseFailure carrying a
message for the user. Malformed options are programming errors and raise.
"""
from __future__ import annotations

import typing as t
import unicodedata
from datetime import datetime, timedelta

from .dates import add_days, next_year_with_day, start_of_day
from .grammar import match_schedule
from .models import (DEFAULT_DURATION_MINUTES, DateExpressionKind, ParsedSchedule, ParseFailure, ParseOptions,
                     ParseResult, ParseSuccess)
from .resolver import ResolvedDate, ResolvedTime, resolve_date, resolve_time, validate_date


ERROR_EMPTY = "일정 문장이 비어 있습니다."
ERROR_NO_MATCH = "날짜/시간 패턴을 인식하지 못했습니다. 예) 다음주 화요일 오후 3시에 회의"
ERROR_UNRESOLVED = "날짜를 계산하지 못했습니다. 숫자 날짜(예: 3월 2일) 또는 요일 표현을 확인해 주세요."
ERROR_OUT_OF_RANGE = "표현할 수 있는 날짜 범위를 벗어났습니다."


def _check_options(options: ParseOptions) -> tuple[datetime, int]:
    now = options.now if options.now is not None else datetime.now()
    if not isinstance(now, datetime):
        raise TypeError(f"now must be a datetime, got {type(now).__name__}")

    duration = options.default_duration_minutes
    if duration is None:
        duration = DEFAULT_DURATION_MINUTES
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise TypeError(f"default_duration_minutes must be an int, got {type(duration).__name__}")
    if duration <= 0:
        raise ValueError(f"default_duration_minutes must be positive, got {duration}")
    return now, duration


def _build_span(
        resolved: ResolvedDate,
        time: t.Optional[ResolvedTime],
        duration: int,
        now: datetime,
) -> tuple[datetime, datetime]:
    if time is not None:
        start = datetime(resolved.year, resolved.month, resolved.day, time.hour, time.minute,
                         tzinfo=now.tzinfo)
    else:
        start = datetime(resolved.year, resolved.month, resolved.day, tzinfo=now.tzinfo)
    return start, _end_for(start, time is not None, duration)


def _end_for(start: datetime, timed: bool, duration: int) -> datetime:
    if timed:
        return start + timedelta(minutes=duration)
    return add_days(start, 1)


def roll_forward(
        kind: DateExpressionKind,
        start: datetime,
        end: datetime,
        reference: datetime,
) -> tuple[datetime, datetime]:
    """Move a span that starts before ``reference`` into the future.

    - absolute-month-day: one year at a time until no longer in the past
    - absolute-with-year: an explicit year is taken literally
    - everything else: one week
    """
    if start >= reference or kind == "absolute-with-year":
        return start, end
    length = end - start
    if kind == "absolute-month-day":
        while start < reference:
            start = next_year_with_day(start)
        return start, start + length
    return add_days(start, 7), add_days(end, 7)


def parse_korean_schedule(sentence: str, options: t.Optional[ParseOptions] = None) -> ParseResult:
    """Parse a Korean schedule sentence into a ParsedSchedule.

    :param sentence: Free text such as "다음주 화요일 오후 3시 반에 강남에서 팀 미팅".
    :param options: Reference time and default event length.
    :return: ParseSuccess with the schedule, or ParseFailure with a message.
    :raises TypeError, ValueError: If ``options`` are malformed.
    """
    now, duration = _check_options(options or ParseOptions())

    if not sentence or not sentence.strip():
        return ParseFailure(ERROR_EMPTY)

    source = unicodedata.normalize("NFC", sentence).strip()
    match = match_schedule(source)
    if match is None:
        return ParseFailure(ERROR_NO_MATCH)

    today = start_of_day(now)
    try:
        resolved = resolve_date(match, today)
    except OverflowError:
        return ParseFailure(ERROR_OUT_OF_RANGE)
    if resolved is not None:
        error = validate_date(resolved)
        if error:
            return ParseFailure(error)

    time, error = resolve_time(match)
    if error:
        return ParseFailure(error)

    if resolved is None:
        return ParseFailure(ERROR_UNRESOLVED)

    try:
        start, end = _build_span(resolved, time, duration, now)
        start, end = roll_forward(resolved.kind, start, end, now if time is not None else today)
    except (OverflowError, ValueError):
        return ParseFailure(ERROR_OUT_OF_RANGE)

    return ParseSuccess(ParsedSchedule(
        title=match.title,
        start=start,
        end=end,
        all_day=time is None,
        location=match.location,
        source=source,
    ))


parse = parse_korean_schedule
