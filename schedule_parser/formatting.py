# -*- coding: utf-8 -*-
"""Korean preview text for parsed schedules."""
from __future__ import annotations

from datetime import datetime

from .models import ParsedSchedule, ParseResult

KOREAN_WEEKDAYS = "월화수목금토일"  # datetime.weekday() order, Monday first


def format_korean_datetime(value: datetime, all_day: bool) -> str:
    """Format as '2026. 02. 17. (화)' or, with a time, '2026. 02. 17. (화) 15:00'."""
    text = f"{value.year:04d}. {value:%m. %d.} ({KOREAN_WEEKDAYS[value.weekday()]})"
    if all_day:
        return text
    return f"{text} {value:%H:%M}"


def describe_schedule(parsed: ParsedSchedule) -> list[tuple[str, str]]:
    """Label/value rows for a preview of ``parsed``."""
    return [
        ("제목", parsed.title),
        ("시작", format_korean_datetime(parsed.start, parsed.all_day)),
        ("종료", format_korean_datetime(parsed.end, parsed.all_day)),
        ("장소", parsed.location or "(없음)"),
        ("유형", "종일" if parsed.all_day else "시간 지정"),
    ]


def describe_result(result: ParseResult) -> str:
    if result.ok:
        return "등록 가능"
    return f"오류: {result.error}"
