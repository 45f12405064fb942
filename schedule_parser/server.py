# -*- coding: utf-8 -*-
import typing as t

from fastmcp import FastMCP

from .formatting import describe_result, describe_schedule
from .models import ParseOptions
from .parser import parse_korean_schedule

mcp = FastMCP("ScheduleParserServer")


def _parse_schedule(
        sentence: str,
        now: str = "",
        default_duration_minutes: int = 0
) -> dict[str, t.Any]:
    """Parse a sentence and return the result in its wire shape."""
    options = ParseOptions.from_wire(now, default_duration_minutes)
    return parse_korean_schedule(sentence, options).to_dict()


def _preview_schedule(sentence: str, now: str = "", default_duration_minutes: int = 0) -> str:
    """Render the preview shown before a schedule is registered."""
    result = parse_korean_schedule(sentence, ParseOptions.from_wire(now, default_duration_minutes))
    lines = [f"파싱 상태: {describe_result(result)}"]
    if result.ok:
        lines.extend(f"{label}: {value}" for label, value in describe_schedule(result.value))
    return "\n".join(lines)


@mcp.tool()
def parse_schedule(
        sentence: str,
        now: str = "",
        default_duration_minutes: int = 0
) -> dict[str, t.Any]:
    """Parses a Korean schedule sentence into title, start, end and location.

    Supported forms include "내일 오후 3시에 회의", "다음주 화요일 오후 3시 반에 강남에서 팀 미팅",
    "2026년 3월 2일 오후 1시에 분기 리뷰" and "오늘 휴가" (all-day).

    :param sentence: The sentence to parse.
    :param now: Reference time in ISO format (optional, defaults to the current time).
    :param default_duration_minutes: Event length when a time is given (optional, defaults to 60).
    :return: {"ok": true, "value": {...}} or {"ok": false, "error": "..."}.
    """
    return _parse_schedule(sentence, now, default_duration_minutes)


@mcp.tool()
def preview_schedule(sentence: str, now: str = "", default_duration_minutes: int = 0) -> str:
    """Shows how a Korean schedule sentence would be registered.

    :param sentence: The sentence to parse.
    :param now: Reference time in ISO format (optional).
    :param default_duration_minutes: Event length when a time is given (optional).
    :return: A multi-line preview, or the parse error.
    """
    return _preview_schedule(sentence, now, default_duration_minutes)


if __name__ == "__main__":
    mcp.run()
