# -*- coding: utf-8 -*-
"""
Grammar matcher for Korean schedule sentences.

A sentence starts with one date expression, optionally followed by a time of
day, the particle "에" and a location clause ending in "에서". Whatever is
left after that prefix is the schedule title:

    다음주 화요일 | 오후 3시 반 | 에 | 강남에서 | 팀 미팅
    date          time          particle location title

The prefix is recognized by one combined regular expression anchored at the
start of the sentence. Tokens are mapped to integers here; turning them into
a calendar date is the resolver's job.
"""
from __future__ import annotations

import re
import typing as t
from dataclasses import dataclass

from .models import DEFAULT_TITLE, Period


# Token tables
DAY_MODIFIERS = {"오늘": 0, "내일": 1, "모레": 2}
MONTH_MODIFIERS = {"이달": 0, "이번달": 0, "담달": 1, "다음달": 1}
WEEK_MODIFIERS = {"이번주": 0, "담주": 7, "다음주": 7, "다담주": 14, "다다음주": 14}
WEEKDAYS = ("일", "월", "화", "수", "목", "금", "토")  # Sunday = 0
PERIODS: dict[str, Period] = {
    "새벽": "am",
    "아침": "am",
    "오전": "am",
    "점심": "pm",
    "오후": "pm",
    "저녁": "pm",
    "밤": "pm",
}
NEXT_YEAR = "내년"


def _alternatives(tokens: t.Iterable[str]) -> str:
    # Longest first so that "다다음주" is never cut short by "다음주".
    return "|".join(sorted(tokens, key=len, reverse=True))


_YEAR = rf"(?P<year>{NEXT_YEAR}|[0-9]{{4}}년)"
_MONTH = rf"{_YEAR}? *(?P<month>[0-9]+)월"
_MONTH_MODIFIER = rf"(?P<month_modifier>{_alternatives(MONTH_MODIFIERS)})"
_DAY_OF_MONTH = rf"(?:{_MONTH_MODIFIER}|{_MONTH})? *(?P<day>[0-9]+)일"
_DAY_MODIFIER = rf"(?P<day_modifier>{_alternatives(DAY_MODIFIERS)})"
_WEEKDAY = (
    rf"(?P<week_modifier>{_alternatives(WEEK_MODIFIERS)})? *"
    rf"(?P<weekday>[{''.join(WEEKDAYS)}])(?:요일|욜)"
)
_DATE = rf"(?:{_DAY_OF_MONTH}|{_DAY_MODIFIER}|{_WEEKDAY})"

_TIME = (
    rf"(?: *(?P<period>{_alternatives(PERIODS)})?"
    r" *(?:(?P<hour>[0-9]+)시|(?P<clock_hour>[0-9]+):(?P<clock_minute>[0-9]+))"
    r" *(?:(?P<minute>[0-9]+)분|(?P<half>반))?)?"
)
_LOCATION = r"(?: *(?P<location>.+)에서)?"

SCHEDULE_PATTERN = re.compile(rf"^{_DATE}{_TIME}에?{_LOCATION} *")


@dataclass
class GrammarMatch:
    """Tokens captured from the leading expression of a sentence."""
    consumed: str
    title: str
    # date
    year: t.Optional[int] = None            # explicit "YYYY년"
    next_year: bool = False                 # "내년"
    month: t.Optional[int] = None
    day: t.Optional[int] = None
    month_modifier: t.Optional[int] = None  # months to add
    day_modifier: t.Optional[int] = None    # days to add
    week_modifier: t.Optional[int] = None   # days to add to the base week
    weekday: t.Optional[int] = None         # Sunday = 0
    # time
    period: t.Optional[Period] = None
    hour: t.Optional[int] = None
    minute: t.Optional[int] = None
    # place
    location: t.Optional[str] = None

    @property
    def has_year(self) -> bool:
        return self.next_year or self.year is not None

    @property
    def has_time(self) -> bool:
        return self.hour is not None


MAX_NUMBER_DIGITS = 9
OVERSIZED_NUMBER = 10 ** MAX_NUMBER_DIGITS


def _int(value: t.Optional[str]) -> t.Optional[int]:
    if value is None:
        return None
    # Longer digit runs are outside every date/time range; skip the conversion.
    if len(value.lstrip("0")) > MAX_NUMBER_DIGITS:
        return OVERSIZED_NUMBER
    return int(value)


def match_schedule(sentence: str) -> t.Optional[GrammarMatch]:
    """Match the leading date/time/location expression of ``sentence``.

    :param sentence: Normalized, trimmed sentence.
    :return: A GrammarMatch, or ``None`` if the sentence does not start with a
        supported date expression.
    """
    match = SCHEDULE_PATTERN.match(sentence)
    if not match:
        return None
    groups = match.groupdict()

    year_token = groups["year"]
    weekday_token = groups["weekday"]
    period_token = groups["period"]
    week_modifier_token = groups["week_modifier"]
    month_modifier_token = groups["month_modifier"]
    day_modifier_token = groups["day_modifier"]

    if groups["clock_hour"] is not None:
        hour = _int(groups["clock_hour"])
        minute: t.Optional[int] = _int(groups["clock_minute"])
    elif groups["hour"] is not None:
        hour = _int(groups["hour"])
        if groups["half"]:
            minute = 30
        else:
            minute = _int(groups["minute"]) or 0
    else:
        hour = None
        minute = None

    location = (groups["location"] or "").strip() or None
    title = sentence[match.end():].strip() or DEFAULT_TITLE

    return GrammarMatch(
        consumed=match.group(0),
        title=title,
        year=int(year_token[:-1]) if year_token and year_token != NEXT_YEAR else None,
        next_year=year_token == NEXT_YEAR,
        month=_int(groups["month"]),
        day=_int(groups["day"]),
        month_modifier=MONTH_MODIFIERS[month_modifier_token] if month_modifier_token else None,
        day_modifier=DAY_MODIFIERS[day_modifier_token] if day_modifier_token else None,
        week_modifier=WEEK_MODIFIERS[week_modifier_token] if week_modifier_token else None,
        weekday=WEEKDAYS.index(weekday_token) if weekday_token else None,
        period=PERIODS[period_token] if period_token else None,
        hour=hour,
        minute=minute,
        location=location,
    )
