"""
Data models for Korean schedule sentence parsing.

This module contains the dataclasses returned by the parser and the options
that steer it. Every value here is transient: it is built inside one call to
``parse_korean_schedule`` and handed to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import typing as t


DateExpressionKind = t.Literal[
    "absolute-with-year",
    "absolute-month-day",
    "month-modifier",
    "weekday",
    "day-modifier",
]
Period = t.Literal["am", "pm"]

DEFAULT_DURATION_MINUTES = 60
DEFAULT_TITLE = "새 일정"


@dataclass
class ParsedSchedule:
    """
    A schedule extracted from one sentence, e.g.:
    - "다음주 화요일 오후 3시 반에 강남에서 팀 미팅"
    """
    title: str
    start: datetime
    end: datetime
    all_day: bool
    location: t.Optional[str]
    source: str     # NFC-normalized, trimmed input

    def to_dict(self) -> dict[str, t.Any]:
        """Serialize with ISO 8601 timestamps."""
        return {
            "title": self.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "all_day": self.all_day,
            "location": self.location,
            "source": self.source,
        }


@dataclass
class ParseOptions:
    """Options for a single parse call."""
    now: t.Optional[datetime] = None
    default_duration_minutes: t.Optional[int] = None

    @classmethod
    def from_wire(
            cls,
            now: t.Optional[str] = None,
            default_duration_minutes: t.Optional[int] = None,
    ) -> ParseOptions:
        """Build options from the string/int values used by tools and requests.

        :param now: ISO 8601 reference time; empty or ``None`` means the current time.
        :param default_duration_minutes: Event length in minutes; ``None`` or 0 means the default.
        :return: A ParseOptions object.
        :raises ValueError: If ``now`` is not a valid ISO 8601 timestamp.
        """
        return cls(
            now=datetime.fromisoformat(now) if now else None,
            default_duration_minutes=default_duration_minutes or None,
        )


@dataclass
class ParseSuccess:
    value: ParsedSchedule
    ok: t.Literal[True] = True

    def to_dict(self) -> dict[str, t.Any]:
        return {"ok": True, "value": self.value.to_dict()}


@dataclass
class ParseFailure:
    error: str
    ok: t.Literal[False] = False

    def to_dict(self) -> dict[str, t.Any]:
        return {"ok": False, "error": self.error}


ParseResult = t.Union[ParseSuccess, ParseFailure]
