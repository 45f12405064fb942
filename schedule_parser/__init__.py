# -*- coding: utf-8 -*-
from .models import ParsedSchedule, ParseFailure, ParseOptions, ParseResult, ParseSuccess
from .parser import parse, parse_korean_schedule

__all__ = [
    "ParsedSchedule",
    "ParseFailure",
    "ParseOptions",
    "ParseResult",
    "ParseSuccess",
    "parse",
    "parse_korean_schedule",
]
