# -*- coding: utf-8 -*-
import os
import json
import asyncio
import typing as t
from dataclasses import asdict
from datetime import datetime

import click
from rich.panel import Panel
from rich.table import Table
from rich.json import JSON
from rich.text import Text

from calendar_server.models import CalendarEvent
from calendar_server.server import format_calendar_events, get_calendar_events
from calendar_server.store import CalendarError, add_schedule
from orchestrator.utils import collect_sentences, console, error_console
from registry import list_tool_schemas
from schedule_parser import ParsedSchedule, ParseOptions, ParseResult, parse_korean_schedule
from schedule_parser.formatting import describe_schedule, format_korean_datetime


DEFAULT_DURATION_MINUTES = int(os.getenv("DEFAULT_DURATION_MINUTES", "60"))
NOW_FORMATS = ["%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M", "%Y-%m-%d"]


def create_preview_table(parsed: ParsedSchedule) -> Table:
    """Create a two-column preview of a parsed schedule."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for label, value in describe_schedule(parsed):
        table.add_row(label, value)
    return table


def create_summary_table(events: list[CalendarEvent]) -> Table:
    """Create a summary table for registered calendar events."""
    table = Table(title="📅 Calendar Summary", show_header=True, header_style="bold magenta")
    table.add_column("Title", style="white")
    table.add_column("Date/Time", style="yellow")
    table.add_column("Location", style="green")
    table.add_column("Calendar", style="cyan")

    for event in events:
        start = format_korean_datetime(datetime.fromisoformat(event.start), event.all_day)
        end = format_korean_datetime(datetime.fromisoformat(event.end), event.all_day)
        table.add_row(event.title, f"{start} → {end}", event.location or "—", event.calendar_name)

    return table


def parse_and_register(
        sentence: str,
        options: ParseOptions,
        create: bool,
        calendar_name: t.Optional[str],
) -> tuple[ParseResult, dict[str, t.Any]]:
    """Parse one sentence and, if asked, register it.

    Returns the parse result and its wire shape, with the created event under
    ``"event"`` or a registration error under ``"error"``.
    """
    result = parse_korean_schedule(sentence, options)
    record = {"sentence": sentence, **result.to_dict()}
    if not result.ok or not create:
        return result, record

    try:
        event = add_schedule(result.value, calendar_name)
    except CalendarError as e:
        return result, {"sentence": sentence, "ok": False, "error": f"캘린더에 일정을 추가하지 못했습니다: {e}"}
    record["event"] = asdict(event)
    return result, record


def display_record(record: dict[str, t.Any], result: ParseResult) -> None:
    """Print one sentence's outcome as a panel."""
    if not record["ok"]:
        console.print(Panel(
            Text(record["error"], style="red"),
            title=f"❌ {record['sentence']}",
            border_style="red",
        ))
        return

    subtitle = None
    if "event" in record:
        subtitle = f"캘린더: {record['event']['calendar_name']}"
    console.print(Panel(
        create_preview_table(result.value),
        title=f"✅ {record['sentence']}",
        subtitle=subtitle,
        border_style="green",
    ))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("sentences", nargs=-1)
@click.option("--file", "-f", "sentences_file", type=click.File("r", encoding="utf-8"),
              help="Read additional sentences from a file, one per line.")
@click.option("--now", type=click.DateTime(formats=NOW_FORMATS), default=None,
              help="Reference time used for relative expressions (default: current time).")
@click.option("--duration", type=click.IntRange(min=1), default=DEFAULT_DURATION_MINUTES, show_default=True,
              help="Event length in minutes when a time of day is given.")
@click.option("--calendar", "calendar_name", default=None, help="Preferred calendar name for --create.")
@click.option("--create", is_flag=True, help="Register parsed schedules into the in-memory calendar.")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Show the calendar table after registering.")
@click.option("--list", "list_tools", is_flag=True, help="List all tool schemas without parsing anything.")
def main(
        sentences: tuple[str, ...],
        sentences_file: t.Optional[t.TextIO],
        now: t.Optional[datetime],
        duration: int,
        calendar_name: t.Optional[str],
        create: bool,
        as_json: bool,
        verbose: bool,
        list_tools: bool,
) -> None:
    """Parse Korean schedule sentences and optionally register them as calendar events.

    SENTENCES: e.g. "다음주 화요일 오후 3시 반에 강남에서 팀 미팅".
    """
    # If list option is specified, display tool schemas and exit
    if list_tools:
        schemas = asyncio.run(list_tool_schemas())
        console.print(JSON(json.dumps(schemas, indent=2, ensure_ascii=False)), soft_wrap=True)
        return

    all_sentences = collect_sentences(sentences, sentences_file)
    # Pin the reference time so every sentence is resolved against the same instant
    options = ParseOptions(now=now or datetime.now(), default_duration_minutes=duration)

    records = []
    for sentence in all_sentences:
        result, record = parse_and_register(sentence, options, create, calendar_name)
        records.append(record)
        if not as_json:
            display_record(record, result)

    failures = sum(1 for record in records if not record["ok"])

    if as_json:
        console.print(JSON(json.dumps(records, indent=2, ensure_ascii=False)), soft_wrap=True)
    else:
        stats_text = Text()
        stats_text.append("Parsed: ", style="white")
        stats_text.append(f"{len(records) - failures}", style="bold green")
        stats_text.append("  Failed: ", style="white")
        stats_text.append(f"{failures}", style="bold red" if failures else "bold green")
        console.print(Panel(stats_text, title="📊 Statistics", border_style="blue"))

        if create and get_calendar_events():
            console.print(create_summary_table(get_calendar_events()))
            if verbose:
                console.print(format_calendar_events())

    if failures:
        error_console.print(f"[red]Error:[/red] {failures} sentence(s) could not be parsed or registered.")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
