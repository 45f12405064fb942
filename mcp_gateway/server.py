"""
MCP Gateway Server - Unified entry point for the schedule tools.

This server imports the MCP wrapper module and provides a single interface
for the schedule parsing and calendar tools. It acts as a gateway that routes
tool calls to the schedule service via HTTP.
"""
from __future__ import annotations

import typing as t

from fastmcp import FastMCP

# Import the raw functions from the MCP wrapper (not the decorated versions)
# This allows us to register them with our own unified FastMCP instance
from mcp_wrappers.schedule.mcp_service import (
    _parse_schedule, _preview_schedule,
    _list_calendars, _create_calendar_event, _create_event_from_sentence,
    _list_calendar_events, _show_calendar_events,
    SCHEDULE_SERVICE_URL
)

# Import models for type hints
from calendar_server.models import CalendarEvent, CalendarInfo, EventCreationResult

# Create the unified MCP server
mcp = FastMCP("ScheduleGateway")

# Tool names grouped by the service that implements them
TOOLS_BY_SERVICE: dict[str, dict[str, str]] = {
    "schedule_parser": {
        "parse_schedule": "Parse a Korean schedule sentence into title, start, end and location",
        "preview_schedule": "Show the Korean preview of a parsed sentence",
    },
    "calendar_server": {
        "list_calendars": "List calendars and whether they accept new events",
        "create_calendar_event": "Create a calendar event with explicit ISO start and end times",
        "create_event_from_sentence": "Parse a sentence and register it into a calendar",
        "list_calendar_events": "List all calendar events",
        "show_calendar_events": "Display calendar events as a table",
    },
    "gateway": {
        "get_gateway_info": "Get gateway and service status information",
        "list_available_tools": "List all available tools by service",
    },
}


def get_service_status() -> dict[str, str]:
    """
    Get the status of the schedule service.

    This function reports the configured URL to help with debugging and
    service discovery.
    """
    return {
        "schedule_service": SCHEDULE_SERVICE_URL,
        "gateway_status": "running"
    }


# Schedule parser tools
@mcp.tool()
def parse_schedule(sentence: str, now: str = "", default_duration_minutes: int = 0) -> dict[str, t.Any]:
    """Parses a Korean schedule sentence into title, start, end and location."""
    return _parse_schedule(sentence, now, default_duration_minutes).to_dict()


@mcp.tool()
def preview_schedule(sentence: str, now: str = "", default_duration_minutes: int = 0) -> str:
    """Shows how a Korean schedule sentence would be registered."""
    return _preview_schedule(sentence, now, default_duration_minutes)


# Calendar tools
@mcp.tool()
def list_calendars() -> list[CalendarInfo]:
    """Lists the available calendars."""
    return _list_calendars()


@mcp.tool()
def create_calendar_event(
        title: str,
        start: str,
        end: str,
        location: str = "",
        all_day: bool = False,
        calendar_name: str = ""
) -> CalendarEvent:
    """Creates a calendar event with ISO start and end times."""
    return _create_calendar_event(title, start, end, location, all_day, calendar_name)


@mcp.tool()
def create_event_from_sentence(
        sentence: str,
        preferred_calendar_name: str = "",
        now: str = "",
        default_duration_minutes: int = 0
) -> EventCreationResult:
    """Parses a Korean schedule sentence and registers it as a calendar event."""
    return _create_event_from_sentence(sentence, preferred_calendar_name, now, default_duration_minutes)


@mcp.tool()
def list_calendar_events() -> list[CalendarEvent]:
    """Lists all calendar events."""
    return _list_calendar_events()


@mcp.tool()
def show_calendar_events() -> str:
    """Displays all calendar events in a nicely formatted view."""
    return _show_calendar_events()


@mcp.tool()
def get_gateway_info() -> dict[str, str]:
    """
    Get information about the MCP Gateway and the connected service.
    """
    return get_service_status()


@mcp.tool()
def list_available_tools() -> dict[str, list[str]]:
    """
    List all available tools organized by service.
    """
    return {
        service: [f"{name} - {description}" for name, description in tools.items()]
        for service, tools in TOOLS_BY_SERVICE.items()
    }


if __name__ == "__main__":
    print("🌟 Starting Schedule MCP Gateway")
    print(f"📋 Schedule service: {SCHEDULE_SERVICE_URL}")
    print("\nTools available:")
    for service_name, tools in TOOLS_BY_SERVICE.items():
        print(f"\n📦 {service_name}:")
        for name, description in tools.items():
            print(f"    - {name} - {description}")

    print(f"\n🌐 Starting MCP server...")
    mcp.run()
