# -*- coding: utf-8 -*-
from mcp_gateway.server import mcp as gateway_mcp, TOOLS_BY_SERVICE

# Map tool names to their originating services
TOOL_SERVICE_MAPPING = {
    tool_name: service_name
    for service_name, tools in TOOLS_BY_SERVICE.items()
    for tool_name in tools
}


async def list_tool_schemas() -> list[dict]:
    """Collect and return JSON schemas of all available tools from the MCP gateway."""
    schemas = []

    all_tools = await gateway_mcp.get_tools()

    for tool_key, tool in all_tools.items():
        schemas.append({
            "server": TOOL_SERVICE_MAPPING.get(tool_key, "unknown_server"),
            "name": tool_key,
            "title": tool.title or tool_key,
            "description": tool.description or "",
            "inputSchema": tool.parameters or {},
            "outputSchema": tool.output_schema or {},
        })

    return schemas
