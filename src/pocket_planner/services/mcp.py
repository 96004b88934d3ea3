from __future__ import annotations

import logging

from fastmcp import FastMCP

from ..api import get_api_functions

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Pocket Planner exposes a personal calendar of events and tasks. Month arguments are "
    "0-indexed (0 is January) and days are ISO dates. Use the calendar tools to read month "
    "grids, day details, and month lists, and to mark single occurrences done."
)


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="pocket-planner", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.tool(
            api_function.func,
            name=api_function.name,
            description=api_function.description,
            tags=set(api_function.tags),
        )
    return server


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    build_mcp_server().run(transport="streamable-http", host=host, port=port)
