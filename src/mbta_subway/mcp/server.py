"""MCP Server for MBTA subway info.

This module implements a Model Context Protocol (MCP) server that exposes
subway route listing, network statistics and trip planning.
"""

import asyncio
import json
import logging
from typing import Any

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import (
    TextContent,
    Tool,
)

from .. import __version__
from ..core.exceptions import TransitInfoError
from ..core.service import SubwayService
from ..info import format_aggregate, format_error, format_route_names, format_trip

logger = logging.getLogger(__name__)


class SubwayMCPServer:
    """MCP Server for MBTA subway info functionality."""

    def __init__(self, service: SubwayService | None = None) -> None:
        """Initialize the Subway MCP Server."""
        self.server = Server("mbta-subway-info")
        self.service = service or SubwayService.from_settings()

        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List available tools."""
            return self._tools()

        @self.server.call_tool()
        async def handle_call_tool(
            name: str, arguments: dict[str, Any]
        ) -> list[TextContent]:
            """Handle tool calls."""
            return await self._call_tool(name, arguments)

    def _tools(self) -> list[Tool]:
        return [
            Tool(
                name="list_subway_routes",
                description="List the long names of all MBTA subway routes (light rail and heavy rail)",
                inputSchema={"type": "object", "properties": {}},
            ),
            Tool(
                name="aggregate_info",
                description=(
                    "Get the subway routes with the most and fewest stops, and the "
                    "stops that connect two or more routes"
                ),
                inputSchema={"type": "object", "properties": {}},
            ),
            Tool(
                name="plan_trip",
                description="Find the lines to ride between two subway stops with the fewest line changes",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "start": {
                            "type": "string",
                            "description": "Starting stop name (case-insensitive) or stop ID such as 'place-rugg'",
                        },
                        "end": {
                            "type": "string",
                            "description": "Ending stop name (case-insensitive) or stop ID such as 'place-dwnxg'",
                        },
                    },
                    "required": ["start", "end"],
                },
            ),
        ]

    async def _call_tool(
        self, name: str, arguments: dict[str, Any]
    ) -> list[TextContent]:
        try:
            if name == "list_subway_routes":
                return await self._list_subway_routes(arguments)
            elif name == "aggregate_info":
                return await self._aggregate_info(arguments)
            elif name == "plan_trip":
                return await self._plan_trip(arguments)
            else:
                return [TextContent(type="text", text=f"Unknown tool: {name}")]

        except TransitInfoError as e:
            logger.error(f"Error in tool {name}: {e}")
            return [TextContent(type="text", text=format_error(e))]

    async def _list_subway_routes(
        self, arguments: dict[str, Any]
    ) -> list[TextContent]:
        """List subway route names."""
        routes = self.service.subway_routes()
        routes_data = [route.model_dump(mode="json") for route in routes]

        return [
            TextContent(type="text", text=format_route_names(routes)),
            _json_content(routes_data),
        ]

    async def _aggregate_info(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Most/fewest stops and transfer stations."""
        report = self.service.aggregate()

        return [
            TextContent(type="text", text=format_aggregate(report)),
            _json_content(report.model_dump(mode="json")),
        ]

    async def _plan_trip(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Find a minimum-transfer trip."""
        start = arguments["start"]
        end = arguments["end"]

        trip = self.service.plan_trip(start, end)

        return [
            TextContent(type="text", text=format_trip(trip)),
            _json_content(trip.model_dump(mode="json")),
        ]


def _json_content(data: Any) -> TextContent:
    return TextContent(
        type="text",
        text=f"JSON Data:\n```json\n{json.dumps(data, indent=2, ensure_ascii=False)}\n```",
    )


async def main() -> None:
    """Main entry point for the MCP server."""
    # Configure logging
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting MBTA Subway Info MCP Server")

    server_instance = SubwayMCPServer()

    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Server running with stdio transport")
        await server_instance.server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name="mbta-subway-info",
                server_version=__version__,
                capabilities=server_instance.server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def main_sync() -> None:
    """Synchronous wrapper for the async main function - used as entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
