"""MCP server factory.

Creates the ad service FastMCP server with its read-only tool set.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from ...services.ad_service import AdService
from .tools import register_ad_tools

SERVER_NAME = "adservice"


def create_server(service: AdService | None = None) -> FastMCP:
    """Build and return a configured FastMCP server.

    Args:
        service: AdService to answer tool calls with. Built from settings
            on first tool call when omitted.

    Returns:
        A FastMCP instance with the ad tools registered.
    """
    server = FastMCP(SERVER_NAME)
    register_ad_tools(server, service)
    return server


def run_server(service: AdService | None = None) -> None:
    """Run the MCP server using stdio transport."""
    create_server(service).run(transport="stdio")


if __name__ == "__main__":
    run_server()
