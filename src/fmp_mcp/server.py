#!/usr/bin/env python3
"""FMP MCP server - exposes Financial Modeling Prep API data as MCP tools.

Uses the official MCP SDK for protocol handling (initialize handshake,
tools/list, tools/call, JSON-RPC over stdio). Tool definitions are static
data in ``fmp_mcp.tools``; every call goes through ``Dispatcher``.

Requires FMP_API_KEY in the environment (or a .env file). The key is read
on each tool call, so the server starts without it.
"""

import asyncio
import sys
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from fmp_mcp import SERVER_NAME, __version__
from fmp_mcp.config import Settings
from fmp_mcp.dispatcher import Dispatcher
from fmp_mcp.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_server(dispatcher: Dispatcher) -> Server:
    """Build the MCP server and bind its handlers to the dispatcher."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    # The dispatcher validates arguments itself so failures carry the tool's own message
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return await dispatcher.dispatch(name, arguments)

    return server


async def serve(dispatcher: Dispatcher | None = None) -> None:
    """Run the server over stdin/stdout until the host closes the session."""
    dispatcher = dispatcher or Dispatcher()
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("FMP MCP Server running on stdio", tools=len(dispatcher.registry))
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Console entry point."""
    settings = Settings()
    setup_logging(
        service_name=settings.service_name,
        service_version=settings.service_version,
        log_level=settings.log_level,
        log_format=settings.log_format,
    )
    try:
        asyncio.run(serve())
    except Exception as e:
        logger.error("Server error", error=str(e), exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
