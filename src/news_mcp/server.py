"""MCP server wiring: tools/list and tools/call over stdio."""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .config import MODE_GNEWS, MODE_RSS
from .dispatcher import Dispatcher

logger = logging.getLogger("NEWS_MCP")

SERVER_NAMES = {
    MODE_RSS: "yahoo-news-server",
    MODE_GNEWS: "gnews-server",
}


class ToolCallFailed(Exception):
    """Carries an error ToolResult text out of the call handler.

    The SDK turns exceptions raised by the handler into a CallToolResult
    with isError set and the exception text as content.
    """

    pass


def create_server(dispatcher: Dispatcher, name: str = SERVER_NAMES[MODE_RSS]) -> Server:
    """Build an MCP server exposing the dispatcher's tools.

    Args:
        dispatcher: Fully constructed dispatcher for one server mode
        name: Server name reported during initialization

    Returns:
        Server with list_tools and call_tool handlers registered
    """
    server = Server(name, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=spec.name, description=spec.description, inputSchema=spec.input_schema())
            for spec in dispatcher.list_operations()
        ]

    # Arguments are validated by the dispatcher, which owns the error text
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        result = await asyncio.to_thread(dispatcher.call, name, arguments)
        if result.is_error:
            raise ToolCallFailed(result.text)
        return [types.TextContent(type="text", text=result.text)]

    return server


async def run_stdio(server: Server) -> None:
    """Serve requests on stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"{server.name} running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
