"""
MCP stdio server exposing the Kaggle tool catalog.

Run:
  python -m kaggle_mcp
  or
  kaggle-mcp
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from kaggle_mcp import __version__
from kaggle_mcp.api.di.composition import build_services
from kaggle_mcp.infrastructure.observability import configure_logging
from kaggle_mcp.infrastructure.tools.config import Config
from kaggle_mcp.infrastructure.tools.tool_base import ToolResult
from kaggle_mcp.interfaces.services.tools import IToolCatalog, IToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "kaggle"


def describe_tools(catalog: IToolCatalog) -> List[types.Tool]:
    """Catalog descriptors as MCP tool definitions."""
    return [
        types.Tool(name=d.name, description=d.description, inputSchema=d.raw_schema)
        for d in catalog.list_tools()
    ]


def to_text_content(result: ToolResult) -> List[types.TextContent]:
    return [types.TextContent(type="text", text=item["text"]) for item in result["content"]]


def create_server(catalog: IToolCatalog, dispatcher: IToolDispatcher) -> Server:
    """
    Build the low-level MCP server with list/call handlers.

    Calls run synchronously on the event loop, so one kaggle process runs
    at a time.
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return describe_tools(catalog)

    @server.call_tool()
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        return to_text_content(dispatcher.execute(name, arguments))

    # The SDK wrapper turns a missing arguments object into {} before our
    # handler runs; such a call must fail as a request error instead.
    sdk_call_tool = server.request_handlers[types.CallToolRequest]

    async def call_tool_requiring_arguments(req: types.CallToolRequest) -> types.ServerResult:
        if req.params.arguments is None:
            raise ValueError("No arguments provided")
        return await sdk_call_tool(req)

    server.request_handlers[types.CallToolRequest] = call_tool_requiring_arguments
    return server


async def serve(config: Optional[Config] = None) -> None:
    catalog, dispatcher = build_services(config)
    server = create_server(catalog, dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("kaggle MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    configure_logging()
    asyncio.run(serve())


if __name__ == "__main__":
    main()
