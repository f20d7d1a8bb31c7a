"""
stdio Transport

Serves the protocol over stdin/stdout with the MCP SDK's low-level Server.
stdout carries the protocol stream, so all logging must go to stderr.
"""

import logging
from typing import List

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import ErrorData, TextContent, Tool

from .errors import ProtocolError
from .protocol import SERVER_NAME, ProtocolServer

logger = logging.getLogger(__name__)


def _to_mcp_error(error: ProtocolError) -> McpError:
    return McpError(ErrorData(code=error.code, message=error.message))


def build_server(protocol: ProtocolServer) -> Server:
    """Wire the protocol handlers into an MCP SDK server."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        logger.info("Listing available tools...")
        try:
            definitions = await protocol.list_tools()
        except ProtocolError as e:
            raise _to_mcp_error(e) from e
        return [
            Tool(name=d.name, description=d.description, inputSchema=d.input_schema)
            for d in definitions
        ]

    # Registered directly so protocol errors reach the client as JSON-RPC
    # errors carrying their code.
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await protocol.call_tool(request.params.name, request.params.arguments or {})
        except ProtocolError as e:
            raise _to_mcp_error(e) from e
        return types.ServerResult(
            types.CallToolResult(
                content=[TextContent(type="text", text=block.text) for block in result.content],
                isError=result.is_error,
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def run_stdio(protocol: ProtocolServer) -> None:
    """Run the MCP server until stdin closes."""
    server = build_server(protocol)
    protocol.initialize()
    async with stdio_server() as (read_stream, write_stream):
        logger.info("GoHighLevel MCP Server started, ready to handle requests over stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
