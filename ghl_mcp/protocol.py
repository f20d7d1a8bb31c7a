"""
Protocol Server

Transport-independent implementation of the agent-facing protocol:
handshake, tool listing, and tool calls. Both the stdio and the HTTP
transports delegate here, so error mapping happens in exactly one place.
"""

import copy
import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .base import ToolDefinition, ToolResult
from .errors import (
    ConnectivityError,
    InternalError,
    InvalidArgumentsError,
    InvalidRequest,
    MethodNotFound,
    ToolNotFound,
    ToolNotFoundError,
)
from .registry import ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "ghl-mcp-server"
SERVER_VERSION = "1.0.0"
PROTOCOL_VERSION = "2024-11-05"


class ServerState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    SERVING = "serving"


class ProtocolServer:
    """
    Handshake / list / call state machine.

    UNINITIALIZED -> READY after initialize, READY -> SERVING on the first
    list or call. Requests are never rejected based on state.
    """

    def __init__(self, registry: ToolRegistry, name: str = SERVER_NAME, version: str = SERVER_VERSION):
        self.registry = registry
        self._descriptor = {
            "protocolVersion": PROTOCOL_VERSION,
            "serverInfo": {"name": name, "version": version},
            "capabilities": {"tools": {}},
        }
        self.state = ServerState.UNINITIALIZED

    def _mark_serving(self) -> None:
        if self.state == ServerState.READY:
            self.state = ServerState.SERVING

    def initialize(self, client_info: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Idempotent handshake; always returns the same descriptor."""
        if client_info:
            logger.info(f"Initialize from client: {client_info}")
        if self.state == ServerState.UNINITIALIZED:
            self.state = ServerState.READY
        return copy.deepcopy(self._descriptor)

    async def list_tools(self) -> List[ToolDefinition]:
        self._mark_serving()
        try:
            return self.registry.list_all()
        except Exception as e:
            logger.exception("Error listing tools")
            raise InternalError(f"Failed to list tools: {e}") from e

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        self._mark_serving()
        if not isinstance(name, str) or not name:
            raise InvalidRequest("Tool name must be a non-empty string")
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidRequest(f"Arguments for {name} must be an object")

        logger.info(f"Executing tool: {name}")
        logger.debug(f"Arguments: {dict(arguments)}")

        try:
            result = await self.registry.dispatch(name, arguments)
        except ToolNotFoundError as e:
            raise ToolNotFound(e.message) from e
        except InvalidArgumentsError as e:
            raise InvalidRequest(f"Invalid arguments for {name}: {e.message}") from e
        except ConnectivityError as e:
            logger.error(f"Tool {name} could not reach the API: {e.message}")
            raise InternalError(f"Tool execution failed: {e.message}") from e
        except Exception as e:
            logger.exception(f"Unexpected error in tool {name}")
            raise InternalError(f"Tool execution failed: {e}") from e

        if result.is_error:
            logger.warning(f"Tool {name} returned an error result")
        else:
            logger.info(f"Tool {name} executed successfully")
        return result

    async def handle(self, method: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Route one JSON-RPC verb. Raises ProtocolError subclasses.

        Verbs: initialize, describe, invoke, tools/list, tools/call, ping.
        """
        params = params or {}
        if not isinstance(params, Mapping):
            raise InvalidRequest("params must be an object")

        if method == "initialize":
            return self.initialize(params.get("clientInfo"))

        if method in ("describe", "tools/list"):
            tools = await self.list_tools()
            return {"tools": [tool.to_dict() for tool in tools]}

        if method == "invoke":
            result = await self.call_tool(params.get("tool_name"), params.get("parameters"))
            return result.to_dict()

        if method == "tools/call":
            result = await self.call_tool(params.get("name"), params.get("arguments"))
            return result.to_dict()

        if method == "ping":
            return {}

        raise MethodNotFound(f"Method not found: {method}")
