"""
GoHighLevel MCP Server

Exposes the GoHighLevel API as schema-described tools over MCP (stdio)
and JSON-RPC over HTTP. Tool categories live in ghl_mcp/tools/ and are
collected by registry.py.
"""

from .base import ResourceModule, ToolDefinition, ToolResult
from .client import GHLApiClient
from .config import ApiClientConfig, load_config
from .protocol import ProtocolServer
from .registry import ToolRegistry, build_registry

__all__ = [
    "ApiClientConfig",
    "GHLApiClient",
    "ProtocolServer",
    "ResourceModule",
    "ToolDefinition",
    "ToolRegistry",
    "ToolResult",
    "build_registry",
    "load_config",
]
