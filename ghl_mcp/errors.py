"""
Error Taxonomy

Every failure the server can produce, grouped by the layer that raises it:
- startup: ConfigurationError
- API client: UpstreamApiError, ConnectivityError
- tool layer: InvalidArgumentsError, ToolNotFoundError, DuplicateToolError
- protocol boundary: InvalidRequest, MethodNotFound, ToolNotFound, InternalError

Protocol error codes are part of the external contract and must not change.
"""

from typing import Any, Dict, Optional


class GHLMCPError(Exception):
    """Base exception for all server errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(GHLMCPError):
    """Raised at startup when required configuration is missing or invalid."""
    pass


# ============== API client ==============


class ApiClientError(GHLMCPError):
    """Base exception for outbound call failures."""
    pass


class UpstreamApiError(ApiClientError):
    """The remote platform answered with a non-success status."""

    def __init__(self, status_code: int, message: str, details: Any = None):
        self.status_code = status_code
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return f"GHL API Error ({self.status_code}): {self.message}"


class ConnectivityError(ApiClientError):
    """The remote platform could not be reached at all."""
    pass


# ============== Tool layer ==============


class ToolError(GHLMCPError):
    """Base exception for tool-layer errors."""

    def __init__(self, message: str, tool_name: Optional[str] = None, details: Dict = None):
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentsError(ToolError):
    """Raised when tool arguments do not satisfy the tool's input schema."""
    pass


class ToolNotFoundError(ToolError):
    """Raised when no registered module owns the requested tool name."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", tool_name=tool_name)


class DuplicateToolError(ToolError):
    """Raised at registration when two modules claim the same tool name."""
    pass


# ============== Protocol boundary ==============


class ProtocolError(GHLMCPError):
    """Structured error returned to the agent host as {code, message}."""

    code: int = -32603

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class InvalidRequest(ProtocolError):
    code = -32600


class MethodNotFound(ProtocolError):
    code = -32601


class ToolNotFound(ProtocolError):
    code = -32602


class InternalError(ProtocolError):
    code = -32603
