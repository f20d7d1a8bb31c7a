"""
Tool Base Classes

Provides the tool model shared by every category:
- ToolParameter / ToolDefinition: schema-described tool metadata
- Operation: one remote endpoint call described as data
- ResourceModule: generic executor instantiated once per category
- ToolResult helpers: the universal content-block envelope
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote

from .errors import (
    DuplicateToolError,
    InvalidArgumentsError,
    ToolNotFoundError,
    UpstreamApiError,
)

logger = logging.getLogger(__name__)

LOCATION_PARAM = "locationId"
_PLACEHOLDER = re.compile(r"{(\w+)}")
_QUERY_METHODS = ("GET", "DELETE")


@dataclass(frozen=True)
class ToolParameter:
    """Definition of a tool parameter."""
    name: str
    type: str
    description: str
    required: bool = True
    default: Any = None
    enum: Optional[Sequence[Any]] = None
    items_type: str = "string"

    def to_json_schema(self) -> Dict[str, Any]:
        prop: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.type == "array":
            prop["items"] = {"type": self.items_type}
        if self.enum:
            prop["enum"] = list(self.enum)
        if self.default is not None:
            prop["default"] = self.default
        return prop


def required(name: str, type: str, description: str, **kwargs) -> ToolParameter:
    return ToolParameter(name, type, description, required=True, **kwargs)


def optional(name: str, type: str, description: str, **kwargs) -> ToolParameter:
    return ToolParameter(name, type, description, required=False, **kwargs)


LOCATION = optional(LOCATION_PARAM, "string", "GHL Location ID (optional, uses default if not provided)")


@dataclass(frozen=True)
class ToolDefinition:
    """Complete, immutable description of a tool as advertised to the agent."""
    name: str
    description: str
    input_schema: Dict[str, Any] = field(default_factory=dict, hash=False)
    category: str = "general"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


# ============== Results ==============


@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    """Ordered content blocks returned by a tool call."""
    content: Tuple[TextContent, ...]
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": [block.to_dict() for block in self.content],
            "isError": self.is_error,
        }


def text_result(data: Any) -> ToolResult:
    """Wrap any domain result into a single JSON text block."""
    if isinstance(data, str):
        text = data
    else:
        text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    return ToolResult(content=(TextContent(text),))


def error_result(message: str) -> ToolResult:
    """Render a domain failure as a readable text block."""
    return ToolResult(content=(TextContent(f"Error: {message}"),), is_error=True)


# ============== Validation ==============

_TYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "string": lambda v: isinstance(v, str),
    "integer": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "number": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    "boolean": lambda v: isinstance(v, bool),
    "array": lambda v: isinstance(v, list),
    "object": lambda v: isinstance(v, dict),
}


def validate_arguments(
    tool_name: str,
    parameters: Sequence[ToolParameter],
    arguments: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Validate arguments against the tool's parameters.
    Returns a copy with defaults applied and None values removed.
    Raises InvalidArgumentsError if validation fails.
    """
    validated = {k: v for k, v in arguments.items() if v is not None}

    for param in parameters:
        value = validated.get(param.name)

        if value is None:
            if param.required:
                raise InvalidArgumentsError(
                    f"Missing required parameter: {param.name}",
                    tool_name=tool_name,
                )
            if param.default is not None:
                validated[param.name] = param.default
            continue

        check = _TYPE_CHECKS.get(param.type)
        if check is not None and not check(value):
            raise InvalidArgumentsError(
                f"Parameter '{param.name}' must be of type {param.type}",
                tool_name=tool_name,
            )
        if param.enum and value not in param.enum:
            raise InvalidArgumentsError(
                f"Parameter '{param.name}' must be one of: {', '.join(map(str, param.enum))}",
                tool_name=tool_name,
            )

    return validated


# ============== Operations ==============


@dataclass(frozen=True)
class Operation:
    """
    One tool backed by one remote endpoint.

    Path placeholders ({contactId}) are filled from arguments. Remaining
    arguments go to the query string for GET/DELETE and to the JSON body
    otherwise, unless `args_in` forces "query" or "body"; names listed in
    `query` always go to the query string. `extra` holds fixed fields sent
    alongside the arguments.

    `location` controls where the default location id is injected:
    "auto" (query for GET/DELETE, body otherwise), "query", "body", or None.
    A {locationId} path placeholder is always filled from the location id.
    """
    name: str
    description: str
    method: str
    path: str
    parameters: Sequence[ToolParameter] = ()
    location: Optional[str] = "auto"
    location_key: str = LOCATION_PARAM
    args_in: str = "auto"
    query: Sequence[str] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        declared = {p.name: p for p in self.parameters}
        for placeholder in _PLACEHOLDER.findall(self.path):
            if placeholder == LOCATION_PARAM:
                continue
            param = declared.get(placeholder)
            if param is None or not param.required:
                raise ValueError(
                    f"{self.name}: path placeholder '{placeholder}' must be a required parameter"
                )

    @property
    def uses_location(self) -> bool:
        return self.location is not None or "{locationId}" in self.path

    def all_parameters(self) -> List[ToolParameter]:
        params = list(self.parameters)
        if self.uses_location and not any(p.name == LOCATION_PARAM for p in params):
            params.insert(0, LOCATION)
        return params

    def to_definition(self, category: str) -> ToolDefinition:
        params = self.all_parameters()
        return ToolDefinition(
            name=self.name,
            description=self.description,
            input_schema={
                "type": "object",
                "properties": {p.name: p.to_json_schema() for p in params},
                "required": [p.name for p in params if p.required],
            },
            category=category,
        )

    def build_request(
        self,
        arguments: Mapping[str, Any],
        resolve_location: Callable[[Optional[str]], str],
    ) -> Tuple[str, str, Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Translate validated arguments into (method, path, params, json)."""
        args = dict(arguments)
        location_id = resolve_location(args.pop(LOCATION_PARAM, None)) if self.uses_location else None

        path = self.path
        for placeholder in _PLACEHOLDER.findall(self.path):
            value = location_id if placeholder == LOCATION_PARAM else args.pop(placeholder)
            path = path.replace("{" + placeholder + "}", quote(str(value), safe=""))

        method = self.method.upper()
        query: Dict[str, Any] = {name: args.pop(name) for name in self.query if name in args}
        payload: Dict[str, Any] = dict(self.extra)
        payload.update(args)

        query_method = method in _QUERY_METHODS
        args_to_query = query_method if self.args_in == "auto" else self.args_in == "query"
        if args_to_query:
            query.update(payload)
            payload = {}

        target = self.location
        if target == "auto":
            target = "query" if query_method else "body"
        if target == "query":
            query[self.location_key] = location_id
        elif target == "body":
            payload[self.location_key] = location_id

        if args_to_query and not payload:
            return method, path, query or None, None
        return method, path, query or None, payload


# ============== Resource module ==============


class ResourceModule:
    """
    Generic tool module for one resource category.

    Every category (contacts, calendars, products, ...) is an instance of
    this class built from a list of Operations; customization lives in the
    operation data, not in per-category code.
    """

    def __init__(self, category: str, operations: Sequence[Operation], client):
        self.category = category
        self._client = client
        self._operations: Dict[str, Operation] = {}

        for op in operations:
            if op.name in self._operations:
                raise DuplicateToolError(
                    f"Tool '{op.name}' declared twice in category '{category}'",
                    tool_name=op.name,
                )
            self._operations[op.name] = op

        self._definitions = tuple(op.to_definition(category) for op in operations)

    def __repr__(self) -> str:
        return f"ResourceModule({self.category!r}, tools={len(self._operations)})"

    def names(self) -> FrozenSet[str]:
        return frozenset(self._operations)

    def owns(self, name: str) -> bool:
        return name in self._operations

    def definitions(self) -> List[ToolDefinition]:
        return list(self._definitions)

    async def execute(self, name: str, arguments: Mapping[str, Any]) -> ToolResult:
        """
        Validate, call the API, and wrap the outcome.

        Invalid arguments raise InvalidArgumentsError before any API call.
        Upstream failures are rendered as an error text block so the agent
        sees the remote message instead of a crash.
        """
        op = self._operations.get(name)
        if op is None:
            raise ToolNotFoundError(name)

        validated = validate_arguments(name, op.all_parameters(), arguments)
        method, path, params, body = op.build_request(validated, self._client.location_id)

        try:
            response = await self._client.request(method, path, params=params, json=body)
        except UpstreamApiError as e:
            logger.error(f"Tool {name} failed upstream: {e}")
            return error_result(str(e))

        return text_result(response.get("data"))
