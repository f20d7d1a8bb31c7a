"""
Tool Registry

Single Source of Truth (SSOT) for tool ownership.
Builds one flat name -> entry map at startup from every category module
in ghl_mcp/tools/, in a fixed order. Duplicate names are a startup error.
"""

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .base import ResourceModule, ToolDefinition, ToolResult
from .errors import DuplicateToolError, ToolNotFoundError
from .tools import CATEGORY_MODULES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    module: ResourceModule
    definition: ToolDefinition


class ToolRegistry:
    """Deterministic, total mapping from tool name to owning module."""

    def __init__(self):
        self._modules: List[ResourceModule] = []
        self._entries: Dict[str, RegistryEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @property
    def modules(self) -> List[ResourceModule]:
        return list(self._modules)

    def register(self, module: ResourceModule) -> None:
        """
        Register every tool of a module.
        All names are checked before any is inserted.
        """
        definitions = module.definitions()

        seen: Dict[str, str] = {}
        for definition in definitions:
            existing = self._entries.get(definition.name)
            if existing is not None:
                raise DuplicateToolError(
                    f"Tool '{definition.name}' from '{module.category}' is already "
                    f"owned by '{existing.module.category}'",
                    tool_name=definition.name,
                )
            if definition.name in seen:
                raise DuplicateToolError(
                    f"Tool '{definition.name}' declared twice in '{module.category}'",
                    tool_name=definition.name,
                )
            seen[definition.name] = module.category

        for definition in definitions:
            self._entries[definition.name] = RegistryEntry(module=module, definition=definition)
        self._modules.append(module)
        logger.debug(f"Registered {len(definitions)} {module.category} tools")

    def list_all(self) -> List[ToolDefinition]:
        """
        All tool definitions in registration order.
        Any module failure fails the whole listing.
        """
        tools: List[ToolDefinition] = []
        for module in self._modules:
            tools.extend(module.definitions())
        return tools

    def get(self, name: str) -> Optional[ToolDefinition]:
        entry = self._entries.get(name)
        return entry.definition if entry else None

    def names(self) -> List[str]:
        return list(self._entries)

    def tools_by_category(self, category: str) -> List[ToolDefinition]:
        return [
            entry.definition
            for entry in self._entries.values()
            if entry.module.category == category
        ]

    def category_counts(self) -> Dict[str, int]:
        return {module.category: len(module.names()) for module in self._modules}

    async def dispatch(self, name: str, arguments: Mapping[str, Any]) -> ToolResult:
        """Route a call to the module owning `name`."""
        entry = self._entries.get(name)
        if entry is None:
            raise ToolNotFoundError(name)
        return await entry.module.execute(name, arguments)


def discover_modules(client) -> List[ResourceModule]:
    """
    Import every category module in canonical order and instantiate it.
    This is the ONLY place where tool modules are collected.
    """
    modules = []
    for module_name in CATEGORY_MODULES:
        full_name = f"{__package__}.tools.{module_name}"
        source = importlib.import_module(full_name)
        modules.append(ResourceModule(source.CATEGORY, source.OPERATIONS, client))
        logger.debug(f"Loaded tool module: {full_name}")
    return modules


def build_registry(client) -> ToolRegistry:
    registry = ToolRegistry()
    for module in discover_modules(client):
        registry.register(module)
    logger.info(f"Tool discovery complete. Total tools: {len(registry)}")
    return registry
