"""Immutable catalogue of callable MCP tools."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Iterable, Iterator

from monoid_docs.models.api.mcp import ToolDefinition, ToolResult

# async handler(context, arguments) -> ToolResult
ToolHandler = Callable[[Any, dict[str, Any]], Awaitable[ToolResult]]


@dataclass(frozen=True)
class RegisteredTool:
    """A tool definition paired with the coroutine that implements it."""

    definition: ToolDefinition
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.definition.name


class ToolRegistry:
    """Read-only set of tools, built once and shared by reference.

    The definitions are the single source of truth both for ``tools/list``
    and for the argument checks the dispatcher performs.
    """

    def __init__(self, tools: Iterable[RegisteredTool]):
        self._tools = tuple(tools)
        index = {}
        for tool in self._tools:
            if tool.name in index:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            index[tool.name] = tool
        self._index = MappingProxyType(index)

    def get(self, name: str) -> RegisteredTool | None:
        return self._index.get(name)

    @property
    def names(self) -> list[str]:
        return [tool.name for tool in self._tools]

    def definitions(self) -> list[dict[str, Any]]:
        """Tool definitions as returned by ``tools/list``."""
        return [tool.definition.to_dict() for tool in self._tools]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[RegisteredTool]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)
