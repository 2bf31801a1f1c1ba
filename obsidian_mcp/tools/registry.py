"""Tool registry: the fixed, ordered catalog of Obsidian tools.

The registry is built once per server from ``build_tool_registry`` and is read-only
afterwards; the dispatcher uses it both for ``tools/list`` and ``tools/call``.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from obsidian_mcp.obsidian.client import ObsidianClient
from obsidian_mcp.tools.base import Tool
from obsidian_mcp.tools.commands import ExecuteCommandTool, GetServerInfoTool, ListCommandsTool
from obsidian_mcp.tools.search import SearchVaultAdvancedTool, SearchVaultSimpleTool
from obsidian_mcp.tools.vault import (
    AppendToFileTool,
    CreateOrUpdateFileTool,
    DeleteFileTool,
    GetFileContentTool,
    ListVaultFilesTool,
    OpenFileTool,
    PatchFileContentTool,
)
from obsidian_mcp.utils.exceptions import UnknownToolError

TOOL_CLASSES: tuple[type[Tool], ...] = (
    GetServerInfoTool,
    ListVaultFilesTool,
    GetFileContentTool,
    CreateOrUpdateFileTool,
    AppendToFileTool,
    PatchFileContentTool,
    DeleteFileTool,
    SearchVaultSimpleTool,
    SearchVaultAdvancedTool,
    ListCommandsTool,
    ExecuteCommandTool,
    OpenFileTool,
)


class ToolRegistry:
    """
    Registry for MCP tools.

    Tools are registered at construction only, in catalog order.
    """

    def __init__(self, tools: Iterable[Tool]):
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"duplicate tool name: {tool.name}")
            self._tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools

    def get_definitions(self) -> list[dict[str, Any]]:
        """Get all tool definitions in MCP ``tools/list`` format."""
        return [tool.to_schema() for tool in self._tools.values()]

    def execute(self, name: str, arguments: Mapping[str, Any]) -> str:
        """
        Execute a tool by name with the given arguments.

        Args:
            name: Tool name.
            arguments: Tool arguments; copied before use, never mutated.

        Returns:
            Tool result text.

        Raises:
            UnknownToolError: If the tool is not registered.
            ObsidianMcpError: If validation or the backend call fails.
        """
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        logger.debug("Executing tool {}", name)
        return tool.execute(dict(arguments))

    @property
    def tool_names(self) -> list[str]:
        """Get list of registered tool names."""
        return list(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools


def build_tool_registry(client: ObsidianClient) -> ToolRegistry:
    """Create the standard 12-tool catalog bound to one Obsidian client."""
    return ToolRegistry(tool_cls(client) for tool_cls in TOOL_CLASSES)
