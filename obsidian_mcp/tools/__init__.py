"""MCP tools backed by the Obsidian Local REST API."""

from obsidian_mcp.tools.base import Tool
from obsidian_mcp.tools.registry import TOOL_CLASSES, ToolRegistry, build_tool_registry

__all__ = ["TOOL_CLASSES", "Tool", "ToolRegistry", "build_tool_registry"]
