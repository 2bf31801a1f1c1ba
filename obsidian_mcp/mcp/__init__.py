"""MCP stdio protocol: message models, dispatcher, transport and server wiring."""

from obsidian_mcp.mcp.dispatcher import RequestDispatcher
from obsidian_mcp.mcp.protocol import ErrorCode, Request, Response, StructuredError
from obsidian_mcp.mcp.server import McpServer
from obsidian_mcp.mcp.transport import StdioTransport

__all__ = [
    "ErrorCode",
    "McpServer",
    "Request",
    "RequestDispatcher",
    "Response",
    "StdioTransport",
    "StructuredError",
]
