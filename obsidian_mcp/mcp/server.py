"""MCP server wiring: config -> Obsidian client -> tool registry -> dispatcher -> transport."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from obsidian_mcp.config.schema import Config
from obsidian_mcp.mcp.dispatcher import RequestDispatcher
from obsidian_mcp.mcp.transport import StdioTransport
from obsidian_mcp.obsidian.client import ObsidianClient
from obsidian_mcp.tools.registry import ToolRegistry, build_tool_registry


class McpServer:
    """Single-threaded MCP server bound to one Obsidian vault."""

    def __init__(self, client: ObsidianClient):
        self.client = client
        self.registry: ToolRegistry = build_tool_registry(client)
        self.dispatcher = RequestDispatcher(self.registry)

    @classmethod
    def from_config(cls, config: Config) -> McpServer:
        client = ObsidianClient(
            config.api_token,
            config.base_url,
            timeout=config.request_timeout,
        )
        return cls(client)

    def run(self, reader: TextIO | None = None, writer: TextIO | None = None) -> int:
        """Serve requests until end of input, then close the HTTP client."""
        transport = StdioTransport(reader or sys.stdin, writer or sys.stdout)
        logger.info("Serving {} tools for {}", len(self.registry), self.client.base_url)
        try:
            return transport.serve(self.dispatcher.dispatch)
        finally:
            self.client.close()
