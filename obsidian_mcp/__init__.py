"""obsidian-mcp-server: MCP tools for the Obsidian Local REST API."""

__version__ = "0.1.0"
__logo__ = "🪨"
