"""Obsidian Local REST API client."""

from obsidian_mcp.obsidian.client import DEFAULT_BASE_URL, ObsidianClient

__all__ = ["DEFAULT_BASE_URL", "ObsidianClient"]
