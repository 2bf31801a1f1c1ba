"""Configuration module for obsidian-mcp-server."""

from obsidian_mcp.config.loader import get_config_path, load_config
from obsidian_mcp.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
