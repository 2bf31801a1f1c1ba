"""Configuration schema using Pydantic.

Values come from (highest first): explicit keyword arguments (the JSON config
file and CLI flags), ``OBSIDIAN_*`` environment variables, then defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from obsidian_mcp.obsidian.client import DEFAULT_BASE_URL


class Config(BaseSettings):
    """Root configuration for obsidian-mcp-server."""
    api_token: str = ""  # Local REST API key, sent as a bearer token
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float | None = Field(default=None, gt=0)  # None: wait indefinitely
    log_level: str = "INFO"
    log_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="OBSIDIAN_",
        extra="ignore",
    )
