"""Entry point for ``python -m obsidian_mcp``."""

from obsidian_mcp.cli.commands import app

if __name__ == "__main__":
    app()
