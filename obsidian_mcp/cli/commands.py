"""CLI commands for obsidian-mcp-server.

The CLI is the single entry point: ``serve`` runs the MCP server on stdin/stdout,
``tools`` prints the tool catalog. Everything except protocol traffic goes to stderr.
"""

import io
import sys
from pathlib import Path
from typing import TextIO

import typer
from rich.console import Console
from rich.table import Table

from obsidian_mcp import __logo__, __version__
from obsidian_mcp.cli.shared.logging_utils import configure_stderr_logging, ensure_rotating_log_file

app = typer.Typer(
    name="obsidian-mcp-server",
    help=f"{__logo__} obsidian-mcp-server - MCP tools for the Obsidian Local REST API",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _utf8(stream: TextIO) -> TextIO:
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(encoding="utf-8", errors="replace")
    return stream


def version_callback(value: bool):
    if value:
        console.print(f"obsidian-mcp-server v{__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """obsidian-mcp-server - MCP tools for the Obsidian Local REST API."""
    pass


@app.command()
def serve(
    token: str = typer.Option(None, "--token", "-t", help="Obsidian API token (or set OBSIDIAN_API_TOKEN)"),
    url: str = typer.Option(None, "--url", "-u", help="Obsidian server base URL (default http://127.0.0.1:27123)"),
    timeout: float = typer.Option(None, "--timeout", help="Per-request timeout in seconds (default: none)"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to a JSON config file"),
    log_level: str = typer.Option(None, "--log-level", help="Log level for stderr logging (default INFO)"),
    log_file: Path = typer.Option(None, "--log-file", help="Also write logs to this rotating file"),
):
    """Serve MCP requests on stdin/stdout."""
    from obsidian_mcp.config.loader import load_config
    from obsidian_mcp.mcp.server import McpServer
    from obsidian_mcp.utils.exceptions import TransportError

    try:
        config = load_config(config_path)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    overrides = {
        "api_token": token,
        "base_url": url,
        "request_timeout": timeout,
        "log_level": log_level,
        "log_file": log_file,
    }
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    configure_stderr_logging(config.log_level)
    if config.log_file:
        ensure_rotating_log_file(config.log_file, config.log_level)

    if not config.api_token:
        err_console.print(
            "[red]Error:[/red] API token is required. "
            "Use --token or set the OBSIDIAN_API_TOKEN environment variable."
        )
        raise typer.Exit(1)

    err_console.print(f"{__logo__} Starting Obsidian MCP Server...", highlight=False)
    err_console.print(f"[dim]Base URL: {config.base_url}[/dim]")
    err_console.print("[dim]Listening on stdin/stdout for MCP requests[/dim]")

    server = McpServer.from_config(config)
    try:
        server.run(_utf8(sys.stdin), _utf8(sys.stdout))
    except TransportError as e:
        err_console.print(f"[red]Server error:[/red] {e.message}")
        raise typer.Exit(1) from e
    except KeyboardInterrupt:
        err_console.print("\nInterrupted")


@app.command()
def tools():
    """List the tools this server exposes."""
    from obsidian_mcp.tools.registry import TOOL_CLASSES

    table = Table(title="Obsidian MCP tools")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Required")
    table.add_column("Description")
    for tool_cls in TOOL_CLASSES:
        required = ", ".join(tool_cls.parameters.get("required", [])) or "-"
        table.add_row(tool_cls.name, required, tool_cls.description)
    console.print(table)
