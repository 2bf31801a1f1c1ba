"""CLI tests via typer's CliRunner; no real Obsidian server is contacted."""

import json

import pytest
from typer.testing import CliRunner

from obsidian_mcp import __version__
from obsidian_mcp.cli.commands import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("OBSIDIAN_API_TOKEN", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))


def _json_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"obsidian-mcp-server v{__version__}" in result.stdout


def test_serve_requires_token() -> None:
    result = runner.invoke(app, ["serve"], input="")
    assert result.exit_code == 1


def test_serve_answers_on_stdout() -> None:
    requests = "\n".join(
        [
            json.dumps({"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}}),
            "garbage",
            json.dumps({"jsonrpc": "2.0", "id": 2, "method": "ping"}),
        ]
    )
    result = runner.invoke(app, ["serve", "--token", "t", "--url", "http://127.0.0.1:9/"], input=requests + "\n")
    assert result.exit_code == 0, result.output
    responses = _json_lines(result.stdout)
    assert [r.get("id") for r in responses] == [1, None, 2]
    assert responses[0]["result"]["protocolVersion"] == "2024-11-05"
    assert responses[1]["error"]["code"] == -32700
    assert responses[2]["result"] == {}


def test_serve_token_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("OBSIDIAN_API_TOKEN", "env-token")
    result = runner.invoke(app, ["serve"], input=json.dumps({"jsonrpc": "2.0", "id": 7, "method": "ping"}) + "\n")
    assert result.exit_code == 0, result.output
    assert _json_lines(result.stdout) == [{"jsonrpc": "2.0", "id": 7, "result": {}}]


def test_serve_rejects_broken_config_file(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{oops", encoding="utf-8")
    result = runner.invoke(app, ["serve", "--config", str(path), "--token", "t"], input="")
    assert result.exit_code == 1


def test_tools_command_lists_catalog() -> None:
    result = runner.invoke(app, ["tools"])
    assert result.exit_code == 0
    assert "get_file_content" in result.stdout
    assert "search_vault_advanced" in result.stdout
