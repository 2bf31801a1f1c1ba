"""Pytest fixtures: an in-memory Obsidian vault served through httpx.MockTransport."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from loguru import logger

from obsidian_mcp.mcp.dispatcher import RequestDispatcher
from obsidian_mcp.mcp.protocol import Request
from obsidian_mcp.obsidian.client import NOTE_JSON_MEDIA_TYPE, ObsidianClient
from obsidian_mcp.tools.registry import ToolRegistry, build_tool_registry

API_TOKEN = "test-token"
BASE_URL = "http://obsidian.test/"


def _json(status_code: int, body: Any) -> httpx.Response:
    return httpx.Response(status_code, json=body)


def _not_found(message: str = "File not found") -> httpx.Response:
    return _json(404, {"errorCode": 40400, "message": message})


@dataclass
class FakeVault:
    """Minimal stand-in for the Obsidian Local REST API."""

    files: dict[str, str] = field(default_factory=dict)
    commands: dict[str, str] = field(
        default_factory=lambda: {"editor:toggle-bold": "Toggle bold", "app:go-back": "Navigate back"}
    )
    requests: list[httpx.Request] = field(default_factory=list)
    executed: list[str] = field(default_factory=list)
    opened: list[tuple[str, bool]] = field(default_factory=list)
    fail_with: int | None = None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.headers.get("Authorization") != f"Bearer {API_TOKEN}":
            return _json(401, {"errorCode": 40101, "message": "Authorization required"})
        if self.fail_with is not None:
            return _json(self.fail_with, {"errorCode": self.fail_with * 100, "message": "forced failure"})

        path = request.url.path
        if path == "/":
            return _json(200, {"status": "OK", "authenticated": True, "service": "Obsidian Local REST API"})
        if path.startswith("/vault/"):
            return self._vault(request, path.removeprefix("/vault/"))
        if path == "/search/simple/":
            return self._search_simple(request)
        if path == "/search/":
            return _json(200, [{"filename": name, "result": True} for name in sorted(self.files)])
        if path == "/commands/":
            return _json(200, {"commands": [{"id": k, "name": v} for k, v in self.commands.items()]})
        if path.startswith("/commands/"):
            command_id = path.removeprefix("/commands/").removesuffix("/")
            if command_id not in self.commands:
                return _not_found("Command not found")
            self.executed.append(command_id)
            return httpx.Response(204)
        if path.startswith("/open/"):
            self.opened.append((path.removeprefix("/open/"), request.url.params.get("newLeaf") == "true"))
            return httpx.Response(200)
        return _not_found("Not found")

    def _vault(self, request: httpx.Request, name: str) -> httpx.Response:
        if name == "" or name.endswith("/"):
            entries = sorted({n.removeprefix(name).split("/")[0] for n in self.files if n.startswith(name)})
            if name and not entries:
                return _not_found()
            return _json(200, {"files": entries})
        body = request.content.decode("utf-8")
        if request.method == "GET":
            if name not in self.files:
                return _not_found()
            if request.headers.get("Accept") == NOTE_JSON_MEDIA_TYPE:
                return _json(200, {"path": name, "content": self.files[name], "tags": [], "frontmatter": {}})
            return httpx.Response(200, text=self.files[name], headers={"Content-Type": "text/markdown"})
        if request.method == "PUT":
            self.files[name] = body
            return httpx.Response(204)
        if request.method == "POST":
            self.files[name] = self.files.get(name, "") + body
            return httpx.Response(204)
        if request.method == "PATCH":
            if name not in self.files:
                return _not_found()
            self.files[name] = self.files[name] + body
            return httpx.Response(200)
        if request.method == "DELETE":
            if name not in self.files:
                return _not_found()
            del self.files[name]
            return httpx.Response(204)
        return _json(405, {"errorCode": 40500, "message": "Method not allowed"})

    def _search_simple(self, request: httpx.Request) -> httpx.Response:
        query = request.url.params.get("query", "")
        results = []
        for name in sorted(self.files):
            content = self.files[name]
            index = content.find(query)
            if index >= 0:
                results.append({"filename": name, "score": 1, "matches": [{"match": {"start": index, "end": index + len(query)}}]})
        return _json(200, results)


@pytest.fixture(autouse=True)
def _quiet_loguru():
    """Drop loguru sinks so tests never write to streams closed by other tests."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def fake_vault() -> FakeVault:
    return FakeVault()


@pytest.fixture
def obsidian_client(fake_vault: FakeVault):
    client = ObsidianClient(API_TOKEN, BASE_URL, transport=httpx.MockTransport(fake_vault.handle))
    yield client
    client.close()


@pytest.fixture
def registry(obsidian_client: ObsidianClient) -> ToolRegistry:
    return build_tool_registry(obsidian_client)


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> RequestDispatcher:
    return RequestDispatcher(registry)


@pytest.fixture
def call_tool(dispatcher: RequestDispatcher):
    """Dispatch a tools/call request and return the wire-form response."""

    def _call(name: Any, arguments: Any = None, request_id: Any = 1) -> dict[str, Any]:
        params: dict[str, Any] = {"name": name}
        if arguments is not None:
            params["arguments"] = arguments
        response = dispatcher.dispatch(Request(id=request_id, method="tools/call", params=params))
        assert response is not None
        return json.loads(response.to_line())

    return _call


@pytest.fixture
def call_tool_text(call_tool):
    """Call a tool that must succeed and return its single text block."""

    def _call(name: str, arguments: Any = None) -> str:
        wire = call_tool(name, arguments)
        assert "error" not in wire, wire
        content = wire["result"]["content"]
        assert len(content) == 1 and content[0]["type"] == "text"
        return content[0]["text"]

    return _call
