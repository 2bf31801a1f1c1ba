"""Request dispatcher: routes MCP methods to handlers and converts failures."""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger

from obsidian_mcp.mcp.error_boundary import (
    invalid_params_response,
    method_not_found_response,
    obsidian_error_response,
    unhandled_exception_response,
)
from obsidian_mcp.mcp.protocol import (
    PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
    Request,
    Response,
)
from obsidian_mcp.tools.registry import ToolRegistry
from obsidian_mcp.utils.exceptions import ObsidianMcpError

MethodHandler = Callable[[Request], Response]


class RequestDispatcher:
    """Dispatches ``initialize``, ``tools/list``, ``tools/call`` and ``ping``."""

    def __init__(self, registry: ToolRegistry):
        self._registry = registry
        self._handlers: dict[str, MethodHandler] = {
            "initialize": self._handle_initialize,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
            "ping": self._handle_ping,
        }

    @property
    def methods(self) -> list[str]:
        return list(self._handlers)

    def dispatch(self, request: Request) -> Response | None:
        """Handle one request. Never raises; every failure becomes an error response."""
        logger.debug("Dispatching method={} id={}", request.method, request.id)
        handler = self._handlers.get(request.method)
        if handler is None:
            return method_not_found_response(request_id=request.id, method=request.method)
        try:
            return handler(request)
        except ObsidianMcpError as exc:
            return obsidian_error_response(request_id=request.id, method=request.method, exc=exc)
        except Exception as exc:
            return unhandled_exception_response(request_id=request.id, method=request.method, exc=exc)

    def _handle_initialize(self, request: Request) -> Response:
        return Response.success(
            request.id,
            {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {"tools": {}},
                "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
            },
        )

    def _handle_ping(self, request: Request) -> Response:
        return Response.success(request.id, {})

    def _handle_tools_list(self, request: Request) -> Response:
        return Response.success(request.id, {"tools": self._registry.get_definitions()})

    def _handle_tools_call(self, request: Request) -> Response:
        params = request.params or {}
        name = params.get("name")
        if not isinstance(name, str):
            return invalid_params_response(request_id=request.id, message="Invalid params: missing tool name")
        arguments: Any = params.get("arguments")
        if not isinstance(arguments, dict):
            arguments = {}
        text = self._registry.execute(name, arguments)
        return Response.success(request.id, {"content": [{"type": "text", "text": text}]})
