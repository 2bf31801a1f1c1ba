"""JSON-RPC 2.0 message models for the MCP stdio protocol."""

from __future__ import annotations

import json
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "obsidian-mcp-server"
SERVER_VERSION = "1.0.0"


class ErrorCode(IntEnum):
    """JSON-RPC error codes used by this server."""

    PARSE_ERROR = -32700
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class Request(BaseModel):
    """An incoming request; ``id`` is echoed back verbatim."""

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    method: str = ""
    params: dict[str, Any] | None = None


class StructuredError(BaseModel):
    code: int
    message: str
    data: Any = None

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


class Response(BaseModel):
    """A response carrying exactly one of ``result`` or ``error``."""

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: Any = None
    error: StructuredError | None = None

    @model_validator(mode="after")
    def _check_result_or_error(self) -> Response:
        if (self.result is None) == (self.error is None):
            raise ValueError("response must carry exactly one of result or error")
        return self

    @classmethod
    def success(cls, request_id: Any, result: Any) -> Response:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, code: int, message: str, data: Any = None) -> Response:
        return cls(id=request_id, error=StructuredError(code=int(code), message=message, data=data))

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.id is not None:
            payload["id"] = self.id
        if self.error is not None:
            payload["error"] = self.error.to_wire()
        else:
            payload["result"] = self.result
        return payload

    def to_line(self) -> str:
        """Serialize as one compact JSON line, newline-terminated."""
        return json.dumps(self.to_wire(), ensure_ascii=False, allow_nan=False, separators=(",", ":")) + "\n"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def decode_request(line: str) -> Request:
    """
    Decode one input line into a Request.

    Raises:
        ValueError: the line is not JSON or not a well-formed request object.
            ``pydantic.ValidationError`` and ``json.JSONDecodeError`` are both
            ValueError subclasses. Nesting too deep for the decoder and the
            non-standard constants NaN and Infinity are reported the same way.
    """
    try:
        raw = json.loads(line, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError(f"request nested too deeply: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"request must be a JSON object, got {type(raw).__name__}")
    return Request.model_validate(raw)
