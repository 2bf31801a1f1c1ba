"""Base class for MCP tools and typed argument extraction helpers."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from obsidian_mcp.obsidian.client import ObsidianClient
from obsidian_mcp.utils.exceptions import ValidationError


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def required_str(arguments: Mapping[str, Any], key: str) -> str:
    """Return a required string argument or raise ValidationError naming the field."""
    if key not in arguments or arguments[key] is None:
        raise ValidationError(f"{key} is required", field=key)
    value = arguments[key]
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string, got {_json_type_name(value)}", field=key)
    return value


def optional_str(arguments: Mapping[str, Any], key: str, default: str) -> str:
    value = arguments.get(key)
    if isinstance(value, str) and value:
        return value
    return default


def optional_int(arguments: Mapping[str, Any], key: str, default: int) -> int:
    # JSON numbers may arrive as floats; booleans are not numbers here.
    value = arguments.get(key)
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return default


def optional_bool(arguments: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = arguments.get(key)
    if isinstance(value, bool):
        return value
    return default


@dataclass(frozen=True, slots=True)
class NoArgs:
    """Argument bundle for tools that take no parameters."""

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> NoArgs:
        return cls()


class Tool(ABC):
    """
    A named, schema-described operation exposed to MCP callers.

    Subclasses declare ``name``, ``description``, ``parameters`` (JSON schema)
    and ``args_type``, a frozen dataclass with a ``from_arguments`` constructor
    that performs the typed extraction for that tool.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    parameters: ClassVar[dict[str, Any]] = {"type": "object", "properties": {}}
    args_type: ClassVar[type] = NoArgs

    def __init__(self, client: ObsidianClient):
        self._client = client

    def parse_arguments(self, arguments: Mapping[str, Any]) -> Any:
        return self.args_type.from_arguments(arguments)

    def execute(self, arguments: Mapping[str, Any]) -> str:
        """Validate arguments, then run the tool. Raises ObsidianMcpError subclasses."""
        return self.run(self.parse_arguments(arguments))

    @abstractmethod
    def run(self, args: Any) -> str:
        """Issue the backend call for already-validated arguments."""

    def to_schema(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.parameters),
        }
