"""Server info and Obsidian command palette tools."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from obsidian_mcp.tools.base import NoArgs, Tool, required_str


@dataclass(frozen=True, slots=True)
class ExecuteCommandArgs:
    command_id: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> ExecuteCommandArgs:
        return cls(command_id=required_str(arguments, "commandId"))


class GetServerInfoTool(Tool):
    name = "get_server_info"
    description = "Get basic server details and authentication status from Obsidian"

    def run(self, args: NoArgs) -> str:
        return self._client.get_server_info()


class ListCommandsTool(Tool):
    name = "list_commands"
    description = "Get a list of available Obsidian commands"

    def run(self, args: NoArgs) -> str:
        return self._client.list_commands()


class ExecuteCommandTool(Tool):
    name = "execute_command"
    description = "Execute a specific Obsidian command"
    parameters = {
        "type": "object",
        "properties": {
            "commandId": {"type": "string", "description": "ID of the command to execute"},
        },
        "required": ["commandId"],
    }
    args_type = ExecuteCommandArgs

    def run(self, args: ExecuteCommandArgs) -> str:
        return self._client.execute_command(args.command_id)
