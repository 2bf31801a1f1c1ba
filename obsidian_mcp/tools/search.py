"""Vault search tools: simple text search and Dataview / JsonLogic queries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from obsidian_mcp.tools.base import Tool, optional_int, required_str

DEFAULT_CONTEXT_LENGTH = 100


@dataclass(frozen=True, slots=True)
class SearchSimpleArgs:
    query: str
    context_length: int = DEFAULT_CONTEXT_LENGTH

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> SearchSimpleArgs:
        return cls(
            query=required_str(arguments, "query"),
            context_length=optional_int(arguments, "contextLength", DEFAULT_CONTEXT_LENGTH),
        )


@dataclass(frozen=True, slots=True)
class SearchAdvancedArgs:
    query: str
    query_type: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> SearchAdvancedArgs:
        return cls(
            query=required_str(arguments, "query"),
            query_type=required_str(arguments, "queryType"),
        )


class SearchVaultSimpleTool(Tool):
    name = "search_vault_simple"
    description = "Simple text search across the vault"
    parameters = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search query"},
            "contextLength": {
                "type": "integer",
                "description": "Amount of context to return around matches (default: 100)",
            },
        },
        "required": ["query"],
    }
    args_type = SearchSimpleArgs

    def run(self, args: SearchSimpleArgs) -> str:
        return self._client.search_vault_simple(args.query, args.context_length)


class SearchVaultAdvancedTool(Tool):
    """Query type is checked by the client, before any request is sent."""

    name = "search_vault_advanced"
    description = "Advanced search using Dataview DQL or JsonLogic queries"
    parameters = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search query (DQL or JsonLogic)"},
            "queryType": {
                "type": "string",
                "description": "Query type",
                "enum": ["dataview", "jsonlogic"],
            },
        },
        "required": ["query", "queryType"],
    }
    args_type = SearchAdvancedArgs

    def run(self, args: SearchAdvancedArgs) -> str:
        return self._client.search_vault_advanced(args.query, args.query_type)
