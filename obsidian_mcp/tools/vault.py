"""Vault file tools: list, read, write, append, patch, delete, open."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from obsidian_mcp.tools.base import Tool, optional_bool, optional_str, required_str

_FILENAME_PROPERTY = {
    "type": "string",
    "description": "Path to the file relative to vault root",
}


@dataclass(frozen=True, slots=True)
class ListVaultFilesArgs:
    path: str = ""

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> ListVaultFilesArgs:
        return cls(path=optional_str(arguments, "path", ""))


@dataclass(frozen=True, slots=True)
class GetFileContentArgs:
    filename: str
    format: str = "markdown"

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> GetFileContentArgs:
        return cls(
            filename=required_str(arguments, "filename"),
            format=optional_str(arguments, "format", "markdown"),
        )


@dataclass(frozen=True, slots=True)
class CreateOrUpdateFileArgs:
    filename: str
    content: str
    content_type: str = "text/markdown"

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> CreateOrUpdateFileArgs:
        return cls(
            filename=required_str(arguments, "filename"),
            content=required_str(arguments, "content"),
            content_type=optional_str(arguments, "contentType", "text/markdown"),
        )


@dataclass(frozen=True, slots=True)
class AppendToFileArgs:
    filename: str
    content: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> AppendToFileArgs:
        return cls(
            filename=required_str(arguments, "filename"),
            content=required_str(arguments, "content"),
        )


@dataclass(frozen=True, slots=True)
class PatchFileContentArgs:
    filename: str
    operation: str
    target_type: str
    target: str
    content: str
    content_type: str = "text/markdown"
    delimiter: str = "::"

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> PatchFileContentArgs:
        return cls(
            filename=required_str(arguments, "filename"),
            operation=required_str(arguments, "operation"),
            target_type=required_str(arguments, "targetType"),
            target=required_str(arguments, "target"),
            content=required_str(arguments, "content"),
            content_type=optional_str(arguments, "contentType", "text/markdown"),
            delimiter=optional_str(arguments, "delimiter", "::"),
        )


@dataclass(frozen=True, slots=True)
class FilenameArgs:
    filename: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> FilenameArgs:
        return cls(filename=required_str(arguments, "filename"))


@dataclass(frozen=True, slots=True)
class OpenFileArgs:
    filename: str
    new_leaf: bool = False

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> OpenFileArgs:
        return cls(
            filename=required_str(arguments, "filename"),
            new_leaf=optional_bool(arguments, "newLeaf", False),
        )


class ListVaultFilesTool(Tool):
    name = "list_vault_files"
    description = "List files in the vault root or a specific directory"
    parameters = {
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "Directory path relative to vault root (optional, defaults to root)",
            },
        },
    }
    args_type = ListVaultFilesArgs

    def run(self, args: ListVaultFilesArgs) -> str:
        return self._client.list_vault_files(args.path)


class GetFileContentTool(Tool):
    name = "get_file_content"
    description = "Get the content of a specific file, supports both markdown and JSON format"
    parameters = {
        "type": "object",
        "properties": {
            "filename": _FILENAME_PROPERTY,
            "format": {
                "type": "string",
                "description": "Response format: 'markdown' (default) or 'json' (includes metadata)",
                "enum": ["markdown", "json"],
            },
        },
        "required": ["filename"],
    }
    args_type = GetFileContentArgs

    def run(self, args: GetFileContentArgs) -> str:
        return self._client.get_file_content(args.filename, args.format)


class CreateOrUpdateFileTool(Tool):
    name = "create_or_update_file"
    description = "Create a new file or update an existing one"
    parameters = {
        "type": "object",
        "properties": {
            "filename": _FILENAME_PROPERTY,
            "content": {"type": "string", "description": "Content to write to the file"},
            "contentType": {"type": "string", "description": "Content type (defaults to 'text/markdown')"},
        },
        "required": ["filename", "content"],
    }
    args_type = CreateOrUpdateFileArgs

    def run(self, args: CreateOrUpdateFileArgs) -> str:
        return self._client.create_or_update_file(args.filename, args.content, args.content_type)


class AppendToFileTool(Tool):
    name = "append_to_file"
    description = "Append content to the end of an existing file"
    parameters = {
        "type": "object",
        "properties": {
            "filename": _FILENAME_PROPERTY,
            "content": {"type": "string", "description": "Content to append to the file"},
        },
        "required": ["filename", "content"],
    }
    args_type = AppendToFileArgs

    def run(self, args: AppendToFileArgs) -> str:
        return self._client.append_to_file(args.filename, args.content)


class PatchFileContentTool(Tool):
    name = "patch_file_content"
    description = "Insert content relative to headings, blocks, or frontmatter fields"
    parameters = {
        "type": "object",
        "properties": {
            "filename": _FILENAME_PROPERTY,
            "operation": {
                "type": "string",
                "description": "Patch operation to perform",
                "enum": ["append", "prepend", "replace"],
            },
            "targetType": {
                "type": "string",
                "description": "Type of target to patch",
                "enum": ["heading", "block", "frontmatter"],
            },
            "target": {
                "type": "string",
                "description": "Target to patch (heading path, block ID, or frontmatter field)",
            },
            "content": {"type": "string", "description": "Content to insert"},
            "contentType": {"type": "string", "description": "Content type (defaults to 'text/markdown')"},
            "delimiter": {"type": "string", "description": "Delimiter for nested targets (defaults to '::')"},
        },
        "required": ["filename", "operation", "targetType", "target", "content"],
    }
    args_type = PatchFileContentArgs

    def run(self, args: PatchFileContentArgs) -> str:
        return self._client.patch_file_content(
            args.filename,
            args.operation,
            args.target_type,
            args.target,
            args.content,
            args.content_type,
            args.delimiter,
        )


class DeleteFileTool(Tool):
    name = "delete_file"
    description = "Delete a specific file from the vault"
    parameters = {
        "type": "object",
        "properties": {"filename": _FILENAME_PROPERTY},
        "required": ["filename"],
    }
    args_type = FilenameArgs

    def run(self, args: FilenameArgs) -> str:
        return self._client.delete_file(args.filename)


class OpenFileTool(Tool):
    name = "open_file"
    description = "Open a file in the Obsidian UI"
    parameters = {
        "type": "object",
        "properties": {
            "filename": _FILENAME_PROPERTY,
            "newLeaf": {"type": "boolean", "description": "Open in a new leaf (default: false)"},
        },
        "required": ["filename"],
    }
    args_type = OpenFileArgs

    def run(self, args: OpenFileArgs) -> str:
        return self._client.open_file(args.filename, args.new_leaf)
