"""
Exception hierarchy and error handling utilities for obsidian-mcp-server.

Provides:
- Custom exception classes with error codes
- Error categorization (validation, backend, transport)
- Safe error message formatting (no bearer token leak)
"""

from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(Enum):
    """Error categories for classification."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    BACKEND = "backend"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    FATAL = "fatal"


class ObsidianMcpError(Exception):
    """Base exception for all obsidian-mcp-server errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.FATAL,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ValidationError(ObsidianMcpError):
    """Tool argument or local query validation error."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", category=ErrorCategory.VALIDATION, details=details)


class UnknownToolError(ObsidianMcpError):
    """Requested tool is not in the registry."""

    def __init__(self, tool_name: str):
        super().__init__(
            f"unknown tool: {tool_name}",
            code="UNKNOWN_TOOL",
            category=ErrorCategory.NOT_FOUND,
            details={"tool_name": tool_name},
        )


class BackendError(ObsidianMcpError):
    """HTTP or network failure talking to the Obsidian REST API."""

    def __init__(self, message: str, status_code: int | None = None):
        category = ErrorCategory.BACKEND if status_code is not None else ErrorCategory.TRANSPORT
        details = {"status_code": status_code} if status_code is not None else {}
        super().__init__(message, code="BACKEND_ERROR", category=category, details=details)
        self.status_code = status_code


class BackendResponseError(ObsidianMcpError):
    """Backend answered with a body that could not be decoded."""

    def __init__(self, message: str):
        super().__init__(message, code="BACKEND_BAD_RESPONSE", category=ErrorCategory.BACKEND)


class TransportError(ObsidianMcpError):
    """The protocol output channel could not be written."""

    def __init__(self, message: str):
        super().__init__(message, code="TRANSPORT_ERROR", category=ErrorCategory.TRANSPORT)


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"[a-zA-Z0-9]{32,}"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove sensitive information from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def classify_exception(exc: Exception) -> tuple[str, ErrorCategory]:
    """
    Classify an exception and return (error_code, category).

    Project exceptions keep their own code; everything else is mapped by type.
    """
    if isinstance(exc, ObsidianMcpError):
        return exc.code, exc.category

    if isinstance(exc, httpx.TimeoutException):
        return "TIMEOUT", ErrorCategory.TIMEOUT

    if isinstance(exc, httpx.RequestError):
        return "CONNECTION_ERROR", ErrorCategory.TRANSPORT

    if isinstance(exc, json.JSONDecodeError):
        return "JSON_PARSE_ERROR", ErrorCategory.VALIDATION

    if isinstance(exc, ValueError):
        return "INVALID_VALUE", ErrorCategory.VALIDATION

    if isinstance(exc, KeyError):
        return "MISSING_KEY", ErrorCategory.VALIDATION

    if isinstance(exc, TypeError):
        return "TYPE_ERROR", ErrorCategory.VALIDATION

    if isinstance(exc, OSError):
        return "IO_ERROR", ErrorCategory.TRANSPORT

    return "INTERNAL_ERROR", ErrorCategory.FATAL
