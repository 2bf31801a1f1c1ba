"""Common error-boundary helpers that turn failures into JSON-RPC error responses."""

from __future__ import annotations

from typing import Any

from loguru import logger

from obsidian_mcp.mcp.protocol import ErrorCode, Response
from obsidian_mcp.utils.exceptions import (
    ObsidianMcpError,
    classify_exception,
    sanitize_error_message,
)


def parse_error_response(exc: Exception) -> Response:
    """Build the id-less response for an input line that could not be decoded."""
    logger.warning("Failed to decode request: {}", exc)
    return Response.failure(None, ErrorCode.PARSE_ERROR, "Parse error", str(exc))


def method_not_found_response(*, request_id: Any, method: str) -> Response:
    """Build standardized unknown-method response."""
    logger.info("Unknown method {}", method)
    return Response.failure(request_id, ErrorCode.METHOD_NOT_FOUND, "Method not found", method)


def invalid_params_response(*, request_id: Any, message: str) -> Response:
    return Response.failure(request_id, ErrorCode.INVALID_PARAMS, message)


def obsidian_error_response(*, request_id: Any, method: str, exc: ObsidianMcpError) -> Response:
    """Map project errors to internal-error responses, keeping their message intact."""
    logger.warning("Method {} failed with {}: {}", method, exc.code, exc.message)
    data = {"error_code": exc.code, "category": exc.category.value, **exc.details}
    return Response.failure(request_id, ErrorCode.INTERNAL_ERROR, exc.message, data)


def unhandled_exception_response(*, request_id: Any, method: str, exc: Exception) -> Response:
    """Map unexpected exceptions to standardized internal-error responses."""
    code, category = classify_exception(exc)
    sanitized = sanitize_error_message(str(exc))
    logger.exception("Method {} failed with [{}]: {}", method, code, sanitized)
    data = {"error_code": code, "category": category.value}
    return Response.failure(request_id, ErrorCode.INTERNAL_ERROR, sanitized, data)
