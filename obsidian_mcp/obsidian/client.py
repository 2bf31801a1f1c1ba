"""HTTP client for the Obsidian Local REST API."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote, quote_plus

import httpx
from loguru import logger

from obsidian_mcp.utils.exceptions import BackendError, BackendResponseError, ValidationError

DEFAULT_BASE_URL = "http://127.0.0.1:27123"

NOTE_JSON_MEDIA_TYPE = "application/vnd.olrapi.note+json"
QUERY_CONTENT_TYPES: dict[str, str] = {
    "dataview": "application/vnd.olrapi.dataview.dql+txt",
    "jsonlogic": "application/vnd.olrapi.jsonlogic+json",
}

# Sub-delims kept literal in a single path segment; "," ";" "/" "?" are escaped.
_PATH_SEGMENT_SAFE = "$&+:=@"


def _vault_path(prefix: str, filename: str) -> str:
    return prefix + filename.removeprefix("/")


class ObsidianClient:
    """One method per tool; each call is a single synchronous request/reply."""

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._api_token = api_token
        self._http = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> ObsidianClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        content: str | None = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        request_headers = {"Authorization": f"Bearer {self._api_token}"}
        request_headers.update(headers or {})
        logger.debug("Obsidian request {} {}", method, path)
        try:
            resp = self._http.request(
                method,
                url,
                headers=request_headers,
                content=content.encode("utf-8") if content is not None else None,
            )
        except httpx.RequestError as exc:
            raise BackendError(f"request failed: {method} {path}: {exc}") from exc

        if resp.status_code >= 400:
            logger.warning("Obsidian API error method={} path={} status={}", method, path, resp.status_code)
            raise BackendError(
                f"API error (status {resp.status_code}): {resp.text}",
                status_code=resp.status_code,
            )
        return resp

    @staticmethod
    def _format_json(resp: httpx.Response, expected: type) -> str:
        try:
            body: Any = json.loads(resp.content)
        except ValueError as exc:
            raise BackendResponseError(f"failed to parse response: {exc}") from exc
        if not isinstance(body, expected):
            kind = "object" if expected is dict else "array"
            raise BackendResponseError(f"failed to parse response: expected a JSON {kind}")
        return json.dumps(body, indent=2, sort_keys=True, ensure_ascii=False)

    def get_server_info(self) -> str:
        resp = self._request("GET", "/")
        return self._format_json(resp, dict)

    def list_vault_files(self, path: str = "") -> str:
        api_path = "/vault/"
        trimmed = path.strip("/")
        if trimmed:
            api_path = f"/vault/{trimmed}/"
        resp = self._request("GET", api_path)
        return self._format_json(resp, dict)

    def get_file_content(self, filename: str, format: str = "markdown") -> str:
        headers = {"Accept": NOTE_JSON_MEDIA_TYPE} if format == "json" else None
        resp = self._request("GET", _vault_path("/vault/", filename), headers)
        if format == "json":
            return self._format_json(resp, dict)
        return resp.text

    def create_or_update_file(self, filename: str, content: str, content_type: str = "text/markdown") -> str:
        self._request("PUT", _vault_path("/vault/", filename), {"Content-Type": content_type}, content)
        return f"Successfully created/updated file: {filename}"

    def append_to_file(self, filename: str, content: str) -> str:
        self._request("POST", _vault_path("/vault/", filename), {"Content-Type": "text/markdown"}, content)
        return f"Successfully appended to file: {filename}"

    def patch_file_content(
        self,
        filename: str,
        operation: str,
        target_type: str,
        target: str,
        content: str,
        content_type: str = "text/markdown",
        delimiter: str = "::",
    ) -> str:
        headers = {
            "Content-Type": content_type,
            "Operation": operation,
            "Target-Type": target_type,
            "Target": quote_plus(target),
            "Target-Delimiter": delimiter,
        }
        self._request("PATCH", _vault_path("/vault/", filename), headers, content)
        return f"Successfully patched file: {filename} (operation: {operation}, target: {target})"

    def delete_file(self, filename: str) -> str:
        self._request("DELETE", _vault_path("/vault/", filename))
        return f"Successfully deleted file: {filename}"

    def search_vault_simple(self, query: str, context_length: int = 100) -> str:
        api_path = f"/search/simple/?query={quote_plus(query)}"
        if context_length > 0:
            api_path += f"&contextLength={context_length}"
        resp = self._request("POST", api_path)
        return self._format_json(resp, list)

    def search_vault_advanced(self, query: str, query_type: str) -> str:
        content_type = QUERY_CONTENT_TYPES.get(query_type)
        if content_type is None:
            raise ValidationError(f"unsupported query type: {query_type}", field="queryType")
        if query_type == "jsonlogic":
            try:
                json.loads(query)
            except ValueError as exc:
                raise ValidationError(f"invalid JSON query: {exc}", field="query") from exc
        resp = self._request("POST", "/search/", {"Content-Type": content_type}, query)
        return self._format_json(resp, list)

    def list_commands(self) -> str:
        resp = self._request("GET", "/commands/")
        return self._format_json(resp, dict)

    def execute_command(self, command_id: str) -> str:
        self._request("POST", f"/commands/{quote(command_id, safe=_PATH_SEGMENT_SAFE)}/")
        return f"Successfully executed command: {command_id}"

    def open_file(self, filename: str, new_leaf: bool = False) -> str:
        api_path = _vault_path("/open/", filename)
        if new_leaf:
            api_path += "?newLeaf=true"
        self._request("POST", api_path)
        return f"Successfully opened file: {filename}"
