"""Line-delimited JSON-RPC transport over a pair of text streams."""

from __future__ import annotations

from typing import Callable, TextIO

from loguru import logger

from obsidian_mcp.mcp.error_boundary import parse_error_response
from obsidian_mcp.mcp.protocol import Request, Response, decode_request
from obsidian_mcp.utils.exceptions import TransportError

RequestHandler = Callable[[Request], Response | None]


class StdioTransport:
    """
    Read one request per line, write one response per line.

    Requests are handled strictly in order: a line is not read until the
    response to the previous one has been written and flushed.
    """

    def __init__(self, reader: TextIO, writer: TextIO):
        self._reader = reader
        self._writer = writer

    def serve(self, handler: RequestHandler) -> int:
        """Run until end of input. Returns the number of lines processed."""
        processed = 0
        for line in self._reader:
            if not line.strip():
                continue
            processed += 1
            try:
                request = decode_request(line)
            except ValueError as exc:
                self.send(parse_error_response(exc))
                continue
            response = handler(request)
            if response is not None:
                self.send(response)
        logger.info("Input closed after {} request(s)", processed)
        return processed

    def send(self, response: Response) -> None:
        data = response.to_line()
        try:
            self._writer.write(data)
            self._writer.flush()
        except OSError as exc:
            raise TransportError(f"failed to send response: {exc}") from exc
