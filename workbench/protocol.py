"""A minimal HTTP framing: read a request body, write a 200 response."""

from __future__ import annotations

import socket

HEADER_BODY_SPLITTER = "\r\n\r\n"
OK_LINE = b"HTTP/1.1 200 OK\r\n"
EMPTY_LINE = b"\r\n"
_CHUNK_SIZE = 1024


class HttpProtocol:
    """Reads the body of an HTTP request and writes plain 200 responses."""

    def read(self, stream: socket.socket) -> str:
        """Return the request body, or an empty string when there is none.

        Raises ``ValueError`` if the request is not valid UTF-8.
        """
        chunks = bytearray()
        while True:
            chunk = stream.recv(_CHUNK_SIZE)
            chunks.extend(chunk)
            if len(chunk) < _CHUNK_SIZE:
                break
        try:
            text = chunks.decode("utf-8")
        except UnicodeDecodeError as err:
            raise ValueError(f"request is not valid UTF-8: {err}") from err
        parts = text.split(HEADER_BODY_SPLITTER)
        return parts[1] if len(parts) > 1 else ""

    def write(self, stream: socket.socket, data: bytes) -> None:
        """Send ``data`` as the body of a 200 response."""
        stream.sendall(OK_LINE)
        stream.sendall(f"Content-Length: {len(data)}\r\n".encode("ascii"))
        stream.sendall(EMPTY_LINE)
        stream.sendall(data)