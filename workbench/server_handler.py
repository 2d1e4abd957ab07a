"""Per-connection handling: read, decode, answer, encode, write."""

from __future__ import annotations

import socket
from typing import Any

from workbench.protocol import HttpProtocol
from workbench.serializer import JsonSerializer
from workbench.service import Request


class WebServerHandler:
    """Serves one request per connection and then closes it."""

    def __init__(
        self,
        protocol: HttpProtocol,
        serializer: JsonSerializer,
        handler: Any,
        request_type: type = Request,
    ) -> None:
        self.protocol = protocol
        self.serializer = serializer
        self.handler = handler
        self.request_type = request_type

    def handle(self, conn: socket.socket) -> None:
        """Answer the request on ``conn``; on any failure drop the connection."""
        try:
            text = self.protocol.read(conn)
            request = self.serializer.deserialize(text, self.request_type)
            response = self.handler.handle(request)
            payload = self.serializer.serialize(response)
            self.protocol.write(conn, payload.encode("utf-8"))
        except Exception as err:  # any stage may fail; the connection is dropped
            print(f"Error: {err}")
            try:
                conn.shutdown(socket.SHUT_RDWR)
            except OSError as close_err:
                print(f"Connection close error: {close_err}")
        finally:
            conn.close()