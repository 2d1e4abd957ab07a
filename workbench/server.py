"""A small TCP web server that hands each connection to a thread pool."""

from __future__ import annotations

import argparse
import socket
import time
from collections.abc import Sequence
from types import TracebackType

from workbench.protocol import HttpProtocol
from workbench.serializer import JsonSerializer
from workbench.server_handler import WebServerHandler
from workbench.service import MyRequestHandler
from workbench.threadpool import ThreadPool


class WebServer:
    """Accepts a bounded number of connections and serves them on a pool."""

    def __init__(
        self,
        host: str,
        port: int,
        handler: WebServerHandler,
        *,
        pool_size: int = 4,
        max_accepts: int = 6,
    ) -> None:
        self.host = host
        self.port = port
        self.handler = handler
        self.max_accepts = max_accepts
        self._pool = ThreadPool(pool_size)

    def start(self) -> None:
        """Bind and accept connections; raises ``OSError`` if binding fails."""
        with socket.create_server((self.host, self.port)) as listener:
            for _ in range(self.max_accepts):
                try:
                    conn, _address = listener.accept()
                except OSError as err:
                    print(f"Accept request error: {err}")
                    time.sleep(0.01)
                    continue
                self._pool.execute(lambda conn=conn: self.handler.handle(conn))

    def close(self) -> None:
        """Wait for running requests, then stop the worker threads."""
        self._pool.shutdown()

    def __enter__(self) -> WebServer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the greeting server."""
    parser = argparse.ArgumentParser(prog="web-server")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)

    handler = WebServerHandler(HttpProtocol(), JsonSerializer(), MyRequestHandler())
    with WebServer(args.host, args.port, handler) as server:
        print(f"Server is starting: {server.host}:{server.port}")
        try:
            server.start()
        except OSError as err:
            print(f"Server error: {err}")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())