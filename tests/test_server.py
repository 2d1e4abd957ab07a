import json
import socket
import threading
import time

import pytest

from workbench.protocol import HttpProtocol
from workbench.serializer import JsonSerializer
from workbench.server import WebServer, main
from workbench.server_handler import WebServerHandler
from workbench.service import MyRequestHandler


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _connect(port):
    deadline = time.monotonic() + 5
    while True:
        try:
            return socket.create_connection(("127.0.0.1", port), timeout=5)
        except OSError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.02)


def _read_all(sock):
    data = bytearray()
    while chunk := sock.recv(4096):
        data.extend(chunk)
    return bytes(data)


def _handler():
    return WebServerHandler(HttpProtocol(), JsonSerializer(), MyRequestHandler())


def _ask(port, name):
    with _connect(port) as conn:
        conn.sendall(f'POST / HTTP/1.1\r\n\r\n{{"name":"{name}"}}'.encode())
        reply = _read_all(conn)
    head, body = reply.split(b"\r\n\r\n", 1)
    assert head.startswith(b"HTTP/1.1 200 OK")
    return json.loads(body)


def test_serves_requests_then_stops():
    port = _free_port()
    with WebServer("127.0.0.1", port, _handler(), max_accepts=2) as server:
        thread = threading.Thread(target=server.start)
        thread.start()
        first = _ask(port, "Ann")
        second = _ask(port, "Bo")
        thread.join(5)
        assert not thread.is_alive()
    assert first == {"welcome": "Hello, Ann!"}
    assert second == {"welcome": "Hello, Bo!"}


def test_host_and_port_are_kept():
    with WebServer("localhost", 8080, _handler()) as server:
        assert (server.host, server.port) == ("localhost", 8080)


def test_bind_failure_raises():
    with socket.create_server(("127.0.0.1", 0)) as busy:
        port = busy.getsockname()[1]
        with WebServer("127.0.0.1", port, _handler()) as server:
            with pytest.raises(OSError):
                server.start()


def test_main_reports_bind_failure(capsys):
    with socket.create_server(("127.0.0.1", 0)) as busy:
        port = busy.getsockname()[1]
        code = main(["--host", "127.0.0.1", "--port", str(port)])
    out = capsys.readouterr().out
    assert code == 1
    assert f"Server is starting: 127.0.0.1:{port}" in out
    assert "Server error:" in out