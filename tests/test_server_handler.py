import socket

import pytest

from workbench.protocol import HttpProtocol
from workbench.serializer import JsonSerializer
from workbench.server_handler import WebServerHandler
from workbench.service import MyRequestHandler, Response


@pytest.fixture
def pair():
    client, server = socket.socketpair()
    yield client, server
    client.close()
    server.close()


def _read_all(sock):
    data = bytearray()
    while chunk := sock.recv(4096):
        data.extend(chunk)
    return bytes(data)


def _handler(inner=None):
    return WebServerHandler(HttpProtocol(), JsonSerializer(), inner or MyRequestHandler())


def test_answers_request(pair):
    client, server = pair
    client.sendall(b"POST / HTTP/1.1\r\n\r\n{\"name\":\"Ann\"}")
    _handler().handle(server)
    head, body = _read_all(client).split(b"\r\n\r\n", 1)
    assert head.startswith(b"HTTP/1.1 200 OK")
    assert f"Content-Length: {len(body)}".encode() in head
    response = JsonSerializer().deserialize(body.decode(), Response)
    assert response.welcome == "Hello, Ann!"


def test_empty_body_uses_default_request(pair):
    client, server = pair
    client.sendall(b"GET / HTTP/1.1\r\n\r\n")
    _handler().handle(server)
    body = HttpProtocol().read(client)
    response = JsonSerializer().deserialize(body, Response)
    assert response.welcome == "Hello, World!"


def test_bad_json_closes_without_reply(pair, capsys):
    client, server = pair
    client.sendall(b"POST / HTTP/1.1\r\n\r\n{oops")
    _handler().handle(server)
    assert _read_all(client) == b""
    assert "Error:" in capsys.readouterr().out


class _Failing:
    def handle(self, request):
        raise OSError("handler broke")


def test_handler_error_closes_without_reply(pair, capsys):
    client, server = pair
    client.sendall(b"POST / HTTP/1.1\r\n\r\n{\"name\":\"Ann\"}")
    _handler(_Failing()).handle(server)
    assert _read_all(client) == b""
    assert "handler broke" in capsys.readouterr().out