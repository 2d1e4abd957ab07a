"""The greeting service answered by the web server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Request:
    """Who to greet."""

    name: str = "World"


@dataclass
class Response:
    """The greeting."""

    welcome: str = "Hello, World!"


class MyRequestHandler:
    """Greets the person named in the request."""

    def handle(self, request: Request) -> Response:
        return Response(welcome=f"Hello, {request.name}!")