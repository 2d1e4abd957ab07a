"""Small printing and module-layout demonstrations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class TestData:
    """A pair displayed as ``(x, y)``."""

    __test__ = False

    x: int
    y: str

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def format_list(items: Iterable[Any]) -> str:
    """Render items as ``[ a, b, c ]``."""
    return "[" + ",".join(f" {item}" for item in items) + " ]"


def _emit(message: str) -> str:
    print(message)
    return message


def show(value: Any) -> str:
    """Print ``value`` with a ``show:`` prefix and return the printed line."""
    return _emit(f"show: {value}")


def say_hello() -> str:
    """Print a greeting and return it."""
    return _emit("Hello, world!")


def say_hello_2() -> list[str]:
    """Greet twice and return both lines."""
    return [say_hello(), say_hello()]


def say_ok() -> str:
    """Print an acknowledgement and return it."""
    return _emit("Ok!")


def say_mod31() -> str:
    """Print the name of the inner module and return it."""
    return _emit("mod3")


def say_mod32() -> str:
    """Delegate to the inner module's greeting."""
    return say_mod31()


def show_main(argv: Sequence[str] | None = None) -> int:
    """Greet, then show a string and a number."""
    _emit("Hello, world!")
    show("Ok")
    x = 99
    show(x)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run every greeting in turn."""
    _emit("Hello, world!")
    say_hello()
    say_hello_2()
    say_ok()
    say_mod32()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())