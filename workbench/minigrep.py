"""A tiny grep: print the lines of a file that contain a query string."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """The query and the file to search."""

    query: str
    file_name: str

    @classmethod
    def from_args(cls, args: Sequence[str]) -> Config:
        """Build from a full argument vector whose first item is the program name."""
        if len(args) < 3:
            raise ValueError("args length < 3")
        return cls(query=args[1], file_name=args[2])

    def __str__(self) -> str:
        return f"{{ query: '{self.query}', file_name: '{self.file_name}' }}"


def _lines(content: str) -> Iterator[str]:
    """Split on newlines, dropping a trailing carriage return from each line."""
    if not content:
        return
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def grep(query: str, content: str) -> list[str]:
    """Return the lines of ``content`` that contain ``query``."""
    return [line for line in _lines(content) if query in line]


def run(args: Sequence[str]) -> list[str]:
    """Search the file named in ``args`` and return the matching lines."""
    config = Config.from_args(args)
    print(f"Search '{config.query}' in file '{config.file_name}'\n")

    content = Path(config.file_name).read_text()
    print(f"The file content: \n\n{content}")

    return grep(config.query, content)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; ``argv`` excludes the program name."""
    arguments = sys.argv[1:] if argv is None else list(argv)
    try:
        result = run(["minigrep", *arguments])
    except ValueError as err:
        print(err)
        return 1
    except OSError as err:
        print(f"Open file failed!: {err}", file=sys.stderr)
        return 1

    print("The grep result: \n")
    for part in result:
        print(part)
    return 0


if __name__ == "__main__":
    sys.exit(main())