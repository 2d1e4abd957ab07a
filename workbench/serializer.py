"""JSON serialisation of dataclass requests and responses."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")

_NAMED_TYPES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "list": list,
    "dict": dict,
}


def _field_type(field: dataclasses.Field) -> Any:
    expected = field.type
    if isinstance(expected, str):
        return _NAMED_TYPES.get(expected)
    return expected


def _matches(value: Any, expected: type) -> bool:
    if expected is bool:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if expected is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected)


def _build(cls: Any, data: Any) -> Any:
    if dataclasses.is_dataclass(cls) and isinstance(cls, type):
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object for {cls.__name__}")
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            if not field.init:
                continue
            if field.name not in data:
                raise ValueError(f"missing field `{field.name}`")
            value = data[field.name]
            expected = _field_type(field)
            if dataclasses.is_dataclass(expected) and isinstance(expected, type):
                value = _build(expected, value)
            elif isinstance(expected, type) and not _matches(value, expected):
                raise ValueError(f"invalid type for field `{field.name}`")
            kwargs[field.name] = value
        return cls(**kwargs)
    if isinstance(cls, type) and cls is not object and not _matches(data, cls):
        raise ValueError(f"expected a JSON value of type {cls.__name__}")
    return data


class JsonSerializer:
    """Compact JSON; an empty input decodes to the type's default value."""

    def serialize(self, value: Any) -> str:
        """Encode ``value`` (a dataclass instance or plain JSON data)."""
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            value = dataclasses.asdict(value)
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)

    def deserialize(self, text: str, cls: type[T]) -> T:
        """Decode ``text`` into ``cls``; raises ``ValueError`` on bad input."""
        if not text:
            return cls()
        return _build(cls, json.loads(text))