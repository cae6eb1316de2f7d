"""Compact JSON encoding and typed decoding for plain objects."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["SerializationError", "to_json", "from_json"]

T = TypeVar("T")


class SerializationError(ValueError):
    """Raised when JSON text cannot be decoded into the requested type."""


def _encode_object(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON text of *obj*.

    Dataclass instances and plain objects are encoded as JSON objects of
    their fields at any depth.

    >>> to_json([1, 2, 3])
    '[1,2,3]'
    """
    return json.dumps(obj, separators=(",", ":"), default=_encode_object)


def from_json(cls: type[T] | None, text: str | None) -> T | Any:
    """Decode *text* and, when *cls* is given, return it as an instance of *cls*.

    Dataclasses are constructed through their ``__init__``; any other class
    gets a bare instance whose attributes are the decoded keys.  Returns
    ``None`` when both arguments are empty.
    """
    if not text and cls is None:
        return None
    try:
        data = json.loads(text or "")
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}") from exc

    if cls is None:
        return data
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    if dataclasses.is_dataclass(cls):
        try:
            return cls(**data)
        except TypeError as exc:
            raise SerializationError(f"Cannot build {cls.__name__}: {exc}") from exc

    obj = cls.__new__(cls)
    try:
        obj.__dict__.update(data)
    except AttributeError as exc:
        raise SerializationError(
            f"Cannot set attributes on {cls.__name__} instances"
        ) from exc
    return obj
