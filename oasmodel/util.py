"""Shared helpers for reading and writing OpenAPI document objects."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any


class ParseError(ValueError):
    """Raised when a document fragment does not have the expected shape."""


def is_false(value: bool) -> bool:
    """Return True when ``value`` is false; used to omit default flags."""
    return not value


def filter_keys(data: Mapping[Any, Any], predicate: Callable[[Any], bool]) -> dict[Any, Any]:
    """Return the entries of ``data`` whose key satisfies ``predicate``, in order."""
    return {key: value for key, value in data.items() if predicate(key)}


def extract_extensions(data: Mapping[Any, Any]) -> dict[str, Any]:
    """Return the specification extensions (keys starting with ``x-``) of ``data``."""
    return filter_keys(data, lambda key: isinstance(key, str) and key.startswith("x-"))


_TYPE_NAMES = {
    str: "a string",
    bool: "a boolean",
    int: "an integer",
    float: "a number",
    list: "a sequence",
    dict: "a mapping",
}


def _matches(value: Any, kind: type) -> bool:
    if kind is bool:
        return isinstance(value, bool)
    if kind is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if kind is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if kind is dict:
        return isinstance(value, Mapping)
    if kind is list:
        return isinstance(value, (list, tuple))
    return isinstance(value, kind)


def _expect_mapping(data: Any, owner: str) -> Mapping[Any, Any]:
    if not isinstance(data, Mapping):
        raise ParseError(f"{owner}: expected a mapping, got {type(data).__name__}")
    return data


def _field(data: Mapping[Any, Any], key: str, kind: type, owner: str, *, required: bool = False) -> Any:
    if key not in data:
        if required:
            raise ParseError(f"{owner}: missing field `{key}`")
        return None
    value = data[key]
    if value is None and not required:
        return None
    if not _matches(value, kind):
        raise ParseError(f"{owner}: field `{key}` must be {_TYPE_NAMES.get(kind, kind.__name__)}")
    return value


def _str_list(data: Mapping[Any, Any], key: str, owner: str) -> list[str]:
    value = _field(data, key, list, owner)
    if value is None:
        return []
    if not all(isinstance(item, str) for item in value):
        raise ParseError(f"{owner}: field `{key}` must hold only strings")
    return list(value)


def _str_map(data: Mapping[Any, Any], key: str, owner: str) -> dict[str, str]:
    value = _field(data, key, dict, owner)
    if value is None:
        return {}
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
        raise ParseError(f"{owner}: field `{key}` must map strings to strings")
    return dict(value)


def _without_none(entries: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in entries.items() if value is not None}