"""References (``$ref``) that may stand in place of an inline object."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Reference:
    """A ``$ref`` pointing at an object defined elsewhere."""

    reference: str

    def to_dict(self) -> dict[str, str]:
        return {"$ref": self.reference}


def reference_or_from_dict(data: Any, parse_item: Callable[[Any], T]) -> Reference | T:
    """Read a reference if ``data`` holds a string ``$ref``, otherwise parse an item."""
    if isinstance(data, Mapping) and isinstance(data.get("$ref"), str):
        return Reference(data["$ref"])
    return parse_item(data)


def reference_or_to_dict(value: Any) -> Any:
    """Serialise a reference or an item to plain data."""
    if isinstance(value, Reference):
        return value.to_dict()
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


def as_item(value: Reference | T) -> T | None:
    """Return the item, or None when ``value`` is a reference."""
    if isinstance(value, Reference):
        return None
    return value