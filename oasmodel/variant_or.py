"""Values that are a known enum member, an unknown string, or absent."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from .util import ParseError

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class Unknown:
    """A string that is not one of the known variants."""

    value: str


def variant_or_unknown(enum_cls: type[E], value: str) -> E | Unknown:
    """Return the enum member named by ``value`` or ``Unknown(value)``."""
    if not isinstance(value, str):
        raise ParseError(f"expected a string, got {type(value).__name__}")
    try:
        return enum_cls(value)
    except ValueError:
        return Unknown(value)


def variant_or_unknown_or_empty(enum_cls: type[E], value: str | None) -> E | Unknown | None:
    """Like :func:`variant_or_unknown`, with None standing for an absent value."""
    if value is None:
        return None
    return variant_or_unknown(enum_cls, value)


def variant_to_str(value: Enum | Unknown | None) -> str | None:
    """Return the string form of a variant, or None when it is absent."""
    if value is None:
        return None
    if isinstance(value, Unknown):
        return value.value
    return value.value