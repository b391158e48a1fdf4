"""Primitive schema types (string, number, integer, boolean) and their formats."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .variant_or import Unknown, variant_to_str


class NumberFormat(Enum):
    """Known formats of a number schema."""

    FLOAT = "float"
    DOUBLE = "double"


class IntegerFormat(Enum):
    """Known formats of an integer schema."""

    INT32 = "int32"
    INT64 = "int64"


class StringFormat(Enum):
    """Known formats of a string schema."""

    DATE = "date"
    DATE_TIME = "date-time"
    PASSWORD = "password"
    BYTE = "byte"
    BINARY = "binary"


def _put(out: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        out[key] = value


def _put_format(out: dict[str, Any], value: Enum | Unknown | None) -> None:
    _put(out, "format", variant_to_str(value))


@dataclass
class StringType:
    """A schema of ``type: string``."""

    format: StringFormat | Unknown | None = None
    pattern: str | None = None
    enumeration: list[str | None] = field(default_factory=list)
    min_length: int | None = None
    max_length: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": "string"}
        _put_format(out, self.format)
        _put(out, "pattern", self.pattern)
        if self.enumeration:
            out["enum"] = list(self.enumeration)
        _put(out, "minLength", self.min_length)
        _put(out, "maxLength", self.max_length)
        return out


@dataclass
class NumberType:
    """A schema of ``type: number``."""

    format: NumberFormat | Unknown | None = None
    multiple_of: float | None = None
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False
    minimum: float | None = None
    maximum: float | None = None
    enumeration: list[float | None] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": "number"}
        _put_format(out, self.format)
        _put(out, "multipleOf", self.multiple_of)
        if self.exclusive_minimum:
            out["exclusiveMinimum"] = True
        if self.exclusive_maximum:
            out["exclusiveMaximum"] = True
        _put(out, "minimum", self.minimum)
        _put(out, "maximum", self.maximum)
        if self.enumeration:
            out["enum"] = list(self.enumeration)
        return out


@dataclass
class IntegerType:
    """A schema of ``type: integer``."""

    format: IntegerFormat | Unknown | None = None
    multiple_of: int | None = None
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False
    minimum: int | None = None
    maximum: int | None = None
    enumeration: list[int | None] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": "integer"}
        _put_format(out, self.format)
        _put(out, "multipleOf", self.multiple_of)
        if self.exclusive_minimum:
            out["exclusiveMinimum"] = True
        if self.exclusive_maximum:
            out["exclusiveMaximum"] = True
        _put(out, "minimum", self.minimum)
        _put(out, "maximum", self.maximum)
        if self.enumeration:
            out["enum"] = list(self.enumeration)
        return out


@dataclass
class BooleanType:
    """A schema of ``type: boolean``."""

    enumeration: list[bool | None] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": "boolean"}
        if self.enumeration:
            out["enum"] = list(self.enumeration)
        return out