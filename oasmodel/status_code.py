"""HTTP status codes and status code ranges used as response keys."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .util import ParseError

_INTEGER = re.compile(r"[+-]?[0-9]+")
_EXPECTING = "number between 100 and 999 (as string or integer) or a string that matches `\\dXX`"


@dataclass(frozen=True, order=True)
class StatusCode:
    """An exact status code such as 200, or a range such as 2XX."""

    is_range: bool
    value: int

    @classmethod
    def code(cls, number: int) -> StatusCode:
        return cls(False, number)

    @classmethod
    def range(cls, digit: int) -> StatusCode:
        return cls(True, digit)

    @classmethod
    def parse(cls, value: Any) -> StatusCode:
        """Read a status code from an integer or a three-character string."""
        if isinstance(value, bool):
            raise ParseError(f"invalid type: boolean `{value}`, expected {_EXPECTING}")
        if isinstance(value, int):
            return cls._from_number(value)
        if not isinstance(value, str):
            raise ParseError(f"invalid type: {type(value).__name__}, expected {_EXPECTING}")
        if len(value.encode("utf-8")) != 3:
            raise ParseError(f'invalid value: string "{value}", expected length 3')
        if _INTEGER.fullmatch(value):
            return cls._from_number(int(value))
        if not value.isascii():
            raise ParseError(f'invalid value: string "{value}", expected ascii, format `\\dXX`')
        upper = value.upper()
        if upper[0] in "0123456789" and upper[1:] == "XX":
            return cls.range(int(upper[0]))
        raise ParseError(f'invalid value: string "{value}", expected format `\\dXX`')

    @classmethod
    def _from_number(cls, number: int) -> StatusCode:
        if 100 <= number < 1000:
            return cls.code(number)
        raise ParseError(f"invalid value: integer `{number}`, expected {_EXPECTING}")

    def __str__(self) -> str:
        return f"{self.value}XX" if self.is_range else str(self.value)