from enum import Enum

import pytest

from oasmodel.util import ParseError
from oasmodel.variant_or import (
    Unknown,
    variant_or_unknown,
    variant_or_unknown_or_empty,
    variant_to_str,
)


class _Format(Enum):
    DATE = "date"
    DATE_TIME = "date-time"
    PASSWORD = "password"
    BYTE = "byte"
    BINARY = "binary"


def test_variant_from():
    assert variant_or_unknown_or_empty(_Format, None) is None
    assert variant_or_unknown_or_empty(_Format, "date") is _Format.DATE
    assert variant_or_unknown_or_empty(_Format, "yolo") == Unknown("yolo")


def test_variant_or_unknown():
    assert variant_or_unknown(_Format, "date-time") is _Format.DATE_TIME
    assert variant_or_unknown(_Format, "Date") == Unknown("Date")


def test_variant_or_unknown_rejects_non_string():
    with pytest.raises(ParseError):
        variant_or_unknown(_Format, 3)


@pytest.mark.parametrize("text", ["date", "binary", "yolo", ""])
def test_round_trip(text):
    assert variant_to_str(variant_or_unknown_or_empty(_Format, text)) == text


def test_variant_to_str_empty():
    assert variant_to_str(None) is None