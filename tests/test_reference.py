import pytest

from oasmodel.reference import (
    Reference,
    as_item,
    reference_or_from_dict,
    reference_or_to_dict,
)


class _Item:
    def __init__(self, data):
        self.data = data

    def to_dict(self):
        return {"wrapped": self.data}


def test_reference_is_read():
    result = reference_or_from_dict({"$ref": "#/components/schemas/Pet"}, _Item)
    assert result == Reference("#/components/schemas/Pet")


def test_reference_ignores_other_keys():
    result = reference_or_from_dict({"$ref": "test", "description": "d"}, _Item)
    assert result == Reference("test")


def test_item_is_parsed_when_no_ref():
    result = reference_or_from_dict({"description": "d"}, _Item)
    assert isinstance(result, _Item)
    assert result.data == {"description": "d"}


def test_non_string_ref_falls_back_to_item():
    result = reference_or_from_dict({"$ref": 5}, _Item)
    assert isinstance(result, _Item)
    assert result.data == {"$ref": 5}


def test_parse_item_errors_propagate():
    def failing(data):
        raise ValueError("bad")

    with pytest.raises(ValueError, match="bad"):
        reference_or_from_dict({"a": 1}, failing)


def test_reference_round_trip():
    ref = Reference("#/components/responses/NotFound")
    assert reference_or_from_dict(reference_or_to_dict(ref), _Item) == ref
    assert ref.to_dict() == {"$ref": "#/components/responses/NotFound"}


def test_reference_or_to_dict_item_and_plain():
    assert reference_or_to_dict(_Item(3)) == {"wrapped": 3}
    assert reference_or_to_dict({"a": 1}) == {"a": 1}


def test_as_item():
    assert as_item(1) == 1
    assert as_item(Reference("")) is None