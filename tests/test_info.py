import pytest

from oasmodel.info import Contact, Info, License
from oasmodel.util import ParseError

PETSTORE_INFO = {
    "title": "Swagger Petstore",
    "license": {"name": "MIT"},
    "version": "1.0.0",
    "x-hash": "abc123",
}


def test_petstore_info():
    info = Info.from_dict(PETSTORE_INFO)
    assert info == Info(
        title="Swagger Petstore",
        license=License(name="MIT"),
        version="1.0.0",
        extensions={"x-hash": "abc123"},
    )
    assert info.to_dict() == PETSTORE_INFO


def test_info_full_round_trip_and_key_order():
    data = {
        "title": "API",
        "description": "desc",
        "termsOfService": "https://example.com/terms",
        "contact": {"name": "Team", "url": "https://example.com", "email": "team@example.com"},
        "license": {"name": "MIT", "url": "https://example.com/license"},
        "version": "2",
        "x-note": [1, 2],
    }
    info = Info.from_dict(data)
    assert info.terms_of_service == "https://example.com/terms"
    assert info.contact.email == "team@example.com"
    out = info.to_dict()
    assert out == data
    assert list(out) == list(data)


def test_unknown_fields_are_ignored():
    info = Info.from_dict({"title": "t", "version": "1", "ignored": "wat"})
    assert "ignored" not in info.to_dict()


def test_null_optional_is_absent():
    info = Info.from_dict({"title": "t", "version": "1", "description": None})
    assert info.description is None
    assert "description" not in info.to_dict()


@pytest.mark.parametrize("missing", ["title", "version"])
def test_missing_required(missing):
    data = {"title": "t", "version": "1"}
    del data[missing]
    with pytest.raises(ParseError, match=missing):
        Info.from_dict(data)


def test_wrong_types_rejected():
    with pytest.raises(ParseError):
        Info.from_dict({"title": 3, "version": "1"})
    with pytest.raises(ParseError):
        Info.from_dict(["title"])
    with pytest.raises(ParseError):
        License.from_dict({"url": "https://example.com"})


def test_contact_round_trip():
    contact = Contact(name="n", extensions={"x-a": True})
    assert Contact.from_dict(contact.to_dict()) == contact
    assert Contact().to_dict() == {}