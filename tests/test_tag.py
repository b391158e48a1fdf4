import pytest

from oasmodel.tag import ExternalDocumentation, Tag
from oasmodel.util import ParseError


def test_tag_round_trip():
    data = {
        "name": "pets",
        "description": "Pet operations",
        "externalDocs": {"description": "More", "url": "https://example.com/docs"},
        "x-order": 1,
    }
    tag = Tag.from_dict(data)
    assert tag.external_docs == ExternalDocumentation(
        description="More", url="https://example.com/docs"
    )
    assert tag.extensions == {"x-order": 1}
    out = tag.to_dict()
    assert out == data
    assert list(out) == list(data)


def test_minimal_tag():
    tag = Tag.from_dict({"name": "store"})
    assert tag == Tag(name="store")
    assert tag.to_dict() == {"name": "store"}


def test_tag_missing_name():
    with pytest.raises(ParseError, match="name"):
        Tag.from_dict({"description": "d"})


def test_external_docs_missing_url():
    with pytest.raises(ParseError, match="url"):
        Tag.from_dict({"name": "t", "externalDocs": {"description": "d"}})


def test_external_docs_round_trip():
    docs = ExternalDocumentation(url="https://example.com", extensions={"x-a": "b"})
    assert ExternalDocumentation.from_dict(docs.to_dict()) == docs


def test_external_docs_not_a_mapping():
    with pytest.raises(ParseError):
        Tag.from_dict({"name": "t", "externalDocs": "https://example.com"})