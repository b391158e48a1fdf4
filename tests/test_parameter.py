import pytest

from oasmodel.example import Example
from oasmodel.parameter import (
    CookieParameter,
    CookieStyle,
    Encoding,
    Header,
    HeaderParameter,
    HeaderStyle,
    MediaType,
    Parameter,
    ParameterData,
    PathParameter,
    PathStyle,
    QueryParameter,
    QueryStyle,
)
from oasmodel.reference import Reference
from oasmodel.schema import Schema
from oasmodel.schema_types import IntegerFormat, IntegerType, StringType
from oasmodel.util import ParseError


def _query(**extra):
    data = {"in": "query", "name": "limit", "schema": {"type": "integer", "format": "int32"}}
    data.update(extra)
    return data


def test_query_parameter_parsed():
    param = Parameter.from_dict(_query())
    assert isinstance(param, QueryParameter)
    assert param.parameter_data.name == "limit"
    assert param.style is QueryStyle.FORM
    assert param.allow_reserved is False
    assert param.allow_empty_value is None
    assert isinstance(param.parameter_data.format, Schema)
    assert param.parameter_data.format.schema_kind == IntegerType(format=IntegerFormat.INT32)


def test_query_style_always_written():
    out = Parameter.from_dict(_query()).to_dict()
    assert out["style"] == "form"
    assert list(out)[0] == "in"
    assert out["in"] == "query"


def test_query_round_trip_with_options():
    data = _query(allowReserved=True, allowEmptyValue=False, style="deepObject", required=True)
    param = Parameter.from_dict(data)
    assert param.style is QueryStyle.DEEP_OBJECT
    assert param.allow_reserved is True
    assert param.allow_empty_value is False
    assert param.to_dict() == data
    assert Parameter.from_dict(param.to_dict()) == param


@pytest.mark.parametrize(
    "location, kind, style",
    [
        ("header", HeaderParameter, HeaderStyle.SIMPLE),
        ("path", PathParameter, PathStyle.SIMPLE),
        ("cookie", CookieParameter, CookieStyle.FORM),
    ],
)
def test_location_dispatch_and_default_style(location, kind, style):
    param = Parameter.from_dict({"in": location, "name": "id", "schema": {"type": "string"}})
    assert type(param) is kind
    assert param.style is style
    assert param.to_dict()["style"] == style.value


@pytest.mark.parametrize("style", list(PathStyle))
def test_path_styles_round_trip(style):
    data = {"in": "path", "name": "id", "required": True, "style": style.value, "schema": {"$ref": "#/s"}}
    param = Parameter.from_dict(data)
    assert param.style is style
    assert param.parameter_data.format == Reference("#/s")
    assert param.to_dict() == data


def test_missing_in_is_error():
    with pytest.raises(ParseError):
        Parameter.from_dict({"name": "x", "schema": {}})


def test_unknown_in_is_error():
    with pytest.raises(ParseError):
        Parameter.from_dict({"in": "body", "name": "x", "schema": {}})


def test_missing_name_is_error():
    with pytest.raises(ParseError):
        Parameter.from_dict({"in": "query", "schema": {}})


def test_missing_schema_and_content_is_error():
    with pytest.raises(ParseError):
        Parameter.from_dict({"in": "query", "name": "x"})


def test_unknown_style_is_error():
    with pytest.raises(ParseError):
        Parameter.from_dict(_query(style="matrix"))


def test_content_parameter():
    data = {
        "in": "query",
        "name": "filter",
        "content": {"application/json": {"schema": {"type": "string"}}},
    }
    param = Parameter.from_dict(data)
    content = param.parameter_data.format
    assert list(content) == ["application/json"]
    assert isinstance(content["application/json"], MediaType)
    assert content["application/json"].schema.schema_kind == StringType()
    assert Parameter.from_dict(param.to_dict()) == param


def test_parameter_extensions_and_examples():
    data = _query(**{"x-foo": "bar", "examples": {"one": {"$ref": "#/e"}, "two": {"value": 3}}})
    param = Parameter.from_dict(data)
    assert param.parameter_data.extensions == {"x-foo": "bar"}
    assert param.parameter_data.examples == {"one": Reference("#/e"), "two": Example(value=3)}
    assert param.to_dict()["x-foo"] == "bar"
    assert Parameter.from_dict(param.to_dict()) == param


def test_parameter_data_round_trip():
    data = {"name": "q", "description": "d", "deprecated": True, "explode": False, "schema": {"$ref": "#/x"}}
    pd = ParameterData.from_dict(data)
    assert pd.explode is False
    assert pd.deprecated is True
    assert pd.to_dict() == data


def test_header_defaults_and_round_trip():
    header = Header.from_dict({"schema": {"type": "string"}, "x-a": 1})
    assert header.style is HeaderStyle.SIMPLE
    assert header.required is False
    assert header.extensions == {"x-a": 1}
    out = header.to_dict()
    assert out["style"] == HeaderStyle.SIMPLE.value
    assert Header.from_dict(out) == header


def test_header_needs_schema_or_content():
    with pytest.raises(ParseError):
        Header.from_dict({"description": "nothing"})


def test_encoding_empty_writes_content_type():
    assert Encoding().to_dict() == {"contentType": None}
    assert Encoding.from_dict({}) == Encoding()


def test_encoding_round_trip():
    data = {
        "contentType": "image/png",
        "headers": {"X-Rate": {"$ref": "#/h"}},
        "style": "pipeDelimited",
        "explode": True,
        "allowReserved": True,
    }
    enc = Encoding.from_dict(data)
    assert enc.style is QueryStyle.PIPE_DELIMITED
    assert enc.headers == {"X-Rate": Reference("#/h")}
    assert enc.to_dict() == data


def test_encoding_bad_style():
    with pytest.raises(ParseError):
        Encoding.from_dict({"style": "simple"})


def test_media_type_empty():
    assert MediaType.from_dict({}).to_dict() == {}


def test_media_type_round_trip():
    data = {
        "schema": {"$ref": "#/components/schemas/Pet"},
        "example": {"name": "rex"},
        "examples": {"a": {"summary": "s"}},
        "encoding": {"file": {"contentType": "image/png"}},
        "x-z": True,
    }
    media = MediaType.from_dict(data)
    assert media.schema == Reference("#/components/schemas/Pet")
    assert media.encoding["file"].content_type == "image/png"
    assert media.extensions == {"x-z": True}
    assert media.to_dict() == data


def test_media_type_not_a_mapping():
    with pytest.raises(ParseError):
        MediaType.from_dict(["schema"])