import json

import pytest

from oasmodel.parameter import MediaType
from oasmodel.reference import Reference
from oasmodel.responses import Link, RequestBody, Response, Responses
from oasmodel.server import Server
from oasmodel.status_code import StatusCode
from oasmodel.util import ParseError


def test_responses_from_source():
    responses = Responses.from_dict(
        json.loads(
            """{
            "404": {
                "description": "xxx"
            },
            "x-foo": "bar",
            "ignored": "wat"
         }"""
        )
    )
    assert responses.responses.get(StatusCode.parse(404)) == Response(description="xxx")
    assert responses.extensions.get("x-foo") == "bar"
    assert list(responses.responses) == [StatusCode.parse(404)]


def test_responses_range_and_default():
    data = {"2XX": {"description": "ok"}, "default": {"$ref": "#/r"}}
    responses = Responses.from_dict(data)
    assert responses.default == Reference("#/r")
    assert responses.responses == {StatusCode.range(2): Response(description="ok")}
    out = responses.to_dict()
    assert out == {"default": {"$ref": "#/r"}, "2XX": {"description": "ok"}}
    assert list(out) == ["default", "2XX"]


def test_responses_integer_key_written_as_string():
    responses = Responses.from_dict({200: {"$ref": "#/ok"}})
    assert responses.to_dict() == {"200": {"$ref": "#/ok"}}


def test_responses_duplicate_code_keeps_last_value():
    responses = Responses.from_dict({"200": {"$ref": "#/a"}, 200: {"$ref": "#/b"}})
    assert responses.responses == {StatusCode.parse(200): Reference("#/b")}


def test_responses_bad_value_raises():
    with pytest.raises(ParseError):
        Responses.from_dict({"200": "nope"})


def test_response_round_trip():
    data = {
        "description": "ok",
        "headers": {"X-Rate": {"$ref": "#/components/headers/rate"}},
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Pet"}}},
        "links": {"next": {"operationId": "getNext", "parameters": {"id": "$response.body#/id"}}},
        "x-note": [1, 2],
    }
    response = Response.from_dict(data)
    assert response.headers["X-Rate"] == Reference("#/components/headers/rate")
    assert response.content["application/json"] == MediaType(
        schema=Reference("#/components/schemas/Pet")
    )
    assert response.links["next"].operation_id == "getNext"
    assert response.extensions == {"x-note": [1, 2]}
    assert response.to_dict() == data


def test_response_requires_description():
    with pytest.raises(ParseError):
        Response.from_dict({"content": {}})


def test_link_first_operation_key_wins():
    link = Link.from_dict({"operationId": "a", "operationRef": "#/b"})
    assert link.operation_id == "a"
    assert link.operation_ref is None


def test_link_needs_operation():
    with pytest.raises(ParseError):
        Link.from_dict({"description": "nothing"})


def test_link_constructor_needs_exactly_one_target():
    with pytest.raises(ValueError):
        Link()
    with pytest.raises(ValueError):
        Link(operation_ref="#/a", operation_id="b")


def test_link_with_server_round_trip():
    data = {
        "description": "follow",
        "operationRef": "#/paths/~1users/get",
        "requestBody": {"id": 1},
        "server": {"url": "https://api.example.com"},
    }
    link = Link.from_dict(data)
    assert link.server == Server(url="https://api.example.com")
    assert link.request_body == {"id": 1}
    assert link.to_dict() == data


def test_request_body_round_trip():
    data = {
        "description": "d",
        "content": {"application/json": {"schema": {"$ref": "#/c"}}},
        "required": True,
    }
    body = RequestBody.from_dict(data)
    assert body.required is True
    assert body.content["application/json"].schema == Reference("#/c")
    assert body.to_dict() == data


def test_request_body_defaults_omitted():
    body = RequestBody.from_dict({})
    assert body == RequestBody()
    assert body.to_dict() == {}