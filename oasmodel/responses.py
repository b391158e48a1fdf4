"""Responses, request bodies and the links that may follow a response."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .parameter import Header, MediaType
from .reference import Reference, reference_or_from_dict, reference_or_to_dict
from .server import Server
from .status_code import StatusCode
from .util import ParseError, _expect_mapping, _field, extract_extensions

_LINK_OPERATION_KEYS = ("operationRef", "operationId")


def _named(
    data: Mapping[Any, Any], key: str, parse: Callable[[Any], Any], owner: str
) -> dict[str, Any]:
    value = _field(data, key, dict, owner)
    if value is None:
        return {}
    if not all(isinstance(name, str) for name in value):
        raise ParseError(f"{owner}: keys of `{key}` must be strings")
    return {name: parse(item) for name, item in value.items()}


def _named_to_dict(values: Mapping[str, Any]) -> dict[str, Any]:
    return {name: reference_or_to_dict(value) for name, value in values.items()}


def _header_or_ref(data: Any) -> Reference | Header:
    return reference_or_from_dict(data, Header.from_dict)


@dataclass
class Link:
    """A design-time link from a response to another operation.

    Exactly one of ``operation_ref`` and ``operation_id`` is set.
    """

    description: str | None = None
    operation_ref: str | None = None
    operation_id: str | None = None
    request_body: Any = None
    parameters: dict[str, Any] = field(default_factory=dict)
    server: Server | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if (self.operation_ref is None) == (self.operation_id is None):
            raise ValueError("a link needs exactly one of operation_ref and operation_id")

    @classmethod
    def from_dict(cls, data: Any) -> Link:
        owner = "Link"
        data = _expect_mapping(data, owner)
        key = next((name for name in data if name in _LINK_OPERATION_KEYS), None)
        if key is None:
            raise ParseError(f"{owner}: expected an `operationRef` or an `operationId` field")
        target = data[key]
        if not isinstance(target, str):
            raise ParseError(f"{owner}: field `{key}` must be a string")
        parameters = _field(data, "parameters", dict, owner) or {}
        if not all(isinstance(name, str) for name in parameters):
            raise ParseError(f"{owner}: keys of `parameters` must be strings")
        server = _field(data, "server", dict, owner)
        return cls(
            description=_field(data, "description", str, owner),
            operation_ref=target if key == "operationRef" else None,
            operation_id=target if key == "operationId" else None,
            request_body=data.get("requestBody"),
            parameters=dict(parameters),
            server=Server.from_dict(server) if server is not None else None,
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.description is not None:
            out["description"] = self.description
        if self.operation_ref is not None:
            out["operationRef"] = self.operation_ref
        else:
            out["operationId"] = self.operation_id
        if self.request_body is not None:
            out["requestBody"] = self.request_body
        if self.parameters:
            out["parameters"] = dict(self.parameters)
        if self.server is not None:
            out["server"] = self.server.to_dict()
        out.update(self.extensions)
        return out


@dataclass
class Response:
    """A single response from an operation."""

    description: str = ""
    headers: dict[str, Reference | Header] = field(default_factory=dict)
    content: dict[str, MediaType] = field(default_factory=dict)
    links: dict[str, Reference | Link] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Response:
        owner = "Response"
        data = _expect_mapping(data, owner)
        return cls(
            description=_field(data, "description", str, owner, required=True),
            headers=_named(data, "headers", _header_or_ref, owner),
            content=_named(data, "content", MediaType.from_dict, owner),
            links=_named(
                data, "links", lambda item: reference_or_from_dict(item, Link.from_dict), owner
            ),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"description": self.description}
        if self.headers:
            out["headers"] = _named_to_dict(self.headers)
        if self.content:
            out["content"] = _named_to_dict(self.content)
        if self.links:
            out["links"] = _named_to_dict(self.links)
        out.update(self.extensions)
        return out


def _response_or_ref(data: Any) -> Reference | Response:
    return reference_or_from_dict(data, Response.from_dict)


@dataclass
class Responses:
    """The expected responses of an operation, keyed by status code."""

    default: Reference | Response | None = None
    responses: dict[StatusCode, Reference | Response] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Responses:
        data = _expect_mapping(data, "Responses")
        default = data.get("default")
        responses: dict[StatusCode, Reference | Response] = {}
        for key, value in data.items():
            try:
                code = StatusCode.parse(key)
            except ParseError:
                continue
            responses[code] = _response_or_ref(value)
        return cls(
            default=None if default is None else _response_or_ref(default),
            responses=responses,
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.default is not None:
            out["default"] = reference_or_to_dict(self.default)
        for code, response in self.responses.items():
            out[str(code)] = reference_or_to_dict(response)
        out.update(self.extensions)
        return out


@dataclass
class RequestBody:
    """A single request body."""

    description: str | None = None
    content: dict[str, MediaType] = field(default_factory=dict)
    required: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> RequestBody:
        owner = "RequestBody"
        data = _expect_mapping(data, owner)
        return cls(
            description=_field(data, "description", str, owner),
            content=_named(data, "content", MediaType.from_dict, owner),
            required=bool(_field(data, "required", bool, owner)),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.description is not None:
            out["description"] = self.description
        if self.content:
            out["content"] = _named_to_dict(self.content)
        if self.required:
            out["required"] = True
        out.update(self.extensions)
        return out