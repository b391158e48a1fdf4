"""The root document object and its reusable components."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .example import Example
from .info import Info
from .parameter import Header, Parameter
from .paths import Operation, PathItem, Paths, _security, callback_from_dict, callback_to_dict
from .reference import Reference, reference_or_from_dict, reference_or_to_dict
from .responses import Link, RequestBody, Response
from .schema import Schema
from .server import Server
from .tag import ExternalDocumentation, Tag
from .util import ParseError, _expect_mapping, _field, extract_extensions

# A security requirement maps scheme names to the scopes they need.
SecurityRequirement = dict[str, list[str]]


def _named(
    data: Mapping[Any, Any], key: str, parse: Callable[[Any], Any], owner: str
) -> dict[str, Any]:
    value = _field(data, key, dict, owner)
    if value is None:
        return {}
    if not all(isinstance(name, str) for name in value):
        raise ParseError(f"{owner}: keys of `{key}` must be strings")
    return {name: reference_or_from_dict(item, parse) for name, item in value.items()}


def _raw_mapping(data: Any) -> dict[Any, Any]:
    return dict(_expect_mapping(data, "SecurityScheme"))


def _callback_or_ref_to_dict(value: Any) -> Any:
    if isinstance(value, Reference):
        return value.to_dict()
    return callback_to_dict(value)


@dataclass
class Components:
    """Reusable objects referenced from elsewhere in the document.

    Security schemes are kept as plain mappings.
    """

    schemas: dict[str, Reference | Schema] = field(default_factory=dict)
    responses: dict[str, Reference | Response] = field(default_factory=dict)
    parameters: dict[str, Reference | Parameter] = field(default_factory=dict)
    examples: dict[str, Reference | Example] = field(default_factory=dict)
    request_bodies: dict[str, Reference | RequestBody] = field(default_factory=dict)
    headers: dict[str, Reference | Header] = field(default_factory=dict)
    security_schemes: dict[str, Reference | dict[Any, Any]] = field(default_factory=dict)
    links: dict[str, Reference | Link] = field(default_factory=dict)
    callbacks: dict[str, Reference | dict[str, PathItem]] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Components:
        owner = "Components"
        data = _expect_mapping(data, owner)
        return cls(
            schemas=_named(data, "schemas", Schema.from_dict, owner),
            responses=_named(data, "responses", Response.from_dict, owner),
            parameters=_named(data, "parameters", Parameter.from_dict, owner),
            examples=_named(data, "examples", Example.from_dict, owner),
            request_bodies=_named(data, "requestBodies", RequestBody.from_dict, owner),
            headers=_named(data, "headers", Header.from_dict, owner),
            security_schemes=_named(data, "securitySchemes", _raw_mapping, owner),
            links=_named(data, "links", Link.from_dict, owner),
            callbacks=_named(data, "callbacks", callback_from_dict, owner),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, values in (
            ("schemas", self.schemas),
            ("responses", self.responses),
            ("parameters", self.parameters),
            ("examples", self.examples),
            ("requestBodies", self.request_bodies),
            ("headers", self.headers),
            ("securitySchemes", self.security_schemes),
            ("links", self.links),
        ):
            if values:
                out[key] = {name: reference_or_to_dict(item) for name, item in values.items()}
        if self.callbacks:
            out["callbacks"] = {
                name: _callback_or_ref_to_dict(item) for name, item in self.callbacks.items()
            }
        out.update(self.extensions)
        return out


@dataclass
class OpenAPI:
    """The root object of an OpenAPI document."""

    openapi: str
    info: Info
    paths: Paths = field(default_factory=Paths)
    servers: list[Server] = field(default_factory=list)
    components: Components | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] = field(default_factory=list)
    external_docs: ExternalDocumentation | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> OpenAPI:
        owner = "OpenAPI"
        data = _expect_mapping(data, owner)
        servers = _field(data, "servers", list, owner) or []
        tags = _field(data, "tags", list, owner) or []
        components = _field(data, "components", dict, owner)
        docs = _field(data, "externalDocs", dict, owner)
        return cls(
            openapi=_field(data, "openapi", str, owner, required=True),
            info=Info.from_dict(_field(data, "info", dict, owner, required=True)),
            paths=Paths.from_dict(_field(data, "paths", dict, owner, required=True)),
            servers=[Server.from_dict(item) for item in servers],
            components=Components.from_dict(components) if components is not None else None,
            security=_security(data, owner),
            tags=[Tag.from_dict(item) for item in tags],
            external_docs=ExternalDocumentation.from_dict(docs) if docs is not None else None,
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"openapi": self.openapi, "info": self.info.to_dict()}
        if self.servers:
            out["servers"] = [server.to_dict() for server in self.servers]
        out["paths"] = self.paths.to_dict()
        if self.components is not None:
            out["components"] = self.components.to_dict()
        if self.security is not None:
            out["security"] = [
                {name: list(scopes) for name, scopes in entry.items()} for entry in self.security
            ]
        if self.tags:
            out["tags"] = [tag.to_dict() for tag in self.tags]
        if self.external_docs is not None:
            out["externalDocs"] = self.external_docs.to_dict()
        out.update(self.extensions)
        return out

    def operations(self) -> Iterator[tuple[str, str, Operation]]:
        """Yield ``(path, method, operation)`` for every operation.

        Path items given as references are skipped.
        """
        for path, item in self.paths:
            if isinstance(item, PathItem):
                for method, operation in item:
                    yield path, method, operation