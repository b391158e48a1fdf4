"""Operations, path items, the paths map and callbacks."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .parameter import Parameter
from .reference import Reference, reference_or_from_dict, reference_or_to_dict
from .responses import RequestBody, Responses
from .server import Server
from .tag import ExternalDocumentation
from .util import ParseError, _expect_mapping, _field, _str_list, extract_extensions

_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def _servers(data: Mapping[Any, Any], owner: str) -> list[Server]:
    value = _field(data, "servers", list, owner)
    return [] if value is None else [Server.from_dict(item) for item in value]


def _parameters(data: Mapping[Any, Any], owner: str) -> list[Reference | Parameter]:
    value = _field(data, "parameters", list, owner)
    if value is None:
        return []
    return [reference_or_from_dict(item, Parameter.from_dict) for item in value]


def _security(data: Mapping[Any, Any], owner: str) -> list[dict[str, list[str]]] | None:
    value = _field(data, "security", list, owner)
    if value is None:
        return None
    requirements = []
    for entry in value:
        if not isinstance(entry, Mapping):
            raise ParseError(f"{owner}: security requirements must be mappings")
        for name, scopes in entry.items():
            if not isinstance(name, str) or not isinstance(scopes, list):
                raise ParseError(f"{owner}: a security requirement maps names to lists")
            if not all(isinstance(scope, str) for scope in scopes):
                raise ParseError(f"{owner}: security scopes must be strings")
        requirements.append({name: list(scopes) for name, scopes in entry.items()})
    return requirements


def callback_from_dict(data: Any) -> dict[str, PathItem]:
    """Read a callback: a map from runtime expressions to path items."""
    data = _expect_mapping(data, "Callback")
    if not all(isinstance(name, str) for name in data):
        raise ParseError("Callback: expressions must be strings")
    return {name: PathItem.from_dict(item) for name, item in data.items()}


def callback_to_dict(callback: Mapping[str, PathItem]) -> dict[str, Any]:
    """Serialise a callback to plain data."""
    return {name: item.to_dict() for name, item in callback.items()}


@dataclass
class Operation:
    """A single API operation on a path."""

    tags: list[str] = field(default_factory=list)
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    operation_id: str | None = None
    parameters: list[Reference | Parameter] = field(default_factory=list)
    request_body: Reference | RequestBody | None = None
    responses: Responses = field(default_factory=Responses)
    callbacks: dict[str, dict[str, PathItem]] = field(default_factory=dict)
    deprecated: bool = False
    security: list[dict[str, list[str]]] | None = None
    servers: list[Server] = field(default_factory=list)
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Operation:
        owner = "Operation"
        data = _expect_mapping(data, owner)
        docs = _field(data, "externalDocs", dict, owner)
        request_body = data.get("requestBody")
        raw_callbacks = _field(data, "callbacks", dict, owner) or {}
        if not all(isinstance(name, str) for name in raw_callbacks):
            raise ParseError(f"{owner}: keys of `callbacks` must be strings")
        return cls(
            tags=_str_list(data, "tags", owner),
            summary=_field(data, "summary", str, owner),
            description=_field(data, "description", str, owner),
            external_docs=ExternalDocumentation.from_dict(docs) if docs is not None else None,
            operation_id=_field(data, "operationId", str, owner),
            parameters=_parameters(data, owner),
            request_body=(
                None
                if request_body is None
                else reference_or_from_dict(request_body, RequestBody.from_dict)
            ),
            responses=Responses.from_dict(
                _field(data, "responses", dict, owner, required=True)
            ),
            callbacks={name: callback_from_dict(item) for name, item in raw_callbacks.items()},
            deprecated=bool(_field(data, "deprecated", bool, owner)),
            security=_security(data, owner),
            servers=_servers(data, owner),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.tags:
            out["tags"] = list(self.tags)
        if self.summary is not None:
            out["summary"] = self.summary
        if self.description is not None:
            out["description"] = self.description
        if self.external_docs is not None:
            out["externalDocs"] = self.external_docs.to_dict()
        if self.operation_id is not None:
            out["operationId"] = self.operation_id
        if self.parameters:
            out["parameters"] = [reference_or_to_dict(p) for p in self.parameters]
        if self.request_body is not None:
            out["requestBody"] = reference_or_to_dict(self.request_body)
        out["responses"] = self.responses.to_dict()
        if self.callbacks:
            out["callbacks"] = {
                name: callback_to_dict(callback) for name, callback in self.callbacks.items()
            }
        if self.deprecated:
            out["deprecated"] = True
        if self.security is not None:
            out["security"] = [
                {name: list(scopes) for name, scopes in entry.items()} for entry in self.security
            ]
        if self.servers:
            out["servers"] = [server.to_dict() for server in self.servers]
        out.update(self.extensions)
        return out


@dataclass
class PathItem:
    """The operations available on a single path."""

    summary: str | None = None
    description: str | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] = field(default_factory=list)
    parameters: list[Reference | Parameter] = field(default_factory=list)
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> PathItem:
        owner = "PathItem"
        data = _expect_mapping(data, owner)
        operations = {}
        for method in _METHODS:
            raw = _field(data, method, dict, owner)
            operations[method] = Operation.from_dict(raw) if raw is not None else None
        return cls(
            summary=_field(data, "summary", str, owner),
            description=_field(data, "description", str, owner),
            servers=_servers(data, owner),
            parameters=_parameters(data, owner),
            extensions=extract_extensions(data),
            **operations,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.summary is not None:
            out["summary"] = self.summary
        if self.description is not None:
            out["description"] = self.description
        for method, operation in self:
            out[method] = operation.to_dict()
        if self.servers:
            out["servers"] = [server.to_dict() for server in self.servers]
        if self.parameters:
            out["parameters"] = [reference_or_to_dict(p) for p in self.parameters]
        out.update(self.extensions)
        return out

    def __iter__(self) -> Iterator[tuple[str, Operation]]:
        """Yield ``(method, operation)`` for each defined operation, in method order."""
        for method in _METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation


@dataclass
class Paths:
    """The relative paths of the API and their path items."""

    paths: dict[str, Reference | PathItem] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Paths:
        data = _expect_mapping(data, "Paths")
        return cls(
            paths={
                path: reference_or_from_dict(item, PathItem.from_dict)
                for path, item in data.items()
                if isinstance(path, str) and path.startswith("/")
            },
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out = {path: reference_or_to_dict(item) for path, item in self.paths.items()}
        out.update(self.extensions)
        return out

    def __iter__(self) -> Iterator[tuple[str, Reference | PathItem]]:
        """Yield ``(path, item)`` pairs in document order."""
        return iter(self.paths.items())