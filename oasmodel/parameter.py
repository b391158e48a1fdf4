"""Operation parameters, headers, media types and their encodings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, TypeVar, Union

from .example import Example
from .reference import Reference, reference_or_from_dict, reference_or_to_dict
from .schema import Schema
from .util import ParseError, _expect_mapping, _field, extract_extensions

E = TypeVar("E", bound=Enum)


class PathStyle(Enum):
    """Serialisation styles of path parameters."""

    MATRIX = "matrix"
    LABEL = "label"
    SIMPLE = "simple"


class QueryStyle(Enum):
    """Serialisation styles of query parameters."""

    FORM = "form"
    SPACE_DELIMITED = "spaceDelimited"
    PIPE_DELIMITED = "pipeDelimited"
    DEEP_OBJECT = "deepObject"


class CookieStyle(Enum):
    """Serialisation styles of cookie parameters."""

    FORM = "form"


class HeaderStyle(Enum):
    """Serialisation styles of header parameters."""

    SIMPLE = "simple"


# A parameter is described either by a schema or by a map of media types.
SchemaOrContent = Union[Reference, Schema, dict]


def _style(enum_cls: type[E], data: Mapping[Any, Any], owner: str) -> E | None:
    value = _field(data, "style", str, owner)
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        known = ", ".join(f"`{member.value}`" for member in enum_cls)
        raise ParseError(f"{owner}: unknown variant `{value}`, expected one of {known}") from None


def _string_keys(value: Mapping[Any, Any], owner: str, key: str) -> None:
    if not all(isinstance(name, str) for name in value):
        raise ParseError(f"{owner}: keys of `{key}` must be strings")


def _examples(data: Mapping[Any, Any], owner: str) -> dict[str, Reference | Example]:
    value = _field(data, "examples", dict, owner)
    if value is None:
        return {}
    _string_keys(value, owner, "examples")
    return {name: reference_or_from_dict(item, Example.from_dict) for name, item in value.items()}


def _content(value: Any, owner: str) -> dict[str, MediaType]:
    value = _expect_mapping(value, f"{owner}.content")
    _string_keys(value, owner, "content")
    return {name: MediaType.from_dict(item) for name, item in value.items()}


def _schema_or_content(data: Mapping[Any, Any], owner: str) -> SchemaOrContent:
    for key in data:
        if key == "schema":
            return reference_or_from_dict(data["schema"], Schema.from_dict)
        if key == "content":
            return _content(data["content"], owner)
    raise ParseError(f"{owner}: expected a `schema` or a `content` field")


def _schema_or_content_to_dict(value: SchemaOrContent) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return {"content": {name: media.to_dict() for name, media in value.items()}}
    return {"schema": reference_or_to_dict(value)}


def _examples_to_dict(examples: Mapping[str, Reference | Example]) -> dict[str, Any]:
    return {name: reference_or_to_dict(item) for name, item in examples.items()}


@dataclass
class Encoding:
    """An encoding definition applied to a single schema property."""

    content_type: str | None = None
    headers: dict[str, Reference | Header] = field(default_factory=dict)
    style: QueryStyle | None = None
    explode: bool = False
    allow_reserved: bool = False
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Encoding:
        owner = "Encoding"
        data = _expect_mapping(data, owner)
        raw_headers = _field(data, "headers", dict, owner) or {}
        _string_keys(raw_headers, owner, "headers")
        return cls(
            content_type=_field(data, "contentType", str, owner),
            headers={
                name: reference_or_from_dict(item, Header.from_dict)
                for name, item in raw_headers.items()
            },
            style=_style(QueryStyle, data, owner),
            explode=bool(_field(data, "explode", bool, owner)),
            allow_reserved=bool(_field(data, "allowReserved", bool, owner)),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        # The content type is always written, even when absent.
        out: dict[str, Any] = {"contentType": self.content_type}
        if self.headers:
            out["headers"] = {name: reference_or_to_dict(h) for name, h in self.headers.items()}
        if self.style is not None:
            out["style"] = self.style.value
        if self.explode:
            out["explode"] = True
        if self.allow_reserved:
            out["allowReserved"] = True
        out.update(self.extensions)
        return out


@dataclass
class MediaType:
    """Schema and examples for one media type."""

    schema: Reference | Schema | None = None
    example: Any = None
    examples: dict[str, Reference | Example] = field(default_factory=dict)
    encoding: dict[str, Encoding] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> MediaType:
        owner = "MediaType"
        data = _expect_mapping(data, owner)
        raw_schema = data.get("schema")
        raw_encoding = _field(data, "encoding", dict, owner) or {}
        _string_keys(raw_encoding, owner, "encoding")
        return cls(
            schema=(
                None
                if raw_schema is None
                else reference_or_from_dict(raw_schema, Schema.from_dict)
            ),
            example=data.get("example"),
            examples=_examples(data, owner),
            encoding={name: Encoding.from_dict(item) for name, item in raw_encoding.items()},
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.schema is not None:
            out["schema"] = reference_or_to_dict(self.schema)
        if self.example is not None:
            out["example"] = self.example
        if self.examples:
            out["examples"] = _examples_to_dict(self.examples)
        if self.encoding:
            out["encoding"] = {name: enc.to_dict() for name, enc in self.encoding.items()}
        out.update(self.extensions)
        return out


@dataclass
class Header:
    """A header definition; like a parameter without name and location."""

    format: SchemaOrContent
    description: str | None = None
    style: HeaderStyle = HeaderStyle.SIMPLE
    required: bool = False
    deprecated: bool | None = None
    example: Any = None
    examples: dict[str, Reference | Example] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Header:
        owner = "Header"
        data = _expect_mapping(data, owner)
        return cls(
            format=_schema_or_content(data, owner),
            description=_field(data, "description", str, owner),
            style=_style(HeaderStyle, data, owner) or HeaderStyle.SIMPLE,
            required=bool(_field(data, "required", bool, owner)),
            deprecated=_field(data, "deprecated", bool, owner),
            example=data.get("example"),
            examples=_examples(data, owner),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.description is not None:
            out["description"] = self.description
        out["style"] = self.style.value
        if self.required:
            out["required"] = True
        if self.deprecated is not None:
            out["deprecated"] = self.deprecated
        out.update(_schema_or_content_to_dict(self.format))
        if self.example is not None:
            out["example"] = self.example
        if self.examples:
            out["examples"] = _examples_to_dict(self.examples)
        out.update(self.extensions)
        return out


@dataclass
class ParameterData:
    """The fields shared by parameters of every location."""

    name: str
    format: SchemaOrContent
    description: str | None = None
    required: bool = False
    deprecated: bool | None = None
    example: Any = None
    examples: dict[str, Reference | Example] = field(default_factory=dict)
    explode: bool | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> ParameterData:
        owner = "Parameter"
        data = _expect_mapping(data, owner)
        return cls(
            name=_field(data, "name", str, owner, required=True),
            format=_schema_or_content(data, owner),
            description=_field(data, "description", str, owner),
            required=bool(_field(data, "required", bool, owner)),
            deprecated=_field(data, "deprecated", bool, owner),
            example=data.get("example"),
            examples=_examples(data, owner),
            explode=_field(data, "explode", bool, owner),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            out["description"] = self.description
        if self.required:
            out["required"] = True
        if self.deprecated is not None:
            out["deprecated"] = self.deprecated
        out.update(_schema_or_content_to_dict(self.format))
        if self.example is not None:
            out["example"] = self.example
        if self.examples:
            out["examples"] = _examples_to_dict(self.examples)
        if self.explode is not None:
            out["explode"] = self.explode
        out.update(self.extensions)
        return out


@dataclass
class Parameter:
    """A single operation parameter; the subclass gives its location."""

    location: ClassVar[str]

    parameter_data: ParameterData

    @classmethod
    def from_dict(cls, data: Any) -> Parameter:
        """Read a parameter, choosing its kind from the ``in`` field."""
        data = _expect_mapping(data, "Parameter")
        if "in" not in data:
            raise ParseError("Parameter: missing field `in`")
        location = data["in"]
        kind = _BY_LOCATION.get(location) if isinstance(location, str) else None
        if kind is None:
            known = ", ".join(f"`{name}`" for name in _BY_LOCATION)
            raise ParseError(f"Parameter: unknown variant `{location}`, expected one of {known}")
        return kind(parameter_data=ParameterData.from_dict(data), **kind._extra_from_dict(data))

    @classmethod
    def _extra_from_dict(cls, data: Mapping[Any, Any]) -> dict[str, Any]:
        return {}

    def _extra_to_dict(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"in": self.location}
        out.update(self.parameter_data.to_dict())
        out.update(self._extra_to_dict())
        return out


@dataclass
class QueryParameter(Parameter):
    """A parameter appended to the URL query string."""

    location: ClassVar[str] = "query"

    allow_reserved: bool = False
    style: QueryStyle = QueryStyle.FORM
    allow_empty_value: bool | None = None

    @classmethod
    def _extra_from_dict(cls, data: Mapping[Any, Any]) -> dict[str, Any]:
        return {
            "allow_reserved": bool(_field(data, "allowReserved", bool, "Parameter")),
            "style": _style(QueryStyle, data, "Parameter") or QueryStyle.FORM,
            "allow_empty_value": _field(data, "allowEmptyValue", bool, "Parameter"),
        }

    def _extra_to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.allow_reserved:
            out["allowReserved"] = True
        out["style"] = self.style.value
        if self.allow_empty_value is not None:
            out["allowEmptyValue"] = self.allow_empty_value
        return out


@dataclass
class HeaderParameter(Parameter):
    """A custom request header."""

    location: ClassVar[str] = "header"

    style: HeaderStyle = HeaderStyle.SIMPLE

    @classmethod
    def _extra_from_dict(cls, data: Mapping[Any, Any]) -> dict[str, Any]:
        return {"style": _style(HeaderStyle, data, "Parameter") or HeaderStyle.SIMPLE}

    def _extra_to_dict(self) -> dict[str, Any]:
        return {"style": self.style.value}


@dataclass
class PathParameter(Parameter):
    """A parameter that is part of the templated path."""

    location: ClassVar[str] = "path"

    style: PathStyle = PathStyle.SIMPLE

    @classmethod
    def _extra_from_dict(cls, data: Mapping[Any, Any]) -> dict[str, Any]:
        return {"style": _style(PathStyle, data, "Parameter") or PathStyle.SIMPLE}

    def _extra_to_dict(self) -> dict[str, Any]:
        return {"style": self.style.value}


@dataclass
class CookieParameter(Parameter):
    """A parameter passed as a cookie."""

    location: ClassVar[str] = "cookie"

    style: CookieStyle = CookieStyle.FORM

    @classmethod
    def _extra_from_dict(cls, data: Mapping[Any, Any]) -> dict[str, Any]:
        return {"style": _style(CookieStyle, data, "Parameter") or CookieStyle.FORM}

    def _extra_to_dict(self) -> dict[str, Any]:
        return {"style": self.style.value}


_BY_LOCATION: dict[str, type[Parameter]] = {
    kind.location: kind
    for kind in (QueryParameter, HeaderParameter, PathParameter, CookieParameter)
}