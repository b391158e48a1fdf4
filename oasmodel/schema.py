"""Schema objects: shared schema data plus the kind of schema they describe."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .discriminator import Discriminator
from .reference import Reference, reference_or_from_dict, reference_or_to_dict
from .schema_types import (
    BooleanType,
    IntegerFormat,
    IntegerType,
    NumberFormat,
    NumberType,
    StringFormat,
    StringType,
)
from .tag import ExternalDocumentation
from .util import ParseError, _expect_mapping, _field, extract_extensions
from .variant_or import variant_or_unknown_or_empty

_OWNER = "Schema"
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass
class SchemaData:
    """Fields common to every schema, whatever its kind."""

    nullable: bool = False
    read_only: bool = False
    write_only: bool = False
    deprecated: bool = False
    external_docs: ExternalDocumentation | None = None
    example: Any = None
    title: str | None = None
    description: str | None = None
    discriminator: Discriminator | None = None
    default: Any = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> SchemaData:
        data = _expect_mapping(data, "SchemaData")
        docs = _field(data, "externalDocs", dict, "SchemaData")
        discriminator = _field(data, "discriminator", dict, "SchemaData")
        return cls(
            nullable=bool(_field(data, "nullable", bool, "SchemaData")),
            read_only=bool(_field(data, "readOnly", bool, "SchemaData")),
            write_only=bool(_field(data, "writeOnly", bool, "SchemaData")),
            deprecated=bool(_field(data, "deprecated", bool, "SchemaData")),
            external_docs=ExternalDocumentation.from_dict(docs) if docs is not None else None,
            example=data.get("example"),
            title=_field(data, "title", str, "SchemaData"),
            description=_field(data, "description", str, "SchemaData"),
            discriminator=(
                Discriminator.from_dict(discriminator) if discriminator is not None else None
            ),
            default=data.get("default"),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.nullable:
            out["nullable"] = True
        if self.read_only:
            out["readOnly"] = True
        if self.write_only:
            out["writeOnly"] = True
        if self.deprecated:
            out["deprecated"] = True
        if self.external_docs is not None:
            out["externalDocs"] = self.external_docs.to_dict()
        _put(out, "example", self.example)
        _put(out, "title", self.title)
        _put(out, "description", self.description)
        if self.discriminator is not None:
            out["discriminator"] = self.discriminator.to_dict()
        _put(out, "default", self.default)
        out.update(self.extensions)
        return out


@dataclass
class ObjectType:
    """A schema of ``type: object``."""

    properties: dict[str, Reference | Schema] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    additional_properties: bool | Reference | Schema | None = None
    min_properties: int | None = None
    max_properties: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": "object"}
        if self.properties:
            out["properties"] = _properties_to_dict(self.properties)
        if self.required:
            out["required"] = list(self.required)
        if self.additional_properties is not None:
            out["additionalProperties"] = _additional_to_data(self.additional_properties)
        _put(out, "minProperties", self.min_properties)
        _put(out, "maxProperties", self.max_properties)
        return out


@dataclass
class ArrayType:
    """A schema of ``type: array``."""

    items: Reference | Schema | None = None
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool = False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": "array"}
        if self.items is not None:
            out["items"] = reference_or_to_dict(self.items)
        _put(out, "minItems", self.min_items)
        _put(out, "maxItems", self.max_items)
        if self.unique_items:
            out["uniqueItems"] = True
        return out


@dataclass
class OneOf:
    """A schema that must match exactly one of several schemas."""

    one_of: list[Reference | Schema] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"oneOf": _schemas_to_list(self.one_of)}


@dataclass
class AllOf:
    """A schema that must match all of several schemas."""

    all_of: list[Reference | Schema] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"allOf": _schemas_to_list(self.all_of)}


@dataclass
class AnyOf:
    """A schema that must match at least one of several schemas."""

    any_of: list[Reference | Schema] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"anyOf": _schemas_to_list(self.any_of)}


@dataclass
class Not:
    """A schema that must not match the given schema."""

    not_: Reference | Schema

    def to_dict(self) -> dict[str, Any]:
        return {"not": reference_or_to_dict(self.not_)}


@dataclass
class AnySchema:
    """Catch-all for combinations of fields that fit no predefined kind."""

    typ: str | None = None
    pattern: str | None = None
    multiple_of: float | None = None
    exclusive_minimum: bool | None = None
    exclusive_maximum: bool | None = None
    minimum: float | None = None
    maximum: float | None = None
    properties: dict[str, Reference | Schema] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    additional_properties: bool | Reference | Schema | None = None
    min_properties: int | None = None
    max_properties: int | None = None
    items: Reference | Schema | None = None
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool | None = None
    enumeration: list[Any] = field(default_factory=list)
    format: str | None = None
    min_length: int | None = None
    max_length: int | None = None
    one_of: list[Reference | Schema] = field(default_factory=list)
    all_of: list[Reference | Schema] = field(default_factory=list)
    any_of: list[Reference | Schema] = field(default_factory=list)
    not_: Reference | Schema | None = None

    @classmethod
    def from_dict(cls, data: Any) -> AnySchema:
        data = _expect_mapping(data, "AnySchema")
        return _any_from_raw(_parse_raw(data))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        _put(out, "type", self.typ)
        _put(out, "pattern", self.pattern)
        _put(out, "multipleOf", self.multiple_of)
        _put(out, "exclusiveMinimum", self.exclusive_minimum)
        _put(out, "exclusiveMaximum", self.exclusive_maximum)
        _put(out, "minimum", self.minimum)
        _put(out, "maximum", self.maximum)
        if self.properties:
            out["properties"] = _properties_to_dict(self.properties)
        if self.required:
            out["required"] = list(self.required)
        if self.additional_properties is not None:
            out["additionalProperties"] = _additional_to_data(self.additional_properties)
        _put(out, "minProperties", self.min_properties)
        _put(out, "maxProperties", self.max_properties)
        if self.items is not None:
            out["items"] = reference_or_to_dict(self.items)
        _put(out, "minItems", self.min_items)
        _put(out, "maxItems", self.max_items)
        _put(out, "uniqueItems", self.unique_items)
        if self.enumeration:
            out["enum"] = list(self.enumeration)
        _put(out, "format", self.format)
        _put(out, "minLength", self.min_length)
        _put(out, "maxLength", self.max_length)
        if self.one_of:
            out["oneOf"] = _schemas_to_list(self.one_of)
        if self.all_of:
            out["allOf"] = _schemas_to_list(self.all_of)
        if self.any_of:
            out["anyOf"] = _schemas_to_list(self.any_of)
        if self.not_ is not None:
            out["not"] = reference_or_to_dict(self.not_)
        return out


SchemaKind = Union[
    StringType,
    NumberType,
    IntegerType,
    ObjectType,
    ArrayType,
    BooleanType,
    OneOf,
    AllOf,
    AnyOf,
    Not,
    AnySchema,
]


@dataclass
class Schema:
    """A schema: its common data together with its kind."""

    schema_data: SchemaData = field(default_factory=SchemaData)
    schema_kind: SchemaKind = field(default_factory=AnySchema)

    @classmethod
    def from_dict(cls, data: Any) -> Schema:
        data = _expect_mapping(data, _OWNER)
        return cls(schema_data=SchemaData.from_dict(data), schema_kind=parse_schema_kind(data))

    def to_dict(self) -> dict[str, Any]:
        out = self.schema_data.to_dict()
        out.update(self.schema_kind.to_dict())
        return out


_STRING_KEYS = frozenset({"typ", "pattern", "enumeration", "format", "min_length", "max_length"})
_NUMERIC_KEYS = frozenset(
    {
        "typ",
        "multiple_of",
        "exclusive_minimum",
        "exclusive_maximum",
        "minimum",
        "maximum",
        "enumeration",
        "format",
    }
)
_BOOLEAN_KEYS = frozenset({"typ", "enumeration"})
_OBJECT_KEYS = frozenset(
    {"typ", "properties", "required", "additional_properties", "min_properties", "max_properties"}
)
_ARRAY_KEYS = frozenset({"typ", "items", "min_items", "max_items", "unique_items"})


def parse_schema_kind(data: Any) -> SchemaKind:
    """Decide the kind of a schema from the fields present in ``data``."""
    data = _expect_mapping(data, _OWNER)
    raw = _parse_raw(data)
    typ = raw["typ"]
    enum = raw["enumeration"]

    if (
        typ == "string"
        and _only(raw, _STRING_KEYS)
        and _enum_valid(enum, lambda v: isinstance(v, str))
    ):
        return StringType(
            format=variant_or_unknown_or_empty(StringFormat, raw["format"]),
            pattern=raw["pattern"],
            enumeration=_enum_transform(enum, str),
            min_length=raw["min_length"],
            max_length=raw["max_length"],
        )

    if typ == "number" and _only(raw, _NUMERIC_KEYS) and _enum_valid(enum, _is_number):
        return NumberType(
            format=variant_or_unknown_or_empty(NumberFormat, raw["format"]),
            multiple_of=_as_float(raw["multiple_of"]),
            exclusive_minimum=bool(raw["exclusive_minimum"]),
            exclusive_maximum=bool(raw["exclusive_maximum"]),
            minimum=_as_float(raw["minimum"]),
            maximum=_as_float(raw["maximum"]),
            enumeration=_enum_transform(enum, float),
        )

    if (
        typ == "integer"
        and _only(raw, _NUMERIC_KEYS)
        and _enum_valid(enum, _is_i64)
        and all(raw[key] is None or _is_i64(raw[key]) for key in ("multiple_of", "minimum", "maximum"))
    ):
        return IntegerType(
            format=variant_or_unknown_or_empty(IntegerFormat, raw["format"]),
            multiple_of=raw["multiple_of"],
            exclusive_minimum=bool(raw["exclusive_minimum"]),
            exclusive_maximum=bool(raw["exclusive_maximum"]),
            minimum=raw["minimum"],
            maximum=raw["maximum"],
            enumeration=_enum_transform(enum, int),
        )

    if (
        typ == "boolean"
        and _only(raw, _BOOLEAN_KEYS)
        and _enum_valid(enum, lambda v: isinstance(v, bool))
    ):
        return BooleanType(enumeration=_enum_transform(enum, bool))

    if typ == "object" and _only(raw, _OBJECT_KEYS):
        return ObjectType(
            properties=raw["properties"] or {},
            required=raw["required"] or [],
            additional_properties=raw["additional_properties"],
            min_properties=raw["min_properties"],
            max_properties=raw["max_properties"],
        )

    if typ == "array" and _only(raw, _ARRAY_KEYS):
        return ArrayType(
            items=raw["items"],
            min_items=raw["min_items"],
            max_items=raw["max_items"],
            unique_items=bool(raw["unique_items"]),
        )

    if raw["one_of"] is not None and _only(raw, {"one_of"}):
        return OneOf(raw["one_of"])
    if raw["all_of"] is not None and _only(raw, {"all_of"}):
        return AllOf(raw["all_of"])
    if raw["any_of"] is not None and _only(raw, {"any_of"}):
        return AnyOf(raw["any_of"])
    if raw["not_"] is not None and _only(raw, {"not_"}):
        return Not(raw["not_"])

    return _any_from_raw(raw)


def _put(out: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        out[key] = value


def _schemas_to_list(schemas: list[Reference | Schema]) -> list[Any]:
    return [reference_or_to_dict(schema) for schema in schemas]


def _properties_to_dict(properties: Mapping[str, Reference | Schema]) -> dict[str, Any]:
    return {name: reference_or_to_dict(schema) for name, schema in properties.items()}


def _additional_to_data(value: bool | Reference | Schema) -> Any:
    if isinstance(value, bool):
        return value
    return reference_or_to_dict(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_i64(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and _I64_MIN <= value <= _I64_MAX


def _as_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _only(raw: Mapping[str, Any], allowed: frozenset[str] | set[str]) -> bool:
    return all(value is None for key, value in raw.items() if key not in allowed)


def _enum_valid(enum: list[Any] | None, check: Callable[[Any], bool]) -> bool:
    if enum is None:
        return True
    return all(value is None or check(value) for value in enum)


def _enum_transform(enum: list[Any] | None, convert: Callable[[Any], Any]) -> list[Any]:
    if enum is None:
        return []
    return [None if value is None else convert(value) for value in enum]


def _usize(data: Mapping[Any, Any], key: str) -> int | None:
    value = _field(data, key, int, _OWNER)
    if value is not None and value < 0:
        raise ParseError(f"{_OWNER}: field `{key}` must not be negative")
    return value


def _schema_or_ref(data: Any) -> Reference | Schema:
    return reference_or_from_dict(data, Schema.from_dict)


def _optional_schema(data: Mapping[Any, Any], key: str) -> Reference | Schema | None:
    value = data.get(key)
    return None if value is None else _schema_or_ref(value)


def _schema_list(data: Mapping[Any, Any], key: str) -> list[Reference | Schema] | None:
    value = _field(data, key, list, _OWNER)
    if value is None:
        return None
    return [_schema_or_ref(item) for item in value]


def _properties(data: Mapping[Any, Any]) -> dict[str, Reference | Schema] | None:
    value = _field(data, "properties", dict, _OWNER)
    if value is None:
        return None
    if not all(isinstance(name, str) for name in value):
        raise ParseError(f"{_OWNER}: property names must be strings")
    return {name: _schema_or_ref(schema) for name, schema in value.items()}


def _required(data: Mapping[Any, Any]) -> list[str] | None:
    value = _field(data, "required", list, _OWNER)
    if value is None:
        return None
    if not all(isinstance(name, str) for name in value):
        raise ParseError(f"{_OWNER}: field `required` must hold only strings")
    return list(value)


def _additional(data: Mapping[Any, Any]) -> bool | Reference | Schema | None:
    value = data.get("additionalProperties")
    if value is None or isinstance(value, bool):
        return value
    if not isinstance(value, Mapping):
        raise ParseError(f"{_OWNER}: field `additionalProperties` must be a boolean or a schema")
    return _schema_or_ref(value)


def _parse_raw(data: Mapping[Any, Any]) -> dict[str, Any]:
    enum = _field(data, "enum", list, _OWNER)
    return {
        "typ": _field(data, "type", str, _OWNER),
        "pattern": _field(data, "pattern", str, _OWNER),
        "multiple_of": _field(data, "multipleOf", float, _OWNER),
        "exclusive_minimum": _field(data, "exclusiveMinimum", bool, _OWNER),
        "exclusive_maximum": _field(data, "exclusiveMaximum", bool, _OWNER),
        "minimum": _field(data, "minimum", float, _OWNER),
        "maximum": _field(data, "maximum", float, _OWNER),
        "properties": _properties(data),
        "required": _required(data),
        "additional_properties": _additional(data),
        "min_properties": _usize(data, "minProperties"),
        "max_properties": _usize(data, "maxProperties"),
        "items": _optional_schema(data, "items"),
        "min_items": _usize(data, "minItems"),
        "max_items": _usize(data, "maxItems"),
        "unique_items": _field(data, "uniqueItems", bool, _OWNER),
        "enumeration": None if enum is None else list(enum),
        "format": _field(data, "format", str, _OWNER),
        "min_length": _usize(data, "minLength"),
        "max_length": _usize(data, "maxLength"),
        "one_of": _schema_list(data, "oneOf"),
        "all_of": _schema_list(data, "allOf"),
        "any_of": _schema_list(data, "anyOf"),
        "not_": _optional_schema(data, "not"),
    }


def _any_from_raw(raw: Mapping[str, Any]) -> AnySchema:
    return AnySchema(
        typ=raw["typ"],
        pattern=raw["pattern"],
        multiple_of=_as_float(raw["multiple_of"]),
        exclusive_minimum=raw["exclusive_minimum"],
        exclusive_maximum=raw["exclusive_maximum"],
        minimum=_as_float(raw["minimum"]),
        maximum=_as_float(raw["maximum"]),
        properties=raw["properties"] or {},
        required=raw["required"] or [],
        additional_properties=raw["additional_properties"],
        min_properties=raw["min_properties"],
        max_properties=raw["max_properties"],
        items=raw["items"],
        min_items=raw["min_items"],
        max_items=raw["max_items"],
        unique_items=raw["unique_items"],
        enumeration=raw["enumeration"] or [],
        format=raw["format"],
        min_length=raw["min_length"],
        max_length=raw["max_length"],
        one_of=raw["one_of"] or [],
        all_of=raw["all_of"] or [],
        any_of=raw["any_of"] or [],
        not_=raw["not_"],
    )