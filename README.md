# oasmodel

A typed Python model of OpenAPI 3.0 documents.

`oasmodel` turns an OpenAPI document that has already been loaded into plain
Python data (for example with `json.load` or a YAML loader) into a tree of
dataclasses, and turns that tree back into plain data with `to_dict()`, ready
to be dumped as JSON or YAML.

It has no dependencies beyond the standard library.

## Installation

```
pip install oasmodel
```

## Usage

```python
import json

from oasmodel.openapi import OpenAPI

with open("petstore.json", encoding="utf-8") as fh:
    api = OpenAPI.from_dict(json.load(fh))

print(api.info.title, api.info.version)

for path, method, operation in api.operations():
    print(method.upper(), path, operation.operation_id)

with open("petstore-out.json", "w", encoding="utf-8") as fh:
    json.dump(api.to_dict(), fh, indent=2)
```

## Modules

| Module | Contents |
| --- | --- |
| `oasmodel.openapi` | `OpenAPI` (the root object, with `operations()`), `Components` |
| `oasmodel.info` | `Info`, `Contact`, `License` |
| `oasmodel.server` | `Server`, `ServerVariable` |
| `oasmodel.tag` | `Tag`, `ExternalDocumentation` |
| `oasmodel.paths` | `Paths`, `PathItem`, `Operation`, `callback_from_dict`, `callback_to_dict` |
| `oasmodel.responses` | `Responses`, `Response`, `RequestBody`, `Link` |
| `oasmodel.parameter` | `Parameter` and its kinds `QueryParameter`, `HeaderParameter`, `PathParameter`, `CookieParameter`; `ParameterData`, `Header`, `MediaType`, `Encoding`; the styles `QueryStyle`, `PathStyle`, `HeaderStyle`, `CookieStyle` |
| `oasmodel.schema` | `Schema`, `SchemaData`, `ObjectType`, `ArrayType`, `OneOf`, `AllOf`, `AnyOf`, `Not`, `AnySchema`, `parse_schema_kind` |
| `oasmodel.schema_types` | `StringType`, `NumberType`, `IntegerType`, `BooleanType` and the formats `StringFormat`, `NumberFormat`, `IntegerFormat` |
| `oasmodel.example` | `Example` |
| `oasmodel.discriminator` | `Discriminator` |
| `oasmodel.reference` | `Reference`, `reference_or_from_dict`, `reference_or_to_dict`, `as_item` |
| `oasmodel.status_code` | `StatusCode` |
| `oasmodel.variant_or` | `Unknown`, `variant_or_unknown`, `variant_or_unknown_or_empty`, `variant_to_str` |
| `oasmodel.util` | `ParseError`, `extract_extensions`, `filter_keys`, `is_false` |

## How the model behaves

- **References.** Wherever the specification allows a `$ref`, the value is
  either a `Reference` or the item itself. `as_item(value)` returns the item,
  or `None` for a reference.
- **Extensions.** Every object keeps its `x-` prefixed keys in an
  `extensions` dictionary, in document order. Other unknown keys are dropped.
- **Paths.** `Paths` keeps only keys that start with `/`. Iterating over a
  `Paths` yields `(path, item)` pairs; iterating over a `PathItem` yields
  `(method, operation)` for each defined operation in the order get, put,
  post, delete, options, head, patch, trace. `OpenAPI.operations()` yields
  `(path, method, operation)` and skips path items given as references.
- **Status codes.** Response keys are `StatusCode` values:
  `StatusCode.parse(200)`, `StatusCode.parse("404")` and
  `StatusCode.parse("2XX")` (or `"2xx"`) all work; anything else raises
  `ParseError`. When reading `Responses`, keys that are not status codes
  (other than `default` and extensions) are ignored. `str(code)` gives
  `"404"` or `"2XX"`.
- **Schemas.** `Schema.from_dict` picks the most specific kind the keywords
  allow: a typed schema (`StringType`, `NumberType`, `IntegerType`,
  `BooleanType`, `ObjectType`, `ArrayType`), a composition (`OneOf`,
  `AllOf`, `AnyOf`, `Not`), or, for any other mix of keywords, the
  catch-all `AnySchema`. Enumerations may contain `None` for `null`.
- **Formats.** Known `format` values become `StringFormat`, `NumberFormat`
  or `IntegerFormat` members; unknown ones are kept as `Unknown` so nothing
  is lost on the way back out.
- **Parameters.** `Parameter.from_dict` dispatches on `in` and returns a
  `QueryParameter`, `HeaderParameter`, `PathParameter` or
  `CookieParameter`. A parameter or header needs either a `schema` or a
  `content` field. Styles are always written out by `to_dict()`, even when
  they are the default.
- **Links.** A `Link` holds exactly one of `operation_ref` and
  `operation_id`; constructing one with neither or both raises `ValueError`.
- **Fixed output quirks.** `ServerVariable.to_dict()` always writes
  `description` and `Encoding.to_dict()` always writes `contentType`, with
  `None` when they are absent.

Malformed input, such as a missing required field or a value of the wrong
type, raises `oasmodel.util.ParseError` (a subclass of `ValueError`).

## What it does not do

- It does not read or write files or parse JSON or YAML text; it works on
  data that has already been loaded.
- It does not resolve `$ref` references.
- Security schemes in `Components.security_schemes` are kept as plain
  mappings rather than typed objects.
- Beyond checking the shape of the input, it does not validate a document
  against the specification.

## Running the tests

```
pip install -e ".[test]"
pytest
```