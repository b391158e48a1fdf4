"""Server objects and the variables used in their URL templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .util import (
    ParseError,
    _expect_mapping,
    _field,
    _str_list,
    _without_none,
    extract_extensions,
)


@dataclass
class ServerVariable:
    """A variable for server URL template substitution."""

    enumeration: list[str] = field(default_factory=list)
    default: str = ""
    description: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> ServerVariable:
        data = _expect_mapping(data, "ServerVariable")
        return cls(
            enumeration=_str_list(data, "enum", "ServerVariable"),
            default=_field(data, "default", str, "ServerVariable", required=True),
            description=_field(data, "description", str, "ServerVariable"),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.enumeration:
            out["enum"] = list(self.enumeration)
        out["default"] = self.default
        # The description is always written, even when absent.
        out["description"] = self.description
        out.update(self.extensions)
        return out


@dataclass
class Server:
    """A server hosting the API."""

    url: str = ""
    description: str | None = None
    variables: dict[str, ServerVariable] | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Server:
        data = _expect_mapping(data, "Server")
        raw_variables = _field(data, "variables", dict, "Server")
        variables = None
        if raw_variables is not None:
            if not all(isinstance(name, str) for name in raw_variables):
                raise ParseError("Server: variable names must be strings")
            variables = {
                name: ServerVariable.from_dict(value) for name, value in raw_variables.items()
            }
        return cls(
            url=_field(data, "url", str, "Server", required=True),
            description=_field(data, "description", str, "Server"),
            variables=variables,
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out = _without_none(
            {
                "url": self.url,
                "description": self.description,
                "variables": (
                    {name: var.to_dict() for name, var in self.variables.items()}
                    if self.variables is not None
                    else None
                ),
            }
        )
        out.update(self.extensions)
        return out