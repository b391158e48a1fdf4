"""Example objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .util import _expect_mapping, _field, _without_none, extract_extensions


@dataclass
class Example:
    """An example value, given inline or by external URL."""

    summary: str | None = None
    description: str | None = None
    value: Any = None
    external_value: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Example:
        data = _expect_mapping(data, "Example")
        return cls(
            summary=_field(data, "summary", str, "Example"),
            description=_field(data, "description", str, "Example"),
            value=data.get("value"),
            external_value=_field(data, "externalValue", str, "Example"),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out = _without_none(
            {
                "summary": self.summary,
                "description": self.description,
                "value": self.value,
                "externalValue": self.external_value,
            }
        )
        out.update(self.extensions)
        return out