"""Discriminator objects for polymorphic schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .util import _expect_mapping, _field, _str_map, extract_extensions


@dataclass
class Discriminator:
    """Names the payload property that selects among alternative schemas."""

    property_name: str = ""
    mapping: dict[str, str] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Discriminator:
        data = _expect_mapping(data, "Discriminator")
        return cls(
            property_name=_field(data, "propertyName", str, "Discriminator", required=True),
            mapping=_str_map(data, "mapping", "Discriminator"),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"propertyName": self.property_name}
        if self.mapping:
            out["mapping"] = dict(self.mapping)
        out.update(self.extensions)
        return out