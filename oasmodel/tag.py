"""Tags and external documentation references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .util import _expect_mapping, _field, _without_none, extract_extensions


@dataclass
class ExternalDocumentation:
    """A reference to an external resource for extended documentation."""

    description: str | None = None
    url: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> ExternalDocumentation:
        data = _expect_mapping(data, "ExternalDocumentation")
        return cls(
            description=_field(data, "description", str, "ExternalDocumentation"),
            url=_field(data, "url", str, "ExternalDocumentation", required=True),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out = _without_none({"description": self.description, "url": self.url})
        out.update(self.extensions)
        return out


@dataclass
class Tag:
    """Metadata for a tag used by operations."""

    name: str = ""
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Tag:
        data = _expect_mapping(data, "Tag")
        docs = _field(data, "externalDocs", dict, "Tag")
        return cls(
            name=_field(data, "name", str, "Tag", required=True),
            description=_field(data, "description", str, "Tag"),
            external_docs=ExternalDocumentation.from_dict(docs) if docs is not None else None,
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out = _without_none(
            {
                "name": self.name,
                "description": self.description,
                "externalDocs": (
                    self.external_docs.to_dict() if self.external_docs is not None else None
                ),
            }
        )
        out.update(self.extensions)
        return out