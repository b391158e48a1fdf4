"""API metadata: the Info object with its Contact and License."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .util import _expect_mapping, _field, _without_none, extract_extensions


@dataclass
class Contact:
    """Contact information for the exposed API."""

    name: str | None = None
    url: str | None = None
    email: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Contact:
        data = _expect_mapping(data, "Contact")
        return cls(
            name=_field(data, "name", str, "Contact"),
            url=_field(data, "url", str, "Contact"),
            email=_field(data, "email", str, "Contact"),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out = _without_none({"name": self.name, "url": self.url, "email": self.email})
        out.update(self.extensions)
        return out


@dataclass
class License:
    """License information for the exposed API."""

    name: str = ""
    url: str | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> License:
        data = _expect_mapping(data, "License")
        return cls(
            name=_field(data, "name", str, "License", required=True),
            url=_field(data, "url", str, "License"),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out = _without_none({"name": self.name, "url": self.url})
        out.update(self.extensions)
        return out


@dataclass
class Info:
    """Metadata about the API."""

    title: str = ""
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None
    version: str = ""
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Info:
        data = _expect_mapping(data, "Info")
        contact = _field(data, "contact", dict, "Info")
        license_ = _field(data, "license", dict, "Info")
        return cls(
            title=_field(data, "title", str, "Info", required=True),
            description=_field(data, "description", str, "Info"),
            terms_of_service=_field(data, "termsOfService", str, "Info"),
            contact=Contact.from_dict(contact) if contact is not None else None,
            license=License.from_dict(license_) if license_ is not None else None,
            version=_field(data, "version", str, "Info", required=True),
            extensions=extract_extensions(data),
        )

    def to_dict(self) -> dict[str, Any]:
        out = _without_none(
            {
                "title": self.title,
                "description": self.description,
                "termsOfService": self.terms_of_service,
                "contact": self.contact.to_dict() if self.contact is not None else None,
                "license": self.license.to_dict() if self.license is not None else None,
                "version": self.version,
            }
        )
        out.update(self.extensions)
        return out