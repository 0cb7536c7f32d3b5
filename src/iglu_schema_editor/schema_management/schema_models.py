"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

SCHEMA_FORMAT = "jsonschema"
IDENTITY_FIELDS: tuple[str, ...] = ("name", "vendor", "format", "version")


class SchemaError(Exception):
    """Raised for schema parsing or shape conversion failures."""


@dataclass(frozen=True)
class SchemaIdentity:
    """Registry identity of a schema (the ``self`` block)."""

    name: str
    vendor: str
    format: str
    version: str

    @property
    def registry_path(self) -> str:
        return f"{self.name}/{self.format}/{self.version}"

    def to_document(self) -> dict[str, str]:
        return {
            "name": self.name,
            "vendor": self.vendor,
            "format": self.format,
            "version": self.version,
        }


@dataclass(frozen=True)
class Schema:
    """JSON Schema document plus registry identity metadata."""

    identity: SchemaIdentity
    description: str | None
    properties: Mapping[str, Mapping[str, Any]]
    title: str | None = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def version(self) -> str:
        return self.identity.version

    @staticmethod
    def from_document(document: Any) -> Schema:
        """Parse one registry schema document.

        Keys other than ``self``, ``description``, ``title`` and ``properties``
        are kept in ``extras`` and written back unchanged by ``to_document``.
        """
        if not isinstance(document, Mapping):
            raise SchemaError("Schema document must be an object.")
        identity = _parse_identity(document.get("self"))

        description = document.get("description")
        if description is not None and not isinstance(description, str):
            raise SchemaError(f"Schema {identity.name}: description must be a string.")

        title = document.get("title")
        if title is not None and not isinstance(title, str):
            raise SchemaError(f"Schema {identity.name}: title must be a string.")

        properties = document.get("properties")
        if properties is None:
            properties = {}
        if not isinstance(properties, Mapping):
            raise SchemaError(f"Schema {identity.name}: properties must be an object.")
        for property_name, metadata in properties.items():
            if not isinstance(metadata, Mapping):
                raise SchemaError(
                    f"Schema {identity.name}: property '{property_name}' must be an object."
                )

        extras = {
            key: value
            for key, value in document.items()
            if key not in ("self", "description", "title", "properties")
        }
        return Schema(
            identity=identity,
            description=description,
            properties={key: dict(value) for key, value in properties.items()},
            title=title,
            extras=extras,
        )

    def to_document(self) -> dict[str, Any]:
        """Return the registry wire document for this schema."""
        document: dict[str, Any] = dict(self.extras)
        document["self"] = self.identity.to_document()
        if self.title is not None:
            document["title"] = self.title
        if self.description is not None:
            document["description"] = self.description
        document["properties"] = {key: dict(value) for key, value in self.properties.items()}
        return document


def _parse_identity(value: Any) -> SchemaIdentity:
    if not isinstance(value, Mapping):
        raise SchemaError("Schema document requires a 'self' object.")
    parts: dict[str, str] = {}
    for key in IDENTITY_FIELDS:
        part = value.get(key)
        if not isinstance(part, str) or not part.strip():
            raise SchemaError(f"Schema 'self.{key}' must be a non-empty string.")
        parts[key] = part
    return SchemaIdentity(**parts)
