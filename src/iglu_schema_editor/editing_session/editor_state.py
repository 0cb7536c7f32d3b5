"""Editing session state and its transitions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, replace

from iglu_schema_editor.configuration.runtime_settings import RegistrySettings
from iglu_schema_editor.registry_access.registry_client import sort_schemas_by_name
from iglu_schema_editor.schema_management.schema_models import Schema


class SchemaNotFoundError(Exception):
    """Raised when the requested schema is not in the listed schemas."""


@dataclass(frozen=True)
class EditorState:
    """Registry connection, listed schemas and the schema selected for editing."""

    registry_url: str
    read_key: str | None = None
    write_key: str | None = None
    connected: bool = False
    schemas: tuple[Schema, ...] = ()
    editing: Schema | None = None

    @staticmethod
    def from_settings(settings: RegistrySettings) -> EditorState:
        return EditorState(
            registry_url=settings.url,
            read_key=settings.read_key,
            write_key=settings.write_key,
        )

    def connected_with(self, schemas: Iterable[Schema]) -> EditorState:
        return replace(self, connected=True, schemas=tuple(schemas))

    def selecting(self, name: str, version: str | None = None) -> EditorState:
        candidates = [
            schema
            for schema in self.schemas
            if schema.name == name and (version is None or schema.version == version)
        ]
        if not candidates:
            label = name if version is None else f"{name} {version}"
            raise SchemaNotFoundError(f"Schema not found in registry: {label}")
        selected = max(candidates, key=lambda schema: _version_key(schema.version))
        return replace(self, editing=selected)

    def saved(self, schema: Schema) -> EditorState:
        remaining = [
            listed
            for listed in self.schemas
            if (listed.name, listed.version) != (schema.name, schema.version)
        ]
        schemas = tuple(sort_schemas_by_name([*remaining, schema]))
        return replace(self, schemas=schemas, editing=schema)


def _version_key(version: str) -> tuple[int, ...]:
    # SchemaVer is MODEL-REVISION-ADDITION; non-numeric parts sort first.
    return tuple(int(part) if part.isdigit() else -1 for part in re.split(r"[-.]", version))
