"""Editing session use-case service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from iglu_schema_editor.schema_management.editor_form import (
    EDITOR_HIDDEN_FIELDS,
    EDITOR_READ_ONLY_FIELDS,
    validate_editable_document,
)
from iglu_schema_editor.schema_management.schema_models import Schema, SchemaIdentity
from iglu_schema_editor.schema_management.shape_adapter import to_wire_document

from .editor_state import EditorState

logger = logging.getLogger(__name__)

# Identity fields the editor hides or shows read-only must survive an edit unchanged.
_PROTECTED_IDENTITY_FIELDS: tuple[str, ...] = tuple(
    path.removeprefix("self.")
    for path in EDITOR_READ_ONLY_FIELDS + EDITOR_HIDDEN_FIELDS
    if path.startswith("self.")
)


class IdentityChangeError(Exception):
    """Raised when an edit changes a read-only identity field of the selected schema."""


class SchemaRegistry(Protocol):
    """Protocol for registry clients used by the session."""

    def list_schemas(self, read_key: str | None = None) -> list[Schema]: ...

    def put_schema(self, schema: Schema, write_key: str | None = None) -> Any: ...


def connect_registry(state: EditorState, registry: SchemaRegistry) -> EditorState:
    """List the registry's schemas and return the connected state."""
    schemas = registry.list_schemas(state.read_key)
    logger.info("Connected to %s, %d schemas listed", state.registry_url, len(schemas))
    return state.connected_with(schemas)


def select_schema(state: EditorState, name: str, version: str | None = None) -> EditorState:
    """Return the state with the named schema selected for editing."""
    return state.selecting(name, version)


def persist_schema(
    state: EditorState,
    registry: SchemaRegistry,
    editable_document: Mapping[str, Any],
) -> tuple[EditorState, Any]:
    """Validate, convert and write an edited schema.

    Returns the state after the save together with the registry acknowledgement.
    Nothing is written and ``state`` stays valid when any step fails.
    """
    validate_editable_document(editable_document)
    schema = Schema.from_document(to_wire_document(editable_document))
    if state.editing is not None:
        _ensure_identity_unchanged(state.editing.identity, schema.identity)
    acknowledgement = registry.put_schema(schema, state.write_key)
    logger.info("Saved %s to %s", schema.identity.registry_path, state.registry_url)
    return state.saved(schema), acknowledgement


def _ensure_identity_unchanged(original: SchemaIdentity, edited: SchemaIdentity) -> None:
    for field_name in _PROTECTED_IDENTITY_FIELDS:
        before = getattr(original, field_name)
        after = getattr(edited, field_name)
        if before != after:
            raise IdentityChangeError(
                f"self.{field_name} cannot be changed (was '{before}', now '{after}')."
            )
