"""Editing session exports."""

from .editor_state import EditorState, SchemaNotFoundError
from .session_use_case import (
    IdentityChangeError,
    SchemaRegistry,
    connect_registry,
    persist_schema,
    select_schema,
)

__all__ = [
    "EditorState",
    "SchemaNotFoundError",
    "IdentityChangeError",
    "SchemaRegistry",
    "connect_registry",
    "persist_schema",
    "select_schema",
]
