"""Schema management exports."""

from .editor_form import (
    EDITOR_FORM_SCHEMA,
    EDITOR_HIDDEN_FIELDS,
    EDITOR_READ_ONLY_FIELDS,
    EditorValidationError,
    validate_editable_document,
)
from .schema_models import SCHEMA_FORMAT, Schema, SchemaError, SchemaIdentity
from .shape_adapter import to_editable, to_editable_document, to_wire, to_wire_document

__all__ = [
    "SCHEMA_FORMAT",
    "Schema",
    "SchemaError",
    "SchemaIdentity",
    "EDITOR_FORM_SCHEMA",
    "EDITOR_HIDDEN_FIELDS",
    "EDITOR_READ_ONLY_FIELDS",
    "EditorValidationError",
    "validate_editable_document",
    "to_editable",
    "to_wire",
    "to_editable_document",
    "to_wire_document",
]
