"""Static editor form definition and editable document validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema import Draft7Validator

from .schema_models import SCHEMA_FORMAT, SchemaError

PROPERTY_TYPES: tuple[str, ...] = ("string", "number", "boolean")

EDITOR_FORM_SCHEMA: dict[str, Any] = {
    "title": "Schema editor",
    "type": "object",
    "properties": {
        "$schema": {"type": "string"},
        "$id": {"type": "string"},
        "title": {
            "type": "string",
            "description": "The user-friendly display name for this event",
        },
        "description": {
            "type": "string",
            "description": "A description for this event",
        },
        "self": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "The name of the event"},
                "vendor": {"type": "string"},
                "format": {"enum": [SCHEMA_FORMAT]},
                "version": {"type": "string"},
            },
            "required": ["name", "vendor", "format", "version"],
        },
        "properties": {
            "type": "array",
            "description": "The properties to track on the event",
            "items": {
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "The name of the property to track",
                    },
                    "type": {
                        "enum": list(PROPERTY_TYPES),
                        "description": "The data type of the property",
                    },
                    "description": {
                        "type": "string",
                        "description": "A description of the property being tracked",
                    },
                },
                "required": ["name", "type"],
                "additionalProperties": {"type": "string"},
            },
        },
    },
    "required": ["$schema", "self", "properties"],
}

# Paths the editor never shows, and paths it shows without allowing changes.
EDITOR_HIDDEN_FIELDS: tuple[str, ...] = (
    "$id",
    "$schema",
    "type",
    "additionalProperties",
    "self.vendor",
    "self.format",
)
EDITOR_READ_ONLY_FIELDS: tuple[str, ...] = ("self.name",)

_VALIDATOR = Draft7Validator(EDITOR_FORM_SCHEMA)


class EditorValidationError(SchemaError):
    """Raised when an editable document violates the editor form."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__("Editable document is invalid:\n" + "\n".join(violations))


def collect_violations(document: Any) -> list[str]:
    """Return ``path: message`` for each editor form violation, ordered by path."""
    errors = sorted(
        _VALIDATOR.iter_errors(document),
        key=lambda error: (error.json_path, error.message),
    )
    return [f"{error.json_path}: {error.message}" for error in errors]


def validate_editable_document(document: Any) -> Mapping[str, Any]:
    """Validate an editable document against the editor form and return it."""
    violations = collect_violations(document)
    if violations:
        raise EditorValidationError(violations)
    return document
