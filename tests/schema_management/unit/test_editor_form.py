"""Editor form validation tests."""

from __future__ import annotations

from typing import Any

import pytest
from iglu_schema_editor.schema_management.editor_form import (
    EDITOR_FORM_SCHEMA,
    EditorValidationError,
    collect_violations,
    validate_editable_document,
)
from iglu_schema_editor.schema_management.schema_models import SchemaError


def _editable(**overrides: Any) -> dict[str, Any]:
    document: dict[str, Any] = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "self": {
            "name": "checkout",
            "vendor": "com.acme",
            "format": "jsonschema",
            "version": "1-0-0",
        },
        "description": "Checkout completed",
        "properties": [
            {"name": "amount", "type": "number", "description": "Order total"},
            {"name": "currency", "type": "string", "examples": "EUR"},
        ],
    }
    document.update(overrides)
    return document


def test_editor_form_restricts_property_types() -> None:
    item_schema = EDITOR_FORM_SCHEMA["properties"]["properties"]["items"]

    assert item_schema["properties"]["type"]["enum"] == ["string", "number", "boolean"]
    assert EDITOR_FORM_SCHEMA["required"] == ["$schema", "self", "properties"]


def test_valid_editable_document_passes() -> None:
    document = _editable()

    assert validate_editable_document(document) is document
    assert collect_violations(document) == []


def test_unknown_property_type_is_reported_with_its_path() -> None:
    document = _editable(properties=[{"name": "amount", "type": "integer"}])

    with pytest.raises(EditorValidationError) as excinfo:
        validate_editable_document(document)

    assert len(excinfo.value.violations) == 1
    assert excinfo.value.violations[0].startswith("$.properties[0].type:")


def test_missing_identity_fields_and_schema_uri_are_all_reported() -> None:
    document = _editable(self={"name": "checkout", "format": "yaml"})
    del document["$schema"]

    violations = collect_violations(document)

    assert any("'$schema' is a required property" in violation for violation in violations)
    assert any("'vendor' is a required property" in violation for violation in violations)
    assert any("'version' is a required property" in violation for violation in violations)
    assert any(violation.startswith("$.self.format:") for violation in violations)
    assert collect_violations(document) == violations


def test_additional_property_metadata_must_be_text() -> None:
    document = _editable(properties=[{"name": "amount", "type": "number", "examples": 3}])

    violations = collect_violations(document)

    assert violations == ["$.properties[0].examples: 3 is not of type 'string'"]


def test_editor_validation_error_is_a_schema_error() -> None:
    assert issubclass(EditorValidationError, SchemaError)
