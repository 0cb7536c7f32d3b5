"""Property shape conversion tests."""

from __future__ import annotations

import pytest
from iglu_schema_editor.schema_management.schema_models import Schema, SchemaError
from iglu_schema_editor.schema_management.shape_adapter import (
    to_editable,
    to_editable_document,
    to_wire,
    to_wire_document,
)


def _properties() -> dict[str, dict[str, str]]:
    return {
        "amount": {"type": "number", "description": "Order total"},
        "currency": {"type": "string", "description": "ISO code", "examples": "EUR"},
        "gift": {"type": "boolean", "description": "Gift wrapped"},
    }


def _schema_document() -> dict:
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "self": {
            "name": "checkout",
            "vendor": "com.acme",
            "format": "jsonschema",
            "version": "1-0-0",
        },
        "description": "Checkout completed",
        "type": "object",
        "properties": _properties(),
        "additionalProperties": False,
    }


def test_to_editable_sets_name_on_each_record() -> None:
    records = to_editable(_properties())

    assert records == [
        {"name": "amount", "type": "number", "description": "Order total"},
        {"name": "currency", "type": "string", "description": "ISO code", "examples": "EUR"},
        {"name": "gift", "type": "boolean", "description": "Gift wrapped"},
    ]


def test_to_editable_of_empty_properties_is_empty() -> None:
    assert to_editable({}) == []


def test_round_trip_restores_properties() -> None:
    properties = _properties()

    assert to_wire(to_editable(properties)) == properties


def test_to_wire_does_not_mutate_records() -> None:
    records = [{"name": "amount", "type": "number", "description": "Order total"}]

    to_wire(records)

    assert records == [{"name": "amount", "type": "number", "description": "Order total"}]


def test_duplicate_names_collapse_with_last_record_winning() -> None:
    records = [
        {"name": "x", "type": "string", "description": "first"},
        {"name": "y", "type": "number", "description": "other"},
        {"name": "x", "type": "boolean", "description": "second"},
    ]

    properties = to_wire(records)

    assert properties == {
        "x": {"type": "boolean", "description": "second"},
        "y": {"type": "number", "description": "other"},
    }


def test_to_wire_requires_names() -> None:
    with pytest.raises(SchemaError, match="requires a name"):
        to_wire([{"type": "string"}])


def test_editable_document_round_trip_keeps_every_top_level_key() -> None:
    document = _schema_document()
    schema = Schema.from_document(document)

    editable = to_editable_document(schema)

    assert isinstance(editable["properties"], list)
    assert editable["$schema"] == document["$schema"]
    assert editable["additionalProperties"] is False
    assert to_wire_document(editable) == document


def test_to_wire_document_rejects_non_list_properties() -> None:
    with pytest.raises(SchemaError, match="must be a list of property records"):
        to_wire_document({"properties": {"amount": {"type": "number"}}})

    with pytest.raises(SchemaError, match="must be objects"):
        to_wire_document({"properties": ["amount"]})


def test_editable_document_round_trip_without_description_omits_it() -> None:
    document = _schema_document()
    del document["description"]

    editable = to_editable_document(Schema.from_document(document))

    assert "description" not in editable
    assert to_wire_document(editable) == document
