"""Conversion between the registry's property map and editable property records."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .schema_models import Schema, SchemaError


def to_editable(properties: Mapping[str, Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Return one property record per entry, each carrying its own ``name``."""
    return [{"name": name, **metadata} for name, metadata in properties.items()]


def to_wire(records: Sequence[Mapping[str, Any]]) -> dict[str, dict[str, Any]]:
    """Fold property records back into a map keyed by name.

    Records sharing a name collapse into one entry; the later record wins.
    """
    properties: dict[str, dict[str, Any]] = {}
    for record in records:
        if "name" not in record:
            raise SchemaError("Property record requires a name.")
        metadata = {key: value for key, value in record.items() if key != "name"}
        properties[record["name"]] = metadata
    return properties


def to_editable_document(schema: Schema) -> dict[str, Any]:
    """Return the schema document with ``properties`` as a list of property records."""
    document = schema.to_document()
    document["properties"] = to_editable(schema.properties)
    return document


def to_wire_document(editable: Mapping[str, Any]) -> dict[str, Any]:
    """Return the registry document for an editable document."""
    records = editable.get("properties")
    if records is None:
        records = []
    if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
        raise SchemaError("Editable document properties must be a list of property records.")
    for record in records:
        if not isinstance(record, Mapping):
            raise SchemaError("Property records must be objects.")
    document = dict(editable)
    document["properties"] = to_wire(records)
    return document
