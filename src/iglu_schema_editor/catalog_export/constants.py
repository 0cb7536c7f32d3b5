"""Shared catalog export constants."""

from __future__ import annotations

CATALOG_SHEET_NAME = "Schemas"

CATALOG_COLUMNS: tuple[str, ...] = ("Name", "Vendor", "Version", "Description", "Properties")
