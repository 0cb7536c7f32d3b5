"""Catalog export exports."""

from .catalog_workbook_builder import catalog_rows, write_catalog_workbook
from .constants import CATALOG_COLUMNS, CATALOG_SHEET_NAME

__all__ = [
    "CATALOG_SHEET_NAME",
    "CATALOG_COLUMNS",
    "catalog_rows",
    "write_catalog_workbook",
]
