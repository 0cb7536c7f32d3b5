"""Excel catalog generation service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from iglu_schema_editor.schema_management.schema_models import Schema

from .constants import CATALOG_COLUMNS, CATALOG_SHEET_NAME


def catalog_rows(schemas: Sequence[Schema]) -> list[tuple[str, str, str, str, int]]:
    """Return one catalog row per schema in the given order."""
    return [
        (
            schema.name,
            schema.identity.vendor,
            schema.version,
            schema.description or "",
            len(schema.properties),
        )
        for schema in schemas
    ]


def write_catalog_workbook(schemas: Sequence[Schema], output_path: Path | str) -> Path:
    """Write the schema catalog table to an Excel workbook and return its path."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = CATALOG_SHEET_NAME

    rows = catalog_rows(schemas)
    for column_index, name in enumerate(CATALOG_COLUMNS, start=1):
        header = sheet.cell(row=1, column=column_index, value=name)
        header.style = "Headline 1"
    for row_index, row in enumerate(rows, start=2):
        for column_index, value in enumerate(row, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)
    _size_columns(sheet, rows)
    sheet.freeze_panes = "A2"

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path.resolve()


def _size_columns(sheet: Worksheet, rows: Sequence[tuple[object, ...]]) -> None:
    for column_index, name in enumerate(CATALOG_COLUMNS, start=1):
        longest = max([len(name), *(len(str(row[column_index - 1])) for row in rows)])
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(longest + 4, 60)
        )
