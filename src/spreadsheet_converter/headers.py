"""Header row extraction."""

from __future__ import annotations

from collections.abc import Sequence

from ._logging import get_logger
from .sheet import CellKind, SheetRow, load_first_sheet
from .storage import FileStorage

logger = get_logger("headers")

HEADER_ROW_NUMBER = 0


def normalize_header(text: str) -> str:
    """Remove all whitespace from a header label, preserving case.

    >>> normalize_header(" First  Name ")
    'FirstName'
    """
    return "".join(text.split())


def headers_from_row(row: SheetRow | None) -> list[str]:
    """Return the textual labels of a header row, left to right.

    Non-text cells are skipped, so a header row containing a number or a
    formula yields fewer labels than it has columns and fails the header
    cardinality check downstream.
    """
    if row is None:
        return []

    headers: list[str] = []
    for cell in row.cells:
        if cell.kind is not CellKind.text:
            continue
        label = normalize_header(cell.text)
        if label:
            headers.append(label)
    return headers


def header_row(rows: Sequence[SheetRow]) -> SheetRow | None:
    """Return physical row 0 from a loaded sheet, if present."""
    for row in rows:
        if row.row_number == HEADER_ROW_NUMBER:
            return row
    return None


def read_headers(storage: FileStorage) -> list[str]:
    """Open the workbook behind ``storage`` and read its header labels."""
    headers = headers_from_row(header_row(load_first_sheet(storage)))
    logger.debug("Read headers", extra={"location": storage.location, "headers": headers})
    return headers
