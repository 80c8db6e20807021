"""Adapter that loads the first worksheet of a workbook with openpyxl.

The rest of the package never touches openpyxl objects: rows are copied out
into plain ``SheetRow``/``SheetCell`` values while the workbook is open, and
the file handle is released before any of them are processed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.datetime import to_excel
from openpyxl.utils.exceptions import InvalidFileException

from ._logging import get_logger
from .errors import StorageAccessError
from .storage import FileStorage

logger = get_logger("sheet")


class CellKind(str, Enum):
    """Value kind of a single cell."""

    text = "text"
    numeric = "numeric"
    boolean = "boolean"
    blank = "blank"
    error = "error"
    formula = "formula"
    unknown = "unknown"


# openpyxl Cell.data_type -> CellKind; dates ("d") are numbers with a date format
_OPENPYXL_KINDS = {
    "s": CellKind.text,
    "n": CellKind.numeric,
    "d": CellKind.numeric,
    "b": CellKind.boolean,
    "e": CellKind.error,
    "f": CellKind.formula,
}


@dataclass(frozen=True)
class SheetCell:
    """A decoded cell.

    Attributes:
        column_index: Zero-based column position
        kind: Value kind reported by the decoder
        value: Raw decoded value (None for blank cells)
    """

    column_index: int
    kind: CellKind
    value: Any = None

    @property
    def is_blank(self) -> bool:
        return self.kind is CellKind.blank

    @property
    def text(self) -> str:
        if self.kind is not CellKind.text:
            raise TypeError(f"Cell {self.column_index} is {self.kind.value}, not text")
        return str(self.value)

    @property
    def number(self) -> float:
        if self.kind is not CellKind.numeric:
            raise TypeError(f"Cell {self.column_index} is {self.kind.value}, not numeric")
        return float(self.value)

    @property
    def boolean(self) -> bool:
        if self.kind is not CellKind.boolean:
            raise TypeError(f"Cell {self.column_index} is {self.kind.value}, not boolean")
        return bool(self.value)


@dataclass(frozen=True)
class SheetRow:
    """A decoded row with its physical, zero-based row number."""

    row_number: int
    cells: tuple[SheetCell, ...]

    @property
    def is_blank(self) -> bool:
        """True when the row has no populated cell."""
        return all(cell.is_blank for cell in self.cells)


def cell_kind(data_type: str | None, value: Any) -> CellKind:
    """Classify an openpyxl cell from its ``data_type`` and value."""
    if value is None:
        return CellKind.blank
    return _OPENPYXL_KINDS.get(data_type or "", CellKind.unknown)


def cell_value(data_type: str | None, value: Any, epoch: Any) -> Any:
    """Return the stored value of an openpyxl cell; dates become serial numbers."""
    if data_type == "d" and value is not None:
        return to_excel(value, epoch)
    return value


def load_first_sheet(storage: FileStorage) -> tuple[SheetRow, ...]:
    """Read every row of the workbook's first worksheet into memory.

    Formulas are kept as formulas (``data_only=False``) so they can be told
    apart from literal values. Date and time cells are numeric and carry
    their serial value in the workbook's date system.

    Raises:
        StorageAccessError: If the source cannot be opened, is not an xlsx
            workbook, or contains no worksheet.
    """
    location = storage.location
    logger.debug("Opening workbook", extra={"location": location})

    try:
        with storage.open() as fp:
            workbook = load_workbook(fp, read_only=False, data_only=False)
    except OSError as exc:
        raise StorageAccessError(location, str(exc)) from exc
    except (BadZipFile, InvalidFileException, KeyError) as exc:
        raise StorageAccessError(location, f"not a readable xlsx workbook ({exc})") from exc

    try:
        if not workbook.worksheets:
            raise StorageAccessError(location, "workbook contains no worksheet")
        worksheet = workbook.worksheets[0]

        rows = []
        for row_number, row in enumerate(worksheet.iter_rows()):
            cells = tuple(
                SheetCell(
                    column_index=cell.column - 1,
                    kind=cell_kind(cell.data_type, cell.value),
                    value=cell_value(cell.data_type, cell.value, workbook.epoch),
                )
                for cell in row
            )
            rows.append(SheetRow(row_number=row_number, cells=cells))
    finally:
        workbook.close()

    logger.debug(
        "Loaded worksheet",
        extra={"location": location, "sheet": worksheet.title, "rows": len(rows)},
    )
    return tuple(rows)
