"""Exception types raised while importing a spreadsheet.

Every failure is fatal to the import attempt: callers catch
``SpreadsheetImportError`` at the construction boundary and treat it as
"this spreadsheet cannot be imported with this mapping".
"""

from __future__ import annotations

from typing import Iterable


def _fmt(names: Iterable[str]) -> str:
    return ", ".join(sorted(names)) or "-"


class SpreadsheetImportError(Exception):
    """Base exception for spreadsheet import failures."""


class MappingShapeError(SpreadsheetImportError):
    """The column map does not match the record type's bound fields."""

    def __init__(
        self,
        message: str,
        *,
        missing: Iterable[str] = (),
        unexpected: Iterable[str] = (),
    ) -> None:
        self.missing = frozenset(missing)
        self.unexpected = frozenset(unexpected)
        if self.missing or self.unexpected:
            message = (
                f"{message} (missing: {_fmt(self.missing)}; "
                f"unexpected: {_fmt(self.unexpected)})"
            )
        super().__init__(message)


class HeaderShapeError(SpreadsheetImportError):
    """The sheet's header row does not match the column map."""

    def __init__(
        self,
        message: str,
        *,
        headers: Iterable[str] = (),
        missing: Iterable[str] = (),
        unexpected: Iterable[str] = (),
    ) -> None:
        self.headers = tuple(headers)
        self.missing = frozenset(missing)
        self.unexpected = frozenset(unexpected)
        super().__init__(
            f"{message} (headers: {list(self.headers)}; "
            f"missing: {_fmt(self.missing)}; unexpected: {_fmt(self.unexpected)})"
        )


class FieldBindingError(SpreadsheetImportError):
    """A populated cell could not be bound to a field on the record type."""

    def __init__(self, message: str, *, row_number: int, column_index: int) -> None:
        self.row_number = row_number
        self.column_index = column_index
        super().__init__(f"Row {row_number}, column {column_index}: {message}")


class RowValueError(SpreadsheetImportError):
    """A cell value was rejected by the declared type of its field."""

    def __init__(self, row_number: int, detail: str) -> None:
        self.row_number = row_number
        super().__init__(f"Row {row_number} has invalid values: {detail}")


class StorageAccessError(SpreadsheetImportError):
    """The workbook behind a storage location cannot be opened or decoded."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        super().__init__(f"Cannot read workbook at '{location}': {reason}")


class ParseStateError(SpreadsheetImportError):
    """A parsing stage was invoked out of order or after a rejection."""
