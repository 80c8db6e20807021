"""Staged construction of a parsed spreadsheet.

Construction runs four stages in a fixed order::

    created -> map_validated -> headers_read -> headers_validated -> rows_parsed

Any failure moves the parser to ``rejected`` and the error propagates; there
is no partial result. ``SpreadsheetParser`` exposes each stage on its own,
``ParsedSpreadsheet`` runs them all and holds the records.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from enum import Enum
from typing import ClassVar, Generic, TypeVar, overload

from ._logging import get_logger
from .column_map import ColumnMap
from .config import ImportSettings
from .errors import ParseStateError, SpreadsheetImportError
from .headers import header_row, headers_from_row
from .materializer import materialize
from .records import ParsedRow
from .sheet import SheetRow, load_first_sheet
from .storage import FileStorage
from .validation import check_map_against_headers, check_map_against_type

TRow = TypeVar("TRow", bound=ParsedRow)

logger = get_logger("spreadsheet")


class ParseState(str, Enum):
    """Lifecycle of a SpreadsheetParser."""

    created = "created"
    map_validated = "map_validated"
    headers_read = "headers_read"
    headers_validated = "headers_validated"
    rows_parsed = "rows_parsed"
    rejected = "rejected"


class SpreadsheetParser(Generic[TRow]):
    """Runs the validate-then-parse stages against one storage location.

    The workbook is loaded once, by ``read_headers``, and reused by
    ``parse_rows``.
    """

    def __init__(
        self,
        column_map: Mapping[str, int],
        storage: FileStorage,
        row_type: type[TRow],
        *,
        settings: ImportSettings | None = None,
    ) -> None:
        self.column_map = column_map if isinstance(column_map, ColumnMap) else ColumnMap(column_map)
        self.storage = storage
        self.row_type = row_type
        self.settings = settings or ImportSettings.load()
        self.state = ParseState.created
        self.headers: tuple[str, ...] = ()
        self.rows: tuple[TRow, ...] = ()
        self._sheet_rows: tuple[SheetRow, ...] | None = None

    @contextmanager
    def _stage(self, expected: ParseState, target: ParseState) -> Iterator[None]:
        if self.state is ParseState.rejected:
            raise ParseStateError(f"Parser for '{self.storage.location}' was rejected")
        if self.state is not expected:
            raise ParseStateError(
                f"Cannot move to '{target.value}' from '{self.state.value}'; "
                f"expected '{expected.value}'"
            )
        try:
            yield
        except SpreadsheetImportError as exc:
            self.state = ParseState.rejected
            self._sheet_rows = None
            logger.warning(
                "Spreadsheet rejected",
                extra={
                    "location": self.storage.location,
                    "stage": target.value,
                    "error": str(exc),
                },
            )
            raise
        except Exception:
            self.state = ParseState.rejected
            self._sheet_rows = None
            raise
        self.state = target

    def validate_map(self) -> None:
        """Check the column map against the record type's bound fields."""
        with self._stage(ParseState.created, ParseState.map_validated):
            check_map_against_type(self.column_map, self.row_type)

    def read_headers(self) -> tuple[str, ...]:
        """Load the workbook and extract the header row."""
        with self._stage(ParseState.map_validated, ParseState.headers_read):
            self._sheet_rows = load_first_sheet(self.storage)
            self.headers = tuple(headers_from_row(header_row(self._sheet_rows)))
            logger.debug(
                "Read headers",
                extra={"location": self.storage.location, "headers": list(self.headers)},
            )
        return self.headers

    def validate_headers(self) -> None:
        """Check the header row against the column map."""
        with self._stage(ParseState.headers_read, ParseState.headers_validated):
            check_map_against_headers(self.column_map, self.headers)

    def parse_rows(self) -> tuple[TRow, ...]:
        """Materialize every data row."""
        with self._stage(ParseState.headers_validated, ParseState.rows_parsed):
            self.rows = tuple(
                materialize(
                    self._sheet_rows or (),
                    self.column_map,
                    self.row_type,
                    skip_blank_rows=self.settings.skip_blank_rows,
                    strict=self.settings.strict_types,
                )
            )
            self._sheet_rows = None
        logger.info(
            "Parsed spreadsheet",
            extra={
                "location": self.storage.location,
                "row_type": self.row_type.__name__,
                "records": len(self.rows),
            },
        )
        return self.rows

    def run(self) -> tuple[TRow, ...]:
        """Run every remaining stage and return the records."""
        if self.state is ParseState.created:
            self.validate_map()
        if self.state is ParseState.map_validated:
            self.read_headers()
        if self.state is ParseState.headers_read:
            self.validate_headers()
        if self.state is ParseState.headers_validated:
            self.parse_rows()
        if self.state is not ParseState.rows_parsed:
            raise ParseStateError(f"Parser for '{self.storage.location}' was rejected")
        return self.rows


class ParsedSpreadsheet(Generic[TRow]):
    """Records parsed from a spreadsheet, in sheet order.

    Either pass ``row_type`` or subclass and set it once::

        class PeopleSheet(ParsedSpreadsheet[PersonRow]):
            row_type = PersonRow

        people = PeopleSheet({"name": 0, "age": 1}, LocalFileStorage("people.xlsx"))
        for person in people:
            ...

    Construction validates and parses eagerly and raises on any mismatch, so
    an instance always holds a complete result. Parsing again needs a new
    instance.
    """

    row_type: ClassVar[type[ParsedRow] | None] = None
    parser_class: ClassVar[type[SpreadsheetParser]] = SpreadsheetParser

    def __init__(
        self,
        column_map: Mapping[str, int],
        storage: FileStorage,
        row_type: type[TRow] | None = None,
        *,
        settings: ImportSettings | None = None,
    ) -> None:
        resolved = row_type or type(self).row_type
        if resolved is None:
            raise TypeError(f"{type(self).__name__} needs a row_type")

        parser = self.parser_class(column_map, storage, resolved, settings=settings)
        rows = parser.run()

        self.row_type = resolved
        self.location = storage.location
        self.column_map: ColumnMap = parser.column_map
        self.headers: tuple[str, ...] = parser.headers
        self.rows: tuple[TRow, ...] = rows

    def __iter__(self) -> Iterator[TRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    @overload
    def __getitem__(self, index: int) -> TRow:
        ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TRow, ...]:
        ...

    def __getitem__(self, index: int | slice) -> TRow | tuple[TRow, ...]:
        return self.rows[index]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.location!r}, "
            f"row_type={self.row_type.__name__}, records={len(self.rows)})"
        )


def parse_spreadsheet(
    storage: FileStorage,
    column_map: Mapping[str, int],
    row_type: type[TRow],
    *,
    settings: ImportSettings | None = None,
) -> ParsedSpreadsheet[TRow]:
    """Validate and parse ``storage`` into ``row_type`` records.

    Raises:
        MappingShapeError: The map does not match the record type.
        HeaderShapeError: The header row does not match the map.
        FieldBindingError: A populated cell cannot be bound to a field.
        RowValueError: A cell value is rejected by its field type.
        StorageAccessError: The workbook cannot be read.
    """
    return ParsedSpreadsheet(column_map, storage, row_type, settings=settings)
