"""Convert spreadsheet rows into typed records, validating shape before any data is read."""

from ._version import __version__
from .column_map import ColumnMap
from .errors import (
    FieldBindingError,
    HeaderShapeError,
    MappingShapeError,
    ParseStateError,
    RowValueError,
    SpreadsheetImportError,
    StorageAccessError,
)
from .headers import read_headers
from .materializer import bind_row, materialize
from .records import ParsedRow
from .sheet import CellKind, SheetCell, SheetRow, load_first_sheet
from .spreadsheet import ParsedSpreadsheet, ParseState, SpreadsheetParser, parse_spreadsheet
from .storage import FileStorage, InMemoryStorage, LocalFileStorage
from .validation import (
    check_map_against_headers,
    check_map_against_type,
    validate_map_against_headers,
    validate_map_against_type,
)

__all__ = [
    "__version__",
    # Records and maps
    "ParsedRow",
    "ColumnMap",
    # Storage
    "FileStorage",
    "LocalFileStorage",
    "InMemoryStorage",
    # Sheet decoding
    "CellKind",
    "SheetCell",
    "SheetRow",
    "load_first_sheet",
    "read_headers",
    # Validation
    "validate_map_against_type",
    "validate_map_against_headers",
    "check_map_against_type",
    "check_map_against_headers",
    # Materialization
    "bind_row",
    "materialize",
    "ParseState",
    "SpreadsheetParser",
    "ParsedSpreadsheet",
    "parse_spreadsheet",
    # Errors
    "SpreadsheetImportError",
    "MappingShapeError",
    "HeaderShapeError",
    "FieldBindingError",
    "RowValueError",
    "StorageAccessError",
    "ParseStateError",
]
