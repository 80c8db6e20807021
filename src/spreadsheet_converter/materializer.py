"""Conversion of decoded sheet rows into record instances."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import ValidationError

from ._logging import get_logger
from .column_map import ColumnMap
from .errors import FieldBindingError, RowValueError
from .headers import HEADER_ROW_NUMBER
from .records import ROW_NUMBER_FIELD, ParsedRow
from .sheet import CellKind, SheetCell, SheetRow

TRow = TypeVar("TRow", bound=ParsedRow)

logger = get_logger("materializer")


def _cell_value(cell: SheetCell) -> tuple[bool, Any]:
    """Return ``(True, value)`` for bindable kinds, ``(False, None)`` otherwise."""
    if cell.kind is CellKind.text:
        return True, cell.text
    if cell.kind is CellKind.numeric:
        return True, cell.number
    if cell.kind is CellKind.boolean:
        return True, cell.boolean
    # blank, error, formula and unknown cells leave the field at its default
    return False, None


def bind_row(
    row: SheetRow,
    column_map: ColumnMap,
    row_type: type[TRow],
    *,
    strict: bool = False,
) -> TRow:
    """Materialize one sheet row into a ``row_type`` instance.

    Each populated cell is routed to the field named by the column its index
    maps to. The record is stamped with the row's physical row number.

    Raises:
        FieldBindingError: If a populated cell sits in an unmapped column, or
            its column name has no bound field on ``row_type``.
        RowValueError: If a value is rejected by the field's declared type.
    """
    values: dict[str, Any] = {}

    for cell in row.cells:
        if cell.is_blank:
            continue

        column_name = column_map.name_for_index(cell.column_index)
        if column_name is None:
            raise FieldBindingError(
                "populated cell is not covered by the column map",
                row_number=row.row_number,
                column_index=cell.column_index,
            )

        field_name = row_type.field_for_column(column_name)
        if field_name is None:
            raise FieldBindingError(
                f"column '{column_name}' has no bound field on {row_type.__name__}",
                row_number=row.row_number,
                column_index=cell.column_index,
            )

        bindable, value = _cell_value(cell)
        if not bindable:
            logger.debug(
                "Skipping cell",
                extra={"row": row.row_number, "column": column_name, "kind": cell.kind.value},
            )
            continue
        values[field_name] = value

    values[ROW_NUMBER_FIELD] = row.row_number

    try:
        return row_type.model_validate(values, strict=strict)
    except ValidationError as exc:
        raise RowValueError(row.row_number, str(exc)) from exc


def materialize(
    rows: Iterable[SheetRow],
    column_map: ColumnMap,
    row_type: type[TRow],
    *,
    skip_blank_rows: bool = True,
    strict: bool = False,
) -> list[TRow]:
    """Materialize every data row of a sheet, in sheet order.

    The header row (physical row 0) is always skipped. Rows without any
    populated cell are skipped when ``skip_blank_rows`` is set; otherwise they
    produce records holding only default values.
    """
    records: list[TRow] = []
    for row in rows:
        if row.row_number == HEADER_ROW_NUMBER:
            continue
        if skip_blank_rows and row.is_blank:
            continue
        records.append(bind_row(row, column_map, row_type, strict=strict))
    return records
