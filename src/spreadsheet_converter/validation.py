"""Pre-flight checks of a column map against a record type and a header row.

The ``validate_*`` functions are pure predicates. The ``check_*`` functions
raise with the offending names so callers can report what went wrong.
Column order is never compared, only cardinality and name sets.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import HeaderShapeError, MappingShapeError
from .records import ParsedRow


def _type_mismatch(
    column_map: Mapping[str, int], row_type: type[ParsedRow]
) -> tuple[set[str], set[str]]:
    expected = {name.lower() for name in row_type.bound_fields()}
    keys = set(column_map)
    return expected - keys, keys - expected


def _header_mismatch(
    column_map: Mapping[str, int], headers: Sequence[str]
) -> tuple[set[str], set[str]]:
    lowered = {header.lower() for header in headers}
    keys = set(column_map)
    return keys - lowered, lowered - keys


def validate_map_against_type(column_map: Mapping[str, int], row_type: type[ParsedRow]) -> bool:
    """Return True if the map has exactly one entry per bound field of ``row_type``."""
    if len(row_type.bound_fields()) != len(column_map):
        return False
    return all(name.lower() in column_map for name in row_type.bound_fields())


def validate_map_against_headers(column_map: Mapping[str, int], headers: Sequence[str]) -> bool:
    """Return True if every header is a map key and the counts agree."""
    if len(headers) != len(column_map):
        return False
    return all(header.lower() in column_map for header in headers)


def check_map_against_type(column_map: Mapping[str, int], row_type: type[ParsedRow]) -> None:
    """Raise MappingShapeError unless the map matches ``row_type``."""
    if validate_map_against_type(column_map, row_type):
        return
    missing, unexpected = _type_mismatch(column_map, row_type)
    raise MappingShapeError(
        f"Column map with {len(column_map)} entries does not match the "
        f"{len(row_type.bound_fields())} bound fields of {row_type.__name__}",
        missing=missing,
        unexpected=unexpected,
    )


def check_map_against_headers(column_map: Mapping[str, int], headers: Sequence[str]) -> None:
    """Raise HeaderShapeError unless ``headers`` match the map."""
    if validate_map_against_headers(column_map, headers):
        return
    missing, unexpected = _header_mismatch(column_map, headers)
    raise HeaderShapeError(
        f"Spreadsheet's {len(headers)} text headers do not match the "
        f"{len(column_map)} entries of the column map",
        headers=headers,
        missing=missing,
        unexpected=unexpected,
    )
