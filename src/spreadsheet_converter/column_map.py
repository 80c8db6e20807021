"""Declared association between spreadsheet column names and column indices."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter, ValidationError

from .errors import MappingShapeError

_MAP_ADAPTER: TypeAdapter[dict[str, int]] = TypeAdapter(dict[str, int])


class ColumnMap(Mapping[str, int]):
    """Immutable mapping of lower-case column name -> zero-based column index.

    Names are lower-cased on construction. Indices must be non-negative and
    unique: a map with two names on the same column is rejected rather than
    resolved by ordering.

    >>> ColumnMap({"Name": 0, "age": 1})["name"]
    0
    """

    __slots__ = ("_entries", "_names_by_index")

    def __init__(self, mapping: Mapping[str, int] | None = None) -> None:
        entries: dict[str, int] = {}
        names_by_index: dict[int, str] = {}

        for raw_name, index in (mapping or {}).items():
            if not isinstance(raw_name, str) or not raw_name.strip():
                raise MappingShapeError(f"Column names must be non-empty strings, got {raw_name!r}")
            if isinstance(index, bool) or not isinstance(index, int) or index < 0:
                raise MappingShapeError(
                    f"Column '{raw_name}' must map to a non-negative integer index, got {index!r}"
                )
            name = raw_name.lower()
            if name in entries:
                raise MappingShapeError(f"Column name '{name}' is declared more than once")
            if index in names_by_index:
                raise MappingShapeError(
                    f"Columns '{names_by_index[index]}' and '{name}' both map to index {index}"
                )
            entries[name] = index
            names_by_index[index] = name

        self._entries = MappingProxyType(entries)
        self._names_by_index = MappingProxyType(names_by_index)

    @classmethod
    def from_json(cls, payload: str | bytes) -> "ColumnMap":
        """Build a map from a JSON object such as ``{"name": 0, "age": 1}``."""
        try:
            data = _MAP_ADAPTER.validate_json(payload)
        except ValidationError as exc:
            raise MappingShapeError(f"Invalid column map JSON: {exc}") from exc
        return cls(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "ColumnMap":
        """Load a map from a JSON file."""
        return cls.from_json(Path(path).read_bytes())

    def name_for_index(self, column_index: int) -> str | None:
        """Return the column name mapped to ``column_index``, or None."""
        return self._names_by_index.get(column_index)

    # -- Mapping protocol ---------------------------------------------------

    def __getitem__(self, name: str) -> int:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ColumnMap({dict(self._entries)!r})"
