"""Record types that spreadsheet rows are materialized into.

Subclass ``ParsedRow`` once per spreadsheet shape and declare one field per
spreadsheet column. Every bound field needs a zero-value default so that a
row with blank cells still produces a record::

    class PersonRow(ParsedRow):
        name: str = ""
        age: float = 0.0
        active: bool = False

The field lists and the column binding table are computed once, when the
class is defined, so a malformed record type fails at import time rather
than halfway through a spreadsheet.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict

ROW_NUMBER_FIELD = "row_number"


class ParsedRowMeta:
    """Field lists for ParsedRow subclasses.

    Attributes:
        intrinsic: Fields present on every record and never sourced from a column.
        bound: Fields sourced from spreadsheet columns. ``None`` means every
            declared field that is not intrinsic.
    """

    intrinsic: tuple[str, ...] = (ROW_NUMBER_FIELD,)
    bound: tuple[str, ...] | None = None


class ParsedRow(BaseModel):
    """Base class for one materialized spreadsheet row.

    ``row_number`` is the physical, zero-based index of the source row; the
    header row is row 0 so the first data row is stamped 1.
    """

    model_config = ConfigDict(extra="forbid")

    row_number: int = 0

    # Populated per subclass by __pydantic_init_subclass__
    _intrinsic_fields: ClassVar[tuple[str, ...]] = (ROW_NUMBER_FIELD,)
    _bound_fields: ClassVar[tuple[str, ...]] = ()
    _binding_table: ClassVar[Mapping[str, str]] = {}

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        meta = getattr(cls, "Meta", ParsedRowMeta)
        intrinsic = tuple(getattr(meta, "intrinsic", ParsedRowMeta.intrinsic))
        declared_bound = getattr(meta, "bound", None)
        fields = cls.model_fields

        if ROW_NUMBER_FIELD not in intrinsic:
            raise TypeError(f"{cls.__name__}.Meta.intrinsic must include '{ROW_NUMBER_FIELD}'")

        unknown = [name for name in intrinsic if name not in fields]
        if declared_bound is not None:
            bound = tuple(declared_bound)
            unknown += [name for name in bound if name not in fields]
        else:
            bound = tuple(name for name in fields if name not in intrinsic)
        if unknown:
            raise TypeError(f"{cls.__name__}.Meta names unknown fields: {sorted(set(unknown))}")

        overlap = set(intrinsic) & set(bound)
        if overlap:
            raise TypeError(
                f"{cls.__name__} declares fields as both intrinsic and bound: {sorted(overlap)}"
            )

        table: dict[str, str] = {}
        for name in bound:
            if fields[name].is_required():
                raise TypeError(
                    f"{cls.__name__}.{name} is spreadsheet-bound and needs a default value"
                )
            key = name.lower()
            if key in table:
                raise TypeError(
                    f"{cls.__name__} fields '{table[key]}' and '{name}' map to the same column name"
                )
            table[key] = name

        cls._intrinsic_fields = intrinsic
        cls._bound_fields = bound
        cls._binding_table = table

    @classmethod
    def intrinsic_fields(cls) -> frozenset[str]:
        """Names of fields every record carries regardless of the spreadsheet."""
        return frozenset(cls._intrinsic_fields)

    @classmethod
    def bound_fields(cls) -> frozenset[str]:
        """Names of fields that require a spreadsheet column."""
        return frozenset(cls._bound_fields)

    @classmethod
    def binding_table(cls) -> Mapping[str, str]:
        """Lower-cased column name -> field name, for every bound field."""
        return dict(cls._binding_table)

    @classmethod
    def field_for_column(cls, column_name: str) -> str | None:
        """Return the bound field a column name populates, or None."""
        return cls._binding_table.get(column_name.lower())
