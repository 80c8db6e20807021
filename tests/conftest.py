"""Shared fixtures: in-memory xlsx workbooks."""

import io
from typing import Any, Sequence

import pytest
from openpyxl import Workbook

from spreadsheet_converter.storage import InMemoryStorage


def xlsx_bytes(rows: Sequence[Sequence[Any]], title: str = "Sheet") -> bytes:
    """Build an xlsx workbook whose first sheet holds ``rows``."""
    wb = Workbook()
    ws = wb.active
    ws.title = title
    for row in rows:
        ws.append(list(row))
    fp = io.BytesIO()
    wb.save(fp)
    return fp.getvalue()


@pytest.fixture
def make_storage():
    """Factory fixture returning InMemoryStorage for the given rows."""

    def _make(rows: Sequence[Sequence[Any]], location: str = "people.xlsx") -> InMemoryStorage:
        return InMemoryStorage(xlsx_bytes(rows), location=location)

    return _make


@pytest.fixture
def people_storage(make_storage):
    """Header row plus three people."""
    return make_storage(
        [
            ["Name", "Age"],
            ["Alice", 30],
            ["Bob", 25],
            ["Charlie", 41.5],
        ]
    )


@pytest.fixture
def person_map():
    return {"name": 0, "age": 1}
