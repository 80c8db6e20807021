"""Import a people workbook into typed records.

Run from the repository root::

    python examples/import_people.py people.xlsx

The workbook's first row must read ``Name | Age | Email | Subscribed`` (in
any column order matching ``PEOPLE_MAP`` below).
"""

from __future__ import annotations

import sys

from spreadsheet_converter import (
    ColumnMap,
    LocalFileStorage,
    ParsedRow,
    ParsedSpreadsheet,
    SpreadsheetImportError,
)


class PersonRow(ParsedRow):
    name: str = ""
    age: float = 0.0
    email: str = ""
    subscribed: bool = False


class PeopleSheet(ParsedSpreadsheet[PersonRow]):
    row_type = PersonRow


PEOPLE_MAP = ColumnMap({"name": 0, "age": 1, "email": 2, "subscribed": 3})


def main(path: str) -> int:
    try:
        people = PeopleSheet(PEOPLE_MAP, LocalFileStorage(path))
    except SpreadsheetImportError as e:
        print(f"Cannot import {path}: {e}", file=sys.stderr)
        return 1

    for person in people:
        status = "subscribed" if person.subscribed else "not subscribed"
        print(f"row {person.row_number}: {person.name} ({person.age:g}) <{person.email}> {status}")
    print(f"{len(people)} people imported")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1]))
