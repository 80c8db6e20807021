"""Storage protocol for workbook sources and its file/in-memory implementations."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class FileStorage(Protocol):
    """A byte source holding one workbook.

    ``location`` identifies the source in logs and errors; ``open()`` returns
    a fresh binary stream positioned at the start. Callers close the stream.
    """

    @property
    def location(self) -> str:
        ...

    def open(self) -> BinaryIO:
        ...


class LocalFileStorage:
    """Workbook stored on the local filesystem."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def open(self) -> BinaryIO:
        return self.path.open("rb")

    def __repr__(self) -> str:
        return f"LocalFileStorage({self.location!r})"


class InMemoryStorage:
    """Workbook held in memory, e.g. an upload body or a test fixture.

    >>> storage = InMemoryStorage(b"PK\\x03\\x04...", location="upload.xlsx")
    >>> storage.location
    'upload.xlsx'
    """

    def __init__(self, data: bytes, location: str = "<memory>") -> None:
        self._data = bytes(data)
        self._location = location

    @classmethod
    def from_stream(cls, fp: BinaryIO, location: str = "<memory>") -> "InMemoryStorage":
        """Snapshot the remaining content of a binary stream."""
        return cls(fp.read(), location=location)

    @property
    def location(self) -> str:
        return self._location

    def open(self) -> BinaryIO:
        return io.BytesIO(self._data)

    def __repr__(self) -> str:
        return f"InMemoryStorage({self._location!r}, {len(self._data)} bytes)"
