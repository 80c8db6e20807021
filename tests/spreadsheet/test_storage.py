"""Tests for storage implementations."""

from spreadsheet_converter.storage import FileStorage, InMemoryStorage, LocalFileStorage


class TestLocalFileStorage:
    def test_location_is_path(self, tmp_path):
        path = tmp_path / "book.xlsx"
        assert LocalFileStorage(path).location == str(path)

    def test_open_reads_bytes(self, tmp_path):
        path = tmp_path / "book.xlsx"
        path.write_bytes(b"abc")
        with LocalFileStorage(path).open() as fp:
            assert fp.read() == b"abc"

    def test_satisfies_protocol(self, tmp_path):
        assert isinstance(LocalFileStorage(tmp_path / "x.xlsx"), FileStorage)


class TestInMemoryStorage:
    def test_each_open_is_fresh(self):
        storage = InMemoryStorage(b"abc", location="upload.xlsx")
        with storage.open() as first:
            assert first.read() == b"abc"
        with storage.open() as second:
            assert second.read() == b"abc"

    def test_from_stream(self):
        import io

        storage = InMemoryStorage.from_stream(io.BytesIO(b"xyz"), location="stream")
        assert storage.location == "stream"
        with storage.open() as fp:
            assert fp.read() == b"xyz"

    def test_satisfies_protocol(self):
        assert isinstance(InMemoryStorage(b""), FileStorage)
