"""Tests for ColumnMap construction and lookups."""

import pytest

from spreadsheet_converter.column_map import ColumnMap
from spreadsheet_converter.errors import MappingShapeError


class TestConstruction:
    def test_keys_are_lower_cased(self):
        column_map = ColumnMap({"Name": 0, "AGE": 1})
        assert dict(column_map) == {"name": 0, "age": 1}

    def test_empty_map(self):
        column_map = ColumnMap()
        assert len(column_map) == 0
        assert dict(column_map) == {}

    def test_equals_plain_dict(self):
        assert ColumnMap({"name": 0}) == {"name": 0}

    def test_is_immutable(self):
        column_map = ColumnMap({"name": 0})
        with pytest.raises(TypeError):
            column_map["age"] = 1  # type: ignore[index]

    def test_copy_of_source_mapping(self):
        source = {"name": 0}
        column_map = ColumnMap(source)
        source["age"] = 1
        assert "age" not in column_map


class TestRejectedMaps:
    def test_shared_index_is_rejected(self):
        with pytest.raises(MappingShapeError, match="both map to index 0"):
            ColumnMap({"name": 0, "nickname": 0})

    def test_duplicate_name_after_lower_casing(self):
        with pytest.raises(MappingShapeError, match="more than once"):
            ColumnMap({"Name": 0, "name": 1})

    def test_negative_index(self):
        with pytest.raises(MappingShapeError, match="non-negative"):
            ColumnMap({"name": -1})

    def test_non_integer_index(self):
        with pytest.raises(MappingShapeError, match="non-negative"):
            ColumnMap({"name": "0"})  # type: ignore[dict-item]

    def test_boolean_index(self):
        with pytest.raises(MappingShapeError):
            ColumnMap({"name": True})

    def test_blank_name(self):
        with pytest.raises(MappingShapeError, match="non-empty"):
            ColumnMap({"  ": 0})


class TestLookup:
    def test_name_for_index(self):
        column_map = ColumnMap({"name": 0, "age": 3})
        assert column_map.name_for_index(0) == "name"
        assert column_map.name_for_index(3) == "age"

    def test_name_for_unmapped_index(self):
        assert ColumnMap({"name": 0}).name_for_index(1) is None


class TestFromJson:
    def test_from_json(self):
        assert dict(ColumnMap.from_json('{"Name": 0, "age": 1}')) == {"name": 0, "age": 1}

    def test_from_json_rejects_non_object(self):
        with pytest.raises(MappingShapeError, match="Invalid column map JSON"):
            ColumnMap.from_json("[1, 2]")

    def test_from_json_rejects_non_integer_values(self):
        with pytest.raises(MappingShapeError):
            ColumnMap.from_json('{"name": "first"}')

    def test_from_file(self, tmp_path):
        path = tmp_path / "map.json"
        path.write_text('{"name": 0}', encoding="utf-8")
        assert dict(ColumnMap.from_file(path)) == {"name": 0}
