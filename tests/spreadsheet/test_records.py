"""Tests for ParsedRow field lists and binding tables."""

import pytest

from spreadsheet_converter.records import ROW_NUMBER_FIELD, ParsedRow


class PersonRow(ParsedRow):
    name: str = ""
    age: float = 0.0
    active: bool = False


class MixedCaseRow(ParsedRow):
    FirstName: str = ""
    Score: float = 0.0


class AnnotatedRow(ParsedRow):
    """Only ``code`` comes from the sheet; ``notes`` is filled in later."""

    class Meta:
        bound = ("code",)

    code: str = ""
    notes: str = ""


class EmptyRow(ParsedRow):
    pass


class TestFieldDirectory:
    def test_row_number_is_intrinsic(self):
        assert PersonRow.intrinsic_fields() == frozenset({ROW_NUMBER_FIELD})

    def test_bound_fields_exclude_intrinsic(self):
        assert PersonRow.bound_fields() == frozenset({"name", "age", "active"})

    def test_explicit_bound_fields(self):
        assert AnnotatedRow.bound_fields() == frozenset({"code"})

    def test_type_without_bound_fields(self):
        assert EmptyRow.bound_fields() == frozenset()
        assert EmptyRow.binding_table() == {}

    def test_base_class_has_no_bound_fields(self):
        assert ParsedRow.bound_fields() == frozenset()


class TestBindingTable:
    def test_keys_are_lower_cased(self):
        assert MixedCaseRow.binding_table() == {"firstname": "FirstName", "score": "Score"}

    def test_field_for_column_is_case_insensitive(self):
        assert MixedCaseRow.field_for_column("firstname") == "FirstName"
        assert MixedCaseRow.field_for_column("FIRSTNAME") == "FirstName"

    def test_field_for_unknown_column(self):
        assert PersonRow.field_for_column("nickname") is None

    def test_unbound_field_is_not_in_table(self):
        assert AnnotatedRow.field_for_column("notes") is None

    def test_binding_table_is_a_copy(self):
        table = PersonRow.binding_table()
        table["bogus"] = "name"
        assert PersonRow.field_for_column("bogus") is None


class TestDefaultConstruction:
    def test_zero_values(self):
        row = PersonRow()
        assert row.row_number == 0
        assert row.name == ""
        assert row.age == 0.0
        assert row.active is False


class TestInvalidRecordTypes:
    def test_bound_field_without_default(self):
        with pytest.raises(TypeError, match="needs a default value"):

            class NoDefaultRow(ParsedRow):
                name: str

    def test_case_insensitive_collision(self):
        with pytest.raises(TypeError, match="same column name"):

            class CollidingRow(ParsedRow):
                Name: str = ""
                name: str = ""

    def test_unknown_bound_field(self):
        with pytest.raises(TypeError, match="unknown fields"):

            class UnknownRow(ParsedRow):
                class Meta:
                    bound = ("missing",)

                code: str = ""

    def test_intrinsic_must_include_row_number(self):
        with pytest.raises(TypeError, match="row_number"):

            class NoRowNumberRow(ParsedRow):
                class Meta:
                    intrinsic = ("code",)

                code: str = ""

    def test_overlapping_field_lists(self):
        with pytest.raises(TypeError, match="both intrinsic and bound"):

            class OverlapRow(ParsedRow):
                class Meta:
                    intrinsic = ("row_number", "code")
                    bound = ("code",)

                code: str = ""
