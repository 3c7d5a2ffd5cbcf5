"""Tests for the literal value model and conversion from parsed YAML/JSON."""

import datetime

import pytest

from schema_lint.models import values as v
from schema_lint.models.values import ArrayValue, ObjectValue, ScalarKind, base_type, format_tag, from_literal


class TestTags:

    @pytest.mark.parametrize("value, expected_type, expected_format", [
        (v.integer(1), "integer", None),
        (v.long(1), "integer", "int64"),
        (v.float_(1.0), "number", "float"),
        (v.double(1.0), "number", None),
        (v.string("a"), "string", None),
        (v.password("a"), "string", "password"),
        (v.byte("YQ=="), "string", "byte"),
        (v.binary("a"), "string", "binary"),
        (v.boolean(True), "boolean", None),
        (v.date(datetime.date(2024, 1, 1)), "string", "date"),
        (v.date_time(datetime.datetime(2024, 1, 1)), "string", "date-time"),
        (v.null(), "null", None),
        (v.array(), "array", None),
        (v.obj(), "object", None),
    ])
    def test_base_type_and_format(self, value, expected_type, expected_format):
        assert base_type(value) == expected_type
        assert format_tag(value) == expected_format

    def test_base_type_rejects_non_values(self):
        with pytest.raises(TypeError):
            base_type(42)

    def test_object_preserves_insertion_order(self):
        value = v.obj({"z": v.integer(1), "a": v.integer(2)}, m=v.integer(3))
        assert list(value.members) == ["z", "a", "m"]


class TestFromLiteral:

    @pytest.mark.parametrize("raw, kind", [
        (True, ScalarKind.BOOLEAN),
        (7, ScalarKind.INTEGER),
        (2 ** 40, ScalarKind.LONG),
        (1.5, ScalarKind.DOUBLE),
        ("x", ScalarKind.STRING),
        (None, ScalarKind.NULL),
        (datetime.date(2024, 1, 2), ScalarKind.DATE),
        (datetime.datetime(2024, 1, 2, 3, 4), ScalarKind.DATE_TIME),
    ])
    def test_without_hints(self, raw, kind):
        assert from_literal(raw).kind is kind

    @pytest.mark.parametrize("raw, type_hint, format_hint, kind", [
        (7, "integer", "int64", ScalarKind.LONG),
        (7, "number", "float", ScalarKind.FLOAT),
        (0, "number", None, ScalarKind.DOUBLE),
        (2 ** 40, "number", None, ScalarKind.DOUBLE),
        (1.5, "number", "float", ScalarKind.FLOAT),
        ("s3cret", "string", "password", ScalarKind.PASSWORD),
        ("YQ==", "string", "byte", ScalarKind.BYTE),
        ("raw", "string", "binary", ScalarKind.BINARY),
        ("2024-01-02", "string", "date", ScalarKind.DATE),
        ("2024-01-02T03:04:05Z", "string", "date-time", ScalarKind.DATE_TIME),
        (datetime.date(2024, 1, 2), "string", "date-time", ScalarKind.DATE_TIME),
    ])
    def test_hints_upgrade_literal(self, raw, type_hint, format_hint, kind):
        assert from_literal(raw, type_hint, format_hint).kind is kind

    @pytest.mark.parametrize("raw, type_hint, format_hint, kind", [
        ("not a date", "string", "date", ScalarKind.STRING),
        ("yesterday", "string", "date-time", ScalarKind.STRING),
        ("55", "integer", "int64", ScalarKind.STRING),
        (55, "string", "password", ScalarKind.INTEGER),
        (True, "integer", "int64", ScalarKind.BOOLEAN),
    ])
    def test_hints_never_coerce_across_types(self, raw, type_hint, format_hint, kind):
        assert from_literal(raw, type_hint, format_hint).kind is kind

    def test_containers(self):
        value = from_literal({"a": [1, "x"], "b": {"c": None}})
        assert isinstance(value, ObjectValue)
        assert value.members["a"] == ArrayValue((v.integer(1), v.string("x")))
        assert value.members["b"] == v.obj(c=v.null())

    def test_unsupported_literal(self):
        with pytest.raises(TypeError):
            from_literal(object())
