"""Tests for expression rendering."""

import enum

import pytest

from ddl import ColumnRef, quote_identifier, sql
from ddl.expression import Value, to_expression


class Level(enum.IntEnum):
    LOW = 1
    HIGH = 2


class TestLiteralInlining:
    """Literals are written into the SQL when no argument list is given."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "NULL"),
            (True, "1"),
            (False, "0"),
            (42, "42"),
            (-1.5, "-1.5"),
            (Level.LOW, "1"),
            (float("inf"), "9e999"),
            (float("-inf"), "-9e999"),
            ("plain", "'plain'"),
            ("it's", "'it''s'"),
            (b"\x01\xab", "X'01AB'"),
        ],
    )
    def test_inline(self, value, expected):
        assert Value(value).build() == expected

    def test_nan_is_rejected(self):
        with pytest.raises(ValueError):
            Value(float("nan")).build()

    def test_bound_arguments_use_placeholders(self):
        """A list collects values and the SQL gets ? placeholders."""
        arguments = []
        expression = (ColumnRef("a") == "x") & (ColumnRef("b") > 3)

        assert expression.build(arguments) == '("a" = ?) AND ("b" > ?)'
        assert arguments == ["x", 3]

    def test_null_is_never_bound(self):
        arguments = []

        assert Value(None).build(arguments) == "NULL"
        assert arguments == []


class TestColumnRef:
    """Operators on column references."""

    def test_comparison_is_not_parenthesised(self):
        assert (ColumnRef("age") >= 0).build() == '"age" >= 0'

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            (ColumnRef("x") == 1, '"x" = 1'),
            (ColumnRef("x") != 1, '"x" <> 1'),
            (ColumnRef("x") < 1, '"x" < 1'),
            (ColumnRef("x") <= 1, '"x" <= 1'),
            (ColumnRef("x") > 1, '"x" > 1'),
            (ColumnRef("x") == None, '"x" IS NULL'),  # noqa: E711
            (ColumnRef("x") != None, '"x" IS NOT NULL'),  # noqa: E711
            (ColumnRef("x").like("a%"), "\"x\" LIKE 'a%'"),
            (ColumnRef("x").in_(["a", "b"]), "\"x\" IN ('a', 'b')"),
            (ColumnRef("x").length() > 3, 'length("x") > 3'),
        ],
    )
    def test_operators(self, expression, expected):
        assert expression.build() == expected

    def test_nested_expressions_are_parenthesised(self):
        age = ColumnRef("age")
        expression = ((age >= 0) & (age <= 150)) | age.is_null()

        assert expression.build() == '(("age" >= 0) AND ("age" <= 150)) OR ("age" IS NULL)'

    def test_not(self):
        assert (~ColumnRef("x").is_null()).build() == 'NOT ("x" IS NULL)'

    def test_name_is_quoted(self):
        assert ColumnRef('we"ird').build() == '"we""ird"'


class TestConversion:
    def test_raw_sql_passes_through(self):
        assert sql("CURRENT_TIMESTAMP").build() == "CURRENT_TIMESTAMP"

    def test_expression_is_returned_unchanged(self):
        expression = ColumnRef("x")

        assert to_expression(expression) is expression

    def test_unsupported_value_raises(self):
        with pytest.raises(TypeError):
            to_expression(object())


def test_quote_identifier():
    assert quote_identifier("name") == '"name"'
    assert quote_identifier('a"b') == '"a""b"'
