from __future__ import annotations

import math
from types import NoneType
from typing import Any, Iterable

from .utils import quote_identifier

__all__ = (
    "Expression",
    "Value",
    "RawSQL",
    "ColumnRef",
    "BinaryExpression",
    "UnaryExpression",
    "PostfixExpression",
    "FunctionCall",
    "InExpression",
    "sql",
    "to_expression",
)

LITERAL_TYPES = (NoneType, bool, int, float, str, bytes)


def inline_literal(value: Any) -> str:
    if value is None:
        return "NULL"

    if isinstance(value, bool):
        return "1" if value else "0"

    if isinstance(value, int):
        return str(int(value))

    if isinstance(value, float):
        if math.isnan(value):
            raise ValueError("NaN has no SQL literal")

        # out-of-range literals read back as +/-Inf
        if math.isinf(value):
            return "9e999" if value > 0 else "-9e999"

        return float.__repr__(value)

    if isinstance(value, str):
        escaped = value.replace("'", "''")
        return f"'{escaped}'"

    if isinstance(value, bytes):
        return f"X'{value.hex().upper()}'"

    raise TypeError(f"Cannot inline value of type {type(value).__name__}")


def to_expression(value: Any) -> Expression:
    if isinstance(value, Expression):
        return value

    if isinstance(value, LITERAL_TYPES):
        return Value(value)

    raise TypeError(f"{value!r} is not convertible to an SQL expression")


class Expression:
    """Node of an SQL expression tree.

    ``build`` renders the node. With ``arguments=None`` literal values are
    written into the SQL text; otherwise they are replaced with ``?`` and
    appended to ``arguments`` in order.
    """

    def build(self, arguments: list[Any] | None = None) -> str:
        raise NotImplementedError

    def _build_operand(self, arguments: list[Any] | None) -> str:
        return self.build(arguments)

    def _compare(self, value: Any, op: str) -> BinaryExpression:
        return BinaryExpression(self, to_expression(value), op)

    def __eq__(self, value: Any) -> Expression:  # type: ignore
        if value is None:
            return self.is_null()

        return self._compare(value, "=")

    def __ne__(self, value: Any) -> Expression:  # type: ignore
        if value is None:
            return self.is_not_null()

        return self._compare(value, "<>")

    def __lt__(self, value: Any) -> BinaryExpression:
        return self._compare(value, "<")

    def __le__(self, value: Any) -> BinaryExpression:
        return self._compare(value, "<=")

    def __gt__(self, value: Any) -> BinaryExpression:
        return self._compare(value, ">")

    def __ge__(self, value: Any) -> BinaryExpression:
        return self._compare(value, ">=")

    def __and__(self, other: Any) -> BinaryExpression:
        return BinaryExpression(self, to_expression(other), "AND")

    def __or__(self, other: Any) -> BinaryExpression:
        return BinaryExpression(self, to_expression(other), "OR")

    def __invert__(self) -> UnaryExpression:
        return UnaryExpression("NOT", self)

    def is_null(self) -> PostfixExpression:
        return PostfixExpression(self, "IS NULL")

    def is_not_null(self) -> PostfixExpression:
        return PostfixExpression(self, "IS NOT NULL")

    def like(self, pattern: Any) -> BinaryExpression:
        return self._compare(pattern, "LIKE")

    def in_(self, values: Iterable[Any]) -> InExpression:
        return InExpression(self, [to_expression(value) for value in values])

    def length(self) -> FunctionCall:
        return FunctionCall("length", [self])


class Value(Expression):
    def __init__(self, value: Any) -> None:
        self.value = value

    def build(self, arguments: list[Any] | None = None) -> str:
        if arguments is None or self.value is None:
            return inline_literal(self.value)

        arguments.append(self.value)
        return "?"

    def __repr__(self) -> str:
        return f"<Value {self.value!r}>"


class RawSQL(Expression):
    def __init__(self, sql: str) -> None:
        self.sql = sql

    def build(self, arguments: list[Any] | None = None) -> str:
        return self.sql

    def __repr__(self) -> str:
        return f"<RawSQL {self.sql!r}>"


class ColumnRef(Expression):
    """Reference to a column by name, handed to ``ColumnBuilder.check`` conditions."""

    def __init__(self, name: str) -> None:
        self.name = name

    def build(self, arguments: list[Any] | None = None) -> str:
        return quote_identifier(self.name)

    def __repr__(self) -> str:
        return f"<ColumnRef {self.name!r}>"


class CompoundExpression(Expression):
    # parenthesised whenever it is the operand of another expression
    def _build_operand(self, arguments: list[Any] | None) -> str:
        return f"({self.build(arguments)})"


class BinaryExpression(CompoundExpression):
    def __init__(self, left: Expression, right: Expression, op: str) -> None:
        self.left = left
        self.right = right
        self.op = op

    def build(self, arguments: list[Any] | None = None) -> str:
        left = self.left._build_operand(arguments)
        right = self.right._build_operand(arguments)

        return f"{left} {self.op} {right}"


class UnaryExpression(CompoundExpression):
    def __init__(self, op: str, operand: Expression) -> None:
        self.op = op
        self.operand = operand

    def build(self, arguments: list[Any] | None = None) -> str:
        return f"{self.op} {self.operand._build_operand(arguments)}"


class PostfixExpression(CompoundExpression):
    def __init__(self, operand: Expression, op: str) -> None:
        self.operand = operand
        self.op = op

    def build(self, arguments: list[Any] | None = None) -> str:
        return f"{self.operand._build_operand(arguments)} {self.op}"


class InExpression(CompoundExpression):
    def __init__(self, operand: Expression, values: list[Expression]) -> None:
        self.operand = operand
        self.values = values

    def build(self, arguments: list[Any] | None = None) -> str:
        values = ", ".join(value.build(arguments) for value in self.values)

        return f"{self.operand._build_operand(arguments)} IN ({values})"


class FunctionCall(Expression):
    def __init__(self, name: str, args: list[Expression]) -> None:
        self.name = name
        self.args = args

    def build(self, arguments: list[Any] | None = None) -> str:
        args = ", ".join(arg.build(arguments) for arg in self.args)

        return f"{self.name}({args})"


def sql(fragment: str) -> RawSQL:
    return RawSQL(fragment)
