"""Arithmetic expressions for dimension input.

Dimension fields accept small expressions such as "297 + 33" or
"2 * 12,7 mm". Input is reduced to digits and operators, then evaluated by
walking a whitelisted Python AST; nothing is passed to eval().
"""

from __future__ import annotations

import ast
import math
import operator
import re
from typing import Callable

# Characters kept from the raw input
EXPRESSION_CHARACTERS: frozenset[str] = frozenset("0123456789 +-/*^()%.,")

_BINARY_OPERATORS: dict[type[ast.operator], Callable[[float, float], float]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow,
}

_UNARY_OPERATORS: dict[type[ast.unaryop], Callable[[float], float]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

# Decimal comma between digits, e.g. "12,7"
_DECIMAL_COMMA = re.compile(r"(?<=\d),(?=\d)")

# Leading zeros of a number, e.g. "090" (not valid Python literals)
_LEADING_ZEROS = re.compile(r"(?<![\d.])0+(?=\d)")


class ExpressionError(ValueError):
    """Raised when a dimension expression cannot be evaluated."""

    def __init__(self, expression: str, message: str) -> None:
        self.expression = expression
        self.message = message
        super().__init__(f"Math expression error in {expression!r}: {message}")


def filter_expression(text: str) -> str:
    """Keep only digits, operators, parentheses and separators."""
    return "".join(character for character in text if character in EXPRESSION_CHARACTERS)


def _real(value: float | complex, expression: str) -> float:
    if isinstance(value, complex):
        raise ExpressionError(expression, "not a real number")
    return value


def _evaluate_node(node: ast.AST, expression: str) -> float:
    if isinstance(node, ast.Expression):
        return _evaluate_node(node.body, expression)
    if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)):
        return float(node.value)
    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPERATORS:
        left = _evaluate_node(node.left, expression)
        right = _evaluate_node(node.right, expression)
        return _real(_BINARY_OPERATORS[type(node.op)](left, right), expression)
    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPERATORS:
        operand = _evaluate_node(node.operand, expression)
        return _real(_UNARY_OPERATORS[type(node.op)](operand), expression)
    raise ExpressionError(expression, "unsupported syntax")


def evaluate_expression(text: str) -> float | None:
    """Evaluate a dimension expression.

    A comma between digits is a decimal separator and `^` raises to a power.
    Anything other than digits, operators and parentheses is ignored, so a
    trailing unit label such as "mm" does no harm.

    Args:
        text: Raw field text.

    Returns:
        The value, or None when the filtered text is empty.

    Raises:
        ExpressionError: If the expression is malformed, divides by zero or
            does not evaluate to a finite number.
    """
    expression = filter_expression(text).strip()
    if not expression:
        return None

    source = _DECIMAL_COMMA.sub(".", expression)
    source = _LEADING_ZEROS.sub("", source).replace("^", "**")
    try:
        tree = ast.parse(source, mode="eval")
    except SyntaxError as e:
        raise ExpressionError(text, "invalid syntax") from e

    try:
        value = _evaluate_node(tree, text)
    except ZeroDivisionError as e:
        raise ExpressionError(text, "division by zero") from e
    except OverflowError as e:
        raise ExpressionError(text, "Infinity value") from e
    except TypeError as e:
        raise ExpressionError(text, "not a real number") from e

    if math.isnan(value):
        raise ExpressionError(text, "NaN value")
    if math.isinf(value):
        raise ExpressionError(text, "Infinity value")
    return value


def parse_dimension(
    text: str | None,
    name: str,
    allow_zero: bool = False,
) -> float | None:
    """Parse a dimension field into a number.

    Args:
        text: Raw field text, or None when the field was not given.
        name: Field name used in error messages.
        allow_zero: Accept zero (margins may be zero, sizes may not).

    Returns:
        The parsed value, or None when the field is empty.

    Raises:
        ExpressionError: If the text is not a valid positive expression.
    """
    if text is None:
        return None
    value = evaluate_expression(text)
    if value is None:
        return None
    if value < 0 or (value == 0 and not allow_zero):
        raise ExpressionError(text, f"{name}: negative or zero values not allowed")
    return value
