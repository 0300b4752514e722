"""
Expression evaluator for the intcalc expression language.

Evaluates expression AST nodes with checked signed 64-bit arithmetic.
Pure evaluation — no I/O, no side effects. Does NOT use Python's eval().
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from intcalc.core.errors import DivisionByZero, IntegerOverflow
from intcalc.core.ir.expressions import (
    INT64_MAX,
    INT64_MIN,
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
)

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> int:
    """Evaluate an expression tree to a signed 64-bit integer.

    Binary operands are evaluated left before right, except for division,
    whose divisor is evaluated (and checked for zero) first.

    Raises:
        IntegerOverflow: If any intermediate result leaves the 64-bit range.
        DivisionByZero: If a divisor evaluates to zero.
    """
    logger.debug("Eval: %s", type(expr).__name__)

    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, UnaryExpr):
        return _interpret_unary(expr)

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr)

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _checked(value: int, operation: str) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise IntegerOverflow(operation)
    return value


def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def _interpret_unary(expr: UnaryExpr) -> int:
    val = evaluate(expr.operand)
    if expr.op == UnaryOp.NEG:
        return _checked(-val, "negation")
    raise TypeError(f"Unknown unary op: {expr.op}")


_ARITHMETIC: dict[BinaryOp, tuple[Callable[[int, int], int], str]] = {
    BinaryOp.ADD: (lambda a, b: a + b, "addition"),
    BinaryOp.SUB: (lambda a, b: a - b, "subtraction"),
    BinaryOp.MUL: (lambda a, b: a * b, "multiplication"),
}


def _interpret_binary(expr: BinaryExpr) -> int:
    """Evaluate the left spine of a binary chain iteratively.

    Walking down from the root, each divisor is evaluated and checked for
    zero before anything beneath it; walking back up, every other right
    operand is evaluated after the accumulated left value.
    """
    spine: list[tuple[BinaryExpr, int | None]] = []
    node: Expr = expr
    while isinstance(node, BinaryExpr):
        divisor: int | None = None
        if node.op == BinaryOp.DIV:
            divisor = evaluate(node.right)
            if divisor == 0:
                raise DivisionByZero()
        elif node.op not in _ARITHMETIC:
            raise TypeError(f"Unknown binary op: {node.op}")
        spine.append((node, divisor))
        node = node.left

    value = evaluate(node)
    for binary, divisor in reversed(spine):
        logger.debug("Apply %s", binary.op.value)
        if divisor is not None:
            value = _checked(_truncating_div(value, divisor), "division")
            continue
        func, operation = _ARITHMETIC[binary.op]
        value = _checked(func(value, evaluate(binary.right)), operation)
    return value
