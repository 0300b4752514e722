"""
intcalc Intermediate Representation (IR) types.
"""

from .expressions import (
    INT64_MAX,
    INT64_MIN,
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Literal",
    "UnaryExpr",
    "UnaryOp",
]
