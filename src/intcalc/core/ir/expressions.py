"""
Expression types for the intcalc IR.

An expression tree is built bottom-up by the parser and consumed once by the
evaluator. Every leaf is an integer literal; every internal node owns fully
formed children.

Supports:
- Integer literals in the signed 64-bit range
- Negation: -x
- Arithmetic: +, -, *, /
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class UnaryOp(StrEnum):
    """Unary operators for expressions."""

    NEG = "-"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """An integer literal."""

    value: int = Field(ge=INT64_MIN, le=INT64_MAX, description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        # Left spine rendered iteratively; long operator chains are left-deep
        spine: list[BinaryExpr] = []
        node: Expr = self
        while isinstance(node, BinaryExpr):
            spine.append(node)
            node = node.left
        text = str(node)
        for binary in reversed(spine):
            text = f"({text} {binary.op.value} {binary.right})"
        return text


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp = UnaryOp.NEG
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"-{self.operand}"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | BinaryExpr | UnaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
UnaryExpr.model_rebuild()
