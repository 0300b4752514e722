"""
intcalc - checked 64-bit integer arithmetic expression calculator.

Evaluates lines such as ``-2+5*((10+5)*3)+8-14/2`` with standard operator
precedence, reporting overflow and division by zero as errors.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    CalcError,
    DivisionByZero,
    EvaluationError,
    ExpectedClosingParenthesis,
    IntegerOverflow,
    NestingTooDeep,
    NumberTooLarge,
    ParseError,
    UnexpectedCharacter,
    UnexpectedToken,
)
from .core.expression_lang import calculate, evaluate, parse_expr

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "calculate",
    "evaluate",
    "parse_expr",
    "CalcError",
    "DivisionByZero",
    "EvaluationError",
    "ExpectedClosingParenthesis",
    "IntegerOverflow",
    "NestingTooDeep",
    "NumberTooLarge",
    "ParseError",
    "UnexpectedCharacter",
    "UnexpectedToken",
]
