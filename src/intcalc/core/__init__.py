"""Core intcalc functionality: IR, tokenizer, parser, evaluator."""

from . import ir
from .errors import (
    CalcError,
    DivisionByZero,
    ErrorKind,
    EvaluationError,
    ExpectedClosingParenthesis,
    IntegerOverflow,
    NestingTooDeep,
    NumberTooLarge,
    ParseError,
    UnexpectedCharacter,
    UnexpectedToken,
)
from .expression_lang import calculate, evaluate, parse_expr, tokenize

__all__ = [
    "ir",
    "CalcError",
    "DivisionByZero",
    "ErrorKind",
    "EvaluationError",
    "ExpectedClosingParenthesis",
    "IntegerOverflow",
    "NestingTooDeep",
    "NumberTooLarge",
    "ParseError",
    "UnexpectedCharacter",
    "UnexpectedToken",
    "calculate",
    "evaluate",
    "parse_expr",
    "tokenize",
]
