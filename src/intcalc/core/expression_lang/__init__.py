"""
intcalc integer expression language.

Tokenizer, parser, and evaluator for integer arithmetic with checked
signed 64-bit semantics.

Usage:
    from intcalc.core.expression_lang import calculate, evaluate, parse_expr

    calculate("-1+5*(2+1)-3")
    # 11

    expr = parse_expr("2*(3+4)")
    evaluate(expr)
    # 14
"""

from __future__ import annotations

import logging

from intcalc.core.errors import NestingTooDeep
from intcalc.core.expression_lang.evaluator import evaluate
from intcalc.core.expression_lang.parser import Parser, parse_expr
from intcalc.core.expression_lang.tokenizer import Token, Tokenizer, TokenKind, tokenize

logger = logging.getLogger(__name__)


def calculate(source: str) -> int:
    """Tokenize, parse, and evaluate one line of input.

    Raises:
        CalcError: Any tokenizing, parsing, or evaluation failure.
    """
    logger.info("%s", source)
    try:
        parser = Parser(source)
        expr = parser.parse()
        logger.info("%s", expr)
        return evaluate(expr)
    except RecursionError as e:
        raise NestingTooDeep() from e


__all__ = [
    "Parser",
    "Token",
    "TokenKind",
    "Tokenizer",
    "calculate",
    "evaluate",
    "parse_expr",
    "tokenize",
]
