"""
Error types for intcalc tokenizing, parsing, and evaluation.

Every error is terminal for the evaluation it occurs in. ``str(error)`` is the
human-readable message shown by the command line loop.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Machine-readable classification of a calculation failure."""

    UNEXPECTED_CHARACTER = "unexpected_character"
    NUMBER_TOO_LARGE = "number_too_large"
    UNEXPECTED_TOKEN = "unexpected_token"
    EXPECTED_CLOSING_PARENTHESIS = "expected_closing_parenthesis"
    OVERFLOW = "overflow"
    DIVISION_BY_ZERO = "division_by_zero"
    NESTING_TOO_DEEP = "nesting_too_deep"


class CalcError(Exception):
    """Base exception for all intcalc errors."""

    kind: ErrorKind | None = None

    def __init__(self, message: str, pos: int | None = None) -> None:
        self.message = message
        self.pos = pos
        super().__init__(message)


class ParseError(CalcError):
    """
    Raised when the input text cannot be turned into an expression tree.

    Examples:
    - Characters outside the expression alphabet
    - Integer literals outside the 64-bit range
    - Tokens in a position the grammar does not allow
    """

    pass


class UnexpectedCharacter(ParseError):
    """A character that is not a space, digit, or recognized symbol."""

    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, char: str, pos: int) -> None:
        self.char = char
        super().__init__(f"Unexpected character: {char!r}", pos)


class NumberTooLarge(ParseError):
    """A run of digits that does not fit in a signed 64-bit integer."""

    kind = ErrorKind.NUMBER_TOO_LARGE

    def __init__(self, digits: str, pos: int) -> None:
        self.digits = digits
        super().__init__("number too large to fit in target type", pos)


class UnexpectedToken(ParseError):
    """A token the grammar does not accept at the current position."""

    kind = ErrorKind.UNEXPECTED_TOKEN


class ExpectedClosingParenthesis(UnexpectedToken):
    """A parenthesized sub-expression that is not followed by ``)``."""

    kind = ErrorKind.EXPECTED_CLOSING_PARENTHESIS


class EvaluationError(CalcError):
    """
    Raised when a well-formed expression tree cannot be evaluated.

    Examples:
    - Overflow of the signed 64-bit range
    - Division by zero
    """

    pass


class IntegerOverflow(EvaluationError):
    """Checked arithmetic left the signed 64-bit range."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Overflow on {operation}")


class DivisionByZero(EvaluationError):
    """The divisor evaluated to exactly zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("Division by zero")


class NestingTooDeep(CalcError):
    """The expression tree is deeper than the interpreter stack allows."""

    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self) -> None:
        super().__init__("Expression nested too deeply")
