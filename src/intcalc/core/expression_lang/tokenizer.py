"""
Tokenizer for the intcalc expression language.

Produces one token per call to :meth:`Tokenizer.next_token`, scanning a
character cursor over the input text that never rewinds.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from intcalc.core.errors import NumberTooLarge, UnexpectedCharacter
from intcalc.core.ir.expressions import INT64_MAX

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    INT = "Int"
    PLUS = "Plus"
    MINUS = "Minus"
    ASTERISK = "Asterisk"
    SLASH = "Slash"
    LEFT_PARENTHESIS = "LeftParenthesis"
    RIGHT_PARENTHESIS = "RightParenthesis"
    EOF = "Eof"


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, pos: int, value: int | None = None) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __str__(self) -> str:
        if self.kind == TokenKind.INT:
            return f"Int({self.value})"
        return str(self.kind)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_SYMBOLS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "(": TokenKind.LEFT_PARENTHESIS,
    ")": TokenKind.RIGHT_PARENTHESIS,
}

# ASCII only; str.isdigit() also accepts other Unicode digits
_DIGITS = frozenset("0123456789")


class Tokenizer:
    """Converts an input string into a stream of tokens, one per pull."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def _peek(self) -> str | None:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def next_token(self) -> Token:
        """Return the next token from the input.

        Raises:
            UnexpectedCharacter: If the input holds a character outside the
                expression alphabet.
            NumberTooLarge: If a digit run does not fit in 64 bits.
        """
        while self._peek() == " ":
            self.pos += 1

        start = self.pos
        c = self._peek()
        if c is None:
            return Token(TokenKind.EOF, start)

        self.pos += 1
        kind = _SYMBOLS.get(c)
        if kind is not None:
            return Token(kind, start)

        if c in _DIGITS:
            while self._peek() in _DIGITS:
                self.pos += 1
            digits = self.source[start : self.pos]
            value = int(digits)
            if value > INT64_MAX:
                raise NumberTooLarge(digits, start)
            return Token(TokenKind.INT, start, value)

        raise UnexpectedCharacter(c, start)


def tokenize(source: str) -> list[Token]:
    """Drain the tokenizer into a list of tokens ending with EOF."""
    tokenizer = Tokenizer(source)
    tokens = [tokenizer.next_token()]
    while tokens[-1].kind != TokenKind.EOF:
        tokens.append(tokenizer.next_token())
    logger.debug("Tokenized %r into %d tokens", source, len(tokens))
    return tokens
