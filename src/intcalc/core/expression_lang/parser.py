"""
Recursive descent parser for the intcalc expression language.

Grammar (precedence low to high, binary operators left-associative):
    expression → term (("+" | "-") term)*
    term       → factor (("*" | "/") factor)*
    factor     → INT | "-" factor | "(" expression ")"

The parser pulls tokens from the tokenizer one at a time and keeps exactly
one token of lookahead.
"""

from __future__ import annotations

import logging

from intcalc.core.errors import ExpectedClosingParenthesis, UnexpectedToken
from intcalc.core.expression_lang.tokenizer import Token, Tokenizer, TokenKind
from intcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Literal,
    UnaryExpr,
    UnaryOp,
)
from intcalc.log_config import TRACE

logger = logging.getLogger(__name__)

_ADDITIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MULTIPLICATIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.ASTERISK: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


class Parser:
    """Recursive descent parser over a pull-based tokenizer.

    Constructing a parser immediately pulls the first token, so an invalid
    leading character fails here rather than at the first parse call.
    """

    def __init__(self, source: str) -> None:
        self.tokenizer = Tokenizer(source)
        self.current: Token = self.tokenizer.next_token()
        logger.debug("First token = %s", self.current)

    def advance(self) -> None:
        """Replace the current token with the tokenizer's next pull."""
        logger.log(TRACE, "Advance")
        self.current = self.tokenizer.next_token()

    # -- Grammar rules --

    def parse(self) -> Expr:
        """Parse one complete expression and require end of input after it."""
        expr = self.parse_expression()
        if self.current.kind != TokenKind.EOF:
            raise UnexpectedToken(
                f"Unexpected token after expression: {self.current}",
                self.current.pos,
            )
        return expr

    def parse_expression(self) -> Expr:
        """term (('+' | '-') term)*

        Stops at the first token that is not ``+`` or ``-`` without
        validating it.
        """
        logger.debug("Start parsing expression from %s", self.current)
        node = self.parse_term()
        while self.current.kind in _ADDITIVE_OPS:
            op = _ADDITIVE_OPS[self.current.kind]
            logger.debug("Operate: %s", self.current)
            self.advance()
            right = self.parse_term()
            node = BinaryExpr(op=op, left=node, right=right)
            logger.debug("New expression node %s", op.value)
        return node

    def parse_term(self) -> Expr:
        """factor (('*' | '/') factor)*"""
        logger.debug("Start parsing term from %s", self.current)
        node = self.parse_factor()
        while self.current.kind in _MULTIPLICATIVE_OPS:
            op = _MULTIPLICATIVE_OPS[self.current.kind]
            logger.debug("Operate: %s", self.current)
            self.advance()
            right = self.parse_factor()
            node = BinaryExpr(op=op, left=node, right=right)
            logger.debug("New term node %s", op.value)
        return node

    def parse_factor(self) -> Expr:
        """INT | '-' factor | '(' expression ')'"""
        tok = self.current
        logger.debug("Parse %s as factor", tok)

        if tok.kind == TokenKind.MINUS:
            self.advance()
            factor: Expr = UnaryExpr(op=UnaryOp.NEG, operand=self.parse_factor())
            logger.debug("New factor: negation")
            return factor

        if tok.kind == TokenKind.INT:
            self.advance()
            factor = Literal(value=tok.value)
            logger.debug("New factor: literal %d", tok.value)
            return factor

        if tok.kind == TokenKind.LEFT_PARENTHESIS:
            self.advance()
            expr = self.parse_expression()
            if self.current.kind != TokenKind.RIGHT_PARENTHESIS:
                raise ExpectedClosingParenthesis(
                    f"Expected closing parenthesis, found {self.current}",
                    self.current.pos,
                )
            self.advance()
            logger.debug("Closed parenthesized expression")
            return expr

        raise UnexpectedToken(f"Unexpected token in factor: {tok}", tok.pos)


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "-1+5*(2+1)-3")

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If tokenizing or parsing fails.
    """
    return Parser(source).parse()
