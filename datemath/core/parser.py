"""
Date-Math Parser

Builds the ordered list of AST nodes from the lexer's token stream.

Grammar:
    Document       := NOW? Clause*
    Clause         := ModifierClause | SnapClause
    ModifierClause := (PLUS | MINUS) NUMBER? MODIFIER
    SnapClause     := (SLASH | AT) MODIFIER

The parser never stops at the first problem. Every illegal token, and every
modifier that does not belong to its clause, is recorded as an error and
skipped; valid clauses elsewhere in the input are still returned.
"""

from __future__ import annotations

import logging
from typing import Final

from datemath.core.ast import (
    AMOUNT_MODIFIERS,
    SNAP_MODIFIERS,
    AmountOperator,
    Expression,
    ModifierExpression,
    NowExpression,
    SnapExpression,
    SnapOperator,
)
from datemath.core.lexer import Lexer
from datemath.core.tokens import Token, TokenType

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE: Final = "Invalid token"

_AMOUNT_OPERATORS: Final = {TokenType.PLUS: AmountOperator.ADD, TokenType.MINUS: AmountOperator.SUB}
_SNAP_OPERATORS: Final = {TokenType.SLASH: SnapOperator.START, TokenType.AT: SnapOperator.END}


def illegal_operator_message(literal: str) -> str:
    return f'Illegal operator: "{literal}"'


class Parser:
    """
    Recursive-descent parser over a Lexer.

    Usage:
        parser = Parser(Lexer("now-1h/h"))
        nodes = parser.parse()
        errors = parser.get_errors()
    """

    def __init__(self, lexer: Lexer):
        self._lexer = lexer
        self._errors: list[str] = []
        self._nodes: list[Expression] | None = None
        self._current = Token(TokenType.END, "")

    def parse(self) -> list[Expression]:
        """
        Parse the whole token stream.

        The stream is consumed once; later calls return the same nodes.

        Returns:
            The nodes in evaluation order.
        """
        if self._nodes is not None:
            return list(self._nodes)

        self._nodes = []
        if self._lexer.is_invalid():
            self._error(INVALID_TOKEN_MESSAGE)
            return []

        self._advance()
        if self._current.type == TokenType.NOW:
            self._nodes.append(NowExpression(token=self._current))
            self._advance()

        while self._current.type != TokenType.END:
            node = self._parse_clause()
            if node is not None:
                self._nodes.append(node)

        return list(self._nodes)

    def get_errors(self) -> list[str]:
        """Return every error found so far, in encounter order."""
        return list(self._errors)

    def _parse_clause(self) -> Expression | None:
        token = self._current
        if token.type in _AMOUNT_OPERATORS:
            return self._parse_modifier_clause()
        if token.type in _SNAP_OPERATORS:
            return self._parse_snap_clause()

        # A number or modifier that no operator opened is orphaned, not illegal.
        if token.type not in (TokenType.NUMBER, TokenType.MODIFIER):
            self._error(illegal_operator_message(token.literal))
        self._advance()
        return None

    def _parse_modifier_clause(self) -> ModifierExpression | None:
        operator_token = self._current
        self._advance()

        amount = 1
        if self._current.type == TokenType.NUMBER:
            amount_token = self._current
            self._advance()
            try:
                amount = int(amount_token.literal)
            except ValueError:
                # Past the interpreter's int/str conversion limit.
                amount = 0
            if amount < 1:
                self._error(illegal_operator_message(amount_token.literal))
                self._skip_modifier()
                return None

        if self._current.type != TokenType.MODIFIER:
            # Incomplete clause; the current token is parsed on its own.
            return None

        modifier = self._current.literal
        self._advance()
        if not AMOUNT_MODIFIERS.check_modifier(modifier):
            self._error(illegal_operator_message(modifier))
            return None

        return ModifierExpression(
            token=operator_token,
            amount=amount,
            modifier=modifier,
            operator=_AMOUNT_OPERATORS[operator_token.type],
        )

    def _parse_snap_clause(self) -> SnapExpression | None:
        operator_token = self._current
        self._advance()

        if self._current.type != TokenType.MODIFIER:
            return None

        modifier = self._current.literal
        self._advance()
        if not SNAP_MODIFIERS.check_modifier(modifier):
            self._error(illegal_operator_message(modifier))
            return None

        return SnapExpression(
            token=operator_token,
            modifier=modifier,
            operator=_SNAP_OPERATORS[operator_token.type],
        )

    def _skip_modifier(self) -> None:
        if self._current.type == TokenType.MODIFIER:
            self._advance()

    def _advance(self) -> None:
        self._current = self._lexer.next_token()

    def _error(self, message: str) -> None:
        logger.debug(f"Parse error: {message}")
        self._errors.append(message)
