"""
Core date-math pipeline: lexer, parser, AST and the token model.

Usage:
    from datemath.core import Lexer, Parser

    parser = Parser(Lexer("now-1h/h"))
    nodes = parser.parse()
"""

from datemath.core.ast import (
    AMOUNT_MODIFIERS,
    SNAP_MODIFIERS,
    AmountOperator,
    Expression,
    ModifierExpression,
    NowExpression,
    SnapExpression,
    SnapOperator,
    new_now_expression,
)
from datemath.core.calendar import Calendar, DateutilCalendar, Unit
from datemath.core.lexer import Lexer
from datemath.core.models import TokenModel
from datemath.core.parser import Parser
from datemath.core.tokens import Token, TokenType

__all__ = [
    # Tokens
    "Token",
    "TokenType",
    "Lexer",
    # Parsing
    "Parser",
    # AST
    "Expression",
    "NowExpression",
    "ModifierExpression",
    "SnapExpression",
    "AmountOperator",
    "SnapOperator",
    "AMOUNT_MODIFIERS",
    "SNAP_MODIFIERS",
    "new_now_expression",
    # Calendar
    "Calendar",
    "DateutilCalendar",
    "Unit",
    # Model
    "TokenModel",
]
