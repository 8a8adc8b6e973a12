"""
Lexical Tokens

The token vocabulary shared by the lexer and the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """Kinds of token produced by the lexer.

    Operator kinds carry their own character as value so that clause
    operators can be compared against them directly.
    """

    NOW = "NOW"
    PLUS = "+"
    MINUS = "-"
    SLASH = "/"
    AT = "@"
    NUMBER = "NUMBER"
    MODIFIER = "MODIFIER"
    ILLEGAL = "ILLEGAL"
    END = "END"


@dataclass(frozen=True)
class Token:
    """A single lexeme: its kind and the exact text it was read from."""

    type: TokenType
    literal: str

    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})"
