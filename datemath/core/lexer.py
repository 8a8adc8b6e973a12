"""
Date-Math Lexer

Turns a raw expression such as ``now-1h/h@M`` into a stream of tokens.

Rules:
- ``now`` is the NOW keyword
- ``+ - / @`` are single-character operators
- a run of ASCII digits is a NUMBER
- a run of ASCII letters is a MODIFIER when it spells one of the known
  codes (``s m h d w M bw mon tue wed thu fri sat sun``), NOW when it
  spells ``now`` and ILLEGAL otherwise
- any other run of characters is a single ILLEGAL token

Lexing never raises. The stream always ends with an END token.

Example:
    >>> lexer = Lexer("now-1h")
    >>> [token.literal for token in lexer]
    ['now', '-', '1', 'h', '']
"""

from __future__ import annotations

import string
from collections.abc import Callable, Iterator
from typing import Final

from datemath.core.tokens import Token, TokenType

KEYWORD_NOW: Final = "now"

OPERATORS: Final[dict[str, TokenType]] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "@": TokenType.AT,
}

# Case matters: "M" is month, "m" is minute.
MODIFIER_CODES: Final = frozenset(
    {"s", "m", "h", "d", "w", "M", "bw", "mon", "tue", "wed", "thu", "fri", "sat", "sun"}
)

_DIGITS: Final = frozenset(string.digits)
_LETTERS: Final = frozenset(string.ascii_letters)


def _is_unrecognized(char: str) -> bool:
    return char not in OPERATORS and char not in _DIGITS and char not in _LETTERS


class Lexer:
    """
    Tokenizer for date-math expressions.

    An absent or empty input puts the lexer in an invalid state that can be
    checked with ``is_invalid()`` before any token is requested. Such a lexer
    only ever produces END.
    """

    def __init__(self, text: str | None):
        """
        Initialize the lexer.

        Args:
            text: The expression to tokenize. May be None or empty.
        """
        self._text = text or ""
        self._invalid = not text
        self._position = 0

    def is_invalid(self) -> bool:
        """Return True when there was no input to tokenize."""
        return self._invalid

    def next_token(self) -> Token:
        """
        Read the next token.

        Returns:
            The next token. Once the input is exhausted every call
            returns an END token.
        """
        if self._position >= len(self._text):
            return Token(TokenType.END, "")

        char = self._text[self._position]

        if char in OPERATORS:
            self._position += 1
            return Token(OPERATORS[char], char)

        if char in _DIGITS:
            return Token(TokenType.NUMBER, self._read_while(lambda c: c in _DIGITS))

        if char in _LETTERS:
            word = self._read_while(lambda c: c in _LETTERS)
            return Token(self._lookup_word(word), word)

        return Token(TokenType.ILLEGAL, self._read_while(_is_unrecognized))

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, END included."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.END:
                return

    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._position
        while self._position < len(self._text) and predicate(self._text[self._position]):
            self._position += 1
        return self._text[start : self._position]

    @staticmethod
    def _lookup_word(word: str) -> TokenType:
        if word == KEYWORD_NOW:
            return TokenType.NOW
        if word in MODIFIER_CODES:
            return TokenType.MODIFIER
        return TokenType.ILLEGAL
