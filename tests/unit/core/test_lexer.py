"""
Unit tests for the Lexer.

Tests tokenization including:
- Keywords, operators, numbers and modifier codes
- Illegal runs of characters
- Absent or empty input
"""

import pytest

from datemath.core.lexer import Lexer
from datemath.core.tokens import Token, TokenType


def assert_tokens(payload: str, expected: list[tuple[TokenType, str]]) -> None:
    lexer = Lexer(payload)
    for expected_type, expected_literal in expected:
        token = lexer.next_token()
        assert token.type == expected_type
        assert token.literal == expected_literal


class TestInvalidInput:
    """Tests for absent and empty input."""

    def test_none_is_invalid(self):
        """No input flags the lexer as invalid before any token is read."""
        assert Lexer(None).is_invalid() is True

    def test_empty_string_is_invalid(self):
        """An empty string is invalid too."""
        assert Lexer("").is_invalid() is True

    def test_invalid_lexer_only_yields_end(self):
        """An invalid lexer still terminates with END."""
        lexer = Lexer(None)
        assert lexer.next_token() == Token(TokenType.END, "")

    def test_valid_input_is_not_invalid(self):
        assert Lexer("now").is_invalid() is False


class TestTokenize:
    """Tests for well-formed expressions."""

    def test_full_expression(self):
        """Every token kind of a long expression, in order."""
        assert_tokens(
            "now-1h/h@M+2w/bw+2d/mon-3s-49d/m",
            [
                (TokenType.NOW, "now"),
                (TokenType.MINUS, "-"),
                (TokenType.NUMBER, "1"),
                (TokenType.MODIFIER, "h"),
                (TokenType.SLASH, "/"),
                (TokenType.MODIFIER, "h"),
                (TokenType.AT, "@"),
                (TokenType.MODIFIER, "M"),
                (TokenType.PLUS, "+"),
                (TokenType.NUMBER, "2"),
                (TokenType.MODIFIER, "w"),
                (TokenType.SLASH, "/"),
                (TokenType.MODIFIER, "bw"),
                (TokenType.PLUS, "+"),
                (TokenType.NUMBER, "2"),
                (TokenType.MODIFIER, "d"),
                (TokenType.SLASH, "/"),
                (TokenType.MODIFIER, "mon"),
                (TokenType.MINUS, "-"),
                (TokenType.NUMBER, "3"),
                (TokenType.MODIFIER, "s"),
                (TokenType.MINUS, "-"),
                (TokenType.NUMBER, "49"),
                (TokenType.MODIFIER, "d"),
                (TokenType.SLASH, "/"),
                (TokenType.MODIFIER, "m"),
                (TokenType.END, ""),
            ],
        )

    def test_multi_digit_number(self):
        assert_tokens("+120m", [(TokenType.PLUS, "+"), (TokenType.NUMBER, "120")])

    @pytest.mark.parametrize("code", ["mon", "tue", "wed", "thu", "fri", "sat", "sun", "bw"])
    def test_multi_letter_codes(self, code):
        """Multi-letter codes are a single MODIFIER token."""
        assert_tokens(f"/{code}", [(TokenType.SLASH, "/"), (TokenType.MODIFIER, code)])

    def test_month_and_minute_are_case_sensitive(self):
        assert_tokens("MmM", [(TokenType.ILLEGAL, "MmM")])
        assert_tokens("/M/m", [
            (TokenType.SLASH, "/"),
            (TokenType.MODIFIER, "M"),
            (TokenType.SLASH, "/"),
            (TokenType.MODIFIER, "m"),
        ])

    def test_end_repeats(self):
        """After END the lexer keeps returning END."""
        lexer = Lexer("now")
        assert lexer.next_token().type == TokenType.NOW
        assert lexer.next_token().type == TokenType.END
        assert lexer.next_token().type == TokenType.END

    def test_iteration_stops_after_end(self):
        tokens = list(Lexer("now+h"))
        assert [t.type for t in tokens] == [
            TokenType.NOW,
            TokenType.PLUS,
            TokenType.MODIFIER,
            TokenType.END,
        ]


class TestIllegal:
    """Tests for unrecognized input."""

    def test_unknown_word(self):
        """An unknown word is one ILLEGAL token with the full literal."""
        assert_tokens("yoquesetio", [(TokenType.ILLEGAL, "yoquesetio"), (TokenType.END, "")])

    def test_illegal_operator_between_valid_tokens(self):
        assert_tokens(
            "now*2h",
            [
                (TokenType.NOW, "now"),
                (TokenType.ILLEGAL, "*"),
                (TokenType.NUMBER, "2"),
                (TokenType.MODIFIER, "h"),
                (TokenType.END, ""),
            ],
        )

    def test_run_of_symbols_is_one_token(self):
        assert_tokens("now**&/d", [
            (TokenType.NOW, "now"),
            (TokenType.ILLEGAL, "**&"),
            (TokenType.SLASH, "/"),
            (TokenType.MODIFIER, "d"),
        ])

    def test_whitespace_is_illegal(self):
        assert_tokens("now -1h", [(TokenType.NOW, "now"), (TokenType.ILLEGAL, " ")])

    def test_non_ascii_letters_are_illegal(self):
        """Only ASCII letters form words."""
        assert_tokens("/dé", [
            (TokenType.SLASH, "/"),
            (TokenType.MODIFIER, "d"),
            (TokenType.ILLEGAL, "é"),
            (TokenType.END, ""),
        ])

    def test_word_containing_now_is_illegal(self):
        assert_tokens("nowish", [(TokenType.ILLEGAL, "nowish")])
