"""Unit tests for configure_logging."""

import logging

import pytest

from datemath.common.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("datemath").setLevel(logging.NOTSET)


class TestConfigureLogging:
    """Tests for root logger configuration."""

    def test_level_by_name(self):
        configure_logging("debug")
        assert logging.getLogger("datemath").level == logging.DEBUG

    def test_level_by_number(self):
        configure_logging(logging.ERROR)
        assert logging.getLogger().level == logging.ERROR

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")

    def test_parser_errors_are_logged(self, caplog):
        from datemath.core.lexer import Lexer
        from datemath.core.parser import Parser

        with caplog.at_level(logging.DEBUG, logger="datemath"):
            Parser(Lexer("now*")).parse()
        assert 'Parse error: Illegal operator: "*"' in caplog.text
