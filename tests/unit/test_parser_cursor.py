"""Тесты для ParserCursor и ParserConfig."""

import sys

import pytest

from scicalc.core.domain.result import ErrorKind
from scicalc.parser import ParserConfig, ParserCursor
from scicalc.parser.config import FRAMES_PER_LEVEL, RESERVED_FRAMES, max_depth_limit


class TestParserCursor:
    """Тесты ParserCursor."""

    def test_initial_state(self):
        cursor = ParserCursor("12")
        assert cursor.position == 0
        assert cursor.current_char == "1"
        assert cursor.error == ErrorKind.SUCCESS
        assert not cursor.failed
        assert not cursor.at_end

    def test_empty_text_at_end(self):
        cursor = ParserCursor("")
        assert cursor.at_end
        assert cursor.current_char is None

    def test_advance_tracks_text(self):
        cursor = ParserCursor("ab")
        cursor.advance()
        assert (cursor.position, cursor.current_char) == (1, "b")
        cursor.advance()
        assert cursor.at_end
        assert cursor.position == 2

    def test_advance_past_end_is_noop(self):
        cursor = ParserCursor("a")
        cursor.advance()
        cursor.advance()
        assert cursor.position == 1
        assert cursor.current_char is None

    def test_skip_whitespace(self):
        cursor = ParserCursor(" \t\n 7")
        cursor.skip_whitespace()
        assert cursor.current_char == "7"
        assert cursor.position == 4

    def test_skip_whitespace_to_end(self):
        cursor = ParserCursor("   ")
        cursor.skip_whitespace()
        assert cursor.at_end

    def test_first_error_wins(self):
        """scanning → failed однократно, повторный fail() не перезаписывает"""
        cursor = ParserCursor("1/0")
        assert cursor.fail(ErrorKind.DIVISION_BY_ZERO) == ErrorKind.DIVISION_BY_ZERO
        assert cursor.fail(ErrorKind.PARSE_ERROR) == ErrorKind.DIVISION_BY_ZERO
        assert cursor.error == ErrorKind.DIVISION_BY_ZERO
        assert cursor.failed

    def test_describe(self):
        cursor = ParserCursor("2)")
        cursor.advance()
        assert cursor.describe() == "unexpected character ')' at position 1"
        cursor.advance()
        assert cursor.describe() == "unexpected end of input at position 2"


class TestParserConfig:
    """Тесты ParserConfig."""

    def test_defaults(self):
        config = ParserConfig()
        assert config.strict_trailing is False
        assert config.max_depth == 128
        assert config.max_number_length == 63
        assert config.max_identifier_length == 31

    def test_frozen(self):
        config = ParserConfig()
        with pytest.raises(AttributeError):
            config.max_depth = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field", ["max_depth", "max_number_length", "max_identifier_length"]
    )
    def test_non_positive_limits_rejected(self, field):
        with pytest.raises(ValueError, match=f"{field} must be positive"):
            ParserConfig(**{field: 0})

    def test_max_depth_bounded_by_recursion_limit(self):
        with pytest.raises(ValueError, match="max_depth must be <="):
            ParserConfig(max_depth=100_000)

    def test_max_depth_at_recursion_bound_accepted(self):
        limit = max_depth_limit()
        assert limit == (sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_LEVEL
        assert ParserConfig(max_depth=limit).max_depth == limit
