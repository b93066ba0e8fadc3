"""Tests for log levels and colors."""

import pytest

from sklog.levels import Color, LogLevel, color_for_level


class TestLogLevelOrdering:
    """Test the ordering that level filtering relies on."""

    def test_levels_are_ordered_from_most_verbose(self):
        """✅ Test TRACE < DEBUG < INFO < WARNING < ERROR."""
        assert (
            LogLevel.TRACE
            < LogLevel.DEBUG
            < LogLevel.INFO
            < LogLevel.WARNING
            < LogLevel.ERROR
        )

    def test_sorted_levels_match_declaration_order(self):
        """✅ Test sorting gives the declared order."""
        assert sorted(LogLevel) == list(LogLevel)


class TestLogLevelParse:
    """Test coercion of user input into a LogLevel."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (LogLevel.INFO, LogLevel.INFO),
            ("INFO", LogLevel.INFO),
            ("info", LogLevel.INFO),
            (" Warning ", LogLevel.WARNING),
            ("trace", LogLevel.TRACE),
            (4, LogLevel.ERROR),
            ("1", LogLevel.DEBUG),
        ],
    )
    def test_parse_valid(self, value, expected):
        """✅ Test members, names and integer values are accepted."""
        assert LogLevel.parse(value) is expected

    @pytest.mark.parametrize("value", ["verbose", "", 17, -1, None, 2.0, True])
    def test_parse_invalid(self, value):
        """❌ Test anything else raises ValueError."""
        with pytest.raises(ValueError):
            LogLevel.parse(value)


class TestColors:
    """Test ANSI colors and their assignment to levels."""

    @pytest.mark.parametrize(
        "level,color",
        [
            (LogLevel.TRACE, Color.WHITE),
            (LogLevel.DEBUG, Color.CYAN),
            (LogLevel.INFO, Color.GREEN),
            (LogLevel.WARNING, Color.YELLOW),
            (LogLevel.ERROR, Color.RED),
        ],
    )
    def test_color_for_level(self, level, color):
        """✅ Test each level has its designated color."""
        assert color_for_level(level) is color

    @pytest.mark.parametrize(
        "color,escape",
        [
            (Color.RESET, "\x1b[0m"),
            (Color.BLACK, "\x1b[30m"),
            (Color.RED, "\x1b[31m"),
            (Color.CYAN, "\x1b[36m"),
            (Color.WHITE, "\x1b[37m"),
        ],
    )
    def test_color_renders_as_escape_sequence(self, color, escape):
        """✅ Test str() of a color is its ANSI escape sequence."""
        assert str(color) == escape
        assert f"{color}" == escape
        assert escape == f"\x1b[{color.ansi_code}m"
