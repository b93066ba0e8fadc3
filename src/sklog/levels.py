"""Log levels and the ANSI colors used to render them."""

from enum import Enum, IntEnum


class LogLevel(IntEnum):
    """
    📶 Severity of a log message.

    Ordered from most to least verbose, so filtering is a plain comparison:
    a message is emitted when ``level >= effective_level``.
    """

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: "LogLevel | str | int") -> "LogLevel":
        """
        Coerce a member, its integer value or its name into a LogLevel.

        Names are matched case-insensitively ("info", "INFO").

        Raises:
            ValueError: if the value does not name a level
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if value.strip().isdigit():
                return cls.parse(int(value))
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"unknown log level: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"unknown log level: {value!r}")


class Color(Enum):
    """ANSI color codes."""

    RESET = 0
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    @property
    def ansi_code(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"\x1b[{self.ansi_code}m"


_LEVEL_COLORS = {
    LogLevel.TRACE: Color.WHITE,
    LogLevel.DEBUG: Color.CYAN,
    LogLevel.INFO: Color.GREEN,
    LogLevel.WARNING: Color.YELLOW,
    LogLevel.ERROR: Color.RED,
}


def color_for_level(level: LogLevel) -> Color:
    """Return the color lines at the given level are wrapped in."""
    return _LEVEL_COLORS[level]
