"""sklog: a small leveled, colorized console logger."""

from sklog.config import (
    get_default_colorize,
    get_default_level,
    reset_defaults,
    set_default_colorize,
    set_default_level,
)
from sklog.errors import FormattingError, LoggingFailure, MessageEvaluationError
from sklog.factory import get_logger
from sklog.levels import Color, LogLevel
from sklog.logger import Logger

__version__ = "0.0.1"

__all__ = [
    "Color",
    "FormattingError",
    "LogLevel",
    "Logger",
    "LoggingFailure",
    "MessageEvaluationError",
    "get_default_colorize",
    "get_default_level",
    "get_logger",
    "reset_defaults",
    "set_default_colorize",
    "set_default_level",
]
