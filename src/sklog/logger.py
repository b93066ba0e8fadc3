"""The Logger: level filtering, lazy messages and line formatting."""

import sys
from typing import Any

from sklog import config
from sklog.errors import FormattingError, MessageEvaluationError
from sklog.levels import Color, LogLevel, color_for_level
from sklog.logging import report_failure
from sklog.utils import current_time

# A plain value, or a zero-argument callable producing one.
Message = Any

_MISSING = object()


def _evaluate(msg: Message) -> Any:
    return msg() if callable(msg) else msg


class Logger:
    """
    🪵 A named logger writing leveled lines to stderr.

    Every severity method takes either a plain value or a zero-argument
    callable. Callables are only invoked when the message passes the level
    check, so expensive messages cost nothing when filtered out::

        log = get_logger("app.sync")
        log.info("starting")
        log.debug(lambda: f"state={expensive_dump()}")

    Any callable is treated as a lazy message and called with no arguments,
    so ``log.debug(SomeClass)`` instantiates the class. Pass ``repr(obj)`` to
    log a callable object itself.

    Attributes:
        level: Level override for this logger; None follows the process default
        colorize: Whether lines are wrapped in ANSI colors
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._level: LogLevel | None = None
        self.colorize: bool = config.settings.default_colorize

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> LogLevel | None:
        return self._level

    @level.setter
    def level(self, value: LogLevel | str | int | None) -> None:
        """Accepts anything ``LogLevel.parse`` does; raises ValueError otherwise."""
        self._level = None if value is None else LogLevel.parse(value)

    @property
    def effective_level(self) -> LogLevel:
        """The level in force right now: the override, else the process default."""
        if self.level is not None:
            return self.level
        return config.settings.default_level

    def is_enabled_for(self, level: LogLevel | str | int) -> bool:
        return LogLevel.parse(level) >= self.effective_level

    def trace(self, msg: Message) -> None:
        self.log(LogLevel.TRACE, msg)

    def debug(self, msg: Message) -> None:
        self.log(LogLevel.DEBUG, msg)

    def info(self, msg: Message) -> None:
        self.log(LogLevel.INFO, msg)

    def warning(self, msg: Message) -> None:
        self.log(LogLevel.WARNING, msg)

    def error(self, msg: Message, detail: Message = _MISSING) -> None:
        """
        Log at ERROR.

        With a second argument the first is usually an exception, and the
        line reads ``"<exception message>: <detail>"``::

            except OSError as exc:
                log.error(exc, lambda: f"could not read {path}")
        """
        if detail is _MISSING:
            self.log(LogLevel.ERROR, msg)
        else:
            self.log(
                LogLevel.ERROR, lambda: f"{_evaluate(msg)}: {_evaluate(detail)}"
            )

    def log(self, level: LogLevel | str | int, msg: Message) -> None:
        """
        Emit ``msg`` at ``level`` if the effective level allows it.

        Never raises: a failure while building or writing the line is
        reported on stderr and the call returns normally.
        """
        try:
            level = LogLevel.parse(level)
        except ValueError as exc:
            report_failure(exc, self._name)
            return

        if level < self.effective_level:
            return

        try:
            self._emit(level, msg)
        except Exception as exc:
            report_failure(exc, self._name)

    def _emit(self, level: LogLevel, msg: Message) -> None:
        try:
            value = _evaluate(msg)
        except Exception as exc:
            raise MessageEvaluationError(
                f"message for {level.name} on {self._name!r} raised {exc!r}"
            ) from exc

        try:
            line = self.format(level, str(value))
            stream = sys.stderr
            stream.write(line + "\n")
            stream.flush()
        except Exception as exc:
            raise FormattingError(
                f"could not emit {level.name} line on {self._name!r}"
            ) from exc

    def format(self, level: LogLevel, message: str) -> str:
        """Compose the output line, without the trailing newline."""
        line = f"{current_time()} - {self._name} - {level.name} - {message}"
        if self.colorize:
            return f"{color_for_level(level)}{line}{Color.RESET}"
        return line

    def __repr__(self) -> str:
        level = self.level.name if self.level is not None else None
        return f"Logger(name={self._name!r}, level={level}, colorize={self.colorize})"
