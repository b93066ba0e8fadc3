"""Failures that can happen while emitting a log line.

None of these ever reach the code that called the logger: they are raised
inside the emit path and caught at the log call boundary.
"""


class LoggingFailure(Exception):
    """Base class for failures raised while producing a log line."""


class MessageEvaluationError(LoggingFailure):
    """The lazy message callable raised."""


class FormattingError(LoggingFailure):
    """Stringifying the message, composing the line or writing it failed."""
