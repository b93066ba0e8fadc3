"""Internal diagnostics for sklog.

The package traces its own behaviour through loguru. As loguru recommends for
libraries, that output is disabled on import; applications that want it call
``logger.enable("sklog")``.

Failures raised while emitting a log line are different: they are always
reported on stderr, rendered by a private structlog logger that leaves the
application's structlog and stdlib logging configuration alone.
"""

import contextlib
import sys

import structlog
from loguru import logger

FALLBACK_MESSAGE = "encountered error while trying to log message"

logger.disable("sklog")


def _failure_logger():
    # Built per call so the current sys.stderr is used (it may have been swapped).
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        wrapper_class=structlog.BoundLogger,
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(
                colors=False, exception_formatter=structlog.dev.plain_traceback
            ),
        ],
    )


def report_failure(exc: BaseException, logger_name: str) -> None:
    """
    ⚠️ Tell the user a log call failed, without ever raising.

    Writes the fixed fallback line, then a dump of the failure with its
    traceback and chained cause.

    Args:
        exc: The failure caught at the log call boundary
        logger_name: Name of the logger whose call failed
    """
    with contextlib.suppress(Exception):
        sys.stderr.write(FALLBACK_MESSAGE + "\n")
        _failure_logger().error(
            "log call failed", logger=logger_name, exc_info=exc
        )
        sys.stderr.flush()
    logger.debug("Reported logging failure for {name}", name=logger_name)


__all__ = ["FALLBACK_MESSAGE", "logger", "report_failure"]
