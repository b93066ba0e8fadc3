"""Creating loggers, by explicit name or by name inferred from context."""

from collections.abc import Callable

from sklog.logger import Logger
from sklog.logging import logger
from sklog.utils import caller_module_name, name_from_callable


def get_logger(name: str | Callable | None = None) -> Logger:
    """
    🏭 Return a new Logger.

    Args:
        name: The logger name. A callable instead names the logger after the
            module and class it was defined in (``get_logger(lambda: None)``
            inside a method gives ``"<module>.<Class>"``). When omitted, the
            calling module's ``__name__`` is used.

    Returns:
        A fresh Logger. Loggers are not cached, so two calls with the same
        name give two independent instances.

    Raises:
        TypeError: if ``name`` is neither a string, a callable nor None
    """
    if name is None:
        resolved = caller_module_name(depth=1)
    elif isinstance(name, str):
        resolved = name
    elif callable(name):
        resolved = name_from_callable(name)
        logger.trace(
            "Inferred logger name {name} from {func!r}", name=resolved, func=name
        )
    else:
        raise TypeError(
            f"logger name must be a string or a callable, not {type(name).__name__}"
        )

    logger.trace("Creating logger {name}", name=resolved)
    return Logger(resolved)
