import functools
import inspect
import sys
from collections.abc import Callable
from datetime import datetime


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DD HH:mm:ss.SSS``"""
    return f"{moment:%Y-%m-%d %H:%M:%S}.{moment.microsecond // 1000:03d}"


def current_time() -> str:
    """Return the current local time, formatted for a log line."""
    return format_timestamp(datetime.now())


def name_from_callable(func: Callable) -> str:
    """
    Infer a logger name from the place a callable was defined.

    The name is the defining module, followed by the enclosing class when
    there is one. Synthetic qualname parts such as ``<locals>`` and
    ``<lambda>`` end the walk.

    Examples:
        lambda at module level in ``app.jobs``     -> "app.jobs"
        lambda inside ``Worker.run`` in ``app.jobs`` -> "app.jobs.Worker"
        the class ``Worker`` itself                 -> "app.jobs.Worker"
    """
    while isinstance(func, functools.partial):
        func = func.func

    module_name = getattr(func, "__module__", None) or "__main__"
    qualname = getattr(func, "__qualname__", None) or type(func).__qualname__

    owner: object = sys.modules.get(module_name)
    classes = []
    for part in qualname.split("."):
        if part.startswith("<") or owner is None:
            break
        owner = getattr(owner, part, None)
        if not inspect.isclass(owner):
            break
        classes.append(part)

    return ".".join([module_name, *classes])


def caller_module_name(depth: int = 1) -> str:
    """Return ``__name__`` of the module ``depth`` frames above the caller."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "__main__"
        return frame.f_globals.get("__name__", "__main__")
    finally:
        del frame
