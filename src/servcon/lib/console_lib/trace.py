"""
Function tracing decorator.

Routes trace output through the ConsoleLogger singleton as verbose
records, so it only shows when the console is in verbose mode.
"""

import functools
import inspect
from pathlib import Path

MAX_REPR = 50
MAX_ITEMS = 3


def _short_repr(value) -> str:
    """repr() with long strings and lists abbreviated."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > MAX_REPR:
        return f"'{value[:MAX_REPR - 3]}...'"
    if isinstance(value, list) and len(value) > MAX_ITEMS:
        return f"[...{len(value)} items...]"
    return repr(value)


def trace(func):
    """Decorator to trace function calls via the ConsoleLogger.

    Shows function entry/exit with arguments and return values when
    the console mode is 'verbose'. Exceptions are logged as verbose
    errors and re-raised.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_console

        console = get_console()
        if console.mode != 'verbose':
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        name = f"{module_name}.{func.__name__}"

        args_repr = [_short_repr(arg) for arg in args]
        args_repr.extend(f"{key}={_short_repr(value)}"
                         for key, value in kwargs.items())

        console.log_verbose(f">> {name}({', '.join(args_repr)})",
                            header='trace')
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            console.log_verbose_error(
                f"!! {name} raised: {type(e).__name__}: {e}", header='trace')
            raise

        if result is not None:
            console.log_verbose(f"<< {name} returned: {_short_repr(result)}",
                                header='trace')
        return result

    return wrapper
