"""Module-level console functions for servcon.

Thin wrappers that forward to the ConsoleLogger singleton, so callers
can ``from servcon import console`` and write ``console.log(...)``
without passing a logger around.

Also re-exports the console_lib public API for convenience imports.
"""

# Re-export console_lib public API — one-stop import for callers
from servcon.lib.console_lib import (                 # noqa: F401
    ConsoleLogger, init_console, get_console,
    LogRecord, MODES, PRIORITY_LEVELS,
    format_mode_list, format_section_display_list,
    trace,
)


def log(message, options=None, **kwargs):
    get_console().log(message, options, **kwargs)


def log_verbose(message, options=None, **kwargs):
    get_console().log_verbose(message, options, **kwargs)


def log_important(message, options=None, **kwargs):
    get_console().log_important(message, options, **kwargs)


def log_critical(message, options=None, **kwargs):
    get_console().log_critical(message, options, **kwargs)


def log_error(message, options=None, **kwargs):
    get_console().log_error(message, options, **kwargs)


def log_verbose_error(message, options=None, **kwargs):
    get_console().log_verbose_error(message, options, **kwargs)


def log_progress(message, options=None, **kwargs):
    get_console().log_progress(message, options, **kwargs)


def start_section(section_name):
    get_console().start_section(section_name)


def end_section(section_name=None):
    get_console().end_section(section_name)


def section_context(section_name):
    """Context manager opening a section on the singleton console."""
    return get_console().section_context(section_name)


def set_mode(mode):
    get_console().set_mode(mode)
