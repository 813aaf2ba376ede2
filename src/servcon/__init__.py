"""servcon — a smarter server console.

Mode-filtered console logging with priorities, message types and
nested, indented sections.
"""

from servcon._version import __version__, __app_name__
from servcon.console import (
    ConsoleLogger, LogRecord, init_console, get_console, trace,
    log, log_verbose, log_important, log_critical, log_error,
    log_verbose_error, log_progress,
    start_section, end_section, section_context, set_mode,
)

__all__ = [
    "__version__", "__app_name__",
    "ConsoleLogger", "LogRecord", "init_console", "get_console", "trace",
    "log", "log_verbose", "log_important", "log_critical", "log_error",
    "log_verbose_error", "log_progress",
    "start_section", "end_section", "section_context", "set_mode",
]
