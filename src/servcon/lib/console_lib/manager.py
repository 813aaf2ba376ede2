"""
ConsoleLogger — mode-filtered console output with nested sections.

Every convenience method (log, log_verbose, log_error, ...) builds a
LogRecord with its category defaults and hands it to process_log_item(),
which asks should_show_item() whether the current mode lets it through,
then renders it, prefixes the section label and indentation, and prints.

Mode filter:
    verbose           everything
    normal            type != verbose and priority > low
    sparse / concise  type != verbose and priority >= high
    error             type == error
    progress          type == progress, or error with priority > low
    silent            nothing
    anything else     nothing

Sections nest. start_section() pushes a name, end_section() pops one,
or closes a named section together with everything opened inside it.
"""

import contextlib
from typing import Any, Dict, List, Mapping, Optional, TextIO

from .levels import PRIORITY_LEVELS
from .modes import (
    DEFAULT_MODE, DEFAULT_SECTION_DISPLAY, MODES,
    HEADER_SECTION_DISPLAYS, PREFIX_SECTION_DISPLAYS,
)
from .record import LogRecord

INDENT_UNIT = "\t"


def _merge_options(defaults: Dict[str, Any], options: Optional[Mapping],
                   overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Category defaults first, then the options mapping, then keywords."""
    merged = dict(defaults)
    if options:
        merged.update(options)
    merged.update(overrides)
    return merged


class ConsoleLogger:
    """A smarter console giving control over display, nesting and so on.

    Output goes to ``file``; None means whatever ``sys.stdout`` is at
    the time of the write.

    Usage::

        console = ConsoleLogger(mode='normal')
        console.start_section('Build')
        console.log('compiling')
        console.log_verbose('flags: -O2')      # hidden in normal mode
        console.log_error('missing header')
        console.end_section('Build')
    """

    PRIORITY_LEVELS = PRIORITY_LEVELS
    MODES = MODES

    def __init__(
        self,
        mode: str = DEFAULT_MODE,
        show_headers: bool = True,
        show_types: bool = False,
        show_sections: str = DEFAULT_SECTION_DISPLAY,
        use_indented_sections: bool = True,
        file: TextIO = None,
    ):
        self.mode = mode
        self.show_headers = show_headers
        self.show_types = show_types
        self.show_sections = show_sections
        self.use_indented_sections = use_indented_sections
        self.file = file

        self.section: List[Optional[str]] = []
        self.section_depth = -1
        self.first_section_log_occurred = False
        self.last_message: Optional[str] = None

    # ------------------------------------------------------------------
    # Emission API
    # ------------------------------------------------------------------

    def log(self, message: Any, options: Optional[Mapping] = None,
            **kwargs: Any) -> None:
        """Default log, a generic message (priority 3, type normal)."""
        self._log(message, _merge_options({}, options, kwargs))

    def log_verbose(self, message: Any, options: Optional[Mapping] = None,
                    **kwargs: Any) -> None:
        """Log an extra detail, hidden unless the mode is verbose."""
        self._log(message, _merge_options(
            {'priority': 1, 'type': 'verbose'}, options, kwargs))

    def log_important(self, message: Any, options: Optional[Mapping] = None,
                      **kwargs: Any) -> None:
        """Log an important message (priority 4)."""
        self._log(message, _merge_options({'priority': 4}, options, kwargs))

    def log_critical(self, message: Any, options: Optional[Mapping] = None,
                     **kwargs: Any) -> None:
        self._log(message, _merge_options({'priority': 5}, options, kwargs))

    def log_error(self, message: Any, options: Optional[Mapping] = None,
                  **kwargs: Any) -> None:
        """Log an error (priority 4, type error)."""
        self._log(message, _merge_options(
            {'priority': 4, 'type': 'error'}, options, kwargs))

    def log_verbose_error(self, message: Any, options: Optional[Mapping] = None,
                          **kwargs: Any) -> None:
        """Log a low priority error, only shown in verbose and error modes."""
        self._log(message, _merge_options(
            {'priority': 1, 'type': 'error'}, options, kwargs))

    def log_progress(self, message: Any, options: Optional[Mapping] = None,
                     **kwargs: Any) -> None:
        """Log a progress message (type progress)."""
        self._log(message, _merge_options({'type': 'progress'}, options, kwargs))

    def _log(self, message: Any, options: Mapping) -> None:
        self.process_log_item(LogRecord.from_options(message, options))

    # ------------------------------------------------------------------
    # Filtering and output
    # ------------------------------------------------------------------

    def should_show_item(self, record: LogRecord) -> bool:
        """Return whether the record is visible in the current mode."""
        record_type = record.get_type()
        priority = record.get_priority()
        low = self.PRIORITY_LEVELS['low']
        high = self.PRIORITY_LEVELS['high']

        if self.mode == 'verbose':
            return True
        elif self.mode == 'normal':
            return record_type != 'verbose' and priority > low
        elif self.mode in ('sparse', 'concise'):
            return record_type != 'verbose' and priority >= high
        elif self.mode == 'error':
            return record_type == 'error'
        elif self.mode == 'progress':
            return (record_type == 'progress'
                    or (record_type == 'error' and priority > low))
        # 'silent' and unknown modes
        return False

    def process_log_item(self, record: LogRecord) -> None:
        """Filter, render and print one record.

        The section prefix is added for show_sections 'always' and
        'logOnly', and for 'firstLog' until the first line of the
        current section has been printed.
        """
        if not self.should_show_item(record):
            return

        msg = record.get_message(self.show_headers, self.show_types)

        if self.show_sections in PREFIX_SECTION_DISPLAYS and (
                self.show_sections != 'firstLog'
                or not self.first_section_log_occurred):
            name = self.current_section
            if name:
                msg = f"[{name}] {msg}"
            self.first_section_log_occurred = True

        if self.use_indented_sections:
            msg = self.get_section_indentation() + msg

        self._write(msg)
        self.last_message = msg

    def get_section_indentation(self, depth: Optional[int] = None) -> str:
        """One indent unit per section level; negative depths give ''."""
        if depth is None:
            depth = self.section_depth
        return INDENT_UNIT * max(depth, 0)

    def _write(self, text: str) -> None:
        print(text, file=self.file)

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    @property
    def current_section(self) -> Optional[str]:
        """Name of the innermost open section, or None."""
        if 0 <= self.section_depth < len(self.section):
            return self.section[self.section_depth]
        return None

    def start_section(self, section_name: str) -> None:
        """Start a new section, nested inside the current one.

        Unless the mode is concise, show_sections 'onChange' and
        'always' print a header block straight away. The header skips
        the mode filter and does not update last_message.
        """
        self.section_depth += 1
        while len(self.section) <= self.section_depth:
            self.section.append(None)
        self.section[self.section_depth] = section_name
        self.first_section_log_occurred = False

        if (self.mode != 'concise'
                and self.show_sections in HEADER_SECTION_DISPLAYS):
            self._write(f"\n\n[{section_name}]\n")

    def end_section(self, section_name: Optional[str] = None) -> None:
        """Close a section.

        Without a name the innermost section is closed. With a name,
        the innermost open section of that name is closed along with
        everything nested inside it. An unknown name closes the
        innermost section.

        Only open sections are searched. Names still sitting in the list
        from sections closed earlier never match, so a named close can
        not reopen a deeper level. When the same name is open twice the
        inner one wins, letting nested section_context() blocks with a
        shared name unwind one level at a time.
        """
        new_depth = self.section_depth - 1

        if section_name:
            # Entries past section_depth are stale; search innermost first
            open_sections = self.section[:self.section_depth + 1]
            for index in range(len(open_sections) - 1, -1, -1):
                if open_sections[index] == section_name:
                    new_depth = index - 1
                    break

        self.section_depth = max(new_depth, -1)

    @contextlib.contextmanager
    def section_context(self, section_name: str):
        """Run a block inside a section, closing it even if the block raises.

        Example:
            with console.section_context('Deploy'):
                console.log('uploading')
        """
        self.start_section(section_name)
        try:
            yield self
        finally:
            self.end_section(section_name)

    # ------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------

    def set_mode(self, mode: str) -> None:
        """Set the display mode. Unknown modes show nothing."""
        self.mode = mode


# =============================================================================
# Module-level singleton
# =============================================================================

_console: Optional[ConsoleLogger] = None


def init_console(mode: str = DEFAULT_MODE, show_headers: bool = True,
                 show_types: bool = False,
                 show_sections: str = DEFAULT_SECTION_DISPLAY,
                 use_indented_sections: bool = True,
                 file: TextIO = None) -> ConsoleLogger:
    """Initialize the module-level ConsoleLogger singleton.

    Call once at program startup. Replaces any existing console, so the
    section stack starts empty again.

    Returns:
        The initialized ConsoleLogger instance
    """
    global _console
    _console = ConsoleLogger(
        mode=mode,
        show_headers=show_headers,
        show_types=show_types,
        show_sections=show_sections,
        use_indented_sections=use_indented_sections,
        file=file,
    )
    return _console


def get_console() -> ConsoleLogger:
    """Get the module-level ConsoleLogger, creating a default if needed."""
    global _console
    if _console is None:
        _console = ConsoleLogger()
    return _console
