"""
console_lib — mode-filtered console output with nested sections.

A small output library providing:
- LogRecord values carrying priority (1-5), type and optional header
- A single global mode deciding which records print
- Named, nested sections with indentation and section labels
- Function tracing decorator

Public API:
    ConsoleLogger    — filter, format and print records
    init_console     — singleton initialization
    get_console      — access singleton
    LogRecord        — one message plus its metadata
    MODES            — recognized display modes
    PRIORITY_LEVELS  — low/high/critical thresholds
    format_mode_list — mode listing for --list-modes
    trace            — function tracing decorator
"""

from .manager import ConsoleLogger, init_console, get_console
from .record import LogRecord
from .levels import PRIORITY_LEVELS
from .modes import (
    MODES, MODE_DESCRIPTIONS, SECTION_DISPLAY_OPTIONS,
    SECTION_DISPLAY_DESCRIPTIONS, is_known_mode, is_known_section_display,
    format_mode_list, format_section_display_list,
)
from .trace import trace

__all__ = [
    'ConsoleLogger', 'init_console', 'get_console',
    'LogRecord', 'PRIORITY_LEVELS',
    'MODES', 'MODE_DESCRIPTIONS', 'SECTION_DISPLAY_OPTIONS',
    'SECTION_DISPLAY_DESCRIPTIONS', 'is_known_mode', 'is_known_section_display',
    'format_mode_list', 'format_section_display_list',
    'trace',
]
