"""
Display mode and section-display registries.

A mode is the single global switch deciding which records print.
Section display controls when the active section name is prefixed to
a line and whether section headers are printed.

    verbose   every message
    normal    all except low priority and verbose messages
    sparse    high priority messages and non-verbose errors
    concise   same as sparse, without section headers
    error     errors only, all of them
    progress  progress messages and non-verbose errors
    silent    nothing at all
"""

# Ordered loudest to quietest
MODES = (
    'verbose',
    'normal',
    'sparse',
    'concise',
    'error',
    'progress',
    'silent',
)

MODE_DESCRIPTIONS = {
    'verbose':  'Every message is displayed',
    'normal':   'All except low priority and verbose messages',
    'sparse':   'Only high priority messages and non-verbose errors',
    'concise':  'Same as sparse, except section headers are not shown',
    'error':    'Only errors, and all errors',
    'progress': 'Progress messages and non-verbose errors only',
    'silent':   'No messages displayed at all',
}

DEFAULT_MODE = 'normal'

SECTION_DISPLAY_OPTIONS = (
    'onChange',
    'firstLog',
    'logOnly',
    'always',
    'never',
)

SECTION_DISPLAY_DESCRIPTIONS = {
    'onChange': 'Print a header block when a section starts',
    'firstLog': 'Prefix the section name to the first line of a section',
    'logOnly':  'Prefix the section name to every line, no header block',
    'always':   'Header block and a prefix on every line',
    'never':    'No section names at all',
}

DEFAULT_SECTION_DISPLAY = 'onChange'

# show_sections values that prefix lines with "[section] "
PREFIX_SECTION_DISPLAYS = {'always', 'logOnly', 'firstLog'}

# show_sections values that print a header block on start_section()
HEADER_SECTION_DISPLAYS = {'onChange', 'always'}


def is_known_mode(mode) -> bool:
    """Return True if mode is one of MODES.

    ConsoleLogger.set_mode() accepts any value; an unknown mode simply
    shows nothing. Callers that want to reject typos check here first.
    """
    return mode in MODES


def is_known_section_display(option) -> bool:
    """Return True if option is one of SECTION_DISPLAY_OPTIONS."""
    return option in SECTION_DISPLAY_OPTIONS


def _format_listing(title, names, descriptions) -> str:
    lines = [title]
    width = max(len(name) for name in names)
    for name in names:
        desc = descriptions.get(name, '')
        lines.append(f"  {name:<{width}}  {desc}")
    return "\n".join(lines)


def format_mode_list() -> str:
    """Format the list of modes for display, loudest first.

    Returns:
        Formatted string listing all modes with descriptions.
    """
    return _format_listing("Available modes:", MODES, MODE_DESCRIPTIONS)


def format_section_display_list() -> str:
    """Format the list of show_sections options for display."""
    return _format_listing("Section display options:",
                           SECTION_DISPLAY_OPTIONS,
                           SECTION_DISPLAY_DESCRIPTIONS)
