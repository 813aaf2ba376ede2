"""Command-line entry point for servcon.

Lets shell scripts share the same mode filter and section layout as
the Python API:

  servcon --mode sparse --kind error "disk almost full"
  servcon --section Deploy --section Upload "sent 3 files"
  servcon --list-modes

Settings not given on the command line come from .servcon.json or
~/.servcon/config.json (see servcon.config).
"""

import argparse
import sys

from servcon._version import BASE_VERSION, VERSION
from servcon.config import apply_settings, resolve_settings
from servcon.lib.console_lib import (
    MODES, SECTION_DISPLAY_OPTIONS, init_console,
    format_mode_list, format_section_display_list,
)

# --kind value -> ConsoleLogger method name
KINDS = {
    "log": "log",
    "verbose": "log_verbose",
    "important": "log_important",
    "critical": "log_critical",
    "error": "log_error",
    "verbose-error": "log_verbose_error",
    "progress": "log_progress",
}


def _build_parser():
    """Build the argparse parser.

    Display flags default to None so config files can fill the gaps.
    """
    parser = argparse.ArgumentParser(
        prog="servcon",
        description="servcon — mode-filtered console logging",
        epilog="Run 'servcon --list-modes' to see modes and section options.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"servcon {BASE_VERSION} ({VERSION})",
    )

    display = parser.add_argument_group("display")
    display.add_argument("--mode", "-m", choices=MODES, default=None,
                         help="Display mode (default: normal)")
    display.add_argument("--show-sections", choices=SECTION_DISPLAY_OPTIONS,
                         default=None,
                         help="When to show section names (default: onChange)")
    display.add_argument("--headers", dest="show_headers",
                         action="store_const", const=True, default=None,
                         help="Show message headers (default)")
    display.add_argument("--no-headers", dest="show_headers",
                         action="store_const", const=False,
                         help="Hide message headers")
    display.add_argument("--types", dest="show_types",
                         action="store_const", const=True, default=None,
                         help="Show message types")
    display.add_argument("--no-types", dest="show_types",
                         action="store_const", const=False,
                         help="Hide message types (default)")
    display.add_argument("--indent", dest="use_indented_sections",
                         action="store_const", const=True, default=None,
                         help="Indent nested sections (default)")
    display.add_argument("--no-indent", dest="use_indented_sections",
                         action="store_const", const=False,
                         help="Do not indent nested sections")
    display.add_argument("--list-modes", action="store_true", default=False,
                         help="List modes and section options, then exit")

    message = parser.add_argument_group("message")
    message.add_argument("--kind", "-k", choices=sorted(KINDS), default="log",
                         help="Message category (default: log)")
    message.add_argument("--priority", "-p", type=int, default=None,
                         metavar="N", help="Priority 1 (low) to 5 (critical)")
    message.add_argument("--type", "-t", default=None, metavar="TYPE",
                         help="Override the message type")
    message.add_argument("--header", default=None, metavar="TEXT",
                         help="Header shown in parentheses before the message")
    message.add_argument("--section", "-s", action="append", default=[],
                         metavar="NAME",
                         help="Open a section (repeat to nest)")
    message.add_argument("messages", nargs="*", metavar="MESSAGE",
                         help="Messages to log, one line each")
    return parser


def _message_options(args):
    """Keyword options for the emission call, leaving category defaults alone."""
    options = {}
    for key in ("priority", "type", "header"):
        value = getattr(args, key)
        if value is not None:
            options[key] = value
    return options


def main(argv=None):
    """Main entry point for servcon CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_modes:
        print(format_mode_list())
        print()
        print(format_section_display_list())
        return 0

    if not args.messages:
        parser.print_help()
        return 0

    console = apply_settings(init_console(), resolve_settings(args))
    emit = getattr(console, KINDS[args.kind])
    options = _message_options(args)

    try:
        for name in args.section:
            console.start_section(name)
        for text in args.messages:
            emit(text, **options)
        for _ in args.section:
            console.end_section()
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
