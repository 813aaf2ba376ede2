"""
LogRecord — one message plus the metadata the filter needs.

Records are built fresh for every log call by the ConsoleLogger
convenience methods and thrown away once printed. Only the rendered
line survives, as ConsoleLogger.last_message.
"""

import enum
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .levels import DEFAULT_PRIORITY, DEFAULT_TYPE

FUNCTION_PLACEHOLDER = 'function ()'
STRUCTURE_PLACEHOLDER = '{ ... }'

# Rendered with str() even when they carry an instance __dict__
SCALAR_TYPES = (str, bytes, numbers.Number, enum.Enum, BaseException)


def is_structured(value: Any) -> bool:
    """True for values rendered field by field rather than via str().

    Mappings, lists, tuples and plain objects carrying an instance
    ``__dict__`` count as structured. Strings (subclasses included),
    bytes, numbers, enum members, exceptions, None and callables do not.
    """
    if isinstance(value, SCALAR_TYPES):
        return False
    if isinstance(value, (Mapping, list, tuple)):
        return True
    return not callable(value) and hasattr(value, '__dict__')


def iter_fields(value: Any):
    """Yield (key, value) pairs of a structured value in natural order."""
    if isinstance(value, Mapping):
        yield from value.items()
    elif isinstance(value, (list, tuple)):
        yield from enumerate(value)
    else:
        yield from vars(value).items()


def _render_field_value(value: Any) -> str:
    if callable(value):
        return FUNCTION_PLACEHOLDER
    if is_structured(value):
        return STRUCTURE_PLACEHOLDER
    return str(value)


@dataclass(frozen=True)
class LogRecord:
    """A single console message.

    Attributes:
        message: Plain value, or a structured value (mapping, list,
            object) printed as ``key: value, `` pairs
        priority: 1 (low) to 5 (critical); falsy means 3
        type: Category such as 'normal', 'verbose', 'error',
            'progress'; any string is accepted, falsy means 'normal'
        header: Optional label printed in parentheses before the body
        args: Auxiliary payload, stored but never rendered
    """
    message: Any
    priority: Optional[int] = DEFAULT_PRIORITY
    type: Optional[str] = DEFAULT_TYPE
    header: Optional[str] = None
    args: Any = None

    @classmethod
    def from_options(cls, message: Any, options: Optional[Mapping] = None) -> 'LogRecord':
        """Build a record from an options mapping, defaulting missing keys."""
        options = options or {}
        return cls(
            message=message,
            priority=options.get('priority') or DEFAULT_PRIORITY,
            type=options.get('type') or DEFAULT_TYPE,
            header=options.get('header') or None,
            args=options.get('args') or None,
        )

    def get_message(self, show_header: bool, show_type: bool) -> str:
        """Render the record body.

        The header comes first as `` (header) ``, then the type as
        `` <type> ``, then the message. A structured message becomes
        ``key: value, `` for each field, keeping the trailing separator.
        Callable field values print as ``function ()`` and nested
        structures as ``{ ... }``.
        """
        msg = ""

        if show_header and self.header:
            msg += f" ({self.header}) "
        if show_type and self.type:
            msg += f" <{self.type}> "

        if is_structured(self.message):
            for key, value in iter_fields(self.message):
                msg += f"{key}: {_render_field_value(value)}, "
        else:
            msg += str(self.message)

        return msg

    def get_priority(self) -> int:
        return self.priority or DEFAULT_PRIORITY

    def get_type(self) -> str:
        return self.type or DEFAULT_TYPE
