"""
Priority level constants for the console filter.

Priorities run from 1 (low) to 5 (critical). Records without a priority
are treated as 3. The filter only compares against the named thresholds
in PRIORITY_LEVELS; the rest are here for readability.

    ←── quieter ─────── default ─────── louder ──→
     1      2      3      4      5
    low           normal  high  critical

Any error with priority 4 or greater is considered critical.
Any error with priority 1 is a "verbose error".
"""

from types import MappingProxyType

LOW = 1            # Extra detail, only shown in verbose mode
NORMAL = 3         # Default for records without a priority
HIGH = 4           # Important, survives sparse/concise modes
CRITICAL = 5       # Highest priority

DEFAULT_PRIORITY = NORMAL
DEFAULT_TYPE = 'normal'

# Thresholds consulted by ConsoleLogger.should_show_item(), read-only
PRIORITY_LEVELS = MappingProxyType({
    'low': LOW,
    'high': HIGH,
    'critical': CRITICAL,
})
