"""Tests for servcon.lib.console_lib.modes and levels — registries and constants."""

import pytest

from servcon.lib.console_lib import ConsoleLogger
from servcon.lib.console_lib.levels import (
    CRITICAL, DEFAULT_PRIORITY, DEFAULT_TYPE, HIGH, LOW, NORMAL, PRIORITY_LEVELS,
)
from servcon.lib.console_lib.modes import (
    DEFAULT_MODE, DEFAULT_SECTION_DISPLAY, HEADER_SECTION_DISPLAYS,
    MODE_DESCRIPTIONS, MODES, PREFIX_SECTION_DISPLAYS,
    SECTION_DISPLAY_DESCRIPTIONS, SECTION_DISPLAY_OPTIONS,
    format_mode_list, format_section_display_list,
    is_known_mode, is_known_section_display,
)


class TestPriorityLevels:
    """Verify priority constants have correct values."""

    def test_level_ordering(self):
        assert LOW < NORMAL < HIGH < CRITICAL

    def test_thresholds(self):
        assert dict(PRIORITY_LEVELS) == {"low": 1, "high": 4, "critical": 5}

    def test_defaults(self):
        assert DEFAULT_PRIORITY == 3
        assert DEFAULT_TYPE == "normal"

    def test_thresholds_read_only(self):
        with pytest.raises(TypeError):
            PRIORITY_LEVELS["low"] = 3
        with pytest.raises(TypeError):
            ConsoleLogger.PRIORITY_LEVELS["high"] = 1
        assert PRIORITY_LEVELS["low"] == 1
        assert ConsoleLogger.PRIORITY_LEVELS["high"] == 4


class TestModes:
    """Mode registry."""

    def test_all_modes(self):
        assert MODES == ("verbose", "normal", "sparse", "concise",
                         "error", "progress", "silent")

    def test_default_mode(self):
        assert DEFAULT_MODE == "normal"

    def test_all_modes_have_descriptions(self):
        for mode in MODES:
            assert mode in MODE_DESCRIPTIONS, f"Missing description for '{mode}'"

    def test_is_known_mode(self):
        assert is_known_mode("sparse") is True
        assert is_known_mode("loud") is False
        assert is_known_mode(None) is False

    def test_format_mode_list_includes_all(self):
        listing = format_mode_list()
        assert listing.startswith("Available modes:")
        for mode in MODES:
            assert mode in listing
        assert MODE_DESCRIPTIONS["concise"] in listing


class TestSectionDisplay:
    """show_sections option registry."""

    def test_all_options(self):
        assert set(SECTION_DISPLAY_OPTIONS) == {
            "onChange", "firstLog", "logOnly", "always", "never"}

    def test_default(self):
        assert DEFAULT_SECTION_DISPLAY == "onChange"

    def test_all_options_have_descriptions(self):
        for option in SECTION_DISPLAY_OPTIONS:
            assert option in SECTION_DISPLAY_DESCRIPTIONS

    def test_prefix_and_header_sets(self):
        assert PREFIX_SECTION_DISPLAYS == {"always", "logOnly", "firstLog"}
        assert HEADER_SECTION_DISPLAYS == {"onChange", "always"}
        assert PREFIX_SECTION_DISPLAYS <= set(SECTION_DISPLAY_OPTIONS)
        assert HEADER_SECTION_DISPLAYS <= set(SECTION_DISPLAY_OPTIONS)

    def test_is_known_section_display(self):
        assert is_known_section_display("firstLog") is True
        assert is_known_section_display("first_log") is False

    def test_format_list_includes_all(self):
        listing = format_section_display_list()
        for option in SECTION_DISPLAY_OPTIONS:
            assert option in listing
