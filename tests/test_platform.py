"""
Tests for the platform registry.

Tests parsing of platform lists, rejection of unknown names and the
platform specific script syntax.
"""

import pytest

from easypack.services.scripts import Platform, UnsupportedPlatformError


@pytest.mark.unit
class TestPlatformParse:
    """Tests for Platform.parse."""

    def test_parse_default_list(self):
        """Test parsing the default platform list."""
        assert Platform.parse("linux, windows") == {Platform.LINUX, Platform.WINDOWS}

    def test_parse_is_order_insensitive_and_deduplicates(self):
        """Test duplicates collapse and order does not matter."""
        assert Platform.parse("linux,linux,windows") == Platform.parse("windows, linux")

    def test_parse_case_insensitive(self):
        """Test platform names are case insensitive."""
        assert Platform.parse(" LINUX ,Windows") == {Platform.LINUX, Platform.WINDOWS}

    def test_parse_single_platform(self):
        assert Platform.parse("linux") == {Platform.LINUX}

    @pytest.mark.parametrize("raw", ["", " ", ",", " , ,"])
    def test_parse_empty_input(self, raw):
        """Test empty input or only separators yields an empty set."""
        assert Platform.parse(raw) == frozenset()

    def test_parse_unknown_platform(self):
        """Test unknown platform names are rejected with the offending token."""
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            Platform.parse("linux, solaris")

        assert exc_info.value.token == "solaris"
        assert "solaris" in str(exc_info.value)
        assert "linux" in str(exc_info.value)

    def test_unsupported_platform_error_is_value_error(self):
        with pytest.raises(ValueError):
            Platform.from_string("macos")


@pytest.mark.unit
class TestPlatformSyntax:
    """Tests for the per platform script syntax."""

    def test_ordered_uses_declaration_order(self):
        """Test generation order does not depend on input order."""
        assert Platform.ordered(Platform.parse("windows, linux")) == [Platform.LINUX, Platform.WINDOWS]
        assert Platform.ordered([Platform.WINDOWS]) == [Platform.WINDOWS]

    def test_linux_syntax(self):
        assert Platform.LINUX.script_extension == ".sh"
        assert Platform.LINUX.line_separator == "\n"
        assert Platform.LINUX.comment("hello") == "# hello"
        assert Platform.LINUX.executable is True

    def test_windows_syntax(self):
        assert Platform.WINDOWS.script_extension == ".bat"
        assert Platform.WINDOWS.line_separator == "\r\n"
        assert Platform.WINDOWS.comment("hello") == "REM hello"
        assert Platform.WINDOWS.executable is False

    def test_join_lines_ends_with_separator(self):
        assert Platform.WINDOWS.join_lines(["a", "b"]) == "a\r\nb\r\n"
        assert Platform.LINUX.join_lines(["a"]) == "a\n"

    def test_str(self):
        assert str(Platform.LINUX) == "linux"
