"""Tests for the formatter registry."""

import pytest

from jformatter.registry import FORMATTERS, FormatName, get_formatter, list_formats


class TestRegistry:
    """Tests for format lookup and enumeration."""

    def test_lists_every_format(self) -> None:
        """Test the selector gets exactly the supported formats."""
        assert list_formats() == ["JSON", "XML", "YAML"]
        assert set(list_formats()) == {name.value for name in FormatName}

    def test_order_is_stable(self) -> None:
        """Test repeated calls return the same order."""
        assert list_formats() == list_formats()

    def test_every_listed_format_resolves(self) -> None:
        """Test each listed name maps to a callable formatter."""
        for name in list_formats():
            assert callable(get_formatter(name))

    def test_accepts_enum_members(self) -> None:
        """Test lookup by FormatName member."""
        assert get_formatter(FormatName.YAML) is get_formatter("YAML")

    def test_unknown_format(self) -> None:
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown format"):
            get_formatter("TOML")

    def test_registry_is_read_only(self) -> None:
        """Test the mapping cannot be changed at runtime."""
        with pytest.raises(TypeError):
            FORMATTERS["TOML"] = lambda text: None
