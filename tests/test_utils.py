"""Tests for color conversion and key casing utilities."""

import pytest

from seedtheme.theme_engine.errors import InvalidColorError
from seedtheme.theme_engine.utils import (
    argb_from_hex,
    camel_to_kebab,
    capitalize_first,
    custom_color_key,
    hex_from_argb,
    hex_to_rgb,
    lower_first,
    rgba_from_argb,
)


class TestHexConversion:
    """Test hex <-> ARGB conversion."""

    def test_argb_from_hex(self):
        """Test a hex string becomes an opaque ARGB integer."""
        assert argb_from_hex("#1f6feb") == 0xFF1F6FEB
        assert argb_from_hex("#000000") == 0xFF000000
        assert argb_from_hex("#FFFFFF") == 0xFFFFFFFF

    @pytest.mark.parametrize("value", ["#1a3048", "#1F6FEB", "#ff0000", "#000000", "#AbCdEf"])
    def test_round_trip(self, value):
        """Test hex -> ARGB -> hex gives the input back, ignoring case."""
        assert hex_from_argb(argb_from_hex(value)) == value.lower()

    def test_hex_from_argb_drops_alpha(self):
        """Test alpha never shows up in the hex string."""
        assert hex_from_argb(0x801F6FEB) == "#1f6feb"

    @pytest.mark.parametrize("value", ["#fff", "1f6feb", "#1f6feb00", "#gg0000", "", " #1f6feb", None, 0xFF1F6FEB])
    def test_malformed_hex(self, value):
        """Test malformed input raises instead of being corrected."""
        with pytest.raises(InvalidColorError) as exc_info:
            argb_from_hex(value)
        assert repr(value) in str(exc_info.value)

    def test_invalid_color_error_is_value_error(self):
        """Test callers catching ValueError still see color errors."""
        with pytest.raises(ValueError):
            hex_to_rgb("#12345")


class TestRgbaDecomposition:
    """Test ARGB channel decomposition."""

    def test_rgba_from_argb(self):
        """Test the four channels are extracted."""
        assert rgba_from_argb(0xFF1F6FEB) == {"r": 31, "g": 111, "b": 235, "a": 255}

    def test_rgba_with_partial_alpha(self):
        """Test alpha is reported on the 0-255 scale."""
        assert rgba_from_argb(0x80102030)["a"] == 128


class TestKeyCasing:
    """Test key casing helpers."""

    @pytest.mark.parametrize("key,expected", [
        ("primary", "primary"),
        ("onPrimary", "on-primary"),
        ("onPrimaryContainer", "on-primary-container"),
        ("surfaceContainerHighest", "surface-container-highest"),
        ("primary40", "primary40"),
        ("neutralVariant40", "neutral-variant40"),
        ("onBrandContainer", "on-brand-container"),
    ])
    def test_camel_to_kebab(self, key, expected):
        """Test camelCase keys become kebab-case with digits kept in place."""
        assert camel_to_kebab(key) == expected

    def test_first_letter_helpers(self):
        """Test only the first character changes case."""
        assert capitalize_first("brandRed") == "BrandRed"
        assert lower_first("BrandRed") == "brandRed"
        assert capitalize_first("") == ""

    @pytest.mark.parametrize("name,expected", [
        ("brand", "brand"),
        ("Brand", "brand"),
        ("brandRed", "brandRed"),
        ("brand-red", "brandRed"),
        ("brand_red", "brandRed"),
        ("Brand Red", "brandRed"),
        ("--brand--red--", "brandRed"),
        ("--", ""),
        ("", ""),
    ])
    def test_custom_color_key(self, name, expected):
        """Test custom color names become camelCase keys."""
        assert custom_color_key(name) == expected
