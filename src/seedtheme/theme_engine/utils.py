"""Utility functions for theme engine operations.

This module provides the hex/ARGB/RGBA conversions and the key casing helpers
shared by the pipeline stages. ARGB colors are 32-bit integers laid out as
``0xAARRGGBB``.
"""

import re
from typing import Dict, Tuple

from .errors import InvalidColorError

_HEX_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9]|(?=[A-Z]))([A-Z])")
_NAME_SEPARATOR = re.compile(r"[^A-Za-z0-9]+")


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple.

    Args:
        hex_color: Hex color string (e.g., '#FF0000')

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        InvalidColorError: If hex_color is not a '#RRGGBB' string
    """
    if not isinstance(hex_color, str) or not _HEX_PATTERN.fullmatch(hex_color):
        raise InvalidColorError(hex_color)

    r = int(hex_color[1:3], 16)
    g = int(hex_color[3:5], 16)
    b = int(hex_color[5:7], 16)
    return (r, g, b)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB values to a lowercase hex color string with # prefix."""
    return f"#{r:02x}{g:02x}{b:02x}"


def argb_from_rgb(r: int, g: int, b: int) -> int:
    """Pack opaque RGB channels into an ARGB integer."""
    return (255 << 24 | (r & 255) << 16 | (g & 255) << 8 | (b & 255)) & 0xFFFFFFFF


def argb_from_hex(hex_color: str) -> int:
    """Convert a '#RRGGBB' string into an opaque ARGB integer.

    Raises:
        InvalidColorError: If hex_color is malformed
    """
    return argb_from_rgb(*hex_to_rgb(hex_color))


def hex_from_argb(argb: int) -> str:
    """Convert an ARGB integer into a lowercase '#rrggbb' string (alpha dropped)."""
    channels = rgba_from_argb(argb)
    return rgb_to_hex(channels["r"], channels["g"], channels["b"])


def rgba_from_argb(argb: int) -> Dict[str, int]:
    """Decompose an ARGB integer into its r, g, b and a channels (0-255)."""
    return {
        "r": (argb >> 16) & 255,
        "g": (argb >> 8) & 255,
        "b": argb & 255,
        "a": (argb >> 24) & 255,
    }


def camel_to_kebab(name: str) -> str:
    """Convert a camelCase key to kebab-case.

    ``onPrimaryContainer`` becomes ``on-primary-container`` and
    ``neutralVariant40`` becomes ``neutral-variant40``; digits stay attached to
    the word before them.
    """
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def capitalize_first(name: str) -> str:
    """Upper-case the first character only (``brandRed`` -> ``BrandRed``)."""
    return name[:1].upper() + name[1:]


def lower_first(name: str) -> str:
    """Lower-case the first character only (``BrandRed`` -> ``brandRed``)."""
    return name[:1].lower() + name[1:]


def custom_color_key(name: str) -> str:
    """camelCase theme key for a custom color name.

    ``brand-red``, ``brand_red`` and ``Brand Red`` all become ``brandRed``.
    Returns an empty string when the name holds no letters or digits.
    """
    words = [word for word in _NAME_SEPARATOR.split(name) if word]
    if not words:
        return ""
    return lower_first(words[0]) + "".join(capitalize_first(word) for word in words[1:])
