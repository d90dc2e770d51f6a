"""Custom brand colors.

A custom color is an extra named hex color (for example a brand red) that gets
its own four-role family in light and dark mode. With ``blend`` on, its hue is
first harmonized toward the theme's source color so it sits comfortably in the
generated scheme.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import ConfigurationError
from .material import argb_from_hct, core_palette, harmonize, tone
from .schema import CUSTOM_DARK_TONES, CUSTOM_LIGHT_TONES, ColorFamily, CustomColor
from .utils import argb_from_hex, capitalize_first, custom_color_key

logger = logging.getLogger(__name__)


def create_color_family(palette: Any, tones: Tuple[int, int, int, int]) -> ColorFamily:
    """Pick the four family roles from a palette at the given tones."""
    color, on_color, color_container, on_color_container = tones
    return ColorFamily(
        color=tone(palette, color),
        on_color=tone(palette, on_color),
        color_container=tone(palette, color_container),
        on_color_container=tone(palette, on_color_container),
    )


def create_custom_colors(custom_colors: Optional[Mapping[str, str]],
                         blend: bool,
                         content: bool,
                         source: Any) -> Dict[str, CustomColor]:
    """Create light and dark families for each custom color.

    Args:
        custom_colors: Mapping of custom color name to '#RRGGBB'
        blend: Harmonize each color toward the source color first
        content: Use the content-derived palette instead of the standard one
        source: HCT source color of the theme

    Returns:
        Dict mapping each name to its CustomColor, empty for empty input

    Raises:
        InvalidColorError: If any custom color is malformed
    """
    custom: Dict[str, CustomColor] = {}

    if not custom_colors:
        return custom

    source_argb = argb_from_hct(source)

    for name, value in custom_colors.items():
        seed = argb_from_hex(value)
        target = harmonize(seed, source_argb) if blend else seed

        palette = core_palette(target, content=content)

        custom[name] = CustomColor(
            seed=seed,
            target=target,
            light=create_color_family(palette, CUSTOM_LIGHT_TONES),
            dark=create_color_family(palette, CUSTOM_DARK_TONES),
        )
        logger.debug(f"Custom color '{name}' {value} -> target {target:#010x}")

    return custom


def flatten_custom_colors(custom: Mapping[str, CustomColor], dark: bool = False) -> Dict[str, int]:
    """Flatten custom families for one mode into role-style keys.

    ``brand`` yields ``brand``, ``onBrand``, ``brandContainer`` and
    ``onBrandContainer``; ``brand-red`` yields ``brandRed``, ``onBrandRed``
    and so on.

    Raises:
        ConfigurationError: If a name has no letters or digits, or two names
            produce the same key
    """
    flat: Dict[str, int] = {}

    for name, color in custom.items():
        family = color.dark if dark else color.light
        base = custom_color_key(name)
        if not base:
            raise ConfigurationError(f"Invalid custom color name {name!r}: needs at least one letter or digit")
        title = capitalize_first(base)
        entries = {
            base: family.color,
            f"on{title}": family.on_color,
            f"{base}Container": family.color_container,
            f"on{title}Container": family.on_color_container,
        }
        for key, value in entries.items():
            if key in flat:
                raise ConfigurationError(f"Custom color '{name}' produces duplicate key '{key}'")
            flat[key] = value

    return flat
