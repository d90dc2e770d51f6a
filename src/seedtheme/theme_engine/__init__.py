"""seedtheme Theme Engine Package.

This package derives a complete light/dark color theme from one seed color:
variant dispatch, scheme construction, tonal palette expansion, custom color
blending, theme assembly and design token formatting.
"""

from .engine import (
    ThemeEngine,
    assemble_theme,
    create_theme,
    create_theme_from_request,
    merge_color_maps,
    set_theme,
)
from .errors import ConfigurationError, InvalidColorError, ThemeError
from .format import (
    format_theme,
    get_tailwind_colors,
    get_tailwind_variables,
    render_stylesheet,
    to_theme_property,
    to_token_properties,
    transform_theme,
)
from .registry import SchemeRegistry, list_variants, select_scheme_class
from .schema import (
    # Core models
    Theme,
    ThemeRequest,
    ThemeProperty,
    TokenProperty,
    CustomColor,
    ColorFamily,
    RGBA,
    SchemePair,

    # Enums
    Variant,

    # Naming tables
    ROLE_NAMES,
    PALETTE_NAMES,
    TONES,
)
from .schemes import build_schemes, convert_dynamic_scheme, create_schemes
from .palettes import create_palette, palette_to_tonal_group
from .custom import create_custom_colors, flatten_custom_colors
from .utils import argb_from_hex, camel_to_kebab, hex_from_argb, rgba_from_argb

__all__ = [
    # Main classes
    "ThemeEngine",
    "SchemeRegistry",

    # Pipeline
    "select_scheme_class",
    "list_variants",
    "create_schemes",
    "build_schemes",
    "convert_dynamic_scheme",
    "create_palette",
    "palette_to_tonal_group",
    "create_custom_colors",
    "flatten_custom_colors",
    "merge_color_maps",
    "assemble_theme",
    "create_theme",
    "create_theme_from_request",
    "set_theme",

    # Formatting
    "transform_theme",
    "to_theme_property",
    "format_theme",
    "to_token_properties",
    "get_tailwind_colors",
    "get_tailwind_variables",
    "render_stylesheet",

    # Schema models
    "Theme",
    "ThemeRequest",
    "ThemeProperty",
    "TokenProperty",
    "CustomColor",
    "ColorFamily",
    "RGBA",
    "SchemePair",
    "Variant",
    "ROLE_NAMES",
    "PALETTE_NAMES",
    "TONES",

    # Errors
    "ThemeError",
    "InvalidColorError",
    "ConfigurationError",

    # Utilities
    "argb_from_hex",
    "hex_from_argb",
    "rgba_from_argb",
    "camel_to_kebab",
]
