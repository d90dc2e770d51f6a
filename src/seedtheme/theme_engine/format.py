"""Design token formatting.

Turns a generated ``Theme`` into token records and renders them as CSS custom
properties, Tailwind-style declaration lines, Tailwind ``colors`` and
variables mappings, or a complete stylesheet. Every output is reshaped from
the same per-color ``ThemeProperty`` records; nothing here recomputes a
color.
"""

from typing import Dict, List, Mapping, Union

from .errors import ConfigurationError
from .schema import RGBA, Theme, ThemeProperties, ThemeProperty, TokenDict, TokenProperty
from .utils import camel_to_kebab, hex_from_argb, rgba_from_argb

CSS_VARIABLE_PREFIX = "--colors-"
FORMATS = ("css", "tailwind")


def to_theme_property(argb: int) -> ThemeProperty:
    """Build the formatter record for one ARGB color."""
    return ThemeProperty(
        argb=argb,
        rgba=RGBA(**rgba_from_argb(argb)),
        hex=hex_from_argb(argb),
    )


def transform_theme(theme: Theme) -> Dict[str, ThemeProperties]:
    """Convert every color of both modes into a ThemeProperty record."""
    return {
        'light': {key: to_theme_property(argb) for key, argb in theme.light.items()},
        'dark': {key: to_theme_property(argb) for key, argb in theme.dark.items()},
    }


def css_variable_name(key: str) -> str:
    """``surfaceContainerLow`` -> ``--colors-surface-container-low``"""
    return f"{CSS_VARIABLE_PREFIX}{camel_to_kebab(key)}"


def format_theme(properties: Mapping[str, ThemeProperty], format: str) -> Union[Dict[str, str], List[str]]:
    """Render one mode of a transformed theme.

    Args:
        properties: ThemeProperty records keyed by role or tonal key
        format: ``"css"`` for a custom property mapping or ``"tailwind"``
            for declaration lines

    Returns:
        Dict of ``--colors-*`` names to ``"r,g,b /* #hex */"`` for ``css``,
        list of ``"  --colors-*: rgba(r, g, b, a); /* #hex */"`` for ``tailwind``

    Raises:
        ConfigurationError: If the format is unknown
    """
    if format == "css":
        return css_variable_formatter(properties)
    if format == "tailwind":
        return tailwind_formatter(properties)
    raise ConfigurationError(f"Unknown format: {format!r} (expected one of {', '.join(FORMATS)})")


def css_variable_formatter(properties: Mapping[str, ThemeProperty]) -> Dict[str, str]:
    result = {}

    for key, value in properties.items():
        rgb = ",".join(str(channel) for channel in (value.rgba.r, value.rgba.g, value.rgba.b))
        result[css_variable_name(key)] = f"{rgb} /* {value.hex} */"

    return result


def tailwind_formatter(properties: Mapping[str, ThemeProperty]) -> List[str]:
    result = []

    for key, value in properties.items():
        rgba = f"rgba({value.rgba.r}, {value.rgba.g}, {value.rgba.b}, {value.rgba.a})"
        result.append(f"  {css_variable_name(key)}: {rgba}; /* {value.hex} */")

    return result


def to_token_properties(properties: Mapping[str, ThemeProperty]) -> TokenDict:
    """Re-key ThemeProperty records by kebab name as CSS variable tokens."""
    tokens: TokenDict = {}

    for key, value in properties.items():
        name = camel_to_kebab(key)
        tokens[name] = TokenProperty(
            css_var=f"{CSS_VARIABLE_PREFIX}{name}",
            rgb=f"{value.rgba.r},{value.rgba.g},{value.rgba.b}",
            hex=value.hex,
        )

    return tokens


def get_tailwind_colors(tokens: Mapping[str, TokenProperty]) -> Dict[str, str]:
    """Color names mapped to CSS variable references for a Tailwind config.

    Tailwind substitutes ``<alpha-value>`` with the opacity modifier of a
    utility class (``bg-primary/50``).
    """
    return {key: f"rgba(var({token.css_var}), <alpha-value>)" for key, token in tokens.items()}


def get_tailwind_variables(tokens: Mapping[str, TokenProperty]) -> Dict[str, str]:
    """Color names mapped to their ``r,g,b`` variable values."""
    return {key: token.rgb for key, token in tokens.items()}


def render_stylesheet(properties: Mapping[str, ThemeProperties], dark_selector: str = ".dark") -> str:
    """Render a stylesheet with light colors on ``:root`` and dark colors on a selector.

    Args:
        properties: Output of ``transform_theme``
        dark_selector: Selector that switches to the dark colors

    Returns:
        CSS text ready to inject into a page
    """
    blocks = []

    for selector, mode in ((":root", 'light'), (dark_selector, 'dark')):
        lines = tailwind_formatter(properties[mode])
        blocks.append("\n".join([f"{selector} {{", *lines, "}"]))

    return "\n\n".join(blocks) + "\n"
