"""Core theme engine for the seedtheme generation pipeline.

This module assembles the outputs of the scheme, palette and custom color
stages into a ``Theme`` and provides the ThemeEngine class, which caches
generated themes and keeps track of the active theme for runtime switching.
Generation is all-or-nothing: any error aborts before a theme is returned.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .custom import create_custom_colors, flatten_custom_colors
from .errors import ConfigurationError, ThemeError
from .format import format_theme, to_token_properties, transform_theme
from .material import hct_from_hex
from .palettes import create_palette
from .schemes import convert_dynamic_scheme, create_schemes
from .schema import CustomColor, Theme, ThemeProperties, ThemeRequest, TokenDict
from .utils import argb_from_hex

logger = logging.getLogger(__name__)


def merge_color_maps(*sources: Tuple[str, Mapping[str, int]]) -> Dict[str, int]:
    """Merge labelled color maps, refusing to overwrite any key.

    Args:
        *sources: ``(label, color_map)`` pairs, merged in order

    Returns:
        A new flat map holding every key of every source

    Raises:
        ConfigurationError: If two sources define the same key
    """
    merged: Dict[str, int] = {}
    origins: Dict[str, str] = {}

    for label, colors in sources:
        for key, value in colors.items():
            if key in merged:
                raise ConfigurationError(
                    f"Theme key '{key}' from {label} collides with {origins[key]}"
                )
            merged[key] = value
            origins[key] = label

    return merged


def assemble_theme(light_scheme: Any,
                   dark_scheme: Any,
                   light_palette: Mapping[str, int],
                   dark_palette: Mapping[str, int],
                   custom: Optional[Mapping[str, CustomColor]] = None,
                   seed: Optional[int] = None) -> Theme:
    """Merge scheme roles, tonal groups and custom families into a Theme.

    Raises:
        ConfigurationError: If any two sources produce the same key
    """
    custom = dict(custom or {})

    light = merge_color_maps(
        ("light scheme", convert_dynamic_scheme(light_scheme)),
        ("light palette", light_palette),
        ("custom colors", flatten_custom_colors(custom, dark=False)),
    )
    dark = merge_color_maps(
        ("dark scheme", convert_dynamic_scheme(dark_scheme)),
        ("dark palette", dark_palette),
        ("custom colors", flatten_custom_colors(custom, dark=True)),
    )

    return Theme(seed=seed, light=light, dark=dark, custom=custom)


def create_theme_from_request(request: ThemeRequest) -> Theme:
    """Run the full pipeline for a validated request."""
    source = hct_from_hex(request.seed)

    schemes = create_schemes(source, request.contrast, request.variant)

    light_palette = create_palette(schemes.light)
    dark_palette = create_palette(schemes.dark)

    custom = create_custom_colors(request.custom_colors, request.blend, request.content, source)

    return assemble_theme(
        schemes.light,
        schemes.dark,
        light_palette,
        dark_palette,
        custom=custom,
        seed=argb_from_hex(request.seed),
    )


def create_theme(seed: str,
                 variant: Any = None,
                 contrast: float = 0.0,
                 blend: bool = False,
                 content: bool = False,
                 custom_colors: Optional[Mapping[str, str]] = None) -> Theme:
    """Create a new theme from a seed color.

    Args:
        seed: Seed color as '#RRGGBB'
        variant: Scheme variant, ``TONAL_SPOT`` when omitted
        contrast: Contrast level, defaults to 0
        blend: Harmonize custom colors toward the seed
        content: Build custom color palettes with the content constructor
        custom_colors: Mapping of custom color name to '#RRGGBB'

    Returns:
        The generated Theme

    Raises:
        InvalidColorError: If the seed or a custom color is malformed
        ConfigurationError: If the variant or a custom color name is invalid
    """
    request = ThemeRequest.build(
        seed=seed,
        variant=variant,
        contrast=contrast,
        blend=blend,
        content=content,
        custom_colors=dict(custom_colors or {}),
    )
    return create_theme_from_request(request)


def set_theme(seed: str, dark: bool = False, **params: Any) -> TokenDict:
    """Generate a theme and return one mode as CSS variable tokens.

    This is the build-time entry point: its result feeds
    ``get_tailwind_colors`` and ``get_tailwind_variables``.
    """
    theme = create_theme(seed, **params)
    properties = transform_theme(theme)
    return to_token_properties(properties['dark' if dark else 'light'])


class ThemeEngine:
    """Theme engine caching generated themes and holding the active one."""

    def __init__(self):
        # Generated theme cache (request key -> theme)
        self._theme_cache: Dict[Tuple[Any, ...], Theme] = {}
        self._active_theme: Optional[Theme] = None
        self._active_request: Optional[ThemeRequest] = None

        logger.debug("ThemeEngine initialized")

    @classmethod
    def from_config(cls, config) -> 'ThemeEngine':
        """Create a theme engine with the configured theme loaded.

        Args:
            config: A ``ThemeConfig``

        Returns:
            ThemeEngine instance with an active theme
        """
        engine = cls()
        engine.load_theme(config.to_request())
        return engine

    @property
    def active_theme(self) -> Optional[Theme]:
        return self._active_theme

    @property
    def active_request(self) -> Optional[ThemeRequest]:
        return self._active_request

    def create_theme(self, request: ThemeRequest) -> Theme:
        """Generate a theme for a request, reusing a cached result if any."""
        cache_key = request.cache_key()

        if cache_key in self._theme_cache:
            logger.debug(f"Theme cache hit for seed {request.seed}")
            return self._theme_cache[cache_key]

        theme = create_theme_from_request(request)
        self._theme_cache[cache_key] = theme

        logger.debug(f"Generated theme for seed {request.seed} ({request.variant.value})")
        return theme

    def load_theme(self, request: Optional[ThemeRequest] = None, **params: Any) -> Theme:
        """Generate a theme and make it the active one.

        Args:
            request: A validated request; built from ``params`` when omitted
            **params: ThemeRequest fields (seed, variant, contrast, ...)

        Returns:
            The new active theme

        Raises:
            ThemeError: If generation fails; the previous theme stays active
        """
        try:
            if request is None:
                request = ThemeRequest.build(**params)
            theme = self.create_theme(request)
        except ThemeError as e:
            logger.error(f"Error loading theme, keeping the previous one: {e}")
            raise

        self._active_theme = theme
        self._active_request = request
        return theme

    def get_theme_properties(self, dark: bool = False) -> ThemeProperties:
        """Get the formatter records of the active theme for one mode."""
        theme = self._require_active_theme()
        return transform_theme(theme)['dark' if dark else 'light']

    def get_css_variables(self, dark: bool = False) -> Dict[str, str]:
        """Get ``--colors-*`` custom properties of the active theme."""
        return format_theme(self.get_theme_properties(dark), 'css')

    def get_tailwind_declarations(self, dark: bool = False) -> List[str]:
        """Get Tailwind-style declaration lines of the active theme."""
        return format_theme(self.get_theme_properties(dark), 'tailwind')

    def get_theme_tokens(self, dark: bool = False) -> TokenDict:
        """Get CSS variable tokens of the active theme keyed by kebab name."""
        return to_token_properties(self.get_theme_properties(dark))

    def clear_cache(self) -> None:
        """Clear the generated theme cache; the active theme is kept."""
        self._theme_cache.clear()
        logger.debug("Theme engine cache cleared")

    def _require_active_theme(self) -> Theme:
        if self._active_theme is None:
            raise ConfigurationError("No theme loaded; call load_theme() first")
        return self._active_theme
