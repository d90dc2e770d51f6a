"""seedtheme - light/dark color themes and design tokens from a single seed color."""

__version__ = "0.1.0"
__author__ = "seedtheme Team"

from .theme_engine import (
    ConfigurationError,
    InvalidColorError,
    Theme,
    ThemeEngine,
    ThemeError,
    Variant,
    create_theme,
    format_theme,
    set_theme,
    transform_theme,
)

__all__ = [
    "ConfigurationError",
    "InvalidColorError",
    "Theme",
    "ThemeEngine",
    "ThemeError",
    "Variant",
    "create_theme",
    "format_theme",
    "set_theme",
    "transform_theme",
    "__version__",
]
