"""Exceptions raised by the theme generation pipeline."""


class ThemeError(Exception):
    """Base class for all theme generation errors."""


class InvalidColorError(ThemeError, ValueError):
    """Raised when a color string is not a well-formed ``#RRGGBB`` hex."""

    def __init__(self, value, reason: str = "expected #RRGGBB"):
        self.value = value
        super().__init__(f"Invalid color {value!r}: {reason}")


class ConfigurationError(ThemeError, ValueError):
    """Raised for unsupported parameters (variant, format, names, keys)."""
