"""Theme schema definitions for the seedtheme generation pipeline.

This module defines the fixed naming tables (semantic roles, tonal palettes,
tones), the ``Variant`` enum and the Pydantic models that carry data between
the pipeline stages: the validated ``ThemeRequest`` input, the ``Theme``
result and the per-color token records produced by the formatter.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError, ThemeError
from .utils import argb_from_hex, camel_to_kebab, custom_color_key


# The "steps" of every tonal palette, lightest first. 100 is white-ish and
# 0 is black-ish for any hue/chroma.
TONES: Tuple[int, ...] = (
    100, 99, 98, 96, 95, 94, 92, 90, 87, 80, 70, 60, 50, 40, 35, 30, 25, 24, 22,
    20, 17, 12, 10, 6, 5, 4, 0,
)

PALETTE_NAMES: Tuple[str, ...] = (
    "primary",
    "secondary",
    "tertiary",
    "neutral",
    "neutralVariant",
    "error",
)

ROLE_NAMES: Tuple[str, ...] = (
    "primary",
    "onPrimary",
    "primaryContainer",
    "onPrimaryContainer",
    "primaryFixed",
    "onPrimaryFixed",
    "primaryFixedDim",
    "onPrimaryFixedVariant",
    "secondary",
    "onSecondary",
    "secondaryContainer",
    "onSecondaryContainer",
    "secondaryFixed",
    "onSecondaryFixed",
    "secondaryFixedDim",
    "onSecondaryFixedVariant",
    "tertiary",
    "onTertiary",
    "tertiaryContainer",
    "onTertiaryContainer",
    "tertiaryFixed",
    "onTertiaryFixed",
    "tertiaryFixedDim",
    "onTertiaryFixedVariant",
    "error",
    "onError",
    "errorContainer",
    "onErrorContainer",
    "outline",
    "outlineVariant",
    "background",
    "onBackground",
    "surface",
    "onSurface",
    "surfaceVariant",
    "onSurfaceVariant",
    "inverseSurface",
    "inverseOnSurface",
    "inversePrimary",
    "shadow",
    "scrim",
    "surfaceContainerHighest",
    "surfaceContainerHigh",
    "surfaceContainer",
    "surfaceContainerLow",
    "surfaceContainerLowest",
    "surfaceBright",
    "surfaceDim",
    "surfaceTint",
)

# Tones picked from a custom color's palette, in (color, onColor,
# colorContainer, onColorContainer) order.
CUSTOM_LIGHT_TONES: Tuple[int, int, int, int] = (40, 100, 90, 10)
CUSTOM_DARK_TONES: Tuple[int, int, int, int] = (80, 20, 30, 90)


class Variant(str, Enum):
    """Scheme generation strategies.

    Each variant influences how the colors generated for a theme are
    distributed in hue/chroma space around the seed color.
    """
    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    TONAL_SPOT = "tonal_spot"
    VIBRANT = "vibrant"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    CONTENT = "content"

    @classmethod
    def parse(cls, value: Any) -> "Variant":
        """Coerce a user supplied value into a ``Variant``.

        Accepts a member, its value (``"tonal_spot"``), its name
        (``"TONAL_SPOT"``), CamelCase (``"TonalSpot"``), kebab case
        (``"tonal-spot"``) or the positional index 0-6.

        Raises:
            ConfigurationError: If the value names no variant
        """
        if isinstance(value, cls):
            return value

        # bool is an int subclass but never a meaningful variant
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ConfigurationError(f"Unknown variant: {value!r}")

        if isinstance(value, str):
            text = value.strip()
            if not text.isupper():
                text = camel_to_kebab(text)
            normalized = text.lower().replace("-", "_").replace(" ", "_").strip("_")
            try:
                return cls(normalized)
            except ValueError:
                pass

        raise ConfigurationError(f"Unknown variant: {value!r}")


VARIANT_DESCRIPTIONS: Dict[Variant, str] = {
    Variant.MONOCHROME: "A grayscale palette.",
    Variant.NEUTRAL: "A palette of colors that are near grayscale.",
    Variant.TONAL_SPOT: (
        "Low to medium colorfulness and a tertiary hue related to the source color."
    ),
    Variant.VIBRANT: "Maxes out colorfulness at each opportunity.",
    Variant.EXPRESSIVE: (
        "High colorfulness and intentionally detached from the source color."
    ),
    Variant.FIDELITY: (
        "The primary container keeps the source color's chroma and tone; "
        "the other palettes follow its hue."
    ),
    Variant.CONTENT: (
        "Primary colors follow the source color with a constant appearance in "
        "light and dark mode while the tertiary color complements it."
    ),
}


class RGBA(BaseModel):
    """Decomposed channels of an ARGB color, each 0-255."""
    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)
    a: int = Field(..., ge=0, le=255)


class ThemeProperty(BaseModel):
    """Formatter record for one color leaf."""
    model_config = ConfigDict(frozen=True)

    argb: int
    rgba: RGBA
    hex: str


class TokenProperty(BaseModel):
    """CSS-variable view of one color leaf, as consumed by Tailwind helpers."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    css_var: str = Field(..., alias="cssVar")
    rgb: str
    hex: str


class ColorFamily(BaseModel):
    """The four roles derived for a custom color in one mode."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    color: int
    on_color: int = Field(..., alias="onColor")
    color_container: int = Field(..., alias="colorContainer")
    on_color_container: int = Field(..., alias="onColorContainer")


class CustomColor(BaseModel):
    """A custom brand color and its light/dark families."""
    model_config = ConfigDict(frozen=True)

    seed: int
    target: int
    light: ColorFamily
    dark: ColorFamily


class Theme(BaseModel):
    """Complete generated theme.

    ``light`` and ``dark`` are flat maps from role or tonal key (for example
    ``primaryContainer`` or ``primary40``) to an ARGB integer. All three maps
    are read-only.
    """
    model_config = ConfigDict(frozen=True)

    seed: Optional[int] = None
    light: Mapping[str, int]
    dark: Mapping[str, int]
    custom: Mapping[str, CustomColor] = Field(default_factory=dict, validate_default=True)

    @field_validator("light", "dark", "custom")
    @classmethod
    def freeze_mapping(cls, v):
        return MappingProxyType(dict(v))


class ThemeRequest(BaseModel):
    """Validated parameters of a single theme generation call."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    seed: str = Field(..., description="Seed color as #RRGGBB")
    contrast: float = 0.0
    variant: Variant = Variant.TONAL_SPOT
    blend: bool = False
    content: bool = False
    custom_colors: Dict[str, str] = Field(default_factory=dict)

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v):
        argb_from_hex(v)
        return v

    @field_validator("variant", mode="before")
    @classmethod
    def validate_variant(cls, v):
        if v is None:
            return Variant.TONAL_SPOT
        return Variant.parse(v)

    @field_validator("custom_colors", mode="before")
    @classmethod
    def validate_custom_colors(cls, v):
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ConfigurationError(f"Custom colors must be a mapping, got {v!r}")
        for name, value in v.items():
            if not isinstance(name, str) or not custom_color_key(name):
                raise ConfigurationError(
                    f"Invalid custom color name {name!r}: needs at least one letter or digit"
                )
            argb_from_hex(value)
        return v

    @classmethod
    def build(cls, **params: Any) -> "ThemeRequest":
        """Create a request, surfacing validation failures as theme errors.

        Raises:
            InvalidColorError: If the seed or a custom color is malformed
            ConfigurationError: For any other invalid parameter
        """
        try:
            return cls(**params)
        except ValidationError as e:
            for error in e.errors():
                original = (error.get("ctx") or {}).get("error")
                if isinstance(original, ThemeError):
                    raise original from None
            raise ConfigurationError(f"Invalid theme parameters: {e}") from e

    def cache_key(self) -> Tuple[Any, ...]:
        """Hashable identity of the request."""
        return (
            self.seed.lower(),
            self.contrast,
            self.variant.value,
            self.blend,
            self.content,
            tuple(sorted((name, value.lower()) for name, value in self.custom_colors.items())),
        )


class SchemePair(BaseModel):
    """Light and dark dynamic schemes built from the same source."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    light: Any
    dark: Any
    variant: Optional[Variant] = None


# Type aliases for convenience
ColorMap = Dict[str, int]
ThemeProperties = Dict[str, ThemeProperty]
TokenDict = Dict[str, TokenProperty]
