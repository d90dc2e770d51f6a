"""Boundary to the ``materialyoucolor`` color science library.

Everything the pipeline needs from perceptual color science goes through the
functions in this module: HCT construction, tone lookup on a palette,
hue harmonization, core palette construction, the seven scheme constructors
and per-role color resolution. No other module imports ``materialyoucolor``.
"""

from typing import Any, Dict, Type

from materialyoucolor.blend import Blend
from materialyoucolor.dynamiccolor.material_dynamic_colors import MaterialDynamicColors
from materialyoucolor.hct import Hct
from materialyoucolor.palettes.core_palette import CorePalette
from materialyoucolor.scheme.dynamic_scheme import DynamicScheme
from materialyoucolor.scheme.scheme_content import SchemeContent
from materialyoucolor.scheme.scheme_expressive import SchemeExpressive
from materialyoucolor.scheme.scheme_fidelity import SchemeFidelity
from materialyoucolor.scheme.scheme_monochrome import SchemeMonochrome
from materialyoucolor.scheme.scheme_neutral import SchemeNeutral
from materialyoucolor.scheme.scheme_tonal_spot import SchemeTonalSpot
from materialyoucolor.scheme.scheme_vibrant import SchemeVibrant
from materialyoucolor.utils.color_utils import argb_from_rgba

from .schema import Variant
from .utils import argb_from_hex

SchemeConstructor = Type[DynamicScheme]

SCHEME_CLASSES: Dict[Variant, SchemeConstructor] = {
    Variant.MONOCHROME: SchemeMonochrome,
    Variant.NEUTRAL: SchemeNeutral,
    Variant.TONAL_SPOT: SchemeTonalSpot,
    Variant.VIBRANT: SchemeVibrant,
    Variant.EXPRESSIVE: SchemeExpressive,
    Variant.FIDELITY: SchemeFidelity,
    Variant.CONTENT: SchemeContent,
}

# Attribute names of the six tonal palettes carried by a dynamic scheme
SCHEME_PALETTE_ATTRIBUTES: Dict[str, str] = {
    "primary": "primary_palette",
    "secondary": "secondary_palette",
    "tertiary": "tertiary_palette",
    "neutral": "neutral_palette",
    "neutralVariant": "neutral_variant_palette",
    "error": "error_palette",
}


def hct_from_argb(argb: int) -> Hct:
    """Build the HCT representation of an ARGB color."""
    return Hct.from_int(argb)


def hct_from_hex(hex_color: str) -> Hct:
    """Build the HCT representation of a '#RRGGBB' color."""
    return hct_from_argb(argb_from_hex(hex_color))


def argb_from_hct(hct: Hct) -> int:
    return hct.to_int()


def hue_of(argb: int) -> float:
    """Hue angle (0-360) of an ARGB color."""
    return Hct.from_int(argb).hue


def harmonize(design_color: int, source_color: int) -> int:
    """Shift ``design_color``'s hue toward ``source_color``'s hue."""
    return Blend.harmonize(design_color, source_color)


def core_palette(argb: int, content: bool = False) -> Any:
    """Primary tonal palette of a color's core palette.

    Args:
        argb: Color the palette is derived from
        content: Use the content-derived constructor, which keeps more of the
            color's original chroma

    Returns:
        Tonal palette exposing ``tone(t)``
    """
    palettes = CorePalette.content_of(argb) if content else CorePalette.of(argb)
    return palettes.a1


def tone(palette: Any, value: int) -> int:
    """ARGB color of a tonal palette at the given tone.

    ``TonalPalette.tone`` hands back ``[r, g, b, a]`` channels; they are packed
    into an ARGB integer here.
    """
    return argb_from_rgba(palette.tone(value))


def scheme_palette(scheme: DynamicScheme, name: str) -> Any:
    """One of the six semantic tonal palettes of a dynamic scheme."""
    return getattr(scheme, SCHEME_PALETTE_ATTRIBUTES[name])


def role_argb(scheme: DynamicScheme, role: str) -> int:
    """Resolve a semantic role (``primaryContainer``, ``scrim``, ...) on a scheme."""
    dynamic_color = getattr(MaterialDynamicColors, role)
    return dynamic_color.get_hct(scheme).to_int()
