"""Tonal palette expansion.

A dynamic scheme carries six tonal palettes (primary, secondary, tertiary,
neutral, neutral variant and error). Each is sampled at the fixed ``TONES``
and flattened into keys like ``primary40`` or ``neutralVariant95`` so that a
design token system gets full shade scales next to the curated roles.
"""

from typing import Any, Dict

from .material import scheme_palette, tone
from .schema import PALETTE_NAMES, TONES


def palette_to_tonal_group(name: str, palette: Any) -> Dict[str, int]:
    """Convert a tonal palette to a tonal group of ARGB colors.

    Args:
        name: Palette name used as the key prefix
        palette: Tonal palette exposing ``tone(t)``

    Returns:
        Dict mapping ``f"{name}{tone}"`` to ARGB for every tone in ``TONES``
    """
    return {f"{name}{value}": tone(palette, value) for value in TONES}


def create_palette(scheme: Any) -> Dict[str, int]:
    """Flatten all six palettes of a scheme into one 162-entry map."""
    flat: Dict[str, int] = {}

    for name in PALETTE_NAMES:
        flat.update(palette_to_tonal_group(name, scheme_palette(scheme, name)))

    return flat
