"""Light and dark dynamic scheme construction."""

import logging
from typing import Any, Dict

from .material import hct_from_hex, role_argb
from .registry import select_scheme_class
from .schema import ROLE_NAMES, SchemePair, Variant

logger = logging.getLogger(__name__)


def create_schemes(source: Any, contrast: float = 0.0, variant: Any = None) -> SchemePair:
    """Create light and dark color schemes from a source color.

    Args:
        source: HCT color used as the base for both schemes
        contrast: Contrast level passed to the scheme library, usually -1 to 1
        variant: Scheme variant, ``TONAL_SPOT`` when omitted

    Returns:
        SchemePair with the light and dark dynamic schemes

    Raises:
        ConfigurationError: If the variant is unknown
    """
    resolved = Variant.TONAL_SPOT if variant is None else Variant.parse(variant)
    scheme_class = select_scheme_class(resolved)

    light = scheme_class(source, False, contrast)
    dark = scheme_class(source, True, contrast)

    logger.debug(f"Built {scheme_class.__name__} schemes at contrast {contrast}")
    return SchemePair(light=light, dark=dark, variant=resolved)


def build_schemes(seed: str, contrast: float = 0.0, variant: Any = None) -> SchemePair:
    """Create light and dark schemes straight from a '#RRGGBB' seed.

    Raises:
        InvalidColorError: If the seed is malformed
        ConfigurationError: If the variant is unknown
    """
    return create_schemes(hct_from_hex(seed), contrast, variant)


def convert_dynamic_scheme(scheme: Any) -> Dict[str, int]:
    """Convert a dynamic scheme to a flat map of semantic roles to ARGB.

    The key set is always exactly ``ROLE_NAMES``, in that order.
    """
    return {role: role_argb(scheme, role) for role in ROLE_NAMES}
