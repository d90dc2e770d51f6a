"""Variant registry for scheme construction strategies.

This module provides the SchemeRegistry class that maps each ``Variant`` to the
dynamic scheme constructor implementing it. The table is closed: a value that
names no variant is a configuration error, never a silent fallback.
"""

import logging
from typing import Any, Dict, List, Optional

from .errors import ConfigurationError
from .material import SCHEME_CLASSES, SchemeConstructor
from .schema import VARIANT_DESCRIPTIONS, Variant

logger = logging.getLogger(__name__)


class SchemeRegistry:
    """Registry of the seven scheme construction strategies."""

    def __init__(self, schemes: Optional[Dict[Variant, SchemeConstructor]] = None):
        """Initialize the registry.

        Args:
            schemes: Optional replacement strategy table, mainly for tests
        """
        self._schemes: Dict[Variant, SchemeConstructor] = dict(schemes or SCHEME_CLASSES)

        missing = [variant.value for variant in Variant if variant not in self._schemes]
        if missing:
            raise ConfigurationError(f"No scheme registered for variants: {', '.join(missing)}")

    def select(self, variant: Any = None) -> SchemeConstructor:
        """Resolve the scheme constructor for a variant.

        Args:
            variant: A ``Variant`` or any value ``Variant.parse`` accepts;
                ``None`` selects ``TONAL_SPOT``

        Returns:
            Scheme class taking ``(source_hct, is_dark, contrast_level)``

        Raises:
            ConfigurationError: If the variant is unknown
        """
        resolved = Variant.TONAL_SPOT if variant is None else Variant.parse(variant)
        scheme_class = self._schemes[resolved]
        logger.debug(f"Variant '{resolved.value}' resolved to {scheme_class.__name__}")
        return scheme_class

    def describe(self, variant: Any) -> Dict[str, str]:
        """Get display information for one variant."""
        resolved = Variant.parse(variant)
        return {
            'name': resolved.value,
            'description': VARIANT_DESCRIPTIONS[resolved],
            'scheme': self._schemes[resolved].__name__,
        }

    def list_variants(self) -> List[Dict[str, str]]:
        """List all variants with their descriptions, in declaration order."""
        return [self.describe(variant) for variant in Variant]


_default_registry = SchemeRegistry()


def select_scheme_class(variant: Any = None) -> SchemeConstructor:
    """Resolve a variant against the default registry."""
    return _default_registry.select(variant)


def list_variants() -> List[Dict[str, str]]:
    return _default_registry.list_variants()
