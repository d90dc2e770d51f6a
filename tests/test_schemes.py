"""Tests for light/dark scheme construction."""

import pytest

from seedtheme.theme_engine.errors import ConfigurationError, InvalidColorError
from seedtheme.theme_engine.material import hct_from_hex
from seedtheme.theme_engine.schemes import build_schemes, convert_dynamic_scheme, create_schemes
from seedtheme.theme_engine.schema import ROLE_NAMES, Variant

SEEDS = ["#1a3048", "#1f6feb", "#ff0000", "#6750a4"]


class TestCreateSchemes:
    """Test scheme construction for every variant."""

    @pytest.mark.parametrize("variant", list(Variant))
    @pytest.mark.parametrize("seed", SEEDS)
    def test_role_keys_match_reference(self, seed, variant):
        """Test light and dark expose exactly the reference role set."""
        schemes = build_schemes(seed, 0.0, variant)

        light = convert_dynamic_scheme(schemes.light)
        dark = convert_dynamic_scheme(schemes.dark)

        assert list(light) == list(ROLE_NAMES)
        assert list(dark) == list(ROLE_NAMES)

    @pytest.mark.parametrize("variant", list(Variant))
    def test_light_and_dark_diverge(self, variant):
        """Test background and surface differ between light and dark."""
        schemes = build_schemes("#1a3048", 0.0, variant)

        light = convert_dynamic_scheme(schemes.light)
        dark = convert_dynamic_scheme(schemes.dark)

        assert light["background"] != dark["background"]
        assert light["surface"] != dark["surface"]

    def test_roles_are_opaque_argb(self):
        """Test every role is an opaque 32-bit ARGB integer."""
        roles = convert_dynamic_scheme(build_schemes("#1f6feb").light)

        for role, argb in roles.items():
            assert isinstance(argb, int), role
            assert 0 <= argb <= 0xFFFFFFFF, role
            assert argb >> 24 == 0xFF, role

    def test_shared_source_and_contrast(self):
        """Test both schemes are built from the same source and contrast."""
        source = hct_from_hex("#1f6feb")
        schemes = create_schemes(source, 0.5, Variant.VIBRANT)

        assert schemes.variant is Variant.VIBRANT
        assert schemes.light.is_dark is False
        assert schemes.dark.is_dark is True
        assert schemes.light.contrast_level == schemes.dark.contrast_level == 0.5

    def test_default_variant(self):
        """Test omitting the variant builds a tonal spot pair."""
        schemes = build_schemes("#1f6feb")
        assert schemes.variant is Variant.TONAL_SPOT

    def test_deterministic(self):
        """Test identical inputs give identical roles."""
        first = convert_dynamic_scheme(build_schemes("#1a3048", 0.0, "fidelity").dark)
        second = convert_dynamic_scheme(build_schemes("#1a3048", 0.0, "fidelity").dark)
        assert first == second

    def test_unknown_variant(self):
        """Test an unknown variant fails before any scheme is built."""
        with pytest.raises(ConfigurationError, match="rainbow"):
            build_schemes("#1f6feb", 0.0, "rainbow")

    def test_malformed_seed(self):
        """Test a malformed seed is rejected."""
        with pytest.raises(InvalidColorError, match="#1f6fe"):
            build_schemes("#1f6fe")
