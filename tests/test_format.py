"""Tests for design token formatting."""

import re

import pytest

from seedtheme.theme_engine.errors import ConfigurationError
from seedtheme.theme_engine.format import (
    css_variable_name,
    format_theme,
    get_tailwind_colors,
    get_tailwind_variables,
    render_stylesheet,
    to_theme_property,
    to_token_properties,
    transform_theme,
)
from seedtheme.theme_engine.schema import RGBA, ThemeProperty
from seedtheme.theme_engine.utils import hex_to_rgb

CSS_VALUE = re.compile(r"^(\d{1,3}),(\d{1,3}),(\d{1,3}) /\* (#[0-9a-f]{6}) \*/$")
TAILWIND_LINE = re.compile(
    r"^  --colors-[a-z0-9-]+: rgba\((\d{1,3}), (\d{1,3}), (\d{1,3}), (\d{1,3})\); /\* (#[0-9a-f]{6}) \*/$"
)


class TestThemeProperty:
    """Test the per-color formatter record."""

    def test_to_theme_property(self):
        """Test the record carries argb, channels and hex."""
        prop = to_theme_property(0xFF1F6FEB)

        assert prop.argb == 0xFF1F6FEB
        assert prop.rgba == RGBA(r=31, g=111, b=235, a=255)
        assert prop.hex == "#1f6feb"

    def test_transform_theme(self, navy_theme):
        """Test both modes are transformed key for key."""
        properties = transform_theme(navy_theme)

        assert set(properties) == {"light", "dark"}
        assert list(properties["light"]) == list(navy_theme.light)
        assert properties["dark"]["primary"].argb == navy_theme.dark["primary"]


class TestCssFormat:
    """Test the css custom property output."""

    def test_primary_value(self, navy_theme):
        """Test the primary variable is 'r,g,b /* #hex */' with a matching hex."""
        css = format_theme(transform_theme(navy_theme)["light"], "css")

        match = CSS_VALUE.match(css["--colors-primary"])
        assert match
        r, g, b, hex_value = match.groups()
        assert hex_to_rgb(hex_value) == (int(r), int(g), int(b))

    def test_every_value_well_formed(self, navy_theme):
        """Test every variable name and value has the expected shape."""
        css = format_theme(transform_theme(navy_theme)["dark"], "css")

        assert len(css) == 211
        for name, value in css.items():
            assert name.startswith("--colors-")
            assert name == name.lower()
            assert CSS_VALUE.match(value), value

    def test_kebab_names(self, brand_theme):
        """Test camelCase keys become kebab-case variable names."""
        css = format_theme(transform_theme(brand_theme)["light"], "css")

        assert "--colors-surface-container-highest" in css
        assert "--colors-on-brand-container" in css
        assert "--colors-neutral-variant40" in css

    def test_reshapes_without_recomputing(self):
        """Test the output repeats the record fields as given."""
        record = ThemeProperty(argb=0, rgba=RGBA(r=1, g=2, b=3, a=4), hex="#abcdef")

        css = format_theme({"brand": record}, "css")
        lines = format_theme({"brand": record}, "tailwind")

        assert css == {"--colors-brand": "1,2,3 /* #abcdef */"}
        assert lines == ["  --colors-brand: rgba(1, 2, 3, 4); /* #abcdef */"]


class TestTailwindFormat:
    """Test the Tailwind declaration output."""

    def test_lines(self, navy_theme):
        """Test one declaration line per color."""
        lines = format_theme(transform_theme(navy_theme)["light"], "tailwind")

        assert len(lines) == 211
        for line in lines:
            match = TAILWIND_LINE.match(line)
            assert match, line
            assert match.group(4) == "255"

    def test_unknown_format(self, navy_theme):
        """Test an unknown format is refused."""
        with pytest.raises(ConfigurationError, match="scss"):
            format_theme(transform_theme(navy_theme)["light"], "scss")


class TestTailwindTokens:
    """Test Tailwind config helpers."""

    def setup_method(self):
        record = ThemeProperty(argb=0xFF1F6FEB, rgba=RGBA(r=31, g=111, b=235, a=255), hex="#1f6feb")
        self.tokens = to_token_properties({"onPrimaryContainer": record})

    def test_token_properties(self):
        """Test tokens are keyed by kebab name."""
        token = self.tokens["on-primary-container"]

        assert token.css_var == "--colors-on-primary-container"
        assert token.rgb == "31,111,235"
        assert token.hex == "#1f6feb"

    def test_tailwind_colors(self):
        """Test colors reference the CSS variable with an alpha placeholder."""
        assert get_tailwind_colors(self.tokens) == {
            "on-primary-container": "rgba(var(--colors-on-primary-container), <alpha-value>)",
        }

    def test_tailwind_variables(self):
        """Test variables map to bare rgb channels."""
        assert get_tailwind_variables(self.tokens) == {"on-primary-container": "31,111,235"}

    def test_css_variable_name(self):
        assert css_variable_name("surfaceContainerLow") == "--colors-surface-container-low"


class TestStylesheet:
    """Test stylesheet rendering."""

    def test_blocks(self, navy_theme):
        """Test light colors go on :root and dark colors on the dark selector."""
        properties = transform_theme(navy_theme)
        css = render_stylesheet(properties, dark_selector="[data-theme=dark]")

        root, dark = css.split("\n\n")
        assert root.startswith(":root {\n")
        assert dark.startswith("[data-theme=dark] {\n")
        assert css.endswith("}\n")
        assert format_theme(properties["light"], "tailwind")[0] in root
        assert format_theme(properties["dark"], "tailwind")[0] in dark
