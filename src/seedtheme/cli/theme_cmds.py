"""Theme generation CLI commands.

This module provides CLI commands for generating design tokens from a seed
color, previewing the generated roles and listing the available variants.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..config import ThemeConfig, apply_overrides, get_config, load_config, save_config
from ..theme_engine import (
    PALETTE_NAMES,
    TONES,
    ThemeEngine,
    ThemeError,
    Variant,
    format_theme,
    list_variants,
    render_stylesheet,
    transform_theme,
)

OUTPUT_FORMATS = ["css", "tailwind", "json", "stylesheet"]
VARIANT_CHOICES = [variant.value for variant in Variant]

console = Console()
error_console = Console(stderr=True)


def fail(message: str) -> None:
    """Print an error and abort with exit status 1."""
    error_console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    sys.exit(1)


def parse_custom_colors(values: Tuple[str, ...]) -> Optional[Dict[str, str]]:
    """Parse repeated ``NAME=#RRGGBB`` options; None when none were given."""
    if not values:
        return None

    custom = {}
    for value in values:
        name, sep, hex_color = value.partition("=")
        if not sep or not name.strip() or not hex_color.strip():
            raise click.BadParameter(f"expected NAME=#RRGGBB, got {value!r}", param_hint="--custom")
        custom[name.strip()] = hex_color.strip()
    return custom


def render_output(engine: ThemeEngine, config: ThemeConfig, output_format: str, dark: bool) -> str:
    """Render the active theme of an engine in one of the CLI output formats."""
    if output_format == "stylesheet":
        return render_stylesheet(transform_theme(engine.active_theme), config.dark_selector)

    if output_format == "json":
        properties = transform_theme(engine.active_theme)
        data = {
            mode: {key: prop.model_dump() for key, prop in props.items()}
            for mode, props in properties.items()
        }
        return json.dumps(data, indent=2) + "\n"

    rendered = format_theme(engine.get_theme_properties(dark), output_format)
    if output_format == "tailwind":
        return "\n".join(rendered) + "\n"
    return json.dumps(rendered, indent=2) + "\n"


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config_path: Optional[Path], verbose: bool):
    """seedtheme - generate color design tokens from a single seed color."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['config_path'] = config_path

    try:
        ctx.obj['config'] = load_config(config_path) if config_path else get_config()
    except ThemeError as e:
        fail(f"Configuration error: {e}")


@main.command()
@click.option("--seed", "-s", help="Seed color as #RRGGBB")
@click.option("--contrast", "-c", type=float, help="Contrast level, usually -1 to 1")
@click.option("--variant", type=click.Choice(VARIANT_CHOICES, case_sensitive=False), help="Scheme variant")
@click.option("--blend/--no-blend", default=None, help="Harmonize custom colors toward the seed")
@click.option("--content/--no-content", default=None, help="Use content palettes for custom colors")
@click.option("--custom", multiple=True, metavar="NAME=#RRGGBB", help="Custom color (repeatable)")
@click.option("--format", "-f", "output_format", type=click.Choice(OUTPUT_FORMATS), help="Output format")
@click.option("--dark", is_flag=True, help="Emit the dark mode for css and tailwind formats")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write to file")
@click.pass_context
def generate(ctx, seed, contrast, variant, blend, content, custom, output_format, dark, output):
    """Generate design tokens for a theme."""
    config = apply_overrides(
        ctx.obj['config'],
        seed=seed,
        contrast=contrast,
        variant=variant,
        blend=blend,
        content=content,
        custom_colors=parse_custom_colors(custom),
        format=output_format,
    )

    try:
        engine = ThemeEngine.from_config(config)
        text = render_output(engine, config, config.format, dark)
    except ThemeError as e:
        fail(str(e))

    if output:
        output.write_text(text, encoding="utf-8")
        error_console.print(f"[green]Wrote {escape(str(output))}[/green]")
    else:
        click.echo(text, nl=False)


@main.command()
@click.option("--seed", "-s", help="Seed color as #RRGGBB")
@click.option("--variant", type=click.Choice(VARIANT_CHOICES, case_sensitive=False), help="Scheme variant")
@click.option("--contrast", "-c", type=float, help="Contrast level, usually -1 to 1")
@click.option("--palettes", is_flag=True, help="Include tonal palette keys")
@click.pass_context
def preview(ctx, seed, variant, contrast, palettes):
    """Preview theme colors side by side for light and dark mode."""
    config = apply_overrides(ctx.obj['config'], seed=seed, variant=variant, contrast=contrast)

    try:
        engine = ThemeEngine.from_config(config)
    except ThemeError as e:
        fail(str(e))

    theme = engine.active_theme
    properties = transform_theme(theme)

    table = Table(
        title=f"Theme Preview: {config.seed} ({engine.active_request.variant.value})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Key", style="cyan", min_width=24)
    table.add_column("Light", min_width=16)
    table.add_column("Dark", min_width=16)

    tonal_keys = set() if palettes else _tonal_keys()
    keys = [key for key in theme.light if key not in tonal_keys]
    for key in keys:
        table.add_row(key, _swatch(properties['light'][key].hex), _swatch(properties['dark'][key].hex))

    console.print()
    console.print(table)
    console.print()


@main.command()
def variants():
    """List all available scheme variants."""
    table = Table(title="Available Variants", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan", min_width=12)
    table.add_column("Scheme", style="blue")
    table.add_column("Description")

    for info in list_variants():
        table.add_row(info['name'], info['scheme'], info['description'])

    console.print()
    console.print(table)
    console.print()


@main.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def init(ctx, force):
    """Write a default config file."""
    path = ctx.obj['config_path'] or Path.cwd() / "seedtheme.yaml"

    if path.exists() and not force:
        fail(f"{path} already exists (use --force to overwrite)")

    save_config(ThemeConfig(), path)
    console.print(f"[green]Created {escape(str(path))}[/green]")


def _tonal_keys() -> set:
    return {f"{name}{tone}" for name in PALETTE_NAMES for tone in TONES}


def _swatch(hex_color: str) -> Text:
    return Text.assemble(("    ", f"on {hex_color}"), " ", (hex_color, "dim"))
