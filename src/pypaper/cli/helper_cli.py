"""
Command-line interface for pypaper.

This module provides commands for working with printable paper:
- generate: Render a page to SVG or PDF
- init: Write the default configuration file
- validate: Validate an existing configuration file
- convert: Convert a spacing value between inches and millimeters
- page-css: Print the @page rule for a page size

Usage:
    pypaper generate --type graph --size a4 -o graph.pdf
    pypaper init -o paper.yaml
    pypaper generate --config paper.yaml -o paper.svg
    pypaper validate paper.yaml
"""

from pathlib import Path

import click
import yaml

from ..config import PaperConfig
from ..paper_generator.dimensions import Orientation, PageSize
from ..paper_generator.drawing import PaperDrawing
from ..paper_generator.page import PaperPad, PrintPage
from ..paper_generator.patterns import PaperType
from ..paper_generator.units import IMPERIAL, METRIC

_PAPER_TYPES = [t.value for t in PaperType]
_PAGE_SIZES = [s.value for s in PageSize]
_ORIENTATIONS = [o.value for o in Orientation]


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """pypaper - printable lined, graph, dot, and blank paper."""
    pass


def _load_config(config_file: Path | None) -> PaperConfig:
    if config_file is None:
        return PaperConfig.default()
    try:
        return PaperConfig.from_yaml(config_file)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        click.echo(f"Error loading config: {e}", err=True)
        raise SystemExit(1) from None


@cli.command()
@click.option(
    "--config", "-c", "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="YAML configuration to start from (default: built-in defaults).",
)
@click.option("--type", "-t", "paper_type", type=click.Choice(_PAPER_TYPES), help="Paper pattern.")
@click.option("--size", "-s", "page_size", type=click.Choice(_PAGE_SIZES), help="Page size.")
@click.option("--orientation", type=click.Choice(_ORIENTATIONS), help="Page orientation.")
@click.option(
    "--spacing",
    help="Lined spacing: wide, college, narrow, or a value in inches (letter) / mm (a4).",
)
@click.option("--grid-size", type=float, help="Graph spacing in inches (letter) / mm (a4).")
@click.option("--dot-density", type=click.IntRange(2, 5), help="Dots per inch (2-5).")
@click.option("--margin-top", type=float, help="Top margin in inches.")
@click.option("--margin-bottom", type=float, help="Bottom margin in inches.")
@click.option("--margin-left", type=float, help="Left margin in inches.")
@click.option("--margin-right", type=float, help="Right margin in inches.")
@click.option("--color", help="Line color as #rgb or #rrggbb.")
@click.option("--thickness", type=float, help="Line thickness in pixels.")
@click.option("--no-guide", is_flag=True, help="Omit the margin outline on blank paper.")
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    required=True,
    help="Output file (.svg or .pdf).",
)
@click.option("--pages", type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of pages (PDF) or numbered SVG files.")
@click.option("--debug", is_flag=True, help="Print a generation summary.")
def generate(
    config_file: Path | None,
    paper_type: str | None,
    page_size: str | None,
    orientation: str | None,
    spacing: str | None,
    grid_size: float | None,
    dot_density: int | None,
    margin_top: float | None,
    margin_bottom: float | None,
    margin_left: float | None,
    margin_right: float | None,
    color: str | None,
    thickness: float | None,
    no_guide: bool,
    output: Path,
    pages: int,
    debug: bool,
):
    """
    Render a paper page to SVG or PDF.

    Options override values from --config. Switching --size converts the
    configured spacing into the new page's unit.

    Example:
        pypaper generate --type dot --dot-density 4 -o dots.pdf
    """
    config = _load_config(config_file)

    if page_size is not None and page_size != config.page_size.value:
        config = config.with_page_size(page_size)

    overrides = {
        "paper_type": paper_type,
        "orientation": orientation,
        "line_spacing": spacing,
        "grid_size": grid_size,
        "dot_density": dot_density,
        "line_color": color,
        "line_thickness": thickness,
    }
    margins = {
        "top": margin_top,
        "bottom": margin_bottom,
        "left": margin_left,
        "right": margin_right,
    }
    data = config._to_dict()
    data.update({k: v for k, v in overrides.items() if v is not None})
    data["margins"].update({k: v for k, v in margins.items() if v is not None})
    if no_guide:
        data["show_margin_guide"] = False

    try:
        config = PaperConfig.from_dict(data).checked()
    except ValueError as e:
        click.echo(str(e), err=True)
        raise SystemExit(1) from None

    paper = PaperDrawing(config, debug=debug)
    suffix = output.suffix.lower()

    if suffix == ".pdf":
        paper.export_pdf(str(output), copies=pages)
    elif suffix == ".svg":
        if pages == 1:
            paper.export_svg(str(output))
        else:
            pad = PaperPad()
            for _ in range(pages):
                pad.add_page(paper.drawing)
            for path in pad.export_svg_files(str(output.with_suffix(""))):
                click.echo(f"Exported SVG: {path}")
    else:
        click.echo(f"Unsupported output format '{output.suffix}' (use .svg or .pdf)", err=True)
        raise SystemExit(1)


@cli.command()
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    required=True,
    help="Output YAML file path.",
)
def init(output: Path):
    """
    Write the default configuration to a YAML file.

    Example:
        pypaper init -o paper.yaml
    """
    PaperConfig.default().to_yaml(output)
    click.echo(f"Configuration saved to: {output}")


@cli.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path):
    """
    Validate a paper configuration file.

    Example:
        pypaper validate paper.yaml
    """
    click.echo(f"\nValidating: {config_file}")
    click.echo("-" * 50)

    config = _load_config(config_file)
    errors = config.validate()

    if errors:
        click.echo("\nErrors:")
        for e in errors:
            click.echo(f"  - {e}")
        raise SystemExit(1)

    click.echo("Configuration is valid.")
    click.echo(f"  Paper:   {config.paper_type.value}")
    click.echo(f"  Page:    {config.page_size.value} {config.orientation.value}")
    click.echo(f"  Spacing: {config.spacing_label()}")


@cli.command()
@click.argument("value", type=float)
@click.option(
    "--from", "from_unit",
    type=click.Choice(["in", "mm"]),
    default="in",
    show_default=True,
    help="Unit of VALUE.",
)
def convert(value: float, from_unit: str):
    """
    Convert a spacing value between inches and millimeters.

    Uses the same rounding as switching page sizes: 0.1 mm for inch to
    mm, the nearest 1/32 inch for mm to inch.

    Example:
        pypaper convert 0.34375 --from in
    """
    if from_unit == "in":
        source, target = IMPERIAL, METRIC
    else:
        source, target = METRIC, IMPERIAL

    converted = target.convert_from(value, source)
    click.echo(f"{source.format(value)} = {target.format(converted)}")


@cli.command("page-css")
@click.option("--size", "-s", "page_size", type=click.Choice(_PAGE_SIZES), default="letter",
              show_default=True, help="Page size.")
@click.option("--orientation", type=click.Choice(_ORIENTATIONS), default="portrait",
              show_default=True, help="Page orientation.")
def page_css(page_size: str, orientation: str):
    """
    Print the CSS @page rule that matches a page size.

    Example:
        pypaper page-css --size a4 --orientation landscape
    """
    page = PrintPage(PageSize(page_size), Orientation(orientation))
    click.echo(page.css_rule())


if __name__ == "__main__":
    cli()
