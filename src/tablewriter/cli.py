"""Command-line interface for rendering CSV files as text tables."""

import logging
import sys

import click

from .csv_source import from_csv
from .exceptions import TableWriterError
from .models import Alignment
from .presets import Preset, apply_preset
from .settings import DEFAULT_PRESET, MAX_WIDTH_ENV_VAR, PRESET_ENV_VAR, resolve_max_width

ALIGNMENTS = {
    "default": Alignment.DEFAULT,
    "left": Alignment.LEFT,
    "right": Alignment.RIGHT,
    "center": Alignment.CENTER,
}


@click.group()
@click.version_option(package_name="tablewriter")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr.")
def cli(verbose: bool) -> None:
    """tablewriter: render tabular data as text grids."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--header/--no-header",
    default=True,
    help="Treat the first CSV record as the header (default: yes)",
)
@click.option(
    "--preset",
    type=click.Choice([p.value for p in Preset]),
    envvar=PRESET_ENV_VAR,
    default=DEFAULT_PRESET,
    show_default=True,
    help=f"Separator and border preset (env: {PRESET_ENV_VAR})",
)
@click.option(
    "--border/--no-border",
    default=None,
    help="Force all outer borders on or off, overriding the preset",
)
@click.option("--row-line", is_flag=True, help="Draw a line after every row")
@click.option(
    "--align",
    type=click.Choice(list(ALIGNMENTS)),
    default="default",
    show_default=True,
    help="Body cell alignment; default right-aligns numbers",
)
@click.option(
    "--max-width",
    type=click.IntRange(min=1),
    default=None,
    help=f"Column width cap before wrapping (env: {MAX_WIDTH_ENV_VAR}, default: 30)",
)
@click.option("--no-wrap", is_flag=True, help="Only break cells on explicit newlines")
@click.option("--no-auto-format", is_flag=True, help="Print header labels verbatim")
@click.option("--caption", type=str, default=None, help="Caption printed under the table")
def render(
    file: str,
    header: bool,
    preset: str,
    border: bool | None,
    row_line: bool,
    align: str,
    max_width: int | None,
    no_wrap: bool,
    no_auto_format: bool,
    caption: str | None,
) -> None:
    """Render a CSV file as a table on stdout."""
    try:
        table = from_csv(
            file,
            has_header=header,
            max_width=resolve_max_width(max_width),
            auto_wrap=not no_wrap,
        )
    except TableWriterError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    apply_preset(table, Preset(preset))
    if border is not None:
        table.set_border(border)
    table.set_row_line(row_line)
    table.set_alignment(ALIGNMENTS[align])
    table.set_auto_format_headers(not no_auto_format)
    if caption is not None:
        table.set_caption(True, caption)

    try:
        table.render()
    except TableWriterError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
