"""Command-line interface for rendering tables from layout files."""

import logging
import sys

import click

from .column import Justification
from .exceptions import TabletextError
from .layout import load_layout
from .limits import MAX_CELL_LINES, MAX_ROWS, MAX_TRUNCATE_WIDTH
from .table import Table


@click.group()
@click.version_option(package_name="tabletext")
def cli() -> None:
    """tabletext aligned table rendering CLI."""
    pass


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML layout file with columns and rows.",
)
@click.option(
    "--justify",
    "-j",
    "overrides",
    multiple=True,
    metavar="COLUMN=SIDE",
    help="Override a column's justification (e.g., Balance=right). Repeatable.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def render(file_path: str, overrides: tuple[str, ...], verbose: bool) -> None:
    """Render a layout file as an aligned text table."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        table = load_layout(file_path)
        for override in overrides:
            _apply_justification(table, override)
    except TabletextError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(table.render(), nl=False)


@cli.command()
def limits() -> None:
    """Show the configured table ceilings."""
    click.echo(f"Max truncation width: {MAX_TRUNCATE_WIDTH:,}")
    click.echo(f"Max rows per table:   {MAX_ROWS:,}")
    click.echo(f"Max lines per cell:   {MAX_CELL_LINES:,}")


def _apply_justification(table: Table, override: str) -> None:
    name, sep, side = override.rpartition("=")
    if not sep or not name:
        raise click.BadParameter(
            f"Expected COLUMN=SIDE, got {override!r}", param_hint="--justify"
        )
    justification = Justification.parse(side)
    for column in table.columns:
        if column.name == name:
            column.set_justification(justification)
            return
    raise click.BadParameter(f"Unknown column {name!r}", param_hint="--justify")


if __name__ == "__main__":
    cli()
