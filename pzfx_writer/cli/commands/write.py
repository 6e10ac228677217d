"""Write command - Convert CSV tables into a GraphPad Prism .pzfx file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...application.models import TableOptions, WritePzfxRequest
from ...exceptions import PzfxWriterError
from ...infrastructure.container import create_default_container
from ...infrastructure.io.csv_reader import CSVReader, CSVReadOptions
from ...infrastructure.logging.console_logger import ConsoleLogger

console = Console()


def _parse_selector(value: str | None) -> int | str | None:
    if value is None:
        return None
    return int(value) if value.isdigit() else value


def _parse_subcolumns(value: str) -> int | str:
    return int(value) if value.isdigit() else value


@click.command()
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.argument(
    "data_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--notes",
    "notes_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="CSV with name,value rows written as a project info table (repeatable)",
)
@click.option("--x-col", help="Position (1-based) or name of the X column")
@click.option("--x-err", help="Position (1-based) or name of the X error column")
@click.option(
    "--subcolumns",
    default="1",
    show_default=True,
    help="Subcolumns per Y column, or SDN for mean/SD/N",
)
@click.option(
    "--suffix",
    "subcolumn_suffix",
    default=None,
    help=r"Regex removed from column names to group replicates, e.g. '_\d+$'",
)
@click.option("--digits", "n_digits", type=float, help="Decimals to display")
@click.option(
    "--row-names-col",
    type=int,
    default=None,
    help="0-based CSV column holding the row titles",
)
@click.option(
    "--row-names/--no-row-names",
    default=True,
    show_default=True,
    help="Write row titles",
)
@click.option("-v", "--verbose", count=True, help="Increase output verbosity")
def write_command(
    output: Path,
    data_files: tuple[Path, ...],
    notes_files: tuple[Path, ...],
    x_col: str | None,
    x_err: str | None,
    subcolumns: str,
    subcolumn_suffix: str | None,
    n_digits: float | None,
    row_names_col: int | None,
    row_names: bool,
    verbose: int,
) -> None:
    """Write CSV tables to a GraphPad Prism .pzfx file.

    Each DATA_FILE becomes one data table titled with its file name. Values
    ending in an asterisk are written as excluded values.

    Examples:

    \b
        # One column table
        pzfx-writer write out.pzfx growth.csv

    \b
        # XY table with replicates Dose_1, Dose_2, Dose_3
        pzfx-writer write out.pzfx doses.csv --x-col Time --subcolumns 3 --suffix '_\\d+$'
    """
    container = create_default_container(verbose=verbose)
    reader = CSVReader()
    try:
        tables = {
            path.stem: reader.read(path, CSVReadOptions(row_names_column=row_names_col))
            for path in data_files
        }
        notes = (
            {path.stem: reader.read_notes(path) for path in notes_files}
            if notes_files
            else None
        )
        request = WritePzfxRequest(
            tables=tables,
            output_path=output,
            notes=notes,
            options=TableOptions(
                row_names=row_names,
                x_col=_parse_selector(x_col),
                x_err=_parse_selector(x_err),
                n_digits=n_digits,
                subcolumns=_parse_subcolumns(subcolumns),
                subcolumn_suffix=subcolumn_suffix,
            ),
        )
        response = container.create_write_use_case().execute(request)
    except PzfxWriterError as e:
        container.create_logger().error(str(e))
        raise click.ClickException(str(e)) from e

    summary = Table(title=f"Wrote {response.output_path}")
    summary.add_column("Kind", style="cyan")
    summary.add_column("Title")
    for name in response.table_names:
        summary.add_row("Data", name)
    for name in response.info_names:
        summary.add_row("Info", name)
    console.print(summary)
    if response.warnings:
        console.print(f"[yellow]{len(response.warnings)} warning(s)[/yellow]")
    logger = container.create_logger()
    if isinstance(logger, ConsoleLogger):
        logger.log_final_stats()
