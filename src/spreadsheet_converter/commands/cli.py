"""Command line entry point for inspecting and importing spreadsheets."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

import click

from .._logging import configure_logging
from ..column_map import ColumnMap
from ..config import ConfigError, EnvConfigRepository, ImportSettings
from ..errors import SpreadsheetImportError
from ..headers import read_headers
from ..records import ParsedRow
from ..spreadsheet import parse_spreadsheet
from ..storage import LocalFileStorage

_WORKBOOK = click.Path(exists=True, dir_okay=False, path_type=Path)


def load_row_type(spec: str) -> type[ParsedRow]:
    """Resolve ``"package.module:ClassName"`` to a ParsedRow subclass."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise click.BadParameter(f"expected 'module:Class', got {spec!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {module_name!r}: {e}") from e
    row_type = getattr(module, attr, None)
    if not isinstance(row_type, type) or not issubclass(row_type, ParsedRow):
        raise click.BadParameter(f"{spec!r} is not a ParsedRow subclass")
    return row_type


def _fail(error: Exception) -> None:
    click.secho(f"Error: {error}", fg="red", err=True)
    sys.exit(1)


@click.group("spreadsheet-converter")
@click.option(
    "--settings",
    "settings_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON settings file (overrides SPREADSHEET_CONVERTER_SETTINGS_FILE)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: from settings)",
)
@click.pass_context
def cli(ctx: click.Context, settings_file: Path | None, log_level: str | None) -> None:
    """Validate spreadsheets against column maps and import their rows."""
    try:
        settings = ImportSettings.load(EnvConfigRepository(settings_file=settings_file))
    except ConfigError as e:
        _fail(e)
        return
    configure_logging((log_level or settings.log_level).upper())
    ctx.obj = settings


@cli.command("headers")
@click.argument("workbook", type=_WORKBOOK)
def headers_cli(workbook: Path) -> None:
    """Print the normalized header labels of WORKBOOK, one per line."""
    try:
        headers = read_headers(LocalFileStorage(workbook))
    except SpreadsheetImportError as e:
        _fail(e)
        return
    for header in headers:
        click.echo(header)


@cli.command("import")
@click.argument("workbook", type=_WORKBOOK)
@click.option(
    "--map",
    "map_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='JSON column map, e.g. {"name": 0, "age": 1}',
)
@click.option("--row-type", "row_type_spec", required=True, help="Record type as module:Class")
@click.pass_obj
def import_cli(
    settings: ImportSettings, workbook: Path, map_path: Path, row_type_spec: str
) -> None:
    """Import WORKBOOK and print one JSON record per data row.

    Examples:\n
        spreadsheet-converter import people.xlsx --map people.json --row-type myapp.rows:PersonRow\n
    """
    row_type = load_row_type(row_type_spec)
    try:
        column_map = ColumnMap.from_file(map_path)
        sheet = parse_spreadsheet(
            LocalFileStorage(workbook), column_map, row_type, settings=settings
        )
    except SpreadsheetImportError as e:
        _fail(e)
        return
    for record in sheet:
        click.echo(record.model_dump_json())


def main() -> None:
    cli()
