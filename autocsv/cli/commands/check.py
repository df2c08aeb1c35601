"""Check command - parse a CSV file into records and report problems."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console

from ...config import ConfigLoader
from ...domain.exceptions import ConversionError
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import DataSourceError
from ..utils import load_record_type

console = Console()


@click.command()
@click.argument("record_type")
@click.argument(
    "csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--delimiter", default=None, help="Field delimiter (default: ',')")
@click.option("--quote-char", default=None, help="Quote character (default: '\"')")
@click.option("--no-quote", is_flag=True, help="Read fields without quoting")
@click.option("--strict", is_flag=True, help="Treat unknown columns as errors")
@click.option("-v", "--verbose", count=True, help="Increase output detail")
def check_command(
    record_type: str,
    csv_file: Path,
    delimiter: str | None,
    quote_char: str | None,
    no_quote: bool,
    strict: bool,
    verbose: int,
) -> None:
    """Check that CSV_FILE parses into RECORD_TYPE records.

    Required columns must be present and filled, and every mapped value
    must parse with the field's type and format. Unknown columns only
    produce warnings unless --strict is given.

    Examples:

    \b
        autocsv check myapp.models:Person people.csv
        autocsv check myapp.models:Person people.csv --delimiter ';' -v
    """
    config = ConfigLoader.load()
    if strict:
        config = dataclasses.replace(config, strict_headers=True)
    cls = load_record_type(record_type)

    try:
        options = config.csv_options()
        if delimiter is not None:
            options = options.with_delimiter(delimiter)
        if quote_char is not None:
            options = options.with_quote_char(quote_char)
        if no_quote:
            options = options.with_quote_char(None)
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e

    container = DependencyContainer(verbose=verbose, console=console, config=config)
    logger = container.create_logger()
    converter = container.create_converter()
    try:
        records = converter.convert_from_csv(cls, csv_file, options)
    except (ConversionError, DataSourceError) as e:
        if isinstance(e, DataSourceError):
            logger.error(str(e))
        raise click.ClickException(
            f"{csv_file.name} is not valid for {cls.__name__}"
        ) from e

    logger.success(f"{csv_file.name}: {len(records):,} valid {cls.__name__} records")
    logger.log_final_stats()
