"""Schema command - show the column schema derived from a record type."""

from __future__ import annotations

import click
from rich.console import Console

from ...config import ConfigLoader
from ...domain.exceptions import SchemaError
from ...domain.services.schema_resolver import SchemaResolver
from ..presenters.schema_table import SchemaPresenter
from ..utils import load_record_type

console = Console()


@click.command()
@click.argument("record_type")
@click.option(
    "--date-format",
    default=None,
    help="Date pattern for date fields without one (default: from config)",
)
def schema_command(record_type: str, date_format: str | None) -> None:
    """Show the CSV columns derived from RECORD_TYPE.

    RECORD_TYPE is an importable dataclass given as MODULE:CLASS.

    Examples:

    \b
        autocsv schema myapp.models:Person
        autocsv schema myapp.models:Person --date-format dd/MM/yyyy
    """
    config = ConfigLoader.load()
    cls = load_record_type(record_type)
    resolver = SchemaResolver(
        default_date_format=date_format or config.default_date_format
    )
    try:
        schema = resolver.resolve(cls)
    except SchemaError as e:
        raise click.ClickException(str(e)) from e
    SchemaPresenter(console).present(schema)
