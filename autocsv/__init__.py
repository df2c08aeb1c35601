"""autocsv package.

Converts collections of typed records to delimited text with a header row
and back, driven by per-field column metadata.

Features:
- Column schemas derived from dataclass fields and ``column()`` metadata
- Case/punctuation-insensitive header matching with required-column checks
- Number patterns (``#,##0.00``) and date patterns (``dd/MM/yyyy``)
- CSV file and pandas DataFrame round-trips
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("autocsv")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from rich.console import Console

from autocsv.application.converter import CSVConverter, ConverterDependencies
from autocsv.application.models import CSVOptions
from autocsv.config import ConfigLoader, ConverterConfig
from autocsv.domain.entities import (
    ColumnMapping,
    ColumnMeta,
    FieldDescriptor,
    RecordSchema,
    ValueType,
    column,
)
from autocsv.domain.exceptions import ConversionError, ParseError, RowError, SchemaError
from autocsv.domain.services import SchemaBuilder, SchemaResolver
from autocsv.infrastructure.container import DependencyContainer


def create_converter(
    *,
    verbose: int = 0,
    console: Console | None = None,
    config: ConverterConfig | None = None,
    quiet: bool = False,
) -> CSVConverter:
    """Build a converter wired with the CSV, DataFrame and console adapters."""
    container = DependencyContainer(
        verbose=verbose, console=console, use_null_logger=quiet, config=config
    )
    return container.create_converter()


__all__ = [
    "__version__",
    # Conversion
    "CSVConverter",
    "CSVOptions",
    "ConverterDependencies",
    "create_converter",
    # Schema
    "ColumnMapping",
    "ColumnMeta",
    "FieldDescriptor",
    "RecordSchema",
    "SchemaBuilder",
    "SchemaResolver",
    "ValueType",
    "column",
    # Configuration
    "ConfigLoader",
    "ConverterConfig",
    # Errors
    "ConversionError",
    "ParseError",
    "RowError",
    "SchemaError",
]
