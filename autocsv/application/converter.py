from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from ..constants import Defaults
from ..domain.entities.schema import RecordSchema
from ..domain.exceptions import ConversionError, SchemaError
from ..domain.services.header_reconciler import HeaderReconciler, ReconcileResult
from ..domain.services.row_materializer import RowMaterializer
from ..domain.services.schema_resolver import SchemaResolver
from ..domain.services.serializer import RecordSerializer
from .models import CSVOptions

if TYPE_CHECKING:
    from collections.abc import Iterable

    import pandas as pd

    from .ports.services import (
        FrameAdapterPort,
        LoggerPort,
        RowReaderPort,
        RowWriterPort,
    )

T = TypeVar("T")


@dataclass(slots=True)
class ConverterDependencies:
    logger: LoggerPort
    row_reader: RowReaderPort | None = None
    row_writer: RowWriterPort | None = None
    frame_adapter: FrameAdapterPort | None = None


class CSVConverter:
    """Converts record collections to CSV rows and back.

    Every call resolves the record schema once and reconciles the whole
    header before the first data row is touched. Any SchemaError or RowError
    aborts the call; no partial result is returned.
    """

    def __init__(
        self,
        dependencies: ConverterDependencies,
        *,
        default_date_format: str = Defaults.DATE_FORMAT,
        strict_headers: bool = False,
        options: CSVOptions | None = None,
    ) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._row_reader = dependencies.row_reader
        self._row_writer = dependencies.row_writer
        self._frame_adapter = dependencies.frame_adapter
        self.options = options or CSVOptions()
        self.resolver = SchemaResolver(default_date_format=default_date_format)
        self.strict_headers = strict_headers
        self._materializer = RowMaterializer()
        self._serializer = RecordSerializer(self.schema_for)

    def schema_for(self, record_type: type) -> RecordSchema:
        schema = self.resolver.resolve(record_type)
        self.logger.log_schema_resolved(schema.type_name, schema.column_names())
        return schema

    def reconcile_header(
        self, header: list[str], schema: RecordSchema
    ) -> ReconcileResult:
        reconciler = HeaderReconciler(strict=self.strict_headers, warn=self.logger.warning)
        result = reconciler.reconcile(header, schema)
        self.logger.log_header_reconciled(
            schema.type_name, result.mapped_columns, list(result.unknown_columns)
        )
        return result

    def serialize(
        self, records: Iterable[Any], schema: RecordSchema | None = None
    ) -> list[list[str]]:
        rows = self._serializer.serialize(records, schema)
        self.logger.debug(f"Serialized {len(rows) - 1:,} records")
        return rows

    def deserialize(
        self,
        record_type: type[T],
        rows: Iterable[list[str]],
        schema: RecordSchema | None = None,
    ) -> list[T]:
        if schema is None:
            schema = self.schema_for(record_type)
        iterator = iter(rows)
        header = next(iterator, None)
        if header is None:
            raise SchemaError("Empty CSV file")

        result = self.reconcile_header(header, schema)
        records: list[T] = []
        for row_number, row in enumerate(iterator, start=1):
            records.append(
                self._materializer.materialize(schema, row, result.mapping, row_number)
            )
        return records

    def convert_to_csv(
        self,
        records: Iterable[Any],
        file_path: str | Path,
        options: CSVOptions | None = None,
        *,
        schema: RecordSchema | None = None,
    ) -> int:
        writer = self._require(self._row_writer, "row writer")
        path = Path(file_path)
        rows = self.serialize(records, schema)
        written = writer.write_rows(path, rows, options or self.options)
        self.logger.log_rows_written(str(path), written - 1)
        return written - 1

    def convert_from_csv(
        self,
        record_type: type[T],
        file_path: str | Path,
        options: CSVOptions | None = None,
        *,
        schema: RecordSchema | None = None,
    ) -> list[T]:
        reader = self._require(self._row_reader, "row reader")
        path = Path(file_path)
        try:
            records = self.deserialize(
                record_type, reader.read_rows(path, options or self.options), schema
            )
        except ConversionError as exc:
            self.logger.error(f"{path.name}: {exc}")
            raise
        self.logger.log_rows_read(str(path), len(records))
        return records

    def to_frame(
        self, records: Iterable[Any], schema: RecordSchema | None = None
    ) -> pd.DataFrame:
        adapter = self._require(self._frame_adapter, "frame adapter")
        return adapter.rows_to_frame(self.serialize(records, schema))

    def from_frame(
        self,
        record_type: type[T],
        frame: pd.DataFrame,
        schema: RecordSchema | None = None,
    ) -> list[T]:
        adapter = self._require(self._frame_adapter, "frame adapter")
        records = self.deserialize(record_type, adapter.frame_to_rows(frame), schema)
        self.logger.log_rows_read("DataFrame", len(records))
        return records

    @staticmethod
    def _require(dependency: Any, name: str) -> Any:
        if dependency is None:
            raise RuntimeError(f"CSVConverter was created without a {name}")
        return dependency
