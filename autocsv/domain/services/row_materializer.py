from collections.abc import Sequence
from typing import Any

from ..entities.schema import ColumnMapping, RecordSchema
from ..exceptions import ParseError, RowError, SchemaError
from .transformers.codec import ValueCodec


class RowMaterializer:
    """Builds one record from one data row using a reconciled column mapping."""

    def materialize(
        self,
        schema: RecordSchema,
        row: Sequence[str],
        mapping: ColumnMapping,
        row_number: int,
    ) -> Any:
        record = self._new_record(schema)
        for index, descriptor in mapping.items():
            column_name = descriptor.column_name
            if index >= len(row):
                if descriptor.required:
                    raise RowError(
                        f"Missing required field {column_name} at row {row_number}",
                        row_number=row_number,
                        column_name=column_name,
                    )
                continue

            text = (row[index] or "").strip()
            if not text:
                if descriptor.required:
                    raise RowError(
                        f"Required field {column_name} is empty at row {row_number}",
                        row_number=row_number,
                        column_name=column_name,
                        value=text,
                    )
                continue

            try:
                value = ValueCodec.parse(text, descriptor)
            except ParseError as exc:
                raise RowError(
                    f"Error parsing value '{text}' at row {row_number} "
                    f"for column {column_name}: {exc}",
                    row_number=row_number,
                    column_name=column_name,
                    value=text,
                ) from exc
            descriptor.write(record, value)
        return record

    @staticmethod
    def _new_record(schema: RecordSchema) -> Any:
        try:
            return schema.create_instance()
        except TypeError as exc:
            raise SchemaError(
                f"Cannot construct {schema.type_name} without arguments: {exc}"
            ) from exc
