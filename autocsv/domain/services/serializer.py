from collections.abc import Callable, Iterable
from itertools import chain
from typing import Any

from ..entities.schema import RecordSchema
from ..exceptions import SchemaError
from .schema_resolver import SchemaResolver
from .transformers.codec import ValueCodec


class RecordSerializer:
    """Turns a record collection into a header row plus one row per record.

    Columns come from the runtime type of the first record, so the
    collection must not be empty.
    """

    def __init__(
        self, resolve: Callable[[type], RecordSchema] | None = None
    ) -> None:
        self.resolve = resolve or SchemaResolver().resolve

    def serialize(
        self, records: Iterable[Any], schema: RecordSchema | None = None
    ) -> list[list[str]]:
        iterator = iter(records)
        try:
            first = next(iterator)
        except StopIteration:
            raise SchemaError("No data to convert") from None
        if schema is None:
            schema = self.resolve(type(first))

        rows = [schema.column_names()]
        rows.extend(self.format_record(record, schema) for record in chain([first], iterator))
        return rows

    @staticmethod
    def format_record(record: Any, schema: RecordSchema) -> list[str]:
        cells: list[str] = []
        for descriptor in schema:
            try:
                value = descriptor.read(record)
            except AttributeError as exc:
                raise SchemaError(
                    f"Record of type {type(record).__name__} has no field "
                    f"{descriptor.field_name} declared by {schema.type_name}"
                ) from exc
            cells.append(ValueCodec.format(value, descriptor))
        return cells
