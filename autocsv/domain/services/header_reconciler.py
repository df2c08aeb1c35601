from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..entities.schema import ColumnMapping, FieldDescriptor, RecordSchema
from ..exceptions import SchemaError
from .transformers.text import normalize_column_name


def _ignore(message: str) -> None:
    return None


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    mapping: ColumnMapping
    unknown_columns: tuple[str, ...] = ()
    duplicate_columns: tuple[str, ...] = ()

    @property
    def mapped_columns(self) -> int:
        return len(self.mapping)


class HeaderReconciler:
    """Matches a header row against a record schema.

    Names are compared after normalization, so ``"Last_Name"`` matches a
    column declared as ``"Last Name"``. Missing required columns are fatal;
    unknown and repeated header cells are only reported through ``warn``.
    """

    def __init__(
        self,
        *,
        strict: bool = False,
        warn: Callable[[str], None] | None = None,
    ) -> None:
        self.strict = strict
        self.warn = warn or _ignore

    def reconcile(
        self, header: Sequence[str], schema: RecordSchema
    ) -> ReconcileResult:
        if len(header) == 0:
            raise SchemaError("CSV file has no headers")

        normalized_header = [normalize_column_name(cell) for cell in header]
        by_name: dict[str, FieldDescriptor] = {}
        for descriptor in schema:
            by_name.setdefault(normalize_column_name(descriptor.column_name), descriptor)

        present = set(normalized_header)
        missing = [
            descriptor.column_name
            for descriptor in schema.required_fields()
            if normalize_column_name(descriptor.column_name) not in present
        ]
        if missing:
            raise SchemaError(f"Required column(s) missing in CSV: {', '.join(missing)}")

        columns: dict[int, FieldDescriptor] = {}
        unknown: list[str] = []
        duplicates: list[str] = []
        seen: set[str] = set()
        for index, (cell, key) in enumerate(zip(header, normalized_header)):
            descriptor = by_name.get(key)
            if descriptor is None:
                unknown.append(cell)
            elif key in seen:
                duplicates.append(cell)
            else:
                seen.add(key)
                columns[index] = descriptor

        if self.strict and unknown:
            raise SchemaError(f"Unknown column(s) in CSV: {', '.join(unknown)}")
        for cell in unknown:
            self.warn(f"Unknown column in CSV: {cell}")
        for cell in duplicates:
            self.warn(f"Duplicate column in CSV ignored: {cell}")

        return ReconcileResult(
            mapping=ColumnMapping(columns),
            unknown_columns=tuple(unknown),
            duplicate_columns=tuple(duplicates),
        )
