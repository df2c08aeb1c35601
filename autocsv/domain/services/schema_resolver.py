"""Derive a RecordSchema from a record type's declared column metadata."""

from collections import Counter
from collections.abc import Callable, Sequence
import dataclasses
from datetime import date, datetime
from enum import Enum
import types
from typing import Any, Union, get_args, get_origin, get_type_hints

from ...constants import Defaults
from ..entities.column import COLUMN_METADATA_KEY, ColumnMeta
from ..entities.schema import FieldDescriptor, RecordSchema, ValueType
from ..exceptions import SchemaError
from .transformers.codec import ValueCodec
from .transformers.text import normalize_column_name

_SIMPLE_TYPES: dict[type, ValueType] = {
    str: ValueType.STRING,
    bool: ValueType.BOOLEAN,
    int: ValueType.LONG,
    float: ValueType.FLOAT,
    datetime: ValueType.DATETIME,
    date: ValueType.DATE,
}
_INTEGRAL = frozenset({ValueType.INTEGER, ValueType.LONG})


def value_type_for(annotation: Any) -> tuple[ValueType, type[Enum] | None]:
    """Map a field annotation to its ValueType, unwrapping ``X | None``."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            annotation = args[0]
    if isinstance(annotation, type) and get_origin(annotation) is None:
        if annotation in _SIMPLE_TYPES:
            return _SIMPLE_TYPES[annotation], None
        if issubclass(annotation, Enum):
            return ValueType.ENUM, annotation
    raise SchemaError(f"Unsupported type: {annotation!r}")


def check_unique_columns(descriptors: Sequence[FieldDescriptor], type_name: str) -> None:
    normalized = [normalize_column_name(d.column_name) for d in descriptors]
    blank = [d.column_name for d, n in zip(descriptors, normalized) if not n]
    if blank:
        raise SchemaError(
            f"Column name(s) with no letters or digits in {type_name}: {', '.join(blank)}"
        )
    duplicates = sorted(name for name, count in Counter(normalized).items() if count > 1)
    if duplicates:
        raise SchemaError(
            f"Duplicate column name(s) after normalization in {type_name}: "
            f"{', '.join(duplicates)}"
        )


class SchemaResolver:
    """Builds the ordered column schema of a dataclass record type.

    Fields are taken in declaration order. A field declared with
    ``column(ignore=True)`` is skipped; fields without metadata get all defaults.
    """

    def __init__(self, *, default_date_format: str = Defaults.DATE_FORMAT) -> None:
        self.default_date_format = default_date_format

    def resolve(self, record_type: type) -> RecordSchema:
        type_name = getattr(record_type, "__name__", repr(record_type))
        if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
            raise SchemaError(
                f"{type_name} is not a dataclass; describe it with SchemaBuilder instead"
            )
        try:
            hints = get_type_hints(record_type)
        except NameError as exc:
            raise SchemaError(f"Cannot resolve annotations of {type_name}: {exc}") from exc

        fields = dataclasses.fields(record_type)
        self._require_no_arg_construction(type_name, fields)

        descriptors: list[FieldDescriptor] = []
        for field in fields:
            meta = field.metadata.get(COLUMN_METADATA_KEY) or ColumnMeta()
            if meta.ignore:
                continue
            descriptor = self._describe(type_name, field.name, hints[field.name], meta)
            ValueCodec.validate(descriptor)
            descriptors.append(descriptor)

        check_unique_columns(descriptors, type_name)
        return RecordSchema(
            record_type=record_type, fields=tuple(descriptors), factory=record_type
        )

    def _describe(
        self, type_name: str, field_name: str, annotation: Any, meta: ColumnMeta
    ) -> FieldDescriptor:
        try:
            value_type, enum_type = value_type_for(annotation)
        except SchemaError as exc:
            raise SchemaError(f"{exc} for field {type_name}.{field_name}") from exc
        if meta.value_type is not None and meta.value_type is not value_type:
            if not {meta.value_type, value_type} <= _INTEGRAL:
                raise SchemaError(
                    f"value_type {meta.value_type} does not fit the annotation of "
                    f"{type_name}.{field_name}"
                )
            value_type = meta.value_type
        return FieldDescriptor(
            field_name=field_name,
            column_name=meta.name or field_name,
            value_type=value_type,
            required=meta.required,
            date_format=meta.date_format or self.default_date_format,
            number_format=meta.number_format,
            enum_type=enum_type,
        )

    @staticmethod
    def _require_no_arg_construction(
        type_name: str, fields: tuple[dataclasses.Field[Any], ...]
    ) -> None:
        missing = [
            f.name
            for f in fields
            if f.init
            and f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING
        ]
        if missing:
            raise SchemaError(
                f"{type_name} must be constructible without arguments; "
                f"field(s) without a default: {', '.join(missing)}"
            )


class SchemaBuilder:
    """Explicit schema description for record types that are not dataclasses.

    Example:
        >>> schema = (
        ...     SchemaBuilder(Person)
        ...     .add("first_name", ValueType.STRING, column_name="First Name", required=True)
        ...     .add("salary", ValueType.FLOAT, number_format="#,##0.00")
        ...     .build()
        ... )
    """

    def __init__(
        self,
        record_type: type,
        *,
        factory: Callable[[], Any] | None = None,
        default_date_format: str = Defaults.DATE_FORMAT,
    ) -> None:
        self.record_type = record_type
        self.factory = factory
        self.default_date_format = default_date_format
        self._fields: list[FieldDescriptor] = []

    def add(
        self,
        field_name: str,
        value_type: ValueType | str,
        *,
        column_name: str = "",
        required: bool = False,
        date_format: str = "",
        number_format: str = "",
        enum_type: type[Enum] | None = None,
        ignored: bool = False,
        getter: Callable[[Any], Any] | None = None,
        setter: Callable[[Any, Any], None] | None = None,
    ) -> "SchemaBuilder":
        if ignored:
            return self
        try:
            descriptor = FieldDescriptor(
                field_name=field_name,
                column_name=column_name or field_name,
                value_type=ValueType(value_type),
                required=required,
                date_format=date_format or self.default_date_format,
                number_format=number_format,
                enum_type=enum_type,
                getter=getter,
                setter=setter,
            )
        except ValueError as exc:
            raise SchemaError(f"Invalid column {field_name!r}: {exc}") from exc
        ValueCodec.validate(descriptor)
        self._fields.append(descriptor)
        return self

    def build(self) -> RecordSchema:
        check_unique_columns(self._fields, self.record_type.__name__)
        return RecordSchema(
            record_type=self.record_type,
            fields=tuple(self._fields),
            factory=self.factory,
        )
