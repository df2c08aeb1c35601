from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import Any

from ...constants import Defaults


class ValueType(StrEnum):
    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    ENUM = "enum"

    @property
    def is_numeric(self) -> bool:
        return self in (ValueType.INTEGER, ValueType.LONG, ValueType.FLOAT)

    @property
    def is_temporal(self) -> bool:
        return self in (ValueType.DATE, ValueType.DATETIME)


def _read_attribute(name: str) -> Callable[[Any], Any]:
    def getter(record: Any) -> Any:
        return getattr(record, name)

    return getter


def _write_attribute(name: str) -> Callable[[Any, Any], None]:
    def setter(record: Any, value: Any) -> None:
        # object.__setattr__ also covers frozen dataclasses
        object.__setattr__(record, name, value)

    return setter


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """How one record field maps to one CSV column."""

    field_name: str
    column_name: str
    value_type: ValueType
    required: bool = False
    date_format: str = Defaults.DATE_FORMAT
    number_format: str = ""
    ignored: bool = False
    enum_type: type[Enum] | None = None
    getter: Callable[[Any], Any] | None = field(default=None, compare=False)
    setter: Callable[[Any, Any], None] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.column_name:
            raise ValueError(f"column_name must not be empty for {self.field_name!r}")
        if self.value_type is ValueType.ENUM and self.enum_type is None:
            raise ValueError(f"enum field {self.field_name!r} needs an enum_type")
        if self.getter is None:
            object.__setattr__(self, "getter", _read_attribute(self.field_name))
        if self.setter is None:
            object.__setattr__(self, "setter", _write_attribute(self.field_name))

    def read(self, record: Any) -> Any:
        assert self.getter is not None
        return self.getter(record)

    def write(self, record: Any, value: Any) -> None:
        assert self.setter is not None
        self.setter(record, value)


@dataclass(frozen=True, slots=True)
class RecordSchema:
    record_type: type
    fields: tuple[FieldDescriptor, ...]
    factory: Callable[[], Any] | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    @property
    def type_name(self) -> str:
        return self.record_type.__name__

    def column_names(self) -> list[str]:
        return [f.column_name for f in self.fields]

    def required_fields(self) -> list[FieldDescriptor]:
        return [f for f in self.fields if f.required]

    def create_instance(self) -> Any:
        if self.factory is not None:
            return self.factory()
        return self.record_type()


@dataclass(frozen=True, slots=True)
class ColumnMapping:
    """Header column index (0-based) to field descriptor, in header order."""

    columns: dict[int, FieldDescriptor]

    def __len__(self) -> int:
        return len(self.columns)

    def items(self) -> list[tuple[int, FieldDescriptor]]:
        return sorted(self.columns.items())

    def get(self, index: int) -> FieldDescriptor | None:
        return self.columns.get(index)

    def mapped_fields(self) -> list[FieldDescriptor]:
        return [descriptor for _, descriptor in self.items()]
