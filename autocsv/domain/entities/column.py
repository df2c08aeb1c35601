"""Declarative per-field column metadata for dataclass record types.

Example:
    >>> @dataclass
    ... class Person:
    ...     first_name: str = column("First Name", required=True)
    ...     birth_date: date | None = column("Birth Date", date_format="dd/MM/yyyy")
    ...     internal_note: str | None = column(ignore=True)
"""

import dataclasses
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .schema import ValueType

COLUMN_METADATA_KEY = "autocsv.column"


class ColumnMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    required: bool = False
    date_format: str = ""
    number_format: str = ""
    ignore: bool = False
    value_type: ValueType | None = None

    @field_validator("name", "date_format", "number_format")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


def column(
    name: str = "",
    *,
    required: bool = False,
    date_format: str = "",
    number_format: str = "",
    ignore: bool = False,
    value_type: ValueType | str | None = None,
    default: Any = None,
    default_factory: Any = dataclasses.MISSING,
    **field_kwargs: Any,
) -> Any:
    """Declare a dataclass field together with its CSV column metadata.

    Works like ``dataclasses.field``; the default is ``None`` so that record
    types stay constructible without arguments.
    """
    meta = ColumnMeta(
        name=name,
        required=required,
        date_format=date_format,
        number_format=number_format,
        ignore=ignore,
        value_type=value_type,
    )
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[COLUMN_METADATA_KEY] = meta
    if default_factory is not dataclasses.MISSING:
        return dataclasses.field(
            default_factory=default_factory, metadata=metadata, **field_kwargs
        )
    return dataclasses.field(default=default, metadata=metadata, **field_kwargs)
