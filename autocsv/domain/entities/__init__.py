from .column import COLUMN_METADATA_KEY, ColumnMeta, column
from .schema import ColumnMapping, FieldDescriptor, RecordSchema, ValueType

__all__ = [
    "COLUMN_METADATA_KEY",
    "ColumnMapping",
    "ColumnMeta",
    "FieldDescriptor",
    "RecordSchema",
    "ValueType",
    "column",
]
