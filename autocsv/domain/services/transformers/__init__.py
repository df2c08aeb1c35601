"""Value transformers between typed field values and CSV cell text."""

from .codec import ValueCodec, enum_members
from .date import DatePattern, compile_date_pattern
from .numeric import NumberPattern, compile_number_pattern
from .text import normalize_column_name

__all__ = [
    "DatePattern",
    "NumberPattern",
    "ValueCodec",
    "compile_date_pattern",
    "compile_number_pattern",
    "enum_members",
    "normalize_column_name",
]
