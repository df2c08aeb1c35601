"""Typed value <-> CSV cell text conversion, driven by a field descriptor."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from functools import cache
import re
from typing import Any

from ....constants import BooleanText, Constraints, Patterns
from ...entities.schema import FieldDescriptor, ValueType
from ...exceptions import ParseError, SchemaError
from .date import compile_date_pattern
from .numeric import compile_number_pattern, parse_non_finite

_INTEGER_RE = re.compile(Patterns.INTEGER_LITERAL)
_DECIMAL_RE = re.compile(Patterns.DECIMAL_LITERAL)

_INTEGER_RANGES = {
    ValueType.INTEGER: (Constraints.INTEGER_MIN, Constraints.INTEGER_MAX),
    ValueType.LONG: (Constraints.LONG_MIN, Constraints.LONG_MAX),
}


@cache
def enum_members(enum_type: type[Enum]) -> Mapping[str, Enum]:
    """Static name -> member table for one enumeration type."""
    return dict(enum_type.__members__)


class ValueCodec:
    """Parses trimmed cell text into typed values and formats them back."""

    @staticmethod
    def validate(descriptor: FieldDescriptor) -> None:
        """Compile the descriptor's patterns so bad ones fail before any row."""
        try:
            if descriptor.value_type.is_temporal:
                compile_date_pattern(descriptor.date_format)
            if descriptor.value_type.is_numeric and descriptor.number_format:
                compile_number_pattern(descriptor.number_format)
        except ValueError as exc:
            raise SchemaError(
                f"Invalid format for column {descriptor.column_name}: {exc}"
            ) from exc

    @staticmethod
    def parse(text: str, descriptor: FieldDescriptor) -> Any:
        value_type = descriptor.value_type
        try:
            if value_type is ValueType.STRING:
                return text
            if value_type in _INTEGER_RANGES:
                return ValueCodec._parse_integer(text, descriptor)
            if value_type is ValueType.FLOAT:
                return ValueCodec._parse_float(text, descriptor)
            if value_type is ValueType.BOOLEAN:
                return text.lower() == BooleanText.TRUE
            if value_type is ValueType.DATE:
                return compile_date_pattern(descriptor.date_format).parse(text).date()
            if value_type is ValueType.DATETIME:
                return compile_date_pattern(descriptor.date_format).parse(text)
            if value_type is ValueType.ENUM:
                return ValueCodec._parse_enum(text, descriptor)
        except ValueError as exc:
            raise ParseError(str(exc)) from exc
        raise SchemaError(f"Unsupported type: {value_type}")

    @staticmethod
    def format(value: Any, descriptor: FieldDescriptor) -> str:
        if value is None:
            return ""
        value_type = descriptor.value_type
        if value_type.is_numeric and descriptor.number_format:
            return compile_number_pattern(descriptor.number_format).format(value)
        if value_type is ValueType.FLOAT:
            return repr(float(value))
        if value_type in _INTEGER_RANGES:
            return str(int(value))
        if value_type is ValueType.BOOLEAN:
            return BooleanText.TRUE if value else BooleanText.FALSE
        if value_type.is_temporal and isinstance(value, date):
            return compile_date_pattern(descriptor.date_format).format(value)
        if isinstance(value, Enum):
            return value.name
        return str(value)

    @staticmethod
    def _parse_integer(text: str, descriptor: FieldDescriptor) -> int:
        if descriptor.number_format:
            number = compile_number_pattern(descriptor.number_format).parse(text)
            if not number.is_finite():
                raise ValueError(f"'{text}' is not a valid integer")
            if number != number.to_integral_value():
                raise ValueError(f"'{text}' is not a whole number")
            value = int(number)
        elif _INTEGER_RE.match(text):
            value = int(text)
        else:
            raise ValueError(f"'{text}' is not a valid integer")
        low, high = _INTEGER_RANGES[descriptor.value_type]
        if not low <= value <= high:
            raise ValueError(f"{value} is out of range for {descriptor.value_type}")
        return value

    @staticmethod
    def _parse_float(text: str, descriptor: FieldDescriptor) -> float:
        if descriptor.number_format:
            number: Decimal = compile_number_pattern(descriptor.number_format).parse(text)
            return float(number)
        special = parse_non_finite(text)
        if special is not None:
            return float(special)
        cleaned = text.replace(",", "")
        if not _DECIMAL_RE.match(cleaned):
            raise ValueError(f"'{text}' is not a valid number")
        return float(cleaned)

    @staticmethod
    def _parse_enum(text: str, descriptor: FieldDescriptor) -> Enum:
        assert descriptor.enum_type is not None
        member = enum_members(descriptor.enum_type).get(text)
        if member is None:
            allowed = ", ".join(enum_members(descriptor.enum_type))
            raise ValueError(
                f"'{text}' is not a member of {descriptor.enum_type.__name__} ({allowed})"
            )
        return member

