"""Number pattern support for numeric CSV columns.

Patterns follow the familiar ``DecimalFormat`` subset: ``#`` and ``0`` digit
placeholders, ``,`` for grouping, ``.`` for the decimal point, an optional
literal prefix/suffix and a trailing ``%`` that scales the value by 100.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from functools import lru_cache
import re

from ....constants import NonFiniteText, Patterns

_DIGIT_CHARS = frozenset("#0,.")
_UNSIGNED_DECIMAL_RE = re.compile(Patterns.UNSIGNED_DECIMAL_LITERAL)
_NON_FINITE = {
    NonFiniteText.INFINITY: Decimal("Infinity"),
    "+" + NonFiniteText.INFINITY: Decimal("Infinity"),
    NonFiniteText.NEGATIVE_INFINITY: Decimal("-Infinity"),
    NonFiniteText.NAN: Decimal("NaN"),
}


@dataclass(frozen=True, slots=True)
class NumberPattern:
    pattern: str
    prefix: str = ""
    suffix: str = ""
    grouping_size: int = 0
    min_integer_digits: int = 1
    min_fraction_digits: int = 0
    max_fraction_digits: int = 0
    multiplier: int = 1

    def format(self, value: int | float | Decimal) -> str:
        number = _to_decimal(value)
        if not number.is_finite():
            return non_finite_text(number)
        number *= self.multiplier
        quantum = Decimal(1).scaleb(-self.max_fraction_digits)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, number.adjusted() + self.max_fraction_digits + 2)
            rounded = abs(number).quantize(quantum, rounding=ROUND_HALF_EVEN)
        int_text, _, frac_text = format(rounded, "f").partition(".")

        frac_text = frac_text.rstrip("0").ljust(self.min_fraction_digits, "0")
        int_text = int_text.lstrip("0")
        if self.min_integer_digits:
            int_text = int_text.zfill(self.min_integer_digits)
        if not int_text and not frac_text:
            int_text = "0"
        if self.grouping_size and int_text:
            int_text = _group(int_text, self.grouping_size)

        body = f"{int_text}.{frac_text}" if frac_text else int_text
        sign = "-" if number < 0 and rounded != 0 else ""
        return f"{sign}{self.prefix}{body}{self.suffix}"

    def parse(self, text: str) -> Decimal:
        special = parse_non_finite(text)
        if special is not None:
            return special
        raw = text.strip()
        negative = raw.startswith("-")
        if raw.startswith(("+", "-")):
            raw = raw[1:]
        if self.prefix and raw.startswith(self.prefix):
            raw = raw[len(self.prefix) :]
        if self.suffix and raw.endswith(self.suffix):
            raw = raw[: -len(self.suffix)]
        raw = raw.replace(",", "").strip()
        if not _UNSIGNED_DECIMAL_RE.match(raw):
            raise ValueError(f"'{text}' does not match number pattern '{self.pattern}'")
        number = Decimal(raw) / self.multiplier
        return -number if negative else number


def non_finite_text(number: Decimal) -> str:
    """Spelling used for infinities and NaN, matching Python's float repr."""
    if number.is_nan():
        return NonFiniteText.NAN
    return NonFiniteText.NEGATIVE_INFINITY if number < 0 else NonFiniteText.INFINITY


def parse_non_finite(text: str) -> Decimal | None:
    return _NON_FINITE.get(text.strip().lower())


def _to_decimal(value: int | float | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() gives the shortest repr, avoiding binary noise like 0.1000000000000000055
        return Decimal(str(value))
    return Decimal(int(value))


def _group(digits: str, size: int) -> str:
    head = len(digits) % size or size
    groups = [digits[:head]]
    groups.extend(digits[i : i + size] for i in range(head, len(digits), size))
    return ",".join(groups)


def _split_affixes(pattern: str) -> tuple[str, str, str]:
    prefix: list[str] = []
    body: list[str] = []
    suffix: list[str] = []
    target = prefix
    in_quote = False
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "'":
            if i + 1 < len(pattern) and pattern[i + 1] == "'":
                target.append("'")
                i += 2
                continue
            in_quote = not in_quote
            i += 1
            continue
        if not in_quote and char in _DIGIT_CHARS:
            if target is suffix:
                raise ValueError(f"Malformed number pattern '{pattern}'")
            target = body
            body.append(char)
        else:
            if target is body:
                target = suffix
            target.append(char)
        i += 1
    if in_quote:
        raise ValueError(f"Unterminated quote in number pattern '{pattern}'")
    return "".join(prefix), "".join(body), "".join(suffix)


@lru_cache(maxsize=128)
def compile_number_pattern(pattern: str) -> NumberPattern:
    positive = pattern.split(";", 1)[0]
    prefix, body, suffix = _split_affixes(positive)
    if not body or not any(c in "#0" for c in body):
        raise ValueError(f"Number pattern '{pattern}' has no digit placeholders")
    if body.count(".") > 1:
        raise ValueError(f"Number pattern '{pattern}' has more than one decimal point")

    int_part, _, frac_part = body.partition(".")
    if "," in frac_part:
        raise ValueError(f"Grouping separator after decimal point in '{pattern}'")

    grouping_size = 0
    if "," in int_part:
        grouping_size = len(int_part) - int_part.rindex(",") - 1
        if grouping_size == 0:
            raise ValueError(f"Number pattern '{pattern}' ends with a grouping separator")

    multiplier = 100 if "%" in prefix or "%" in suffix else 1
    return NumberPattern(
        pattern=pattern,
        prefix=prefix,
        suffix=suffix,
        grouping_size=grouping_size,
        min_integer_digits=int_part.count("0"),
        min_fraction_digits=frac_part.count("0"),
        max_fraction_digits=len(frac_part),
        multiplier=multiplier,
    )

