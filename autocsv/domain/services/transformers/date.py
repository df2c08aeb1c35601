"""Date pattern support for date and datetime CSV columns.

Patterns use the ``SimpleDateFormat`` letters (``yyyy-MM-dd``, ``dd/MM/yyyy``,
``yyyy-MM-dd'T'HH:mm:ss.SSS``...). Text inside single quotes is literal.
"""

from dataclasses import dataclass
from datetime import date, datetime
from functools import lru_cache
import re

from ....constants import DatePatternLetters

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
TWO_DIGIT_YEAR_PIVOT = 69


@dataclass(frozen=True, slots=True)
class _Token:
    letter: str
    count: int = 0
    literal: str = ""

    @property
    def is_literal(self) -> bool:
        return not self.letter


def _tokenize(pattern: str) -> list[_Token]:
    tokens: list[_Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(_Token(letter="", literal="".join(literal)))
            literal.clear()

    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "'":
            if pattern[i + 1 : i + 2] == "'":
                literal.append("'")
                i += 2
                continue
            i += 1
            while True:
                if i >= len(pattern):
                    raise ValueError(f"Unterminated quote in date pattern '{pattern}'")
                if pattern[i] == "'":
                    if pattern[i + 1 : i + 2] == "'":
                        literal.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue
        if char.isascii() and char.isalpha():
            if char not in DatePatternLetters.SUPPORTED:
                raise ValueError(
                    f"Unsupported letter '{char}' in date pattern '{pattern}'"
                )
            count = 1
            while i + count < len(pattern) and pattern[i + count] == char:
                count += 1
            flush()
            tokens.append(_Token(letter=char, count=count))
            i += count
            continue
        literal.append(char)
        i += 1
    flush()
    return tokens


def _names_regex(names: tuple[str, ...]) -> str:
    return "(" + "|".join(re.escape(n) for n in names) + ")"


def _token_regex(token: _Token) -> str:
    letter, count = token.letter, token.count
    if token.is_literal:
        return re.escape(token.literal)
    if letter == "y":
        return "(\\d{2})" if count == 2 else f"(\\d{{1,{max(count, 4)}}})"
    if letter == "M" and count >= 4:
        return _names_regex(MONTH_NAMES)
    if letter == "M" and count == 3:
        return _names_regex(tuple(m[:3] for m in MONTH_NAMES))
    if letter == "S":
        return f"(\\d{{1,{max(count, 3)}}})"
    if letter == "a":
        return "(AM|PM)"
    if letter == "E":
        return _names_regex(DAY_NAMES + tuple(d[:3] for d in DAY_NAMES))
    return f"(\\d{{1,{max(count, 2)}}})"


@dataclass(frozen=True, slots=True)
class DatePattern:
    pattern: str
    tokens: tuple[_Token, ...]
    regex: re.Pattern[str]

    @property
    def has_time(self) -> bool:
        return any(t.letter in DatePatternLetters.TIME_LETTERS for t in self.tokens)

    def format(self, value: date) -> str:
        return "".join(self._format_token(token, value) for token in self.tokens)

    def parse(self, text: str) -> datetime:
        match = self.regex.fullmatch(text)
        if match is None:
            raise ValueError(f"'{text}' does not match date pattern '{self.pattern}'")
        parts = {"year": 1970, "month": 1, "day": 1, "hour": 0, "minute": 0}
        parts.update(second=0, microsecond=0)
        hour12: int | None = None
        pm = False
        groups = iter(match.groups())
        for token in self.tokens:
            if token.is_literal:
                continue
            raw = next(groups)
            letter = token.letter
            if letter == "y":
                year = int(raw)
                if token.count == 2:
                    year += 1900 if year >= TWO_DIGIT_YEAR_PIVOT else 2000
                parts["year"] = year
            elif letter == "M":
                parts["month"] = self._month_number(raw, token.count)
            elif letter == "d":
                parts["day"] = int(raw)
            elif letter == "H":
                parts["hour"] = int(raw)
            elif letter == "h":
                hour12 = int(raw)
            elif letter == "m":
                parts["minute"] = int(raw)
            elif letter == "s":
                parts["second"] = int(raw)
            elif letter == "S":
                parts["microsecond"] = int(raw) * 1000
            elif letter == "a":
                pm = raw.upper() == "PM"
        if hour12 is not None:
            if not 1 <= hour12 <= 12:
                raise ValueError(f"hour {hour12} out of range 1-12 in '{text}'")
            parts["hour"] = hour12 % 12 + (12 if pm else 0)
        return datetime(**parts)

    @staticmethod
    def _month_number(raw: str, count: int) -> int:
        if count < 3:
            return int(raw)
        lowered = raw.lower()
        for index, name in enumerate(MONTH_NAMES, start=1):
            if name.lower() == lowered or name[:3].lower() == lowered:
                return index
        raise ValueError(f"unknown month name '{raw}'")

    @staticmethod
    def _format_token(token: _Token, value: date) -> str:
        if token.is_literal:
            return token.literal
        letter, count = token.letter, token.count
        moment = value if isinstance(value, datetime) else None
        if letter == "y":
            if count == 2:
                return f"{value.year % 100:02d}"
            return str(value.year).zfill(count)
        if letter == "M":
            if count >= 4:
                return MONTH_NAMES[value.month - 1]
            if count == 3:
                return MONTH_NAMES[value.month - 1][:3]
            return str(value.month).zfill(count)
        if letter == "d":
            return str(value.day).zfill(count)
        if letter == "E":
            name = DAY_NAMES[value.weekday()]
            return name if count >= 4 else name[:3]
        hour = moment.hour if moment else 0
        if letter == "H":
            return str(hour).zfill(count)
        if letter == "h":
            return str(hour % 12 or 12).zfill(count)
        if letter == "a":
            return "PM" if hour >= 12 else "AM"
        if letter == "m":
            return str(moment.minute if moment else 0).zfill(count)
        if letter == "s":
            return str(moment.second if moment else 0).zfill(count)
        # S: milliseconds
        return str(moment.microsecond // 1000 if moment else 0).zfill(count)


@lru_cache(maxsize=128)
def compile_date_pattern(pattern: str) -> DatePattern:
    if not pattern:
        raise ValueError("Date pattern must not be empty")
    tokens = _tokenize(pattern)
    regex = re.compile("".join(_token_regex(t) for t in tokens), re.IGNORECASE)
    return DatePattern(pattern=pattern, tokens=tuple(tokens), regex=regex)
