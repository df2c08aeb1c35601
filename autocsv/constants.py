from typing import ClassVar


class Defaults:
    DATE_FORMAT = "yyyy-MM-dd"
    DELIMITER = ","
    QUOTE_CHAR = '"'
    LINE_TERMINATOR = "\n"
    ENCODING = "utf-8"
    CONFIG_FILE = "autocsv.toml"


class Constraints:
    INTEGER_MIN = -(2**31)
    INTEGER_MAX = 2**31 - 1
    LONG_MIN = -(2**63)
    LONG_MAX = 2**63 - 1


class Patterns:
    NON_ALNUM = "[^a-z0-9]"
    WHITESPACE = "\\s+"
    INTEGER_LITERAL = "^[+-]?\\d+$"
    DECIMAL_LITERAL = "^[+-]?(?:\\d+\\.?\\d*|\\.\\d+)(?:[eE][+-]?\\d+)?$"
    UNSIGNED_DECIMAL_LITERAL = "^(?:\\d+\\.?\\d*|\\.\\d+)(?:[eE][+-]?\\d+)?$"


class BooleanText:
    TRUE = "true"
    FALSE = "false"


class NonFiniteText:
    INFINITY = "inf"
    NEGATIVE_INFINITY = "-inf"
    NAN = "nan"


class DatePatternLetters:
    SUPPORTED: ClassVar[frozenset[str]] = frozenset("yMdHhmsSaE")
    TIME_LETTERS: ClassVar[frozenset[str]] = frozenset("HhmsSa")


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
