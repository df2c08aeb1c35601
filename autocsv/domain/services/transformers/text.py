import re

from ....constants import Patterns

_WHITESPACE_RE = re.compile(Patterns.WHITESPACE)
_NON_ALNUM_RE = re.compile(Patterns.NON_ALNUM)


def normalize_column_name(name: str) -> str:
    """Canonical form used to match header cells against column names.

    ``" Last_Name "`` and ``"last name"`` both normalize to ``"lastname"``.
    """
    text = name.strip().lower()
    text = _WHITESPACE_RE.sub("", text)
    return _NON_ALNUM_RE.sub("", text)
