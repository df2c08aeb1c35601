from typing import Self

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..constants import Defaults


class CSVOptions(BaseModel):
    """Tokenizer settings shared by the row reader and the row writer.

    ``quote_char=None`` disables quoting and ``escape_char=None`` disables
    escaping.
    """

    model_config = ConfigDict(frozen=True)

    delimiter: str = Defaults.DELIMITER
    quote_char: str | None = Defaults.QUOTE_CHAR
    escape_char: str | None = None
    line_terminator: str = Defaults.LINE_TERMINATOR
    encoding: str = Defaults.ENCODING

    @field_validator("delimiter")
    @classmethod
    def _single_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        return value

    @field_validator("quote_char", "escape_char")
    @classmethod
    def _single_char_or_none(cls, value: str | None) -> str | None:
        if value is None or value == "":
            return None
        if len(value) != 1:
            raise ValueError(f"must be a single character, got {value!r}")
        return value

    @field_validator("line_terminator")
    @classmethod
    def _non_empty_terminator(cls, value: str) -> str:
        if not value:
            raise ValueError("line_terminator must not be empty")
        return value

    @model_validator(mode="after")
    def _distinct_characters(self) -> Self:
        if self.delimiter in (self.quote_char, self.escape_char):
            raise ValueError("delimiter must differ from quote_char and escape_char")
        return self

    @classmethod
    def default_options(cls) -> "CSVOptions":
        return cls()

    def with_delimiter(self, delimiter: str) -> "CSVOptions":
        return self.model_validate({**self.model_dump(), "delimiter": delimiter})

    def with_quote_char(self, quote_char: str | None) -> "CSVOptions":
        return self.model_validate({**self.model_dump(), "quote_char": quote_char})

    def with_escape_char(self, escape_char: str | None) -> "CSVOptions":
        return self.model_validate({**self.model_dump(), "escape_char": escape_char})

    def with_line_terminator(self, line_terminator: str) -> "CSVOptions":
        return self.model_validate(
            {**self.model_dump(), "line_terminator": line_terminator}
        )
