from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .application.models import CSVOptions
from .constants import Defaults

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    default_date_format: str = Defaults.DATE_FORMAT
    delimiter: str = Defaults.DELIMITER
    quote_char: str | None = Defaults.QUOTE_CHAR
    escape_char: str | None = None
    line_terminator: str = Defaults.LINE_TERMINATOR
    encoding: str = Defaults.ENCODING
    strict_headers: bool = False

    def __post_init__(self) -> None:
        if not self.default_date_format.strip():
            raise ValueError("default_date_format must not be empty")
        if len(self.delimiter) != 1:
            raise ValueError(
                f"delimiter must be a single character, got {self.delimiter!r}"
            )
        if self.quote_char is not None and len(self.quote_char) != 1:
            raise ValueError(
                f"quote_char must be a single character or None, got {self.quote_char!r}"
            )
        if self.escape_char is not None and len(self.escape_char) != 1:
            raise ValueError(
                f"escape_char must be a single character or None, got {self.escape_char!r}"
            )
        if not self.line_terminator:
            raise ValueError("line_terminator must not be empty")

    def csv_options(self) -> CSVOptions:
        return CSVOptions(
            delimiter=self.delimiter,
            quote_char=self.quote_char,
            escape_char=self.escape_char,
            line_terminator=self.line_terminator,
            encoding=self.encoding,
        )

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        return cls(
            default_date_format=os.getenv("AUTOCSV_DATE_FORMAT", Defaults.DATE_FORMAT),
            delimiter=os.getenv("AUTOCSV_DELIMITER", Defaults.DELIMITER),
            quote_char=_optional_char(os.getenv("AUTOCSV_QUOTE_CHAR", Defaults.QUOTE_CHAR)),
            escape_char=_optional_char(os.getenv("AUTOCSV_ESCAPE_CHAR")),
            encoding=os.getenv("AUTOCSV_ENCODING", Defaults.ENCODING),
            strict_headers=os.getenv("AUTOCSV_STRICT_HEADERS", "").strip().lower()
            in _TRUE_VALUES,
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ConverterConfig:
        config = ConverterConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ConverterConfig
    ) -> ConverterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        csv_section = _get_table(data, "csv")
        schema_section = _get_table(data, "schema")

        delimiter = base_config.delimiter
        if (value := csv_section.get("delimiter")) is not None:
            delimiter = str(value)
        quote_char = base_config.quote_char
        if "quote_char" in csv_section:
            quote_char = _optional_char(csv_section.get("quote_char"))
        escape_char = base_config.escape_char
        if "escape_char" in csv_section:
            escape_char = _optional_char(csv_section.get("escape_char"))
        line_terminator = base_config.line_terminator
        if (value := csv_section.get("line_terminator")) is not None:
            line_terminator = str(value)
        encoding = base_config.encoding
        if (value := csv_section.get("encoding")) is not None:
            encoding = str(value)
        default_date_format = base_config.default_date_format
        if (value := schema_section.get("default_date_format")) is not None:
            default_date_format = str(value)
        strict_headers = base_config.strict_headers
        if (value := schema_section.get("strict_headers")) is not None:
            strict_headers = _coerce_bool(value, key="schema.strict_headers")
        return ConverterConfig(
            default_date_format=default_date_format,
            delimiter=delimiter,
            quote_char=quote_char,
            escape_char=escape_char,
            line_terminator=line_terminator,
            encoding=encoding,
            strict_headers=strict_headers,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _optional_char(value: object) -> str | None:
    if value is None or value is False:
        return None
    text = str(value)
    return text or None


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    raise ValueError(f"{key} must be a boolean, got {type(value).__name__}")
