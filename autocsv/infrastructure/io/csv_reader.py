from __future__ import annotations

import csv
from typing import TYPE_CHECKING

from .dialect import csv_format_params
from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from ...application.models import CSVOptions


class CSVRowReader:
    pass

    def read_rows(self, path: Path, options: CSVOptions) -> Iterator[list[str]]:
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        return self._iter_rows(path, options)

    @staticmethod
    def _iter_rows(path: Path, options: CSVOptions) -> Iterator[list[str]]:
        try:
            with path.open(newline="", encoding=options.encoding) as handle:
                reader = csv.reader(handle, **csv_format_params(options))
                yield from reader
        except csv.Error as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
