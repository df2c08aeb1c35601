from __future__ import annotations

import csv
from typing import TYPE_CHECKING

from .dialect import csv_format_params
from .exceptions import DataWriteError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ...application.models import CSVOptions


class CSVRowWriter:
    pass

    def write_rows(
        self, path: Path, rows: Iterable[list[str]], options: CSVOptions
    ) -> int:
        count = 0
        try:
            with path.open("w", newline="", encoding=options.encoding) as handle:
                writer = csv.writer(handle, **csv_format_params(options))
                for row in rows:
                    writer.writerow(row)
                    count += 1
        except csv.Error as e:
            raise DataWriteError(f"Failed to write CSV {path}: {e}") from e
        except OSError as e:
            raise DataWriteError(f"Cannot write {path}: {e}") from e
        return count
