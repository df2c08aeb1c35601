from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    import pandas as pd

    from ..models import CSVOptions


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_schema_resolved(self, type_name: str, columns: list[str]) -> None: ...

    def log_header_reconciled(
        self, type_name: str, mapped_count: int, unknown_columns: list[str]
    ) -> None: ...

    def log_rows_read(self, source: str, row_count: int) -> None: ...

    def log_rows_written(self, target: str, row_count: int) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class RowReaderPort(Protocol):
    pass

    def read_rows(self, path: Path, options: CSVOptions) -> Iterator[list[str]]: ...


@runtime_checkable
class RowWriterPort(Protocol):
    pass

    def write_rows(
        self, path: Path, rows: Iterable[list[str]], options: CSVOptions
    ) -> int: ...


@runtime_checkable
class FrameAdapterPort(Protocol):
    pass

    def rows_to_frame(self, rows: list[list[str]]) -> pd.DataFrame: ...

    def frame_to_rows(self, frame: pd.DataFrame) -> Iterator[list[str]]: ...
