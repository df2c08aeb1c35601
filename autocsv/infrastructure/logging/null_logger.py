from typing import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_schema_resolved(self, type_name: str, columns: list[str]) -> None:
        return None

    @override
    def log_header_reconciled(
        self, type_name: str, mapped_count: int, unknown_columns: list[str]
    ) -> None:
        return None

    @override
    def log_rows_read(self, source: str, row_count: int) -> None:
        return None

    @override
    def log_rows_written(self, target: str, row_count: int) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
