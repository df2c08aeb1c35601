from dataclasses import dataclass
from enum import IntEnum
from typing import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...constants import LogLevels


class LogLevel(IntEnum):
    NORMAL = LogLevels.NORMAL
    VERBOSE = LogLevels.VERBOSE
    DEBUG = LogLevels.DEBUG


@dataclass(slots=True)
class LogContext:
    record_type: str = ""


def _empty_stats() -> dict[str, int]:
    return {
        "schemas_resolved": 0,
        "rows_read": 0,
        "rows_written": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(escape(f"{prefix}{message}"))

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{escape(prefix + message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{escape(prefix + message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_schema_resolved(self, type_name: str, columns: list[str]) -> None:
        self.set_context(record_type=type_name)
        self._stats["schemas_resolved"] += 1
        self.verbose(f"Resolved schema for {type_name}: {len(columns)} columns")
        if self.verbosity >= LogLevel.DEBUG:
            self.debug(f"  Columns: {', '.join(columns)}")

    @override
    def log_header_reconciled(
        self, type_name: str, mapped_count: int, unknown_columns: list[str]
    ) -> None:
        msg = f"Header matched {mapped_count} column(s) of {type_name}"
        if unknown_columns:
            msg += f" ({len(unknown_columns)} unknown)"
        self.verbose(msg)

    @override
    def log_rows_read(self, source: str, row_count: int) -> None:
        self._stats["rows_read"] += row_count
        self.verbose(f"Read {row_count:,} records from {source}")

    @override
    def log_rows_written(self, target: str, row_count: int) -> None:
        self._stats["rows_written"] += row_count
        self.verbose(f"Wrote {row_count:,} records to {target}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Conversion Statistics:[/dim]")
            self.console.print(
                f"[dim]  Schemas resolved: {self._stats['schemas_resolved']}[/dim]"
            )
            self.console.print(f"[dim]  Rows read: {self._stats['rows_read']:,}[/dim]")
            self.console.print(
                f"[dim]  Rows written: {self._stats['rows_written']:,}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        return f"[{self._context.record_type}] " if self._context.record_type else ""
