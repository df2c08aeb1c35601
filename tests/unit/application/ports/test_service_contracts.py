"""Contract tests for service port interfaces.

These tests verify that the infrastructure implementations satisfy the
port protocols the application layer depends on.
"""

from autocsv.application.ports.services import (
    FrameAdapterPort,
    LoggerPort,
    RowReaderPort,
    RowWriterPort,
)
from autocsv.infrastructure.io import CSVRowReader, CSVRowWriter, FrameAdapter
from autocsv.infrastructure.logging import ConsoleLogger, NullLogger


class MockLogger:
    """Mock logger for testing protocol compliance."""

    def __init__(self):
        self.messages = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def verbose(self, message: str) -> None:
        self.messages.append(("verbose", message))

    def log_schema_resolved(self, type_name: str, columns: list[str]) -> None:
        self.messages.append(("log_schema_resolved", type_name))

    def log_header_reconciled(
        self, type_name: str, mapped_count: int, unknown_columns: list[str]
    ) -> None:
        self.messages.append(("log_header_reconciled", mapped_count))

    def log_rows_read(self, source: str, row_count: int) -> None:
        self.messages.append(("log_rows_read", row_count))

    def log_rows_written(self, target: str, row_count: int) -> None:
        self.messages.append(("log_rows_written", row_count))

    def log_final_stats(self) -> None:
        self.messages.append(("log_final_stats", None))


class TestLoggerPortContract:
    def test_mock_logger_satisfies_protocol(self):
        assert isinstance(MockLogger(), LoggerPort)

    def test_console_logger_satisfies_protocol(self):
        assert isinstance(ConsoleLogger(), LoggerPort)

    def test_null_logger_satisfies_protocol(self):
        assert isinstance(NullLogger(), LoggerPort)

    def test_incomplete_logger_does_not_satisfy_protocol(self):
        class HalfLogger:
            def info(self, message: str) -> None:
                pass

        assert not isinstance(HalfLogger(), LoggerPort)


class TestIOPortContracts:
    def test_row_reader(self):
        assert isinstance(CSVRowReader(), RowReaderPort)

    def test_row_writer(self):
        assert isinstance(CSVRowWriter(), RowWriterPort)

    def test_frame_adapter(self):
        assert isinstance(FrameAdapter(), FrameAdapterPort)

    def test_reader_is_not_a_writer(self):
        assert not isinstance(CSVRowReader(), RowWriterPort)
