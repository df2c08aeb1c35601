from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.converter import ConverterDependencies, CSVConverter
from ..config import ConverterConfig
from .io.csv_reader import CSVRowReader
from .io.csv_writer import CSVRowWriter
from .io.frame_io import FrameAdapter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import LoggerPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: ConverterConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or ConverterConfig()
        self._logger_instance: LoggerPort | None = None
        self._row_reader_instance: CSVRowReader | None = None
        self._row_writer_instance: CSVRowWriter | None = None
        self._frame_adapter_instance: FrameAdapter | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_row_reader(self) -> CSVRowReader:
        if self._row_reader_instance is None:
            self._row_reader_instance = CSVRowReader()
        return self._row_reader_instance

    def create_row_writer(self) -> CSVRowWriter:
        if self._row_writer_instance is None:
            self._row_writer_instance = CSVRowWriter()
        return self._row_writer_instance

    def create_frame_adapter(self) -> FrameAdapter:
        if self._frame_adapter_instance is None:
            self._frame_adapter_instance = FrameAdapter()
        return self._frame_adapter_instance

    def create_converter(self) -> CSVConverter:
        dependencies = ConverterDependencies(
            logger=self.create_logger(),
            row_reader=self.create_row_reader(),
            row_writer=self.create_row_writer(),
            frame_adapter=self.create_frame_adapter(),
        )
        return CSVConverter(
            dependencies,
            default_date_format=self.config.default_date_format,
            strict_headers=self.config.strict_headers,
            options=self.config.csv_options(),
        )
