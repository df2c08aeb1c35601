from .csv_reader import CSVRowReader
from .csv_writer import CSVRowWriter
from .exceptions import (
    AutocsvInfrastructureError,
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    DataWriteError,
)
from .frame_io import FrameAdapter

__all__ = [
    "AutocsvInfrastructureError",
    "CSVRowReader",
    "CSVRowWriter",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DataWriteError",
    "FrameAdapter",
]
