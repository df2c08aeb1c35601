from .services import FrameAdapterPort, LoggerPort, RowReaderPort, RowWriterPort

__all__ = [
    "FrameAdapterPort",
    "LoggerPort",
    "RowReaderPort",
    "RowWriterPort",
]
