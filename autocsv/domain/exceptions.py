class ConversionError(Exception):
    pass


class SchemaError(ConversionError):
    pass


class ParseError(ConversionError):
    pass


class RowError(ConversionError):
    def __init__(
        self,
        message: str,
        *,
        row_number: int,
        column_name: str,
        value: str | None = None,
    ) -> None:
        super().__init__(message)
        self.row_number = row_number
        self.column_name = column_name
        self.value = value
