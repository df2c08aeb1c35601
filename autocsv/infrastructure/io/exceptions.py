class AutocsvInfrastructureError(Exception):
    pass


class DataSourceError(AutocsvInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class DataWriteError(DataSourceError):
    pass
