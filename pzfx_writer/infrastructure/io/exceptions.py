from ...exceptions import PzfxWriterError


class DataSourceError(PzfxWriterError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass
