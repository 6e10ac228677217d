class PzfxWriterError(Exception):
    pass


class TableShapeError(PzfxWriterError):
    pass


class SubcolumnGroupingError(PzfxWriterError):
    pass


class PzfxWriteError(PzfxWriterError):
    pass


class PzfxWarning(UserWarning):
    pass
