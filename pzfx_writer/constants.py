from typing import ClassVar


class Defaults:
    SUBCOLUMN_SUFFIX = ""
    SUBCOLUMNS = 1
    ROW_NAMES = True
    TABLE_NAME_PREFIX = "Data"
    INFO_NAME_PREFIX = "Project info"


class PrismSchema:
    XML_VERSION = "5.00"
    CREATED_BY_PROGRAM = "GraphPad Prism"
    CREATED_BY_VERSION = "6.0f.254"
    DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S+00:00"
    EXCLUSION_FORMAT = "AsteriskAfterNumber"
    EXCLUSION_MARKER = "*"
    NOTES_FONT_COLOR = "#000000"
    NOTES_FONT_FACE = "Helvetica"


class TableFormats:
    TABLE_TYPE_ONE_WAY = "OneWay"
    TABLE_TYPE_XY = "XY"
    X_NONE = "none"
    X_NUMBERS = "numbers"
    X_ERROR = "error"
    Y_REPLICATES = "replicates"
    Y_MEAN_SD_N = "SDN"


class ColumnWidths:
    SUBCOLUMN = 89
    X_WITH_ERROR = 120
    ROW_TITLES = 39


class Annotations:
    NOTES_KEY = "Notes"
    DEFAULT_KEYS: ClassVar[tuple[str, ...]] = (
        "Experiment Date",
        "Experiment ID",
        "Notebook ID",
        "Project",
        "Experimenter",
        "Protocol",
        "Notes",
    )
    NAME_COLUMN = "name"
    VALUE_COLUMN = "value"


class DecimalDigits:
    INTEGRAL = 0
    FRACTIONAL = 2
