"""Infrastructure I/O layer: table adapters, CSV reading and .pzfx writing."""

from .csv_reader import CSVReader, CSVReadOptions
from .exceptions import DataParseError, DataSourceError, DataSourceNotFoundError
from .pzfx_file_writer import PzfxFileWriter
from .table_adapters import TableAdapter

__all__ = [
    "CSVReader",
    "CSVReadOptions",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "PzfxFileWriter",
    "TableAdapter",
]
