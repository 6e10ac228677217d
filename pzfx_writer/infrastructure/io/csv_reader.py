from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from .exceptions import DataParseError, DataSourceNotFoundError


@dataclass(slots=True)
class CSVReadOptions:
    row_names_column: int | None = None
    encoding: str = "utf-8"
    sep: str = ","


class CSVReader:
    """Reads data and notes tables for the command line.

    Numeric columns are inferred by pandas; a trailing ``*`` therefore keeps
    a column as text, which is how excluded values survive the trip.
    """

    def read(self, path: Path, options: CSVReadOptions | None = None) -> pd.DataFrame:
        if options is None:
            options = CSVReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        try:
            df = pd.read_csv(
                path,
                index_col=options.row_names_column,
                encoding=options.encoding,
                sep=options.sep,
            )
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        if df.shape[1] == 0:
            raise DataParseError(f"CSV file has no columns: {path}")
        return df

    def read_notes(self, path: Path, encoding: str = "utf-8") -> pd.DataFrame:
        df = self.read(path, CSVReadOptions(encoding=encoding))
        if df.shape[1] < 2:
            raise DataParseError(
                f"Notes file {path} needs a name and a value column, got {df.shape[1]}"
            )
        return df
