"""pzfx-writer package.

This package writes pandas/numpy tables to GraphPad Prism ``.pzfx`` project
files.

Features:
- Column (one-way) and XY data tables, with optional X error bars
- Replicate and mean/SD/N subcolumns grouped by column-name suffix
- Excluded values marked with a trailing asterisk
- Project info tables with constants and free-text notes
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("pzfx-writer")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from pzfx_writer.api import build_pzfx_tree, write_pzfx
from pzfx_writer.domain.entities.annotation import AnnotationTable, Constant, Note
from pzfx_writer.domain.entities.table import DataTable, TableColumn
from pzfx_writer.exceptions import (
    PzfxWarning,
    PzfxWriteError,
    PzfxWriterError,
    SubcolumnGroupingError,
    TableShapeError,
)

__all__ = [
    "__version__",
    "build_pzfx_tree",
    "write_pzfx",
    "AnnotationTable",
    "Constant",
    "Note",
    "DataTable",
    "TableColumn",
    "PzfxWarning",
    "PzfxWriteError",
    "PzfxWriterError",
    "SubcolumnGroupingError",
    "TableShapeError",
]
