from .annotation import (
    AnnotationRow,
    AnnotationTable,
    Constant,
    Note,
    default_annotation_table,
)
from .table import Cell, DataTable, TableColumn, TabularInput

__all__ = [
    "AnnotationRow",
    "AnnotationTable",
    "Cell",
    "Constant",
    "DataTable",
    "Note",
    "TableColumn",
    "TabularInput",
    "default_annotation_table",
]
