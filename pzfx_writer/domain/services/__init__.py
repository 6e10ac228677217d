"""Domain services turning tables into Prism document elements."""

from .cell_renderer import render_cell, render_subcolumn
from .column_assembler import build_row_titles_column, build_x_column, build_y_columns
from .decimal_precision import resolve_decimals
from .document_builder import CreationInfo, build_document
from .info_assembler import build_info_table
from .sequence_builder import build_info_sequence, build_table_sequence, info_id, table_id
from .subcolumn_grouper import SubcolumnGroup, SubcolumnSpec, group_subcolumns
from .table_assembler import TableLayout, build_data_table

__all__ = [
    "CreationInfo",
    "SubcolumnGroup",
    "SubcolumnSpec",
    "TableLayout",
    "build_data_table",
    "build_document",
    "build_info_sequence",
    "build_info_table",
    "build_row_titles_column",
    "build_table_sequence",
    "build_x_column",
    "build_y_columns",
    "group_subcolumns",
    "info_id",
    "render_cell",
    "render_subcolumn",
    "resolve_decimals",
    "table_id",
]
