"""Assembly of one ``<Table>`` element from a data table and its layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from ...constants import PrismSchema, TableFormats
from ...exceptions import TableShapeError
from .column_assembler import build_row_titles_column, build_x_column, build_y_columns
from .sequence_builder import table_id
from .subcolumn_grouper import SubcolumnSpec, group_subcolumns

if TYPE_CHECKING:
    from ..entities.table import TabularInput


def _single_subcolumn() -> SubcolumnSpec:
    return SubcolumnSpec(count=1)


@dataclass(frozen=True, slots=True)
class TableLayout:
    """Resolved per-table write options.

    ``x_col`` and ``x_err`` are 1-based column positions, 0 meaning none.
    """

    row_names: bool = True
    x_col: int = 0
    x_err: int = 0
    subcolumns: SubcolumnSpec = field(default_factory=_single_subcolumn)
    subcolumn_suffix: str = ""
    decimals: float | None = None


def _check_layout(table: TabularInput, name: str, layout: TableLayout) -> None:
    column_count = len(table.column_names())
    for label, position in (("x_col", layout.x_col), ("x_err", layout.x_err)):
        if position < 0 or position > column_count:
            raise TableShapeError(
                f"Not enough columns for table {name}: {label}={position}, "
                f"table has {column_count} columns"
            )
    if layout.x_err and not layout.x_col:
        raise TableShapeError(f"Table {name} has an X error column but no X column")
    if layout.x_err and layout.x_err == layout.x_col:
        raise TableShapeError(
            f"Table {name} uses column {layout.x_col} as both X and X error column"
        )


def build_data_table(
    table: TabularInput, name: str, index: int, layout: TableLayout
) -> ET.Element:
    """Build the ``<Table>`` element for one input table.

    Args:
        table: Input table
        name: Display name, written as the table title
        index: Position of the table in the document, gives its ID
        layout: Resolved options for this table

    Returns:
        The ``<Table>`` element

    Raises:
        TableShapeError: X/X error positions do not fit the table
        SubcolumnGroupingError: A replicate group has too many columns
    """
    _check_layout(table, name, layout)
    columns = table.columns()
    table_type = TableFormats.TABLE_TYPE_ONE_WAY
    x_format = TableFormats.X_NONE
    x_column: ET.Element | None = None
    x_positions: list[int] = []

    if layout.x_col:
        x_positions.append(layout.x_col - 1)
        x_error = None
        x_format = TableFormats.X_NUMBERS
        if layout.x_err:
            x_positions.append(layout.x_err - 1)
            x_error = columns[layout.x_err - 1]
            x_format = TableFormats.X_ERROR
        x_column = build_x_column(
            columns[layout.x_col - 1], x_error, decimals=layout.decimals
        )
        table_type = TableFormats.TABLE_TYPE_XY

    y_values = [column for i, column in enumerate(columns) if i not in x_positions]
    groups = group_subcolumns(
        y_values, layout.subcolumns, layout.subcolumn_suffix, table_name=name
    )

    element = ET.Element(
        "Table",
        attrib={
            "ID": table_id(index),
            "XFormat": x_format,
            "YFormat": layout.subcolumns.y_format,
            "Replicates": str(layout.subcolumns.count),
            "TableType": table_type,
            "EVFormat": PrismSchema.EXCLUSION_FORMAT,
        },
    )
    ET.SubElement(element, "Title").text = name
    if layout.row_names:
        element.append(build_row_titles_column(table.row_labels()))
    if x_column is not None:
        element.append(x_column)
    element.extend(build_y_columns(groups, decimals=layout.decimals))
    return element
