"""Builders for the column elements of one Prism data table."""

from collections.abc import Sequence
from xml.etree import ElementTree as ET

from ...constants import ColumnWidths
from ..entities.table import TableColumn
from .cell_renderer import render_subcolumn
from .decimal_precision import resolve_decimals
from .subcolumn_grouper import SubcolumnGroup


def _titled_column(
    tag: str,
    title: str,
    columns: Sequence[TableColumn],
    *,
    width: int,
    decimals: int,
) -> ET.Element:
    element = ET.Element(
        tag,
        attrib={
            "Width": str(width),
            "Decimals": str(decimals),
            "Subcolumns": str(len(columns)),
        },
    )
    ET.SubElement(element, "Title").text = title
    element.extend(render_subcolumn(column.cells) for column in columns)
    return element


def build_x_column(
    x_values: TableColumn,
    x_error: TableColumn | None = None,
    *,
    decimals: float | None = None,
) -> ET.Element:
    """Build the ``XColumn``: the X values, then the X error values if any."""
    columns = [x_values] if x_error is None else [x_values, x_error]
    width = ColumnWidths.SUBCOLUMN if x_error is None else ColumnWidths.X_WITH_ERROR
    return _titled_column(
        "XColumn",
        x_values.name,
        columns,
        width=width,
        decimals=resolve_decimals(columns, decimals),
    )


def build_y_columns(
    groups: Sequence[SubcolumnGroup], *, decimals: float | None = None
) -> list[ET.Element]:
    """Build one ``YColumn`` per replicate group, titled with the group name."""
    return [
        _titled_column(
            "YColumn",
            group.name,
            group.columns,
            width=ColumnWidths.SUBCOLUMN * len(group.columns),
            decimals=resolve_decimals(group.columns, decimals),
        )
        for group in groups
    ]


def build_row_titles_column(labels: Sequence[str]) -> ET.Element:
    element = ET.Element(
        "RowTitlesColumn", attrib={"Width": str(ColumnWidths.ROW_TITLES)}
    )
    element.append(render_subcolumn(labels))
    return element
