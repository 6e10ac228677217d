"""Rendering of single table values into ``<d>`` cell elements."""

from collections.abc import Iterable
from xml.etree import ElementTree as ET

from ...constants import PrismSchema
from ..entities.table import Cell


def split_exclusion(value: str) -> tuple[str, bool]:
    """Strip one trailing exclusion marker from a value.

    Returns:
        The value without the marker and whether the marker was present
    """
    if value.endswith(PrismSchema.EXCLUSION_MARKER):
        return value[: -len(PrismSchema.EXCLUSION_MARKER)], True
    return value, False


def render_cell(value: Cell) -> ET.Element:
    """Render one cell.

    Missing values become an empty ``<d/>``; a value ending with ``*`` is
    written without the asterisk and flagged ``Excluded="1"``.
    """
    cell = ET.Element("d")
    if value is None:
        return cell
    text, excluded = split_exclusion(value)
    cell.text = text
    if excluded:
        cell.set("Excluded", "1")
    return cell


def render_subcolumn(values: Iterable[Cell]) -> ET.Element:
    subcolumn = ET.Element("Subcolumn")
    subcolumn.extend(render_cell(value) for value in values)
    return subcolumn
