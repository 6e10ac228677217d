"""Assembly of ``<Info>`` elements from annotation tables."""

from xml.etree import ElementTree as ET

from ...constants import PrismSchema
from ..entities.annotation import AnnotationTable
from .sequence_builder import info_id


def build_notes(lines: list[str]) -> ET.Element:
    """Build the free-text ``<Notes>`` block, one ``<BR/>`` after each line."""
    notes = ET.Element("Notes")
    font = ET.SubElement(
        notes,
        "Font",
        attrib={
            "Color": PrismSchema.NOTES_FONT_COLOR,
            "Face": PrismSchema.NOTES_FONT_FACE,
        },
    )
    previous: ET.Element | None = None
    for line in lines:
        if previous is None:
            font.text = line
        else:
            previous.tail = line
        previous = ET.SubElement(font, "BR")
    return notes


def build_constant(name: str, value: str | None) -> ET.Element:
    constant = ET.Element("Constant")
    ET.SubElement(constant, "Name").text = name
    ET.SubElement(constant, "Value").text = value
    return constant


def build_info_table(table: AnnotationTable, name: str, index: int) -> ET.Element:
    """Build one ``<Info>`` element.

    Note rows are joined, in order, into a single Notes block; missing note
    text adds no line and a block without lines is left out. Every other row
    becomes a ``<Constant>``, repeated names included.
    """
    info = ET.Element("Info", attrib={"ID": info_id(index)})
    ET.SubElement(info, "Title").text = name
    lines = [note.text for note in table.notes() if note.text is not None]
    if lines:
        info.append(build_notes(lines))
    info.extend(
        build_constant(constant.name, constant.value) for constant in table.constants()
    )
    return info
