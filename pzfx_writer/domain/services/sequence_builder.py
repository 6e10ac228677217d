"""``InfoSequence``/``TableSequence`` reference lists.

IDs are derived from positions in the owning collection so the references
and the tables they point to can never disagree.
"""

from xml.etree import ElementTree as ET

TABLE_ID_PREFIX = "Table"
INFO_ID_PREFIX = "Info"


def table_id(index: int) -> str:
    return f"{TABLE_ID_PREFIX}{index}"


def info_id(index: int) -> str:
    return f"{INFO_ID_PREFIX}{index}"


def build_sequence(tag: str, ids: list[str]) -> ET.Element:
    """Build a sequence element with one ``Ref`` per ID, the first selected."""
    sequence = ET.Element(tag)
    for position, ref_id in enumerate(ids):
        ref = ET.SubElement(sequence, "Ref", attrib={"ID": ref_id})
        if position == 0:
            ref.set("Selected", "1")
    return sequence


def build_table_sequence(table_count: int) -> ET.Element:
    return build_sequence("TableSequence", [table_id(i) for i in range(table_count)])


def build_info_sequence(info_count: int) -> ET.Element:
    return build_sequence("InfoSequence", [info_id(i) for i in range(info_count)])
