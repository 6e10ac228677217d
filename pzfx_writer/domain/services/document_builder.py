"""Assembly of the ``GraphPadPrismFile`` root element."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from xml.etree import ElementTree as ET

from ...constants import PrismSchema
from .sequence_builder import build_info_sequence, build_table_sequence


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class CreationInfo:
    program: str = PrismSchema.CREATED_BY_PROGRAM
    version: str = PrismSchema.CREATED_BY_VERSION
    login: str = ""
    timestamp: datetime = field(default_factory=_utc_now)

    def formatted_timestamp(self) -> str:
        return self.timestamp.astimezone(UTC).strftime(PrismSchema.DATETIME_FORMAT)


def build_created(created: CreationInfo) -> ET.Element:
    element = ET.Element("Created")
    ET.SubElement(
        element,
        "OriginalVersion",
        attrib={
            "CreatedByProgram": created.program,
            "CreatedByVersion": created.version,
            "Login": created.login,
            "DateTime": created.formatted_timestamp(),
        },
    )
    return element


def build_document(
    data_tables: Sequence[ET.Element],
    info_tables: Sequence[ET.Element],
    created: CreationInfo | None = None,
) -> ET.Element:
    """Arrange all parts under the root in the order Prism expects.

    Args:
        data_tables: ``<Table>`` elements, in ID order
        info_tables: ``<Info>`` elements, in ID order
        created: Creation metadata; defaults to now

    Returns:
        The ``GraphPadPrismFile`` root element
    """
    root = ET.Element(
        "GraphPadPrismFile", attrib={"PrismXMLVersion": PrismSchema.XML_VERSION}
    )
    root.append(build_created(created or CreationInfo()))
    root.append(build_info_sequence(len(info_tables)))
    root.extend(info_tables)
    root.append(build_table_sequence(len(data_tables)))
    root.extend(data_tables)
    return root
