from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path
    from xml.etree import ElementTree as ET

    from ..domain.services.document_builder import CreationInfo

ColumnSelector = int | str | None
PerTable = Sequence


def _empty_str_list() -> list[str]:
    return []


@dataclass(slots=True)
class TableOptions:
    """Write options; each is one value for all tables or one per table."""

    row_names: bool | PerTable[bool] = Defaults.ROW_NAMES
    x_col: ColumnSelector | PerTable[ColumnSelector] = None
    x_err: ColumnSelector | PerTable[ColumnSelector] = None
    n_digits: float | None | PerTable[float | None] = None
    subcolumns: int | str | PerTable[int | str] = Defaults.SUBCOLUMNS
    subcolumn_suffix: str | PerTable[str] | None = None


def _default_options() -> TableOptions:
    return TableOptions()


@dataclass(slots=True)
class WritePzfxRequest:
    tables: object
    output_path: Path | None = None
    notes: object = None
    options: TableOptions = field(default_factory=_default_options)
    created: CreationInfo | None = None


@dataclass(slots=True)
class BuiltDocument:
    root: ET.Element
    table_names: list[str] = field(default_factory=_empty_str_list)
    info_names: list[str] = field(default_factory=_empty_str_list)
    warnings: list[str] = field(default_factory=_empty_str_list)


@dataclass(slots=True)
class WritePzfxResponse:
    output_path: Path
    table_names: list[str] = field(default_factory=_empty_str_list)
    info_names: list[str] = field(default_factory=_empty_str_list)
    warnings: list[str] = field(default_factory=_empty_str_list)

    @property
    def table_count(self) -> int:
        return len(self.table_names)

    @property
    def info_count(self) -> int:
        return len(self.info_names)
