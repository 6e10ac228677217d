from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path
    from xml.etree import ElementTree as ET

    from ...domain.entities.annotation import AnnotationTable
    from ...domain.entities.table import DataTable


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_table_built(
        self, table_name: str, row_count: int, y_column_count: int
    ) -> None: ...

    def log_document_written(
        self, path: Path, table_count: int, info_count: int
    ) -> None: ...


@runtime_checkable
class DocumentWriterPort(Protocol):
    pass

    def write(self, root: ET.Element, path: Path) -> Path: ...


@runtime_checkable
class TableAdapterPort(Protocol):
    pass

    def as_data_table(self, obj: object) -> DataTable | None: ...

    def as_annotation_table(self, obj: object) -> AnnotationTable | None: ...

    def is_table_collection(self, obj: object) -> bool: ...

    def is_annotation_collection(self, obj: object) -> bool: ...

    def as_option_value(self, value: object) -> object: ...
