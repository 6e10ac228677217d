from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_table_built(
        self, table_name: str, row_count: int, y_column_count: int
    ) -> None:
        return None

    @override
    def log_document_written(
        self, path: Path, table_count: int, info_count: int
    ) -> None:
        return None
