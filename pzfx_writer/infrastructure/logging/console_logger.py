from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    table_name: str = ""


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = {
            "tables_built": 0,
            "rows_written": 0,
            "warnings": 0,
            "errors": 0,
        }

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_table_built(
        self, table_name: str, row_count: int, y_column_count: int
    ) -> None:
        self.set_context(table_name=table_name)
        self._stats["tables_built"] += 1
        self._stats["rows_written"] += row_count
        self.verbose(
            f"Built table {table_name}: {row_count:,} rows, {y_column_count} Y columns"
        )

    @override
    def log_document_written(
        self, path: Path, table_count: int, info_count: int
    ) -> None:
        self.clear_context()
        self.success(
            f"Wrote {path} ({table_count} data tables, {info_count} info tables)"
        )

    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Write Statistics:[/dim]")
            self.console.print(f"[dim]  Tables built: {self._stats['tables_built']}[/dim]")
            self.console.print(
                f"[dim]  Rows written: {self._stats['rows_written']:,}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = {
            "tables_built": 0,
            "rows_written": 0,
            "warnings": 0,
            "errors": 0,
        }

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        if self._context.table_name:
            return escape(f"[{self._context.table_name}] ")
        return ""
