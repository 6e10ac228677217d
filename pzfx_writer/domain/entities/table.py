"""Tabular input model.

Every rectangular data source is adapted into a ``DataTable`` at the boundary
so the assemblers only deal with already-stringified cells.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

Cell = str | None


@dataclass(frozen=True, slots=True)
class TableColumn:
    name: str
    cells: tuple[Cell, ...]
    integral: bool = False
    numeric: bool = True

    def __len__(self) -> int:
        return len(self.cells)

    @classmethod
    def missing(cls, name: str, row_count: int) -> TableColumn:
        return cls(name=name, cells=(None,) * row_count, integral=False, numeric=True)


@runtime_checkable
class TabularInput(Protocol):
    @property
    def row_count(self) -> int: ...

    def column_names(self) -> list[str]: ...

    def columns(self) -> list[TableColumn]: ...

    def row_labels(self) -> list[str]: ...


def _empty_columns() -> tuple[TableColumn, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class DataTable:
    table_columns: tuple[TableColumn, ...] = field(default_factory=_empty_columns)
    labels: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        lengths = {len(column) for column in self.table_columns}
        if len(lengths) > 1:
            raise ValueError(
                f"All columns must have the same number of rows, got {sorted(lengths)}"
            )
        if self.labels is not None and self.table_columns:
            if len(self.labels) != len(self.table_columns[0]):
                raise ValueError(
                    f"Expected {len(self.table_columns[0])} row labels, got {len(self.labels)}"
                )

    @property
    def row_count(self) -> int:
        if self.table_columns:
            return len(self.table_columns[0])
        return len(self.labels or ())

    @property
    def column_count(self) -> int:
        return len(self.table_columns)

    def column_names(self) -> list[str]:
        return [column.name for column in self.table_columns]

    def columns(self) -> list[TableColumn]:
        return list(self.table_columns)

    def row_labels(self) -> list[str]:
        if self.labels is None:
            return [str(i) for i in range(1, self.row_count + 1)]
        return list(self.labels)

    def is_numeric(self) -> bool:
        return all(column.numeric for column in self.table_columns)
