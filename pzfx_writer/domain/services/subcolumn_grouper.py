"""Grouping of value columns into replicate subcolumns.

Columns whose names only differ by the subcolumn suffix (for example
``Dose_1``, ``Dose_2``) become the subcolumns of one ``YColumn`` titled with
the shared base name. Short groups are padded with all-missing columns.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math
import numbers
import re

from ...constants import TableFormats
from ...exceptions import SubcolumnGroupingError
from ..entities.table import TableColumn

MEAN_SD_N = TableFormats.Y_MEAN_SD_N
MEAN_SD_N_COUNT = 3


@dataclass(frozen=True, slots=True)
class SubcolumnSpec:
    count: int
    y_format: str = TableFormats.Y_REPLICATES

    @classmethod
    def parse(cls, value: int | str) -> SubcolumnSpec:
        if isinstance(value, str):
            if value.strip().upper() == MEAN_SD_N:
                return cls(count=MEAN_SD_N_COUNT, y_format=TableFormats.Y_MEAN_SD_N)
            try:
                value = int(value)
            except ValueError:
                raise ValueError(
                    f"Subcolumns must be a positive integer or '{MEAN_SD_N}', got {value!r}"
                ) from None
        if (
            isinstance(value, bool)
            or not isinstance(value, numbers.Real)
            or not math.isfinite(value)
            or int(value) != value
            or value < 1
        ):
            raise ValueError(
                f"Subcolumns must be a positive integer or '{MEAN_SD_N}', got {value!r}"
            )
        return cls(count=int(value))


@dataclass(frozen=True, slots=True)
class SubcolumnGroup:
    name: str
    columns: tuple[TableColumn, ...]


def group_key(name: str, suffix: str) -> str:
    if not suffix:
        return name
    return re.sub(suffix, "", name, count=1)


def _partition(
    columns: Sequence[TableColumn], suffix: str
) -> list[tuple[str, list[TableColumn]]]:
    if not suffix:
        return [(column.name, [column]) for column in columns]
    groups: dict[str, list[TableColumn]] = {}
    for column in columns:
        groups.setdefault(group_key(column.name, suffix), []).append(column)
    return list(groups.items())


def group_subcolumns(
    columns: Sequence[TableColumn],
    spec: SubcolumnSpec,
    suffix: str = "",
    *,
    table_name: str = "",
) -> list[SubcolumnGroup]:
    """Partition value columns into replicate groups of exactly ``spec.count``.

    Args:
        columns: Value columns, X columns already removed
        spec: Expected subcolumns per group
        suffix: Regular expression removed from column names to get the group
            name; empty puts every column in its own group
        table_name: Display name used in error messages

    Returns:
        Groups in first-seen order, each padded to ``spec.count`` columns

    Raises:
        SubcolumnGroupingError: A group has more columns than expected
    """
    try:
        re.compile(suffix)
    except re.error as e:
        raise SubcolumnGroupingError(
            f"Invalid subcolumn suffix {suffix!r} for table {table_name}: {e}"
        ) from e
    row_count = len(columns[0]) if columns else 0
    result: list[SubcolumnGroup] = []
    for name, members in _partition(columns, suffix):
        if len(members) > spec.count:
            raise SubcolumnGroupingError(
                f"Group '{name}' in table {table_name} has {len(members)} columns, "
                f"but {spec.count} were expected"
            )
        padding = [
            TableColumn.missing(name, row_count)
            for _ in range(spec.count - len(members))
        ]
        result.append(SubcolumnGroup(name=name, columns=tuple(members + padding)))
    return result
