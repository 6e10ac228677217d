"""Resolution of caller options into one ``TableLayout`` per table.

Every option may be given once for all tables or as a list with one entry
per table. Column selectors are 1-based positions or column names.
"""

from __future__ import annotations

from collections.abc import Sequence
import math
import numbers
from typing import TYPE_CHECKING, cast

from ..domain.services.subcolumn_grouper import SubcolumnSpec
from ..domain.services.table_assembler import TableLayout
from ..exceptions import TableShapeError

if TYPE_CHECKING:
    from ..domain.entities.table import DataTable
    from .models import ColumnSelector, TableOptions


def broadcast(value: object, count: int, option_name: str) -> list[object]:
    """Repeat a single option value per table, or check a per-table list."""
    if isinstance(value, Sequence) and not isinstance(value, str):
        values = list(cast("Sequence[object]", value))
        if len(values) == 1:
            return values * count
        if len(values) != count:
            raise TableShapeError(
                f"Argument '{option_name}' can only be of length 1 or the number of "
                f"tables ({count}), got {len(values)}"
            )
        return values
    return [value] * count


def _is_missing(selector: object) -> bool:
    if selector is None:
        return True
    if isinstance(selector, numbers.Real) and math.isnan(selector):
        return True
    return isinstance(selector, str) and not selector.strip()


def resolve_column(
    selector: ColumnSelector,
    table: DataTable,
    table_name: str,
    role: str,
    warnings: list[str],
) -> int:
    """Turn a column selector into a 1-based position, 0 meaning none.

    Out-of-range positions are left for the caller to report so all offending
    tables can be named at once.
    """
    if _is_missing(selector):
        return 0
    if isinstance(selector, bool) or not isinstance(selector, (str, numbers.Real)):
        raise TableShapeError(
            f"Column selector for table {table_name} must be a position or a name, got {selector!r}"
        )
    if isinstance(selector, str):
        positions = [
            i for i, name in enumerate(table.column_names(), start=1) if name == selector
        ]
        if not positions:
            warnings.append(
                f"Column {selector} is not in table {table_name}, not used as '{role}' column"
            )
            return 0
        if len(positions) > 1:
            warnings.append(
                f"Column {selector} has multiple occurrences in table {table_name}, "
                f"only the first one used as '{role}' column"
            )
        return positions[0]
    if not math.isfinite(selector) or int(selector) != selector:
        raise TableShapeError(
            f"Column position for table {table_name} must be a whole number, got {selector!r}"
        )
    return int(selector)


def _check_positions(
    positions: list[int], tables: dict[str, DataTable], role: str
) -> None:
    violations = [
        name
        for position, (name, table) in zip(positions, tables.items(), strict=True)
        if position < 0 or position > table.column_count
    ]
    if violations:
        raise TableShapeError(
            f"Not enough columns for '{role}' column in table {', '.join(violations)}"
        )


def _resolve_digits(value: object, table_name: str) -> float | None:
    if _is_missing(value):
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TableShapeError(
            f"Argument 'n_digits' for table {table_name} must be numeric, got {value!r}"
        )
    if not math.isfinite(value):
        raise TableShapeError(
            f"Argument 'n_digits' for table {table_name} must be finite, got {value!r}"
        )
    return float(value)


def resolve_layouts(
    tables: dict[str, DataTable],
    options: TableOptions,
    *,
    default_suffix: str = "",
) -> tuple[list[TableLayout], list[str]]:
    """Resolve the options of every table.

    Returns:
        One layout per table, in table order, and the warnings raised on the way

    Raises:
        TableShapeError: An option list has the wrong length, a column position
            does not exist, or an X error column is given without an X column
    """
    count = len(tables)
    names = list(tables)
    warnings: list[str] = []

    row_names = broadcast(options.row_names, count, "row_names")
    x_cols = broadcast(options.x_col, count, "x_col")
    x_errs = broadcast(options.x_err, count, "x_err")
    digits = broadcast(options.n_digits, count, "n_digits")
    subcolumns = broadcast(options.subcolumns, count, "subcolumns")
    suffix_option = default_suffix if options.subcolumn_suffix is None else options.subcolumn_suffix
    suffixes = broadcast(suffix_option, count, "subcolumn_suffix")

    x_positions = [
        resolve_column(cast("ColumnSelector", selector), table, name, "X", warnings)
        for selector, (name, table) in zip(x_cols, tables.items(), strict=True)
    ]
    _check_positions(x_positions, tables, "X")
    err_positions = [
        resolve_column(cast("ColumnSelector", selector), table, name, "X error", warnings)
        for selector, (name, table) in zip(x_errs, tables.items(), strict=True)
    ]
    _check_positions(err_positions, tables, "X error")

    orphans = [
        name
        for name, x_pos, err_pos in zip(names, x_positions, err_positions, strict=True)
        if err_pos and not x_pos
    ]
    if orphans:
        raise TableShapeError(
            f"An X error column needs an X column, missing in table {', '.join(orphans)}"
        )

    layouts: list[TableLayout] = []
    for i, name in enumerate(names):
        try:
            spec = SubcolumnSpec.parse(cast("int | str", subcolumns[i]))
        except ValueError as e:
            raise TableShapeError(f"Table {name}: {e}") from e
        suffix = suffixes[i]
        if suffix is not None and not isinstance(suffix, str):
            raise TableShapeError(
                f"Argument 'subcolumn_suffix' for table {name} must be a string, got {suffix!r}"
            )
        layouts.append(
            TableLayout(
                row_names=bool(row_names[i]),
                x_col=x_positions[i],
                x_err=err_positions[i],
                subcolumns=spec,
                subcolumn_suffix=suffix or "",
                decimals=_resolve_digits(digits[i], name),
            )
        )
    return layouts, warnings
