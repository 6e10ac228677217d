"""Resolution of the display-only ``Decimals`` hint for a column."""

from collections.abc import Iterable
import math

from ...constants import DecimalDigits
from ..entities.table import TableColumn
from .cell_renderer import split_exclusion


def _numeric_values(columns: Iterable[TableColumn]) -> list[float]:
    values: list[float] = []
    for column in columns:
        for cell in column.cells:
            if cell is None:
                continue
            text, _ = split_exclusion(cell)
            try:
                number = float(text)
            except ValueError:
                continue
            if math.isfinite(number):
                values.append(number)
    return values


def resolve_decimals(
    columns: Iterable[TableColumn], override: float | None = None
) -> int:
    """Decide how many decimals Prism should display for a column.

    Integral columns never show decimals. Otherwise an explicit override wins,
    and without one the values decide: all whole numbers give 0, anything
    else 2. Values that are not numbers are ignored.
    """
    columns = list(columns)
    typed_columns = [
        column
        for column in columns
        if column.integral or any(cell is not None for cell in column.cells)
    ]
    if typed_columns and all(column.integral for column in typed_columns):
        return DecimalDigits.INTEGRAL
    if override is not None and math.isfinite(override):
        return int(round(override))
    if all(value % 1 == 0 for value in _numeric_values(columns)):
        return DecimalDigits.INTEGRAL
    return DecimalDigits.FRACTIONAL
