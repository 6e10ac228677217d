"""Adapters from rectangular data types to ``DataTable``/``AnnotationTable``.

Values are stringified here, once, so nothing downstream needs to know
whether a table came from pandas, numpy or plain Python.
"""

from collections.abc import Mapping, Sequence
import math
from typing import Any, cast

import numpy as np
import pandas as pd

from ...constants import Annotations
from ...domain.entities.annotation import AnnotationTable
from ...domain.entities.table import Cell, DataTable, TableColumn


def format_cell(value: object) -> Cell:
    """Format one scalar as cell text.

    Whole floats lose their ``.0`` so ``1.0`` and ``1`` render alike; other
    floats keep up to 15 significant digits. Text is kept as given, blanks
    included.
    """
    if value is None:
        return None
    try:
        if bool(pd.isna(cast("Any", value))):
            return None
    except (TypeError, ValueError):
        pass
    if isinstance(value, (bool, np.bool_)):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        number = float(value)
        if math.isfinite(number) and number.is_integer():
            return str(int(number))
        return format(number, ".15g")
    return str(value)


def series_to_column(name: object, series: pd.Series) -> TableColumn:
    is_bool = pd.api.types.is_bool_dtype(series)
    return TableColumn(
        name=str(name),
        cells=tuple(format_cell(value) for value in series.tolist()),
        integral=bool(pd.api.types.is_integer_dtype(series)) and not is_bool,
        numeric=bool(pd.api.types.is_numeric_dtype(series)) and not is_bool,
    )


def dataframe_to_table(frame: pd.DataFrame) -> DataTable:
    columns = tuple(
        series_to_column(frame.columns[i], frame.iloc[:, i])
        for i in range(frame.shape[1])
    )
    labels: tuple[str, ...] | None = None
    if not isinstance(frame.index, pd.RangeIndex):
        labels = tuple("" if pd.isna(label) else str(label) for label in frame.index)
    return DataTable(table_columns=columns, labels=labels)


def matrix_to_table(matrix: np.ndarray) -> DataTable:
    """Adapt a 2-D array; columns are named ``V1``, ``V2``, ..."""
    frame = pd.DataFrame(
        matrix, columns=[f"V{i}" for i in range(1, matrix.shape[1] + 1)]
    )
    return dataframe_to_table(frame)


def is_tabular(obj: object) -> bool:
    if isinstance(obj, np.ndarray):
        return obj.ndim == 2
    return isinstance(obj, (pd.DataFrame, DataTable))


def as_data_table(obj: object) -> DataTable | None:
    """Adapt a supported table, or return None for anything else."""
    if isinstance(obj, DataTable):
        return obj
    if isinstance(obj, pd.DataFrame):
        return dataframe_to_table(obj)
    if isinstance(obj, np.ndarray) and obj.ndim == 2:
        return matrix_to_table(obj)
    return None


def option_value(value: object) -> object:
    """Turn numpy/pandas option values into plain Python values.

    Arrays, Series and Index objects become lists, one entry per table; numpy
    scalars become the matching Python scalar and pandas missing markers
    become None.
    """
    if isinstance(value, (np.ndarray, pd.Series, pd.Index)):
        value = value.tolist()
    if isinstance(value, (list, tuple)):
        return [option_value(item) for item in cast("list[object]", value)]
    if isinstance(value, np.generic):
        return value.item()
    if value is pd.NA or value is pd.NaT:
        return None
    return value


def _key_value_columns(frame: pd.DataFrame) -> tuple[int, int] | None:
    lowered = [str(column).strip().lower() for column in frame.columns]
    if Annotations.NAME_COLUMN in lowered and Annotations.VALUE_COLUMN in lowered:
        return (
            lowered.index(Annotations.NAME_COLUMN),
            lowered.index(Annotations.VALUE_COLUMN),
        )
    if frame.shape[1] >= 2:
        return 0, 1
    return None


def _is_pair(item: object) -> bool:
    return isinstance(item, (tuple, list)) and len(item) == 2 and isinstance(item[0], str)


def as_annotation_table(obj: object) -> AnnotationTable | None:
    """Adapt key/value data to an ``AnnotationTable``, or return None.

    Accepts a DataFrame (``Name``/``Value`` columns, any case, else the first
    two columns), a mapping of names to values, or a sequence of pairs.
    """
    if isinstance(obj, AnnotationTable):
        return obj
    if isinstance(obj, pd.DataFrame):
        positions = _key_value_columns(obj)
        if positions is None:
            return None
        names = obj.iloc[:, positions[0]].tolist()
        values = obj.iloc[:, positions[1]].tolist()
        return AnnotationTable.from_pairs(
            (format_cell(name) or "", format_cell(value))
            for name, value in zip(names, values, strict=True)
        )
    if isinstance(obj, Mapping):
        mapping = cast("Mapping[object, object]", obj)
        return AnnotationTable.from_pairs(
            (str(name), format_cell(value)) for name, value in mapping.items()
        )
    if isinstance(obj, Sequence) and not isinstance(obj, str):
        if not all(_is_pair(item) for item in obj):
            return None
        pairs = cast("Sequence[tuple[str, object]]", obj)
        return AnnotationTable.from_pairs(
            (name, format_cell(value)) for name, value in pairs
        )
    return None


def _is_collection_member(value: object) -> bool:
    if isinstance(value, (AnnotationTable, pd.DataFrame, Mapping)):
        return True
    return isinstance(value, Sequence) and not isinstance(value, str)


class TableAdapter:
    """Boundary adapter used by the write use case."""

    def as_data_table(self, obj: object) -> DataTable | None:
        return as_data_table(obj)

    def as_annotation_table(self, obj: object) -> AnnotationTable | None:
        return as_annotation_table(obj)

    def is_table_collection(self, obj: object) -> bool:
        if is_tabular(obj):
            return False
        return isinstance(obj, Mapping) or (
            isinstance(obj, Sequence) and not isinstance(obj, str)
        )

    def is_annotation_collection(self, obj: object) -> bool:
        if isinstance(obj, (AnnotationTable, pd.DataFrame)):
            return False
        if isinstance(obj, Mapping):
            mapping = cast("Mapping[object, object]", obj)
            return any(_is_collection_member(value) for value in mapping.values())
        if isinstance(obj, Sequence) and not isinstance(obj, str):
            return not all(_is_pair(item) for item in obj)
        return False

    def as_option_value(self, value: object) -> object:
        return option_value(value)
