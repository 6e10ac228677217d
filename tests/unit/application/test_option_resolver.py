"""Unit tests for per-table option resolution."""

import math

import numpy as np
import pytest

from pzfx_writer.application.models import TableOptions
from pzfx_writer.application.option_resolver import (
    broadcast,
    resolve_column,
    resolve_layouts,
)
from pzfx_writer.domain.entities.table import DataTable, TableColumn
from pzfx_writer.domain.services.subcolumn_grouper import SubcolumnSpec
from pzfx_writer.exceptions import TableShapeError


def make_table(*names):
    return DataTable(
        table_columns=tuple(TableColumn(name=n, cells=("1", "2")) for n in names)
    )


@pytest.fixture
def tables():
    return {
        "First": make_table("Time", "Time_err", "Y_1", "Y_2"),
        "Second": make_table("A", "B"),
    }


class TestBroadcast:
    def test_scalar_is_repeated(self):
        assert broadcast(2, 3, "subcolumns") == [2, 2, 2]

    def test_string_is_a_scalar(self):
        assert broadcast("_\\d+$", 2, "subcolumn_suffix") == ["_\\d+$", "_\\d+$"]

    def test_single_item_list_is_repeated(self):
        assert broadcast([True], 2, "row_names") == [True, True]

    def test_list_per_table(self):
        assert broadcast((1, 0), 2, "x_col") == [1, 0]

    def test_length_mismatch(self):
        with pytest.raises(TableShapeError, match="Argument 'x_col' can only be"):
            broadcast([1, 2, 3], 2, "x_col")


class TestResolveColumn:
    def test_missing_selectors(self):
        table = make_table("a")
        for selector in (None, math.nan, "", 0):
            assert resolve_column(selector, table, "T", "X", []) == 0

    def test_position(self):
        assert resolve_column(2, make_table("a", "b"), "T", "X", []) == 2

    def test_whole_float_position(self):
        assert resolve_column(2.0, make_table("a", "b"), "T", "X", []) == 2

    def test_fractional_position(self):
        with pytest.raises(TableShapeError, match="whole number"):
            resolve_column(1.5, make_table("a", "b"), "T", "X", [])

    @pytest.mark.parametrize("selector", [True, np.True_, [1], object()])
    def test_non_selector_is_rejected(self, selector):
        with pytest.raises(TableShapeError, match="position or a name"):
            resolve_column(selector, make_table("a"), "T", "X", [])

    def test_numpy_position(self):
        assert resolve_column(np.int64(2), make_table("a", "b"), "T", "X", []) == 2

    def test_numpy_nan_is_missing(self):
        assert resolve_column(np.float32("nan"), make_table("a"), "T", "X", []) == 0

    def test_infinite_position(self):
        with pytest.raises(TableShapeError, match="whole number"):
            resolve_column(math.inf, make_table("a"), "T", "X", [])

    def test_name(self):
        warnings = []

        assert resolve_column("b", make_table("a", "b"), "T", "X", warnings) == 2
        assert warnings == []

    def test_unknown_name_warns(self):
        warnings = []

        assert resolve_column("z", make_table("a"), "Growth", "X", warnings) == 0
        assert warnings == [
            "Column z is not in table Growth, not used as 'X' column"
        ]

    def test_duplicate_name_uses_first(self):
        warnings = []

        position = resolve_column("a", make_table("b", "a", "a"), "T", "X", warnings)

        assert position == 2
        assert "multiple occurrences in table T" in warnings[0]


class TestResolveLayouts:
    def test_defaults(self, tables):
        layouts, warnings = resolve_layouts(tables, TableOptions())

        assert warnings == []
        assert [layout.x_col for layout in layouts] == [0, 0]
        assert all(layout.row_names for layout in layouts)
        assert all(layout.subcolumns == SubcolumnSpec(1) for layout in layouts)
        assert all(layout.subcolumn_suffix == "" for layout in layouts)
        assert all(layout.decimals is None for layout in layouts)

    def test_per_table_values(self, tables):
        options = TableOptions(
            row_names=[False, True],
            x_col=["Time", None],
            x_err=[2, None],
            subcolumns=[2, "SDN"],
            subcolumn_suffix=r"_\d+$",
            n_digits=[3, None],
        )

        first, second = resolve_layouts(tables, options)[0]

        assert (first.row_names, first.x_col, first.x_err) == (False, 1, 2)
        assert first.subcolumns == SubcolumnSpec(2)
        assert first.decimals == 3.0
        assert (second.row_names, second.x_col, second.x_err) == (True, 0, 0)
        assert second.subcolumns.y_format == "SDN"
        assert second.subcolumn_suffix == r"_\d+$"

    def test_default_suffix_applies_when_unset(self, tables):
        layouts, _ = resolve_layouts(tables, TableOptions(), default_suffix="_r$")

        assert [layout.subcolumn_suffix for layout in layouts] == ["_r$", "_r$"]

    def test_position_beyond_columns_names_all_tables(self, tables):
        with pytest.raises(TableShapeError, match="in table First, Second"):
            resolve_layouts(tables, TableOptions(x_col=5))

    def test_negative_position(self, tables):
        with pytest.raises(TableShapeError, match="in table Second"):
            resolve_layouts(tables, TableOptions(x_col=[1, -1]))

    def test_x_error_without_x(self, tables):
        with pytest.raises(TableShapeError, match="needs an X column, missing in table First"):
            resolve_layouts(tables, TableOptions(x_err=[2, None]))

    def test_x_error_without_x_after_unknown_name(self, tables):
        options = TableOptions(x_col=["Nope", None], x_err=[2, None])

        with pytest.raises(TableShapeError, match="needs an X column"):
            resolve_layouts(tables, options)

    def test_unknown_column_name_warns(self, tables):
        layouts, warnings = resolve_layouts(tables, TableOptions(x_col="Time"))

        assert [layout.x_col for layout in layouts] == [1, 0]
        assert warnings == [
            "Column Time is not in table Second, not used as 'X' column"
        ]

    def test_bad_subcolumns(self, tables):
        with pytest.raises(TableShapeError, match="Table First: Subcolumns must be"):
            resolve_layouts(tables, TableOptions(subcolumns=0))

    def test_bad_digits(self, tables):
        with pytest.raises(TableShapeError, match="'n_digits' for table First"):
            resolve_layouts(tables, TableOptions(n_digits="two"))

    def test_numpy_digits(self, tables):
        layouts, _ = resolve_layouts(tables, TableOptions(n_digits=np.int64(3)))

        assert [layout.decimals for layout in layouts] == [3.0, 3.0]

    def test_infinite_digits(self, tables):
        with pytest.raises(TableShapeError, match="'n_digits' for table First must be finite"):
            resolve_layouts(tables, TableOptions(n_digits=math.inf))

    def test_infinite_subcolumns(self, tables):
        with pytest.raises(TableShapeError, match="Table First: Subcolumns must be"):
            resolve_layouts(tables, TableOptions(subcolumns=math.inf))

    def test_bad_suffix(self, tables):
        with pytest.raises(TableShapeError, match="'subcolumn_suffix' for table First"):
            resolve_layouts(tables, TableOptions(subcolumn_suffix=[1, 2]))

    def test_option_length_mismatch(self, tables):
        with pytest.raises(TableShapeError, match="'row_names'"):
            resolve_layouts(tables, TableOptions(row_names=[True, False, True]))
