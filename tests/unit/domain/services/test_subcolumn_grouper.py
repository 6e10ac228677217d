"""Unit tests for replicate subcolumn grouping."""

import math

import numpy as np
import pytest

from pzfx_writer.domain.entities.table import TableColumn
from pzfx_writer.domain.services.subcolumn_grouper import (
    SubcolumnSpec,
    group_key,
    group_subcolumns,
)
from pzfx_writer.exceptions import SubcolumnGroupingError


def columns(*names, rows=3):
    return [
        TableColumn(name=name, cells=tuple(f"{name}{i}" for i in range(rows)))
        for name in names
    ]


class TestSubcolumnSpec:
    def test_integer(self):
        assert SubcolumnSpec.parse(2) == SubcolumnSpec(count=2, y_format="replicates")

    def test_numeric_string(self):
        assert SubcolumnSpec.parse("4").count == 4

    def test_numpy_integer(self):
        assert SubcolumnSpec.parse(np.int64(2)) == SubcolumnSpec(count=2)

    @pytest.mark.parametrize("value", ["SDN", "sdn"])
    def test_mean_sd_n(self, value):
        spec = SubcolumnSpec.parse(value)

        assert spec.count == 3
        assert spec.y_format == "SDN"

    @pytest.mark.parametrize(
        "value", [0, -1, 1.5, "many", True, math.inf, math.nan, None, [2]]
    )
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="Subcolumns must be"):
            SubcolumnSpec.parse(value)


class TestGroupKey:
    def test_suffix_removed(self):
        assert group_key("Measurement_12", r"_\d+$") == "Measurement"

    def test_no_match_keeps_name(self):
        assert group_key("Other", r"_\d+$") == "Other"

    def test_empty_suffix_keeps_name(self):
        assert group_key("A_1", "") == "A_1"


class TestGroupSubcolumns:
    def test_groups_by_base_name(self):
        groups = group_subcolumns(
            columns("A_1", "A_2", "B_1", "B_2"), SubcolumnSpec(2), r"_\d+$"
        )

        assert [g.name for g in groups] == ["A", "B"]
        assert [[c.name for c in g.columns] for g in groups] == [
            ["A_1", "A_2"],
            ["B_1", "B_2"],
        ]

    def test_first_seen_order_and_member_order(self):
        groups = group_subcolumns(
            columns("B_2", "A_1", "B_1", "A_2"), SubcolumnSpec(2), r"_\d+$"
        )

        assert [g.name for g in groups] == ["B", "A"]
        assert [c.name for c in groups[0].columns] == ["B_2", "B_1"]

    def test_short_groups_are_padded(self):
        groups = group_subcolumns(
            columns("A_1", "A_2", "B_1", "B_2"), SubcolumnSpec(3), r"_\d+$"
        )

        for group in groups:
            assert len(group.columns) == 3
            assert group.columns[2].cells == (None, None, None)

    def test_uneven_groups_are_padded_to_the_same_count(self):
        groups = group_subcolumns(
            columns("M_1", "M_2", "M_3", "Other_1"), SubcolumnSpec(3), r"_\d+$"
        )

        assert [len(g.columns) for g in groups] == [3, 3]
        assert [c.cells[0] for c in groups[1].columns] == ["Other_10", None, None]

    def test_empty_suffix_gives_one_group_per_column(self):
        groups = group_subcolumns(columns("A_1", "A_2"), SubcolumnSpec(2), "")

        assert [g.name for g in groups] == ["A_1", "A_2"]
        assert all(g.columns[1].cells == (None, None, None) for g in groups)

    def test_too_many_columns_fails_with_group_and_table(self):
        with pytest.raises(SubcolumnGroupingError, match="Group 'A' in table Growth"):
            group_subcolumns(
                columns("A_1", "A_2", "A_3"),
                SubcolumnSpec(2),
                r"_\d+$",
                table_name="Growth",
            )

    def test_invalid_pattern(self):
        with pytest.raises(SubcolumnGroupingError, match="Invalid subcolumn suffix"):
            group_subcolumns(columns("A"), SubcolumnSpec(1), "(", table_name="T")

    def test_no_columns(self):
        assert group_subcolumns([], SubcolumnSpec(2), r"_\d+$") == []
