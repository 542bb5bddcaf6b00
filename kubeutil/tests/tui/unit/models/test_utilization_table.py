"""Tests for UtilizationTable model."""

from __future__ import annotations

import pytest

from kubeutil.models.core.utilization_table import TableRow, UtilizationTable

pytestmark = pytest.mark.unit


class TestUtilizationTable:
    """Tests for UtilizationTable helpers."""

    def _table(self) -> UtilizationTable:
        return UtilizationTable(
            header=TableRow(name="Node", attributes=["CPU", "Memory"]),
            body=[
                TableRow(name="a", attributes=["1.000000", "1.00 GiB"]),
                TableRow(name="b", attributes=["2.000000", "2.00 GiB"], command="cmd"),
            ],
        )

    def test_columns(self) -> None:
        """Subject label comes first."""
        assert self._table().columns() == ("Node", "CPU", "Memory")

    def test_rows(self) -> None:
        """Rows flatten to string tuples."""
        assert self._table().rows() == [
            ("a", "1.000000", "1.00 GiB"),
            ("b", "2.000000", "2.00 GiB"),
        ]

    def test_find_row(self) -> None:
        """Rows are found by subject name."""
        table = self._table()
        row = table.find_row("b")
        assert row is not None
        assert row.command == "cmd"
        assert table.find_row("missing") is None

    def test_defaults(self) -> None:
        """Body and title default to empty."""
        table = UtilizationTable(header=TableRow(name="Resource"))
        assert table.body == []
        assert table.title is None
        assert table.columns() == ("Resource",)
