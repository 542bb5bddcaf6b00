"""UtilizationDataTable - DataTable widget that renders a UtilizationTable.

CSS Classes: widget-utilization-table
"""

from __future__ import annotations

import re
from contextlib import suppress
from typing import Any, ClassVar

from rich.text import Text
from textual.coordinate import Coordinate
from textual.widgets import DataTable

from kubeutil.constants.values import ERR_MARKER
from kubeutil.keyboard import DATA_TABLE_BINDINGS
from kubeutil.models.core.utilization_table import UtilizationTable

# A whole cell holding a number with an optional percent sign or size unit.
_NUMERIC_CELL = re.compile(
    r"^(?P<number>[+-]?\d+(?:\.\d+)?)\s*(?P<unit>%|B|KiB|MiB|GiB|TiB|PiB)?$"
)
_UNIT_SCALE: dict[str, float] = {
    "B": 1,
    "KiB": 1024,
    "MiB": 1024**2,
    "GiB": 1024**3,
    "TiB": 1024**4,
    "PiB": 1024**5,
}


class UtilizationDataTable(DataTable):
    """DataTable that renders a UtilizationTable with sortable columns.

    Each row key is the row's subject name. Drill-down commands carried by
    the rows are kept in ``commands`` keyed by subject name.
    """

    BINDINGS = DATA_TABLE_BINDINGS

    _DEFAULT_CLASSES: ClassVar[str] = "widget-utilization-table"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the utilization table."""
        self._sort_column: str | None = None
        self._sort_reverse: bool = False
        self._column_keys: list[str] = []
        self.commands: dict[str, str] = {}
        if "classes" not in kwargs or not kwargs.get("classes"):
            kwargs["classes"] = self._DEFAULT_CLASSES
        kwargs.setdefault("cursor_type", "row")
        kwargs.setdefault("zebra_stripes", True)
        super().__init__(*args, **kwargs)

    @staticmethod
    def _format_cell(value: str) -> str | Text:
        if value == ERR_MARKER:
            return Text(value, style="bold red")
        return value

    def load_table(self, table: UtilizationTable) -> None:
        """Replace all columns and rows with the given table."""
        self._column_keys = list(table.columns())
        self.commands = {
            row.name: row.command for row in table.body if row.command
        }
        self.clear_safe(columns=True)
        for label in self._column_keys:
            self.add_column(label, key=label)
        for row in table.body:
            self.add_row(
                row.name,
                *(self._format_cell(value) for value in row.attributes),
                key=row.name,
            )
        if self._sort_column in self._column_keys:
            self.sort_by_column(self._sort_column, self._sort_reverse)

    def clear_safe(self, columns: bool = False) -> None:
        """Safely clear the table, resetting cursor position."""
        with suppress(Exception):
            self.cursor_coordinate = Coordinate(0, 0)
        self.clear(columns=columns)

    @staticmethod
    def sort_key(value: Any) -> tuple[int, float, str]:
        """Sort numbers and sizes by magnitude, then text; "Err" sorts last."""
        text = str(value).strip()
        if text == ERR_MARKER:
            return (2, 0.0, text)
        match = _NUMERIC_CELL.match(text)
        if match is None:
            return (1, 0.0, text.lower())
        number = float(match.group("number"))
        scale = _UNIT_SCALE.get(match.group("unit") or "", 1)
        return (0, number * scale, text)

    def sort_by_column(self, column_key: str, reverse: bool = False) -> None:
        """Sort table by column.

        Args:
            column_key: The column key to sort by.
            reverse: If True, sort in descending order.
        """
        self._sort_column = column_key
        self._sort_reverse = reverse
        self.sort(column_key, key=self.sort_key, reverse=reverse)

    def action_toggle_sort(self) -> None:
        """Toggle sort on current column."""
        if not self._column_keys:
            return
        column_key = self._column_keys[min(self.cursor_column, len(self._column_keys) - 1)]
        reverse = column_key == self._sort_column and not self._sort_reverse
        self.sort_by_column(column_key, reverse)

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Sort by the clicked column, flipping direction on repeat clicks."""
        event.stop()
        column_key = str(event.column_key.value)
        reverse = column_key == self._sort_column and not self._sort_reverse
        self.sort_by_column(column_key, reverse)
