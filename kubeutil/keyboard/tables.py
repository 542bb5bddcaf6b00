"""DataTable keyboard bindings."""

from textual.binding import Binding

DATA_TABLE_BINDINGS: list[Binding] = [
    Binding("s", "toggle_sort", "Sort"),
]

__all__ = [
    "DATA_TABLE_BINDINGS",
]
