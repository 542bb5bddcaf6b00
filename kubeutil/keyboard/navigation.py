"""Screen-specific keyboard bindings."""

from typing import Annotated

UTILIZATION_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("r", "refresh", "Refresh"),
    ("1", "switch_tab_1", "Cluster"),
    ("2", "switch_tab_2", "Nodes"),
    ("3", "switch_tab_3", "Inventory"),
]

NODE_DETAIL_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("escape", "pop_screen", "Back"),
]

__all__ = [
    "NODE_DETAIL_SCREEN_BINDINGS",
    "UTILIZATION_SCREEN_BINDINGS",
]
