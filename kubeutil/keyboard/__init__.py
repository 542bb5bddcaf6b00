"""Keyboard bindings module.

Bindings are organized into three categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
- tables: DataTable bindings (DATA_TABLE_BINDINGS)
"""

from kubeutil.keyboard.app import APP_BINDINGS
from kubeutil.keyboard.navigation import (
    NODE_DETAIL_SCREEN_BINDINGS,
    UTILIZATION_SCREEN_BINDINGS,
)
from kubeutil.keyboard.tables import DATA_TABLE_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "DATA_TABLE_BINDINGS",
    "NODE_DETAIL_SCREEN_BINDINGS",
    "UTILIZATION_SCREEN_BINDINGS",
]
