"""UtilizationScreen - cluster, per-node and node inventory tables in tabs."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static, TabbedContent, TabPane

from kubeutil.controllers import ClusterController
from kubeutil.keyboard import UTILIZATION_SCREEN_BINDINGS
from kubeutil.screens.utilization.config import (
    TAB_IDS,
    TAB_TABLES,
    TAB_TITLES,
)
from kubeutil.screens.utilization.node_detail_screen import NodeDetailScreen
from kubeutil.screens.utilization.presenter import (
    UtilizationDataLoaded,
    UtilizationDataLoadFailed,
    UtilizationPresenter,
)
from kubeutil.widgets import UtilizationDataTable

logger = logging.getLogger(__name__)


class UtilizationScreen(Screen[None]):
    """Shows utilization tables and refreshes them on demand."""

    BINDINGS = UTILIZATION_SCREEN_BINDINGS
    TAB_IDS = TAB_IDS

    def __init__(self, controller: ClusterController) -> None:
        super().__init__()
        self.presenter = UtilizationPresenter(self, controller)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="utilization-status")
        with TabbedContent(initial=TAB_IDS[0], id="utilization-tabs"):
            for tab_id in TAB_IDS:
                table_id, _ = TAB_TABLES[tab_id]
                with TabPane(TAB_TITLES[tab_id], id=tab_id):
                    yield UtilizationDataTable(id=table_id)
        yield Footer()

    def on_mount(self) -> None:
        self.action_refresh()

    def _update_status(self) -> None:
        self.query_one("#utilization-status", Static).update(
            self.presenter.status_text()
        )

    def _populate_tables(self) -> None:
        for table_id, key in TAB_TABLES.values():
            table = self.presenter.get_table(key)
            if table is not None:
                self.query_one(f"#{table_id}", UtilizationDataTable).load_table(table)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_refresh(self) -> None:
        self.presenter.load_data()
        self._update_status()

    def _switch_tab(self, index: int) -> None:
        self.query_one("#utilization-tabs", TabbedContent).active = TAB_IDS[index]

    def action_switch_tab_1(self) -> None:
        self._switch_tab(0)

    def action_switch_tab_2(self) -> None:
        self._switch_tab(1)

    def action_switch_tab_3(self) -> None:
        self._switch_tab(2)

    # =========================================================================
    # Message handlers
    # =========================================================================

    def on_utilization_data_loaded(self, _: UtilizationDataLoaded) -> None:
        self._populate_tables()
        self._update_status()

    def on_utilization_data_load_failed(self, event: UtilizationDataLoadFailed) -> None:
        logger.debug("Showing load failure: %s", event.error)
        self._update_status()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        table = event.data_table
        if not isinstance(table, UtilizationDataTable):
            return
        node_name = event.row_key.value
        command = table.commands.get(node_name) if node_name else None
        if node_name and command:
            self.app.push_screen(
                NodeDetailScreen(self.presenter.controller, node_name, command)
            )
