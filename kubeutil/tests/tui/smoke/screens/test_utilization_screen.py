"""Smoke tests for UtilizationScreen and NodeDetailScreen."""

from __future__ import annotations

import pytest
from textual.widgets import Static, TabbedContent

from kubeutil.app import KubeUtilApp
from kubeutil.controllers import ClusterController
from kubeutil.errors import KubectlError
from kubeutil.models.core.node_info import NodeRow
from kubeutil.models.core.pod_info import PodRow
from kubeutil.models.core.utilization_table import UtilizationTable
from kubeutil.models.state.fetch_options import FetchOptions
from kubeutil.screens import UtilizationScreen
from kubeutil.screens.utilization.node_detail_screen import NodeDetailScreen
from kubeutil.utils.utilization import (
    format_cluster_utilization,
    format_node_list,
    format_node_utilization,
)
from kubeutil.widgets import UtilizationDataTable

_NODES = [
    NodeRow(name="node-a", cpu="4", memory="8Gi"),
    NodeRow(name="node-b", cpu="4", memory="8Gi"),
]
_PODS = [
    PodRow(namespace="default", name="web", node_name="node-a", cpu_request="2"),
]

pytestmark = pytest.mark.smoke


class FakeClusterController(ClusterController):
    """Controller that serves canned tables instead of running kubectl."""

    def __init__(self, fail: bool = False) -> None:
        super().__init__(FetchOptions(context="test-cluster"))
        self.fail = fail
        self.fetch_count = 0

    async def fetch_all(self) -> dict[str, UtilizationTable]:
        self.fetch_count += 1
        if self.fail:
            raise KubectlError("Unable to connect to the server")
        return {
            self.KEY_CLUSTER: format_cluster_utilization(_NODES, _PODS),
            self.KEY_NODES: format_node_utilization(_NODES, _PODS),
            self.KEY_INVENTORY: format_node_list(_NODES, self.context),
        }

    async def get_node_yaml(self, node_name: str) -> str:
        return f"apiVersion: v1\nkind: Node\nmetadata:\n  name: {node_name}\n"


@pytest.fixture
def controller() -> FakeClusterController:
    return FakeClusterController()


@pytest.fixture
def app(controller: FakeClusterController) -> KubeUtilApp:
    return KubeUtilApp(controller.options, controller=controller)


class TestUtilizationScreen:
    """Smoke tests for UtilizationScreen."""

    @pytest.mark.asyncio
    async def test_tables_populate_on_mount(self, app: KubeUtilApp) -> None:
        """All three tables are filled after the first load."""
        async with app.run_test(size=(140, 40)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            assert isinstance(app.screen, UtilizationScreen)
            cluster = app.screen.query_one("#cluster-table", UtilizationDataTable)
            nodes = app.screen.query_one("#nodes-table", UtilizationDataTable)
            inventory = app.screen.query_one("#inventory-table", UtilizationDataTable)
            assert cluster.row_count == 2
            assert nodes.row_count == 2
            assert inventory.row_count == 2
            assert inventory.commands["node-a"] == (
                "kubectl --context test-cluster get node node-a -o yaml"
            )

    @pytest.mark.asyncio
    async def test_number_keys_switch_tabs(self, app: KubeUtilApp) -> None:
        """1/2/3 switch between the three tabs."""
        async with app.run_test(size=(140, 40)) as pilot:
            await pilot.pause()
            tabs = app.screen.query_one("#utilization-tabs", TabbedContent)
            assert tabs.active == "tab-cluster"
            await pilot.press("2")
            await pilot.pause()
            assert tabs.active == "tab-nodes"
            await pilot.press("3")
            await pilot.pause()
            assert tabs.active == "tab-inventory"
            await pilot.press("1")
            await pilot.pause()
            assert tabs.active == "tab-cluster"

    @pytest.mark.asyncio
    async def test_r_refreshes(
        self, app: KubeUtilApp, controller: FakeClusterController
    ) -> None:
        """r reloads the tables."""
        async with app.run_test(size=(140, 40)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.press("r")
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            assert controller.fetch_count >= 2

    @pytest.mark.asyncio
    async def test_load_failure_shows_error(self) -> None:
        """A failed load is reported in the status line."""
        controller = FakeClusterController(fail=True)
        app = KubeUtilApp(controller.options, controller=controller)
        async with app.run_test(size=(140, 40)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, UtilizationScreen)
            assert "Unable to connect" in screen.presenter.status_text()
            assert screen.query_one("#cluster-table", UtilizationDataTable).row_count == 0


class TestNodeDetailScreen:
    """Smoke tests for the node drill-down."""

    @pytest.mark.asyncio
    async def test_enter_on_inventory_row_opens_detail(self, app: KubeUtilApp) -> None:
        """Selecting a node row pushes NodeDetailScreen; escape returns."""
        async with app.run_test(size=(140, 40)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            await pilot.press("3")
            await pilot.pause()
            inventory = app.screen.query_one("#inventory-table", UtilizationDataTable)
            inventory.focus()
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()
            assert isinstance(app.screen, NodeDetailScreen)
            assert app.screen.node_name == "node-a"
            assert app.screen.command == (
                "kubectl --context test-cluster get node node-a -o yaml"
            )
            command = app.screen.query_one("#node-detail-command", Static)
            assert command is not None

            await pilot.press("escape")
            await pilot.pause()
            assert isinstance(app.screen, UtilizationScreen)

    @pytest.mark.asyncio
    async def test_enter_on_cluster_row_stays(self, app: KubeUtilApp) -> None:
        """Rows without a drill-down command do not open a detail screen."""
        async with app.run_test(size=(140, 40)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()
            cluster = app.screen.query_one("#cluster-table", UtilizationDataTable)
            cluster.focus()
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()
            assert isinstance(app.screen, UtilizationScreen)
