"""NodeDetailScreen - shows one node's full YAML."""

from __future__ import annotations

from rich.markup import escape
from rich.syntax import Syntax
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from kubeutil.controllers import ClusterController
from kubeutil.errors import KubeUtilError
from kubeutil.keyboard import NODE_DETAIL_SCREEN_BINDINGS


class NodeDetailScreen(Screen[None]):
    """Runs a node row's drill-down command and shows the YAML."""

    BINDINGS = NODE_DETAIL_SCREEN_BINDINGS

    def __init__(
        self, controller: ClusterController, node_name: str, command: str
    ) -> None:
        super().__init__()
        self._controller = controller
        self.node_name = node_name
        self.command = command

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(self.command, id="node-detail-command", markup=False)
        with VerticalScroll():
            yield Static("Loading...", id="node-detail-body")
        yield Footer()

    def on_mount(self) -> None:
        self.run_worker(self._load_node_yaml, name="node-detail", exclusive=True)

    async def _load_node_yaml(self) -> None:
        body = self.query_one("#node-detail-body", Static)
        try:
            output = await self._controller.get_node_yaml(self.node_name)
        except KubeUtilError as exc:
            body.update(f"[red]Error:[/red] {escape(str(exc))}")
            return
        body.update(Syntax(output, "yaml", word_wrap=True))

    def action_pop_screen(self) -> None:
        self.app.pop_screen()
