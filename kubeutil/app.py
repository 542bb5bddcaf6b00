"""Main application class for the kubeutil interactive shell."""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

from kubeutil.constants import APP_TITLE
from kubeutil.controllers import ClusterController
from kubeutil.keyboard.app import APP_BINDINGS
from kubeutil.models.state.fetch_options import FetchOptions
from kubeutil.screens import UtilizationScreen


class KubeUtilApp(App[None]):
    """Interactive shell showing cluster utilization tables."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    def __init__(
        self,
        options: FetchOptions | None = None,
        controller: ClusterController | None = None,
    ) -> None:
        super().__init__()
        self.options = options or FetchOptions()
        self.controller = controller or ClusterController(self.options)
        self.sub_title = (
            self.options.context or ClusterController.resolve_current_context() or ""
        )

    def on_mount(self) -> None:
        self.push_screen(UtilizationScreen(self.controller))

    def action_refresh(self) -> None:
        """Refresh the active utilization screen."""
        screen = self.screen
        if isinstance(screen, UtilizationScreen):
            screen.action_refresh()
