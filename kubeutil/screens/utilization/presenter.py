"""Utilization screen presenter - data loading, state management, and status text."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from rich.markup import escape
from textual.message import Message

from kubeutil.constants.enums import FetchState
from kubeutil.controllers import ClusterController
from kubeutil.errors import KubeUtilError
from kubeutil.models.core.utilization_table import UtilizationTable

logger = logging.getLogger(__name__)


# =============================================================================
# Worker Messages
# =============================================================================


class UtilizationDataLoaded(Message):
    """Message indicating all utilization tables have been built."""


class UtilizationDataLoadFailed(Message):
    """Message indicating utilization loading failed."""

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


class UtilizationPresenter:
    """Presenter for UtilizationScreen - handles data loading, state, and formatting."""

    _ERROR_MAX_LENGTH = 160

    def __init__(self, screen: Any, controller: ClusterController) -> None:
        self._screen = screen
        self._controller = controller
        self._tables: dict[str, UtilizationTable] = {}
        self._is_loading = False
        self._error_message = ""
        self._last_updated: datetime | None = None

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def controller(self) -> ClusterController:
        return self._controller

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def last_updated(self) -> datetime | None:
        return self._last_updated

    def get_table(self, key: str) -> UtilizationTable | None:
        return self._tables.get(key)

    def failed_sources(self) -> list[str]:
        """Return the names of data sources whose last fetch failed."""
        return [
            name
            for name, status in self._controller.get_all_fetch_states().items()
            if status.state == FetchState.ERROR
        ]

    # =========================================================================
    # Loading
    # =========================================================================

    def load_data(self) -> None:
        """Start loading utilization data in a worker."""
        self._is_loading = True
        self._error_message = ""
        self._screen.run_worker(
            self._load_utilization_worker, name="utilization-data", exclusive=True
        )

    @classmethod
    def _friendly_error(cls, error: BaseException) -> str:
        """Convert an exception to a short single-line message."""
        msg = " ".join(str(error).split())
        if len(msg) > cls._ERROR_MAX_LENGTH:
            return msg[: cls._ERROR_MAX_LENGTH - 3] + "..."
        return msg or type(error).__name__

    async def _load_utilization_worker(self) -> None:
        try:
            tables = await self._controller.fetch_all()
        except KubeUtilError as exc:
            logger.warning("Utilization load failed: %s", exc)
            self._error_message = self._friendly_error(exc)
            self._is_loading = False
            self._screen.post_message(UtilizationDataLoadFailed(self._error_message))
            return

        self._tables = tables
        self._last_updated = datetime.now()
        self._is_loading = False
        self._screen.post_message(UtilizationDataLoaded())

    # =========================================================================
    # Status text
    # =========================================================================

    def status_text(self) -> str:
        """Return the status line for the current state."""
        context = self._controller.context or "current context"
        if self._is_loading:
            return f"Loading utilization from {context}..."
        if self._error_message:
            failed = self.failed_sources()
            label = f"Error ({', '.join(failed)}):" if failed else "Error:"
            return f"[red]{label}[/red] {escape(self._error_message)}"
        if self._last_updated is None:
            return "No data loaded"
        return f"{context} - updated {self._last_updated:%H:%M:%S}"
