"""Tests for UtilizationPresenter."""

from __future__ import annotations

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from kubeutil.controllers import ClusterController
from kubeutil.errors import KubectlError
from kubeutil.models.core.utilization_table import TableRow, UtilizationTable
from kubeutil.models.state.fetch_options import FetchOptions
from kubeutil.screens.utilization.presenter import (
    UtilizationDataLoaded,
    UtilizationDataLoadFailed,
    UtilizationPresenter,
)


def _table(name: str) -> UtilizationTable:
    return UtilizationTable(header=TableRow(name=name))


@pytest.fixture
def screen() -> MagicMock:
    """Mock screen with run_worker/post_message."""
    return MagicMock()


@pytest.fixture
def controller() -> ClusterController:
    """Controller with fetch_all mocked."""
    controller = ClusterController(FetchOptions(context="prod"))
    controller.fetch_all = AsyncMock(  # type: ignore[method-assign]
        return_value={
            "cluster": _table("Resource"),
            "nodes": _table("Node"),
            "inventory": _table("Node"),
        }
    )
    return controller


class TestUtilizationPresenter:
    """Tests for UtilizationPresenter."""

    def test_initial_state(self, screen: MagicMock, controller: ClusterController) -> None:
        """Nothing loaded yet."""
        presenter = UtilizationPresenter(screen, controller)
        assert not presenter.is_loading
        assert presenter.error_message == ""
        assert presenter.last_updated is None
        assert presenter.get_table("cluster") is None
        assert presenter.status_text() == "No data loaded"

    def test_load_data_starts_worker(
        self, screen: MagicMock, controller: ClusterController
    ) -> None:
        """load_data runs an exclusive worker."""
        presenter = UtilizationPresenter(screen, controller)
        presenter.load_data()
        assert presenter.is_loading
        assert presenter.status_text() == "Loading utilization from prod..."
        screen.run_worker.assert_called_once()
        assert screen.run_worker.call_args.kwargs["exclusive"] is True

    @pytest.mark.asyncio
    async def test_worker_success(
        self, screen: MagicMock, controller: ClusterController
    ) -> None:
        """A successful load stores tables and posts UtilizationDataLoaded."""
        presenter = UtilizationPresenter(screen, controller)
        presenter.load_data()
        await presenter._load_utilization_worker()

        assert not presenter.is_loading
        assert presenter.get_table("cluster") is not None
        assert isinstance(presenter.last_updated, datetime)
        message = screen.post_message.call_args.args[0]
        assert isinstance(message, UtilizationDataLoaded)
        assert presenter.status_text().startswith("prod - updated ")

    @pytest.mark.asyncio
    async def test_worker_failure(
        self, screen: MagicMock, controller: ClusterController
    ) -> None:
        """A kubectl failure posts UtilizationDataLoadFailed with the message."""
        controller.fetch_all = AsyncMock(  # type: ignore[method-assign]
            side_effect=KubectlError("Unable to connect to the server\n  dial tcp")
        )
        presenter = UtilizationPresenter(screen, controller)
        await presenter._load_utilization_worker()

        message = screen.post_message.call_args.args[0]
        assert isinstance(message, UtilizationDataLoadFailed)
        assert message.error == "Unable to connect to the server dial tcp"
        assert "Error:" in presenter.status_text()

    def test_friendly_error_truncates(self) -> None:
        """Long messages are shortened."""
        text = UtilizationPresenter._friendly_error(KubectlError("x" * 500))
        assert len(text) == 160
        assert text.endswith("...")

    @pytest.mark.asyncio
    async def test_status_names_failed_source(self, screen: MagicMock) -> None:
        """The error status names the data source that failed."""
        controller = ClusterController(FetchOptions(context="prod"))

        async def run(args: tuple[str, ...]) -> str:
            if args[1] == "pods":
                raise KubectlError("pods is forbidden")
            return "node-a\t4\t8Gi\n"

        controller._node_fetcher._run_kubectl = run
        controller._pod_fetcher._run_kubectl = run
        presenter = UtilizationPresenter(screen, controller)
        await presenter._load_utilization_worker()

        assert presenter.failed_sources() == ["pods"]
        assert presenter.status_text() == "[red]Error (pods):[/red] pods is forbidden"

    def test_status_without_failed_source(
        self, screen: MagicMock, controller: ClusterController
    ) -> None:
        """Nothing failed means no sources are named."""
        presenter = UtilizationPresenter(screen, controller)
        assert presenter.failed_sources() == []
