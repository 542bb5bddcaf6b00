"""Cluster controller for utilization data operations.

This module orchestrates the node and pod fetchers, runs kubectl, and hands the
parsed rows to the utilization formatters.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
from dataclasses import dataclass, field
from datetime import datetime, timezone
from kubeutil.constants.enums import FetchState
from kubeutil.constants.timeouts import KUBECTL_COMMAND_TIMEOUT
from kubeutil.controllers.base import BaseController
from kubeutil.controllers.cluster.fetchers import NodeFetcher, PodFetcher
from kubeutil.controllers.cluster.parsers import NodeParser, PodParser
from kubeutil.errors import KubectlError
from kubeutil.models.core.node_info import NodeRow
from kubeutil.models.core.pod_info import PodRow
from kubeutil.models.core.utilization_table import UtilizationTable
from kubeutil.models.state.fetch_options import FetchOptions
from kubeutil.utils.utilization import (
    format_cluster_utilization,
    format_node_list,
    format_node_utilization,
)

logger = logging.getLogger(__name__)


@dataclass
class FetchStatus:
    """Status tracking for a single data source fetch operation."""

    source_name: str
    state: FetchState = FetchState.IDLE
    error_message: str | None = None
    last_updated: datetime | None = None


@dataclass
class Inventory:
    """Node and pod rows fetched together."""

    nodes: list[NodeRow] = field(default_factory=list)
    pods: list[PodRow] = field(default_factory=list)


class ClusterController(BaseController):
    """Cluster utilization data operations with parallel fetching.

    Nodes and pods are fetched concurrently; any failure aborts the whole
    operation and propagates to the caller.
    """

    SOURCE_NODES = "nodes"
    SOURCE_PODS = "pods"

    KEY_CLUSTER = "cluster"
    KEY_NODES = "nodes"
    KEY_INVENTORY = "inventory"

    def __init__(self, options: FetchOptions | None = None):
        """Initialize the cluster controller.

        Args:
            options: Context, selector and timeout for every kubectl query.
        """
        super().__init__()
        self.options = options or FetchOptions()

        self._node_fetcher = NodeFetcher(self._run_kubectl)
        self._pod_fetcher = PodFetcher(self._run_kubectl)
        self._node_parser = NodeParser()
        self._pod_parser = PodParser()

        self._fetch_states: dict[str, FetchStatus] = {
            source: FetchStatus(source_name=source)
            for source in (self.SOURCE_NODES, self.SOURCE_PODS)
        }

    @property
    def context(self) -> str | None:
        return self.options.context

    @staticmethod
    def resolve_current_context(timeout_seconds: int = 8) -> str | None:
        """Resolve active kubectl context name from local kubeconfig."""
        try:
            result = subprocess.run(
                ["kubectl", "config", "current-context"],
                capture_output=True,
                text=True,
                timeout=max(1, timeout_seconds),
            )
        except (OSError, subprocess.TimeoutExpired):
            return None

        if result.returncode != 0:
            return None
        resolved = (result.stdout or "").strip()
        return resolved or None

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = ["kubectl", *self.options.context_args(), *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=timeout
            )
        except FileNotFoundError as exc:
            raise KubectlError("kubectl not found in PATH") from exc
        except subprocess.TimeoutExpired as exc:
            raise KubectlError(f"kubectl timed out after {timeout}s") from exc
        except OSError as exc:
            raise KubectlError(f"Could not run kubectl: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise KubectlError(f"kubectl output is not valid UTF-8: {exc}") from exc
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise KubectlError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    def _update_fetch_state(
        self,
        source: str,
        state: FetchState,
        error_message: str | None = None,
    ) -> None:
        status = self._fetch_states[source]
        status.state = state
        status.error_message = error_message
        status.last_updated = datetime.now(timezone.utc)

    def get_all_fetch_states(self) -> dict[str, FetchStatus]:
        return dict(self._fetch_states)

    async def check_connection(self) -> bool:
        """Return True when the API server answers a readiness probe."""
        try:
            await self._run_kubectl(
                ("get", "--raw", "/readyz", f"--request-timeout={self.options.request_timeout}")
            )
        except KubectlError as exc:
            logger.warning("Cluster connection check failed: %s", exc)
            return False
        return True

    async def fetch_nodes(self) -> list[NodeRow]:
        """Fetch and parse schedulable nodes."""
        self._update_fetch_state(self.SOURCE_NODES, FetchState.LOADING)
        try:
            output = await self._node_fetcher.fetch_nodes_raw(self.options)
            nodes = self._node_parser.parse_nodes(output)
        except Exception as exc:
            self._update_fetch_state(self.SOURCE_NODES, FetchState.ERROR, str(exc))
            raise
        self._update_fetch_state(self.SOURCE_NODES, FetchState.SUCCESS)
        return nodes

    async def fetch_pods(self) -> list[PodRow]:
        """Fetch and parse non-terminated pods."""
        self._update_fetch_state(self.SOURCE_PODS, FetchState.LOADING)
        try:
            output = await self._pod_fetcher.fetch_pods_raw(self.options)
            pods = self._pod_parser.parse_pods(output)
        except Exception as exc:
            self._update_fetch_state(self.SOURCE_PODS, FetchState.ERROR, str(exc))
            raise
        self._update_fetch_state(self.SOURCE_PODS, FetchState.SUCCESS)
        return pods

    async def fetch_inventory(self) -> Inventory:
        """Fetch nodes and pods in parallel.

        With a node selector, only pods bound to a selected node are kept so
        totals are measured against the same nodes as allocatable.
        """
        try:
            nodes, pods = await asyncio.gather(self.fetch_nodes(), self.fetch_pods())
        except Exception:
            logger.debug("Error fetching cluster inventory", exc_info=True)
            raise
        if self.options.selector:
            node_names = {node.name for node in nodes}
            pods = [pod for pod in pods if pod.node_name in node_names]
        logger.debug("Fetched %d nodes and %d pods", len(nodes), len(pods))
        return Inventory(nodes=nodes, pods=pods)

    async def cluster_utilization(self) -> UtilizationTable:
        """Fetch inventory and build the cluster-wide table."""
        inventory = await self.fetch_inventory()
        return format_cluster_utilization(inventory.nodes, inventory.pods)

    async def node_utilization(self) -> UtilizationTable:
        """Fetch inventory and build the per-node table."""
        inventory = await self.fetch_inventory()
        return format_node_utilization(inventory.nodes, inventory.pods)

    async def node_list(self) -> UtilizationTable:
        """Fetch nodes and build the node inventory table."""
        nodes = await self.fetch_nodes()
        return format_node_list(nodes, self.context)

    async def fetch_all(self) -> dict[str, UtilizationTable]:
        """Fetch once and build every table."""
        inventory = await self.fetch_inventory()
        return {
            self.KEY_CLUSTER: format_cluster_utilization(inventory.nodes, inventory.pods),
            self.KEY_NODES: format_node_utilization(inventory.nodes, inventory.pods),
            self.KEY_INVENTORY: format_node_list(inventory.nodes, self.context),
        }

    async def get_node_yaml(self, node_name: str) -> str:
        """Return ``kubectl get node NAME -o yaml`` output."""
        return await self._run_kubectl(
            (
                "get",
                "node",
                node_name,
                "-o",
                "yaml",
                f"--request-timeout={self.options.request_timeout}",
            )
        )
