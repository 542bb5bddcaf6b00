"""Node fetcher for cluster controller - fetches node allocatable data from Kubernetes cluster."""

from __future__ import annotations

import logging
from typing import Any

from kubeutil.models.state.fetch_options import FetchOptions

logger = logging.getLogger(__name__)


class NodeFetcher:
    """Fetches schedulable nodes as tab-separated name/cpu/memory lines."""

    _JSONPATH = (
        "{range .items[*]}"
        "{.metadata.name}{'\\t'}"
        "{.status.allocatable.cpu}{'\\t'}"
        "{.status.allocatable.memory}{'\\n'}"
        "{end}"
    )

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    def build_args(self, options: FetchOptions) -> tuple[str, ...]:
        """Build the node query arguments (without --context)."""
        return (
            "get",
            "nodes",
            *options.selector_args(),
            "--field-selector=spec.unschedulable=false",
            f"-o=jsonpath={self._JSONPATH}",
            f"--request-timeout={options.request_timeout}",
        )

    async def fetch_nodes_raw(self, options: FetchOptions) -> str:
        """Fetch raw node lines."""
        output = await self._run_kubectl(self.build_args(options))
        logger.debug("Fetched node data (%d bytes)", len(output))
        return output
