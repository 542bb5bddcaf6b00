"""Pod fetcher for cluster controller - fetches pod request/limit data from Kubernetes cluster."""

from __future__ import annotations

import logging
from typing import Any

from kubeutil.models.state.fetch_options import FetchOptions

logger = logging.getLogger(__name__)


class PodFetcher:
    """Fetches non-terminated pods with their container requests and limits."""

    # Succeeded/Failed pods no longer hold node resources.
    _FIELD_SELECTOR = "status.phase!=Succeeded,status.phase!=Failed"
    _JSONPATH = (
        "{range .items[*]}"
        "{.metadata.namespace}{'\\t'}"
        "{.metadata.name}{'\\t'}"
        "{.spec.nodeName}{'\\t'}"
        "{.spec.containers[*].resources.requests.cpu}{'\\t'}"
        "{.spec.containers[*].resources.requests.memory}{'\\t'}"
        "{.spec.containers[*].resources.limits.cpu}{'\\t'}"
        "{.spec.containers[*].resources.limits.memory}{'\\n'}"
        "{end}"
    )

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    def build_args(self, options: FetchOptions) -> tuple[str, ...]:
        """Build the pod query arguments (without --context).

        The label selector targets nodes, so it is not applied to pods.
        """
        return (
            "get",
            "pods",
            "--all-namespaces",
            f"--field-selector={self._FIELD_SELECTOR}",
            f"-o=jsonpath={self._JSONPATH}",
            f"--request-timeout={options.request_timeout}",
        )

    async def fetch_pods_raw(self, options: FetchOptions) -> str:
        """Fetch raw pod lines."""
        output = await self._run_kubectl(self.build_args(options))
        logger.debug("Fetched pod data (%d bytes)", len(output))
        return output
