"""Fetchers for cluster controller."""

from kubeutil.controllers.cluster.fetchers.node_fetcher import NodeFetcher
from kubeutil.controllers.cluster.fetchers.pod_fetcher import PodFetcher

__all__ = ["NodeFetcher", "PodFetcher"]
