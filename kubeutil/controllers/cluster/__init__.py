"""Init file for cluster module."""

from kubeutil.controllers.cluster.fetchers import NodeFetcher, PodFetcher
from kubeutil.controllers.cluster.parsers import NodeParser, PodParser

__all__ = ["NodeFetcher", "NodeParser", "PodFetcher", "PodParser"]
