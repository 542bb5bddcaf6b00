"""Parsers for cluster controller."""

from kubeutil.controllers.cluster.parsers.node_parser import NodeParser
from kubeutil.controllers.cluster.parsers.pod_parser import PodParser

__all__ = ["NodeParser", "PodParser"]
