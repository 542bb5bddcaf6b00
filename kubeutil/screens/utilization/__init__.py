"""Utilization screen package."""

from kubeutil.screens.utilization.node_detail_screen import NodeDetailScreen
from kubeutil.screens.utilization.utilization_screen import UtilizationScreen

__all__ = ["NodeDetailScreen", "UtilizationScreen"]
