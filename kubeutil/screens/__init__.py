"""Screens for the kubeutil interactive shell."""

from kubeutil.screens.utilization import NodeDetailScreen, UtilizationScreen

__all__ = ["NodeDetailScreen", "UtilizationScreen"]
