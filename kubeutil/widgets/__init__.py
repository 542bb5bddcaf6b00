"""Widgets for the kubeutil interactive shell."""

from kubeutil.widgets.data import UtilizationDataTable

__all__ = ["UtilizationDataTable"]
