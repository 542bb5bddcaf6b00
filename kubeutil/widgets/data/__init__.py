"""Data display widgets."""

from kubeutil.widgets.data.tables import UtilizationDataTable

__all__ = ["UtilizationDataTable"]
