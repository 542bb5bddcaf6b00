"""Table widgets."""

from kubeutil.widgets.data.tables.utilization_table import UtilizationDataTable

__all__ = ["UtilizationDataTable"]
