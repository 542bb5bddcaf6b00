"""Data models for kubeutil."""

from kubeutil.models.core.node_info import NodeRow
from kubeutil.models.core.pod_info import PodRow
from kubeutil.models.core.utilization_table import TableRow, UtilizationTable
from kubeutil.models.state.fetch_options import FetchOptions

__all__ = [
    "FetchOptions",
    "NodeRow",
    "PodRow",
    "TableRow",
    "UtilizationTable",
]
