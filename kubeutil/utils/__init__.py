"""Utility functions for quantity parsing and utilization formatting."""

from kubeutil.utils.resource_parser import (
    format_cpu_cores,
    format_memory_bytes,
    memory_str_to_bytes,
    parse_cpu_millicores,
    sum_quantity_cell,
)
from kubeutil.utils.utilization import (
    format_cluster_utilization,
    format_node_list,
    format_node_utilization,
    free,
    percentage,
    schedulable,
    sum_size,
    sum_time,
)

__all__ = [
    "format_cluster_utilization",
    "format_cpu_cores",
    "format_memory_bytes",
    "format_node_list",
    "format_node_utilization",
    "free",
    "memory_str_to_bytes",
    "parse_cpu_millicores",
    "percentage",
    "schedulable",
    "sum_quantity_cell",
    "sum_size",
    "sum_time",
]
