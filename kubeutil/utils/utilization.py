"""Utilization aggregation and table formatting.

Folds already-fetched node and pod rows into display-ready tables:
- format_cluster_utilization(): one CPU row and one Memory row for the cluster
- format_node_utilization(): one row per node
- format_node_list(): the node inventory with allocatable capacity

All functions are pure; quantity parse errors propagate to the caller.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from kubeutil.constants.values import (
    CLUSTER_COLUMNS,
    CLUSTER_SUBJECT_LABEL,
    ERR_MARKER,
    NODE_COLUMNS,
    NODE_LIST_COLUMNS,
    NODE_LIST_TITLE,
    NODE_SUBJECT_LABEL,
    ROW_CPU,
    ROW_MEMORY,
    ZERO_PERCENT,
)
from kubeutil.models.core.node_info import NodeRow
from kubeutil.models.core.pod_info import PodRow
from kubeutil.models.core.utilization_table import TableRow, UtilizationTable
from kubeutil.utils.resource_parser import (
    format_cpu_cores,
    format_memory_bytes,
    memory_str_to_bytes,
    parse_cpu_millicores,
    sum_quantity_cell,
)


def sum_time(rows: Iterable[BaseModel], field: str) -> float:
    """Sum a CPU-valued field across rows, in millicores."""
    return sum(
        (sum_quantity_cell(getattr(row, field), parse_cpu_millicores) for row in rows),
        0.0,
    )


def sum_size(rows: Iterable[BaseModel], field: str) -> float:
    """Sum a memory-valued field across rows, in bytes."""
    return sum(
        (sum_quantity_cell(getattr(row, field), memory_str_to_bytes) for row in rows),
        0.0,
    )


def percentage(used: float, capacity: float) -> str:
    """Format used/capacity as a percentage.

    Returns "Err" when capacity is zero and "0%" when nothing is used.
    """
    if used > 0 and capacity > 0:
        return f"{used * 100 / capacity:.2f}%"
    if capacity > 0:
        return ZERO_PERCENT
    return ERR_MARKER


def schedulable(requested: float, allocatable: float) -> float:
    """Capacity left before requests exceed allocatable; never negative."""
    if allocatable >= requested:
        return allocatable - requested
    return 0


def free(requested: float, limited: float, allocatable: float) -> float:
    """Capacity left after the larger of requests and limits; never negative."""
    used = max(requested, limited)
    if allocatable > used:
        return allocatable - used
    return 0


class _Totals(BaseModel):
    """Summed quantities for one subject (cluster or node)."""

    alloc_cpu: float = 0.0
    alloc_mem: float = 0.0
    req_cpu: float = 0.0
    req_mem: float = 0.0
    lim_cpu: float = 0.0
    lim_mem: float = 0.0

    @classmethod
    def from_rows(
        cls, nodes: Sequence[NodeRow], pods: Sequence[PodRow]
    ) -> _Totals:
        return cls(
            alloc_cpu=sum_time(nodes, "cpu"),
            alloc_mem=sum_size(nodes, "memory"),
            req_cpu=sum_time(pods, "cpu_request"),
            req_mem=sum_size(pods, "memory_request"),
            lim_cpu=sum_time(pods, "cpu_limit"),
            lim_mem=sum_size(pods, "memory_limit"),
        )


def format_cluster_utilization(
    nodes: Sequence[NodeRow], pods: Sequence[PodRow]
) -> UtilizationTable:
    """Build the cluster-wide CPU/Memory utilization table."""
    t = _Totals.from_rows(nodes, pods)

    cpu_row = TableRow(
        name=ROW_CPU,
        attributes=[
            format_cpu_cores(t.req_cpu),
            percentage(t.req_cpu, t.alloc_cpu),
            format_cpu_cores(t.lim_cpu),
            percentage(t.lim_cpu, t.alloc_cpu),
            format_cpu_cores(t.alloc_cpu),
            format_cpu_cores(schedulable(t.req_cpu, t.alloc_cpu)),
            format_cpu_cores(free(t.req_cpu, t.lim_cpu, t.alloc_cpu)),
        ],
    )
    mem_row = TableRow(
        name=ROW_MEMORY,
        attributes=[
            format_memory_bytes(t.req_mem),
            percentage(t.req_mem, t.alloc_mem),
            format_memory_bytes(t.lim_mem),
            percentage(t.lim_mem, t.alloc_mem),
            format_memory_bytes(t.alloc_mem),
            format_memory_bytes(schedulable(t.req_mem, t.alloc_mem)),
            format_memory_bytes(free(t.req_mem, t.lim_mem, t.alloc_mem)),
        ],
    )
    return UtilizationTable(
        header=TableRow(name=CLUSTER_SUBJECT_LABEL, attributes=list(CLUSTER_COLUMNS)),
        body=[cpu_row, mem_row],
    )


def format_node_utilization(
    nodes: Sequence[NodeRow], pods: Sequence[PodRow]
) -> UtilizationTable:
    """Build the per-node utilization table.

    A pod counts toward the node whose name equals its node_name exactly;
    unscheduled pods and pods on unlisted nodes count toward none.
    """
    pods_by_node: dict[str, list[PodRow]] = defaultdict(list)
    for pod in pods:
        pods_by_node[pod.node_name].append(pod)

    body: list[TableRow] = []
    for node in nodes:
        t = _Totals.from_rows([node], pods_by_node.get(node.name, []))
        body.append(
            TableRow(
                name=node.name,
                attributes=[
                    format_cpu_cores(t.req_cpu),
                    percentage(t.req_cpu, t.alloc_cpu),
                    format_cpu_cores(t.lim_cpu),
                    percentage(t.lim_cpu, t.alloc_cpu),
                    format_memory_bytes(t.req_mem),
                    percentage(t.req_mem, t.alloc_mem),
                    format_memory_bytes(t.lim_mem),
                    percentage(t.lim_mem, t.alloc_mem),
                ],
            )
        )

    return UtilizationTable(
        header=TableRow(name=NODE_SUBJECT_LABEL, attributes=list(NODE_COLUMNS)),
        body=body,
    )


def node_detail_command(node_name: str, context: str | None = None) -> str:
    """Return the kubectl command that shows one node in detail."""
    context_part = f" --context {context}" if context else ""
    return f"kubectl{context_part} get node {node_name} -o yaml"


def format_node_list(
    nodes: Sequence[NodeRow], context: str | None = None
) -> UtilizationTable:
    """Build the node inventory table with pretty-printed allocatable capacity."""
    body = [
        TableRow(
            name=node.name,
            attributes=[
                format_cpu_cores(sum_time([node], "cpu")),
                format_memory_bytes(sum_size([node], "memory")),
            ],
            command=node_detail_command(node.name, context),
        )
        for node in nodes
    ]
    return UtilizationTable(
        title=NODE_LIST_TITLE,
        header=TableRow(name=NODE_SUBJECT_LABEL, attributes=list(NODE_LIST_COLUMNS)),
        body=body,
    )
