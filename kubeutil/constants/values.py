"""Scalar constants.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "kubeutil"

# ============================================================================
# Utilization table text
# ============================================================================

# Shown instead of a percentage when capacity is zero.
ERR_MARKER: Final = "Err"
ZERO_PERCENT: Final = "0%"

ROW_CPU: Final = "CPU"
ROW_MEMORY: Final = "Memory"

CLUSTER_SUBJECT_LABEL: Final = "Resource"
CLUSTER_COLUMNS: Final = (
    "Requests",
    "%Requests",
    "Limits",
    "%Limits",
    "Allocatable",
    "Schedulable",
    "Free",
)

NODE_SUBJECT_LABEL: Final = "Node"
NODE_COLUMNS: Final = (
    "CPU Requests",
    "CPU %Requests",
    "CPU Limits",
    "CPU %Limits",
    "Mem Requests",
    "Mem %Requests",
    "Mem Limits",
    "Mem %Limits",
)

NODE_LIST_TITLE: Final = "Nodes"
NODE_LIST_COLUMNS: Final = ("CPU", "Memory")

# ============================================================================
# Environment variables
# ============================================================================

ENV_CONTEXT: Final = "KUBEUTIL_CONTEXT"
ENV_SELECTOR: Final = "KUBEUTIL_SELECTOR"
ENV_REQUEST_TIMEOUT: Final = "KUBEUTIL_REQUEST_TIMEOUT"
