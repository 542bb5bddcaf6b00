"""Controllers module.

This module provides controllers for fetching Kubernetes node and pod
inventories and turning them into utilization tables.
"""

from __future__ import annotations

from kubeutil.controllers.base import BaseController
from kubeutil.controllers.cluster.controller import (
    ClusterController,
    FetchStatus,
    Inventory,
)

__all__ = [
    "BaseController",
    "ClusterController",
    "FetchStatus",
    "Inventory",
]
