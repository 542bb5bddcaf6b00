"""Utilization screen configuration."""

from typing import Final

from kubeutil.controllers import ClusterController

TAB_CLUSTER: Final = "tab-cluster"
TAB_NODES: Final = "tab-nodes"
TAB_INVENTORY: Final = "tab-inventory"

TAB_IDS: Final = (TAB_CLUSTER, TAB_NODES, TAB_INVENTORY)

TAB_TITLES: Final = {
    TAB_CLUSTER: "Cluster",
    TAB_NODES: "Nodes",
    TAB_INVENTORY: "Node Inventory",
}

# tab id -> (table widget id, presenter table key)
TAB_TABLES: Final = {
    TAB_CLUSTER: ("cluster-table", ClusterController.KEY_CLUSTER),
    TAB_NODES: ("nodes-table", ClusterController.KEY_NODES),
    TAB_INVENTORY: ("inventory-table", ClusterController.KEY_INVENTORY),
}
