"""Constants module.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, column labels with Final)
- timeouts.py: Timeout values
"""

from kubeutil.constants.enums import FetchState
from kubeutil.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubeutil.constants.values import (
    APP_TITLE,
    CLUSTER_COLUMNS,
    ERR_MARKER,
    NODE_COLUMNS,
    NODE_LIST_COLUMNS,
)

__all__ = [
    "APP_TITLE",
    "CLUSTER_COLUMNS",
    "CLUSTER_REQUEST_TIMEOUT",
    "ERR_MARKER",
    "FetchState",
    "KUBECTL_COMMAND_TIMEOUT",
    "NODE_COLUMNS",
    "NODE_LIST_COLUMNS",
]
