"""Pod inventory models."""

from pydantic import BaseModel, ConfigDict


class PodRow(BaseModel):
    """One pod with its raw request and limit quantities.

    Each quantity field holds the whitespace-separated values of the pod's
    containers; an empty string means no container sets it.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    name: str
    node_name: str = ""
    cpu_request: str = ""
    memory_request: str = ""
    cpu_limit: str = ""
    memory_limit: str = ""
