"""Node inventory models."""

from pydantic import BaseModel, ConfigDict


class NodeRow(BaseModel):
    """One schedulable node and its raw allocatable quantities."""

    model_config = ConfigDict(frozen=True)

    name: str
    cpu: str
    memory: str
