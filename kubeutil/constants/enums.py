"""All enum definitions.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum


class FetchState(Enum):
    """Data fetch state values."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
