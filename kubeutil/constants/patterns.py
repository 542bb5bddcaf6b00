"""Regex patterns for data parsing."""

import re

# Kubernetes quantity: signed decimal number, optional exponent, optional suffix.
QUANTITY_PATTERN = re.compile(
    r"^(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+))"
    r"(?:[eE](?P<exponent>[+-]?\d+))?"
    r"(?P<suffix>[A-Za-z]*)$"
)

# kubectl duration accepted by --request-timeout (e.g. "30s", "1m", "500ms", "0").
KUBECTL_DURATION_PATTERN = re.compile(r"^(?:0|(?:\d+(?:\.\d+)?(?:ns|us|ms|s|m|h))+)$")

__all__ = [
    "KUBECTL_DURATION_PATTERN",
    "QUANTITY_PATTERN",
]
