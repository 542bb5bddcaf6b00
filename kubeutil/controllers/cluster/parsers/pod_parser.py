"""Pod parser for cluster controller - parses pod lines into PodRow records."""

from __future__ import annotations

from kubeutil.errors import RowParseError
from kubeutil.models.core.pod_info import PodRow


class PodParser:
    """Parses tab-separated pod lines into PodRow records."""

    _FIELDS = (
        "namespace",
        "name",
        "node_name",
        "cpu_request",
        "memory_request",
        "cpu_limit",
        "memory_limit",
    )

    def parse_pod_line(self, line: str) -> PodRow:
        """Parse one pod line.

        Columns: namespace, name, node name, CPU requests, memory requests,
        CPU limits, memory limits. Unscheduled pods have an empty node name.

        Raises:
            RowParseError: If the line does not have exactly seven fields.
        """
        fields = line.split("\t")
        if len(fields) != len(self._FIELDS):
            raise RowParseError(
                f"Expected {len(self._FIELDS)} pod fields, got {len(fields)}: {line!r}"
            )
        return PodRow(
            **{key: value.strip() for key, value in zip(self._FIELDS, fields)}
        )

    def parse_pods(self, output: str) -> list[PodRow]:
        """Parse kubectl output into pod rows, skipping blank lines."""
        return [
            self.parse_pod_line(line)
            for line in output.splitlines()
            if line.strip()
        ]
