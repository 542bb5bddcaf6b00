"""Node parser for cluster controller - parses node lines into NodeRow records."""

from __future__ import annotations

from kubeutil.errors import RowParseError
from kubeutil.models.core.node_info import NodeRow


class NodeParser:
    """Parses tab-separated node lines into NodeRow records."""

    _FIELD_COUNT = 3

    def parse_node_line(self, line: str) -> NodeRow:
        """Parse one ``name<TAB>cpu<TAB>memory`` line.

        Raises:
            RowParseError: If the line does not have exactly three fields.
        """
        fields = line.split("\t")
        if len(fields) != self._FIELD_COUNT:
            raise RowParseError(
                f"Expected {self._FIELD_COUNT} node fields, got {len(fields)}: {line!r}"
            )
        name, cpu, memory = (field.strip() for field in fields)
        return NodeRow(name=name, cpu=cpu, memory=memory)

    def parse_nodes(self, output: str) -> list[NodeRow]:
        """Parse kubectl output into node rows, skipping blank lines."""
        return [
            self.parse_node_line(line)
            for line in output.splitlines()
            if line.strip()
        ]
