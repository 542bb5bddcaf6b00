"""Tests for node and pod parsers."""

from __future__ import annotations

import pytest

from kubeutil.controllers.cluster.parsers import NodeParser, PodParser
from kubeutil.errors import RowParseError


class TestNodeParser:
    """Tests for NodeParser class."""

    @pytest.fixture
    def parser(self) -> NodeParser:
        """Create NodeParser instance."""
        return NodeParser()

    def test_parse_node_line(self, parser: NodeParser) -> None:
        """A tab-separated line becomes a NodeRow."""
        row = parser.parse_node_line("ip-10-0-1-10\t4\t16331900Ki")
        assert row.name == "ip-10-0-1-10"
        assert row.cpu == "4"
        assert row.memory == "16331900Ki"

    def test_parse_nodes_skips_blank_lines(self, parser: NodeParser) -> None:
        """Trailing newlines and blank lines are ignored."""
        output = "node-a\t4\t8Gi\n\nnode-b\t3920m\t7Gi\n"
        rows = parser.parse_nodes(output)
        assert [row.name for row in rows] == ["node-a", "node-b"]
        assert rows[1].cpu == "3920m"

    def test_parse_nodes_empty_output(self, parser: NodeParser) -> None:
        """No output means no nodes."""
        assert parser.parse_nodes("") == []

    def test_wrong_field_count_raises(self, parser: NodeParser) -> None:
        """Lines with the wrong shape are rejected."""
        with pytest.raises(RowParseError, match="Expected 3 node fields"):
            parser.parse_node_line("node-a\t4")


class TestPodParser:
    """Tests for PodParser class."""

    @pytest.fixture
    def parser(self) -> PodParser:
        """Create PodParser instance."""
        return PodParser()

    def test_parse_pod_line(self, parser: PodParser) -> None:
        """All seven columns map to named fields."""
        row = parser.parse_pod_line(
            "kube-system\tcoredns-abc\tnode-a\t100m\t70Mi\t\t170Mi"
        )
        assert row.namespace == "kube-system"
        assert row.name == "coredns-abc"
        assert row.node_name == "node-a"
        assert row.cpu_request == "100m"
        assert row.memory_request == "70Mi"
        assert row.cpu_limit == ""
        assert row.memory_limit == "170Mi"

    def test_parse_multi_container_values(self, parser: PodParser) -> None:
        """Container values stay space-separated within a column."""
        row = parser.parse_pod_line("default\tweb\tnode-b\t100m 50m\t64Mi 32Mi\t\t")
        assert row.cpu_request == "100m 50m"
        assert row.memory_request == "64Mi 32Mi"

    def test_unscheduled_pod_has_empty_node(self, parser: PodParser) -> None:
        """Pending pods without a node keep an empty node name."""
        row = parser.parse_pod_line("default\tpending\t\t1\t1Gi\t\t")
        assert row.node_name == ""

    def test_parse_pods(self, parser: PodParser) -> None:
        """Multiple lines parse in order."""
        output = "a\tp1\tn1\t\t\t\t\nb\tp2\tn2\t1\t\t\t\n"
        rows = parser.parse_pods(output)
        assert [(row.namespace, row.name) for row in rows] == [("a", "p1"), ("b", "p2")]

    def test_wrong_field_count_raises(self, parser: PodParser) -> None:
        """Lines with the wrong shape are rejected."""
        with pytest.raises(RowParseError, match="Expected 7 pod fields"):
            parser.parse_pod_line("default\tweb\tnode-a")
