"""Tests for structural validators."""

from graph_builders import make_edges, make_node

from flowguard.models import FindingKind, Severity
from flowguard.validation.structural import (
    validate_end_has_no_outgoing,
    validate_end_nodes,
    validate_no_orphans,
    validate_start_has_outgoing,
    validate_start_node,
)


class TestValidateStartNode:
    """Tests for validate_start_node."""

    def test_single_start_node(self):
        """Test validation passes with exactly one start node."""
        nodes = [make_node("s", "start"), make_node("f", "end")]

        assert validate_start_node(nodes) == []

    def test_missing_start_node(self):
        """Test a graph without a start node is a structure error."""
        nodes = [make_node("f", "end")]

        findings = validate_start_node(nodes)
        assert len(findings) == 1
        assert findings[0].code == "missing_start_node"
        assert findings[0].kind == FindingKind.STRUCTURE
        assert findings[0].severity == Severity.ERROR
        assert findings[0].node_ids == []

    def test_empty_graph(self):
        """Test an empty node list reports a missing start node."""
        findings = validate_start_node([])
        assert [f.code for f in findings] == ["missing_start_node"]

    def test_multiple_start_nodes(self):
        """Test every start node is listed when there are several."""
        nodes = [
            make_node("s1", "start"),
            make_node("a", "action"),
            make_node("s2", "start"),
        ]

        findings = validate_start_node(nodes)
        assert len(findings) == 1
        assert findings[0].code == "multiple_start_nodes"
        assert findings[0].node_ids == ["s1", "s2"]
        assert "2" in findings[0].detail


class TestValidateEndNodes:
    """Tests for validate_end_nodes."""

    def test_end_node_present(self):
        nodes = [make_node("s", "start"), make_node("f1", "end"), make_node("f2", "end")]
        assert validate_end_nodes(nodes) == []

    def test_missing_end_node(self):
        """Test a graph without an end node is a structure error."""
        findings = validate_end_nodes([make_node("s", "start")])

        assert len(findings) == 1
        assert findings[0].code == "missing_end_node"
        assert findings[0].kind == FindingKind.STRUCTURE
        assert findings[0].severity == Severity.ERROR


class TestValidateNoOrphans:
    """Tests for validate_no_orphans."""

    def test_single_node_is_never_orphan(self):
        """Test a lone node is not reported."""
        assert validate_no_orphans([make_node("s", "start")], []) == []

    def test_connected_graph(self):
        nodes = [make_node("s", "start"), make_node("f", "end")]
        edges = make_edges(("s", "f"))

        assert validate_no_orphans(nodes, edges) == []

    def test_orphan_node(self):
        """Test a node outside every edge gets its own connectivity error."""
        nodes = [
            make_node("s", "start"),
            make_node("f", "end"),
            make_node("x", "action", label="Stray step"),
        ]
        edges = make_edges(("s", "f"))

        findings = validate_no_orphans(nodes, edges)
        assert len(findings) == 1
        assert findings[0].code == "orphan_node"
        assert findings[0].kind == FindingKind.CONNECTIVITY
        assert findings[0].severity == Severity.ERROR
        assert findings[0].node_ids == ["x"]
        assert "Stray step" in findings[0].message

    def test_orphan_message_falls_back_to_id(self):
        nodes = [make_node("s", "start"), make_node("x", "action")]

        findings = validate_no_orphans(nodes, [])
        assert [f.node_ids for f in findings] == [["s"], ["x"]]
        assert '"x"' in findings[1].message

    def test_dangling_edge_does_not_connect_nodes(self):
        """Test an edge to an unknown node only connects its known end."""
        nodes = [make_node("s", "start"), make_node("f", "end")]
        edges = make_edges(("s", "ghost"))

        findings = validate_no_orphans(nodes, edges)
        assert [f.node_ids for f in findings] == [["f"]]


class TestValidateStartHasOutgoing:
    """Tests for validate_start_has_outgoing."""

    def test_start_with_outgoing_edge(self):
        nodes = [make_node("s", "start"), make_node("f", "end")]
        assert validate_start_has_outgoing(nodes, make_edges(("s", "f"))) == []

    def test_start_without_outgoing_edge(self):
        """Test a start node that is only a target is reported."""
        nodes = [make_node("s", "start"), make_node("a", "action")]
        edges = make_edges(("a", "s"))

        findings = validate_start_has_outgoing(nodes, edges)
        assert len(findings) == 1
        assert findings[0].code == "start_without_outgoing"
        assert findings[0].kind == FindingKind.STRUCTURE
        assert findings[0].node_ids == ["s"]

    def test_only_first_start_node_is_checked(self):
        """Test a duplicated start node without outgoing edges is not reported again."""
        nodes = [make_node("s1", "start"), make_node("s2", "start"), make_node("f", "end")]
        edges = make_edges(("s1", "f"))

        assert validate_start_has_outgoing(nodes, edges) == []

    def test_first_start_node_without_outgoing_edge(self):
        nodes = [make_node("s1", "start"), make_node("s2", "start"), make_node("f", "end")]
        edges = make_edges(("s2", "f"))

        findings = validate_start_has_outgoing(nodes, edges)
        assert [f.node_ids for f in findings] == [["s1"]]

    def test_no_start_node(self):
        """Test nothing is reported when there is no start node."""
        assert validate_start_has_outgoing([make_node("f", "end")], []) == []


class TestValidateEndHasNoOutgoing:
    """Tests for validate_end_has_no_outgoing."""

    def test_end_without_outgoing(self):
        nodes = [make_node("s", "start"), make_node("f", "end")]
        assert validate_end_has_no_outgoing(nodes, make_edges(("s", "f"))) == []

    def test_end_with_outgoing_is_warning(self):
        """Test an end node with outgoing edges is a warning, not an error."""
        nodes = [make_node("s", "start"), make_node("f", "end", label="Done")]
        edges = make_edges(("s", "f"), ("f", "s"), ("f", "s"))

        findings = validate_end_has_no_outgoing(nodes, edges)
        assert len(findings) == 1
        assert findings[0].code == "end_with_outgoing"
        assert findings[0].kind == FindingKind.CONNECTIVITY
        assert findings[0].severity == Severity.WARNING
        assert findings[0].node_ids == ["f"]
        assert "Done" in findings[0].message
