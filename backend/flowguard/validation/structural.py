"""Structural validators for workflow graphs.

Each validator checks one structural property and returns a list of findings.
None of them raise for malformed graphs:
- exactly one start node
- at least one end node
- no orphan nodes
- the start node has an outgoing edge
- end nodes have no outgoing edges
"""

from collections.abc import Sequence

from flowguard.models.finding import FindingKind, Severity, ValidationFinding
from flowguard.models.graph import NodeType, WorkflowEdge, WorkflowNode


def _sources(edges: Sequence[WorkflowEdge]) -> set[str]:
    return {edge.source for edge in edges}


def validate_start_node(
    nodes: Sequence[WorkflowNode],
) -> list[ValidationFinding]:
    """Validate that the graph has exactly one start node.

    Args:
        nodes: The workflow nodes.

    Returns:
        A single finding when the start node is missing or duplicated.
    """
    start_nodes = [node for node in nodes if node.type == NodeType.START]

    if not start_nodes:
        return [
            ValidationFinding(
                code="missing_start_node",
                kind=FindingKind.STRUCTURE,
                severity=Severity.ERROR,
                message="Missing start node",
                detail="The workflow needs a start node where the flow begins.",
            )
        ]

    if len(start_nodes) > 1:
        return [
            ValidationFinding(
                code="multiple_start_nodes",
                kind=FindingKind.STRUCTURE,
                severity=Severity.ERROR,
                message="Multiple start nodes",
                detail=(
                    f"Only one start node is allowed. Found {len(start_nodes)}."
                ),
                node_ids=[node.id for node in start_nodes],
            )
        ]

    return []


def validate_end_nodes(
    nodes: Sequence[WorkflowNode],
) -> list[ValidationFinding]:
    """Validate that the graph has at least one end node."""
    if any(node.type == NodeType.END for node in nodes):
        return []

    return [
        ValidationFinding(
            code="missing_end_node",
            kind=FindingKind.STRUCTURE,
            severity=Severity.ERROR,
            message="Missing end node",
            detail="The workflow needs at least one end node where the flow finishes.",
        )
    ]


def validate_no_orphans(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
) -> list[ValidationFinding]:
    """Validate that every node takes part in at least one edge.

    A single-node graph is never reported; with two or more nodes, each node
    that is neither the source nor the target of an edge gets its own finding.

    Args:
        nodes: The workflow nodes.
        edges: The workflow edges.

    Returns:
        One finding per orphan node.
    """
    findings: list[ValidationFinding] = []

    if len(nodes) <= 1:
        return findings

    connected_nodes: set[str] = set()
    for edge in edges:
        connected_nodes.add(edge.source)
        connected_nodes.add(edge.target)

    for node in nodes:
        if node.id not in connected_nodes:
            findings.append(
                ValidationFinding(
                    code="orphan_node",
                    kind=FindingKind.CONNECTIVITY,
                    severity=Severity.ERROR,
                    message=f'Node "{node.display_label}" is not connected',
                    detail="This node is not connected to the rest of the flow.",
                    node_ids=[node.id],
                )
            )

    return findings


def validate_start_has_outgoing(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
) -> list[ValidationFinding]:
    """Validate that the start node leads somewhere.

    Only the first start node is checked; duplicated start nodes are already
    reported by ``validate_start_node``.
    """
    start = next((node for node in nodes if node.type == NodeType.START), None)
    if start is None or start.id in _sources(edges):
        return []

    return [
        ValidationFinding(
            code="start_without_outgoing",
            kind=FindingKind.STRUCTURE,
            severity=Severity.ERROR,
            message="Start node has no outgoing edge",
            detail="The start node must be connected to another node.",
            node_ids=[start.id],
        )
    ]


def validate_end_has_no_outgoing(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
) -> list[ValidationFinding]:
    """Warn about end nodes that are the source of an edge."""
    findings: list[ValidationFinding] = []
    sources = _sources(edges)

    for node in nodes:
        if node.type == NodeType.END and node.id in sources:
            findings.append(
                ValidationFinding(
                    code="end_with_outgoing",
                    kind=FindingKind.CONNECTIVITY,
                    severity=Severity.WARNING,
                    message=f'End node "{node.display_label}" has outgoing edges',
                    detail="End nodes normally should not have outgoing transitions.",
                    node_ids=[node.id],
                )
            )

    return findings
