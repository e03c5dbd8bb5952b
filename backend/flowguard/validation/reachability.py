"""Reachability analysis: can the flow get from start to an end node."""

from collections import deque
from collections.abc import Sequence

from flowguard.models.finding import FindingKind, Severity, ValidationFinding
from flowguard.models.graph import NodeType, WorkflowEdge, WorkflowNode
from flowguard.validation.graph import WorkflowGraph


def reachable_from(graph: WorkflowGraph, start_id: str) -> set[str]:
    """Breadth-first search returning every node id reachable from ``start_id``."""
    visited: set[str] = set()
    queue: deque[str] = deque([start_id])

    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        queue.extend(n for n in graph.successors(current) if n not in visited)

    return visited


def validate_end_reachable(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    graph: WorkflowGraph | None = None,
) -> list[ValidationFinding]:
    """Validate that at least one end node is reachable from the start node.

    A missing start or end node is already reported by the structural
    validators, so this check does nothing in that case.

    Args:
        nodes: The workflow nodes.
        edges: The workflow edges.
        graph: Prebuilt adjacency; built from ``nodes``/``edges`` when omitted.

    Returns:
        A single graph-wide finding when no end node is reachable.
    """
    if graph is None:
        graph = WorkflowGraph(nodes, edges)

    start_nodes = graph.nodes_of_type(NodeType.START)
    end_nodes = graph.nodes_of_type(NodeType.END)
    if not start_nodes or not end_nodes:
        return []

    visited = reachable_from(graph, start_nodes[0].id)
    if any(node.id in visited for node in end_nodes):
        return []

    return [
        ValidationFinding(
            code="end_unreachable",
            kind=FindingKind.CONNECTIVITY,
            severity=Severity.ERROR,
            message="No path to an end node",
            detail="The flow cannot get from the start node to any end node.",
        )
    ]
