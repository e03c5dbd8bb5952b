"""Cycle detection for workflow graphs.

Uses an iterative depth-first search with an explicit stack, so long chains
do not hit the interpreter's recursion limit. DFS is started from every node
that has not been visited yet, so disconnected components and nodes not
reachable from the start node are covered as well.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from flowguard.models.finding import FindingKind, Severity, ValidationFinding
from flowguard.models.graph import WorkflowEdge, WorkflowNode
from flowguard.validation.graph import WorkflowGraph


@dataclass
class _SearchState:
    """Visitation state owned by a single ``find_cycles`` call."""

    visited: set[str] = field(default_factory=set)
    on_stack: set[str] = field(default_factory=set)
    path: list[str] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)


def _search_from(graph: WorkflowGraph, root: str, state: _SearchState) -> None:
    frames: list[tuple[str, Iterator[str]]] = []

    def enter(node_id: str) -> None:
        state.visited.add(node_id)
        state.on_stack.add(node_id)
        state.path.append(node_id)
        frames.append((node_id, iter(graph.successors(node_id))))

    enter(root)
    while frames:
        node_id, successors = frames[-1]
        successor = next(successors, None)

        if successor is None:
            frames.pop()
            state.on_stack.discard(node_id)
            state.path.pop()
        elif successor in state.on_stack:
            # Close the loop: suffix of the path from the first occurrence, plus the node again
            start = state.path.index(successor)
            state.cycles.append(state.path[start:] + [successor])
        elif successor not in state.visited:
            enter(successor)


def find_cycles(graph: WorkflowGraph) -> list[list[str]]:
    """Find the unique directed cycles of a graph.

    Each cycle is returned in traversal order with its first node repeated at
    the end. The same cycle can be discovered more than once (for example over
    parallel edges); duplicates are dropped using the sorted node ids as key.

    Args:
        graph: Adjacency of the workflow.

    Returns:
        Unique cycles, in discovery order.
    """
    state = _SearchState()

    for node in graph.nodes:
        if node.id not in state.visited:
            _search_from(graph, node.id, state)

    unique_cycles: list[list[str]] = []
    seen_keys: set[tuple[str, ...]] = set()
    for cycle in state.cycles:
        key = tuple(sorted(cycle))
        if key not in seen_keys:
            seen_keys.add(key)
            unique_cycles.append(cycle)

    return unique_cycles


def detect_cycles(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    graph: WorkflowGraph | None = None,
) -> list[ValidationFinding]:
    """Report every unique cycle as a warning.

    Args:
        nodes: The workflow nodes.
        edges: The workflow edges.
        graph: Prebuilt adjacency; built from ``nodes``/``edges`` when omitted.

    Returns:
        One cycle finding per unique cycle.
    """
    if graph is None:
        graph = WorkflowGraph(nodes, edges)

    findings: list[ValidationFinding] = []
    for cycle in find_cycles(graph):
        labels = [graph.label_of(node_id) for node_id in cycle]
        findings.append(
            ValidationFinding(
                code="cycle_detected",
                kind=FindingKind.CYCLE,
                severity=Severity.WARNING,
                message="Cycle detected in the workflow",
                detail=f"The flow can loop forever: {' -> '.join(labels)}",
                node_ids=cycle,
            )
        )

    return findings
