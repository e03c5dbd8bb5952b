"""Adjacency view of a workflow graph.

Built once per validation run and shared by the validators that need to walk
edges (node-type branching checks, reachability, cycle detection).
"""

from collections import Counter
from collections.abc import Sequence

from flowguard.models.graph import WorkflowEdge, WorkflowNode


class WorkflowGraph:
    """Read-only adjacency lists over a node list and an edge list.

    Only edges whose source is a known node are walked. Targets may still be
    unknown ids; they simply have no successors.
    """

    def __init__(self, nodes: Sequence[WorkflowNode], edges: Sequence[WorkflowEdge]):
        self.nodes: tuple[WorkflowNode, ...] = tuple(nodes)
        self.nodes_by_id: dict[str, WorkflowNode] = {}
        self._successors: dict[str, list[str]] = {}

        for node in self.nodes:
            self.nodes_by_id.setdefault(node.id, node)
            self._successors.setdefault(node.id, [])

        self._out_degree: Counter[str] = Counter()
        for edge in edges:
            self._out_degree[edge.source] += 1
            if edge.source in self._successors:
                self._successors[edge.source].append(edge.target)

    def successors(self, node_id: str) -> list[str]:
        """Targets of the edges leaving ``node_id``, in edge order."""
        return list(self._successors.get(node_id, ()))

    def out_degree(self, node_id: str) -> int:
        """Number of edges whose source is ``node_id``."""
        return self._out_degree[node_id]

    def nodes_of_type(self, node_type: str) -> list[WorkflowNode]:
        return [node for node in self.nodes if node.type == node_type]

    def label_of(self, node_id: str) -> str:
        node = self.nodes_by_id.get(node_id)
        return node.display_label if node else node_id
