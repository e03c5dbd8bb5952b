"""Workflow graph validation.

Pure functions that check a workflow graph is well formed before it is saved.
"""

from flowguard.validation.cycles import detect_cycles, find_cycles
from flowguard.validation.graph import WorkflowGraph
from flowguard.validation.metadata import validate_metadata
from flowguard.validation.node_types import (
    NODE_TYPE_VALIDATORS,
    validate_action_node,
    validate_approval_node,
    validate_decision_node,
    validate_node_config,
    validate_node_configs,
)
from flowguard.validation.orchestrator import (
    build_report,
    ensure_savable,
    findings_for_node,
    graph_statistics,
    node_has_error,
    node_has_warning,
    summarize,
    validate,
    validate_node,
)
from flowguard.validation.reachability import reachable_from, validate_end_reachable
from flowguard.validation.structural import (
    validate_end_has_no_outgoing,
    validate_end_nodes,
    validate_no_orphans,
    validate_start_has_outgoing,
    validate_start_node,
)

__all__ = [
    # Orchestrator
    "validate",
    "summarize",
    "findings_for_node",
    "node_has_error",
    "node_has_warning",
    "validate_node",
    "graph_statistics",
    "build_report",
    "ensure_savable",
    # Structural
    "validate_start_node",
    "validate_end_nodes",
    "validate_no_orphans",
    "validate_start_has_outgoing",
    "validate_end_has_no_outgoing",
    # Node types
    "NODE_TYPE_VALIDATORS",
    "validate_node_config",
    "validate_node_configs",
    "validate_decision_node",
    "validate_approval_node",
    "validate_action_node",
    # Graph analysis
    "WorkflowGraph",
    "find_cycles",
    "detect_cycles",
    "reachable_from",
    "validate_end_reachable",
    # Metadata
    "validate_metadata",
]
