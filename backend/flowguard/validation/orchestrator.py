"""Runs every workflow validator and answers per-node queries for the editor.

``validate`` always runs all validators in a fixed order so that the same
input yields the same ordered findings:

1. metadata
2. structural (start, end, orphans, start outgoing, end outgoing)
3. node-type configuration, grouped by node type
4. reachability
5. cycle detection
"""

import logging
from collections.abc import Sequence

from flowguard.exceptions import WorkflowValidationError
from flowguard.models.finding import (
    GraphStatistics,
    Severity,
    ValidationFinding,
    ValidationReport,
    ValidationSummary,
)
from flowguard.models.graph import NodeType, WorkflowEdge, WorkflowMetadata, WorkflowNode
from flowguard.validation.cycles import detect_cycles
from flowguard.validation.graph import WorkflowGraph
from flowguard.validation.metadata import validate_metadata
from flowguard.validation.node_types import validate_node_config, validate_node_configs
from flowguard.validation.reachability import validate_end_reachable
from flowguard.validation.structural import (
    validate_end_has_no_outgoing,
    validate_end_nodes,
    validate_no_orphans,
    validate_start_has_outgoing,
    validate_start_node,
)

logger = logging.getLogger(__name__)


def validate(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    metadata: WorkflowMetadata,
) -> list[ValidationFinding]:
    """Validate a workflow graph and its metadata.

    Args:
        nodes: The workflow nodes.
        edges: The workflow edges.
        metadata: Workflow-level fields.

    Returns:
        All findings, in validator order. Nothing is short-circuited.
    """
    graph = WorkflowGraph(nodes, edges)
    findings: list[ValidationFinding] = []

    findings.extend(validate_metadata(metadata))

    findings.extend(validate_start_node(nodes))
    findings.extend(validate_end_nodes(nodes))
    findings.extend(validate_no_orphans(nodes, edges))
    findings.extend(validate_start_has_outgoing(nodes, edges))
    findings.extend(validate_end_has_no_outgoing(nodes, edges))

    findings.extend(validate_node_configs(graph))

    findings.extend(validate_end_reachable(nodes, edges, graph))
    findings.extend(detect_cycles(nodes, edges, graph))

    logger.debug(
        f"Validated workflow graph with {len(nodes)} nodes and {len(edges)} edges: "
        f"{len(findings)} finding(s)"
    )
    return findings


def summarize(findings: Sequence[ValidationFinding]) -> ValidationSummary:
    """Partition findings by severity.

    The workflow is valid when there is no error; warnings and infos never block.
    """
    errors = [f for f in findings if f.severity == Severity.ERROR]
    warnings = [f for f in findings if f.severity == Severity.WARNING]
    infos = [f for f in findings if f.severity == Severity.INFO]

    return ValidationSummary(
        errors=errors,
        warnings=warnings,
        infos=infos,
        is_valid=not errors,
        error_count=len(errors),
        warning_count=len(warnings),
        info_count=len(infos),
    )


def findings_for_node(
    findings: Sequence[ValidationFinding], node_id: str
) -> list[ValidationFinding]:
    """Return the findings that refer to ``node_id``."""
    return [f for f in findings if node_id in f.node_ids]


def node_has_error(findings: Sequence[ValidationFinding], node_id: str) -> bool:
    return any(f.severity == Severity.ERROR for f in findings_for_node(findings, node_id))


def node_has_warning(findings: Sequence[ValidationFinding], node_id: str) -> bool:
    return any(f.severity == Severity.WARNING for f in findings_for_node(findings, node_id))


def validate_node(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    node_id: str,
) -> list[ValidationFinding]:
    """Re-run only the node-type validator for a single node.

    Used for live feedback while a node is being edited. Returns an empty
    list when the node does not exist.
    """
    node = next((n for n in nodes if n.id == node_id), None)
    if node is None:
        return []

    return validate_node_config(node, WorkflowGraph(nodes, edges))


def graph_statistics(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
) -> GraphStatistics:
    """Count nodes per type and edges."""

    def count(node_type: NodeType) -> int:
        return sum(1 for node in nodes if node.type == node_type)

    return GraphStatistics(
        total_nodes=len(nodes),
        total_edges=len(edges),
        start_nodes=count(NodeType.START),
        end_nodes=count(NodeType.END),
        decision_nodes=count(NodeType.DECISION),
        approval_nodes=count(NodeType.APPROVAL),
        action_nodes=count(NodeType.ACTION),
    )


def build_report(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    metadata: WorkflowMetadata,
) -> ValidationReport:
    """Validate a workflow and bundle findings, summary and statistics."""
    findings = validate(nodes, edges, metadata)
    return ValidationReport(
        findings=findings,
        summary=summarize(findings),
        statistics=graph_statistics(nodes, edges),
    )


def ensure_savable(findings: Sequence[ValidationFinding]) -> None:
    """Raise when the findings block saving the workflow.

    Raises:
        WorkflowValidationError: If any finding has error severity.
    """
    errors = [f for f in findings if f.severity == Severity.ERROR]
    if errors:
        logger.info(f"Blocking workflow save: {len(errors)} validation error(s)")
        raise WorkflowValidationError(errors)
