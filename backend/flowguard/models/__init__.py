"""Pydantic models for flowguard."""

from flowguard.models.finding import (
    FindingKind,
    GraphStatistics,
    Severity,
    ValidationFinding,
    ValidationReport,
    ValidationSummary,
)
from flowguard.models.graph import (
    ActionType,
    NodeType,
    WorkflowEdge,
    WorkflowMetadata,
    WorkflowNode,
)

__all__ = [
    # Graph
    "ActionType",
    "NodeType",
    "WorkflowEdge",
    "WorkflowMetadata",
    "WorkflowNode",
    # Findings
    "FindingKind",
    "GraphStatistics",
    "Severity",
    "ValidationFinding",
    "ValidationReport",
    "ValidationSummary",
]
