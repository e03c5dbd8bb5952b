"""Pydantic models for validation findings and the derived report."""

from enum import Enum

from pydantic import BaseModel, Field


class FindingKind(str, Enum):
    """Taxonomy tag of a finding."""

    STRUCTURE = "structure"
    CONNECTIVITY = "connectivity"
    CYCLE = "cycle"
    CONFIGURATION = "configuration"
    DATA = "data"


class Severity(str, Enum):
    """How a finding affects saving.

    ERROR blocks the save, WARNING is shown but allowed, INFO is advisory.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationFinding(BaseModel):
    """One reported validation issue."""

    code: str
    """Stable machine identifier (e.g. 'missing_start_node')."""

    kind: FindingKind
    severity: Severity
    message: str
    detail: str

    node_ids: list[str] = Field(default_factory=list, alias="nodeIds")
    """Nodes the finding refers to; empty for graph-wide and metadata findings."""

    model_config = {"populate_by_name": True, "frozen": True}


class ValidationSummary(BaseModel):
    """Findings partitioned by severity."""

    errors: list[ValidationFinding] = []
    warnings: list[ValidationFinding] = []
    infos: list[ValidationFinding] = []
    is_valid: bool = Field(alias="isValid")
    error_count: int = Field(alias="errorCount")
    warning_count: int = Field(alias="warningCount")
    info_count: int = Field(default=0, alias="infoCount")

    model_config = {"populate_by_name": True}


class GraphStatistics(BaseModel):
    """Node and edge counts of a workflow graph."""

    total_nodes: int = Field(alias="totalNodes")
    total_edges: int = Field(alias="totalEdges")
    start_nodes: int = Field(alias="startNodes")
    end_nodes: int = Field(alias="endNodes")
    decision_nodes: int = Field(alias="decisionNodes")
    approval_nodes: int = Field(alias="approvalNodes")
    action_nodes: int = Field(alias="actionNodes")

    model_config = {"populate_by_name": True}


class ValidationReport(BaseModel):
    """Full result of validating a workflow."""

    findings: list[ValidationFinding]
    summary: ValidationSummary
    statistics: GraphStatistics
