"""Workflow validation API routes."""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from flowguard.exceptions import WorkflowValidationError
from flowguard.models import (
    ValidationFinding,
    ValidationReport,
    WorkflowEdge,
    WorkflowMetadata,
    WorkflowNode,
)
from flowguard.validation import build_report, ensure_savable, validate_node

logger = logging.getLogger(__name__)

router = APIRouter()


class ValidateNodeRequest(BaseModel):
    """Graph snapshot for a single-node re-check."""

    nodes: list[WorkflowNode]
    edges: list[WorkflowEdge] = []


class ValidateWorkflowRequest(ValidateNodeRequest):
    """Graph snapshot and metadata sent by the workflow editor."""

    metadata: WorkflowMetadata = Field(default_factory=WorkflowMetadata)


@router.post("/workflows/validate", response_model=ValidationReport)
async def validate_workflow(request: ValidateWorkflowRequest) -> ValidationReport:
    """Validate a workflow graph and return every finding."""
    return build_report(request.nodes, request.edges, request.metadata)


@router.post("/workflows/validate/nodes/{node_id}", response_model=list[ValidationFinding])
async def validate_workflow_node(node_id: str, request: ValidateNodeRequest) -> list[ValidationFinding]:
    """Re-check the configuration of one node while it is being edited."""
    return validate_node(request.nodes, request.edges, node_id)


@router.post("/workflows/save-check", response_model=ValidationReport)
async def check_workflow_savable(request: ValidateWorkflowRequest) -> ValidationReport:
    """Validate a workflow before saving; blocking errors are returned as 422."""
    report = build_report(request.nodes, request.edges, request.metadata)
    try:
        ensure_savable(report.findings)
    except WorkflowValidationError as e:
        logger.info(f"Rejected save of workflow '{request.metadata.code}': {e}")
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(e),
                "errors": [f.model_dump(mode="json", by_alias=True) for f in e.findings],
            },
        ) from e
    return report
