"""Exceptions raised by flowguard."""

from flowguard.models.finding import ValidationFinding


class WorkflowValidationError(Exception):
    """Raised when a workflow with blocking findings is about to be saved."""

    def __init__(self, findings: list[ValidationFinding]):
        self.findings = findings
        super().__init__(f"Workflow has {len(findings)} blocking validation error(s)")
