"""Validation of workflow-level fields (code, name, target entity type)."""

from flowguard.models.finding import FindingKind, Severity, ValidationFinding
from flowguard.models.graph import WorkflowMetadata
from flowguard.validation.constants import CODE_PATTERN


def _data_finding(code: str, message: str, detail: str, severity: Severity = Severity.ERROR) -> ValidationFinding:
    return ValidationFinding(
        code=code,
        kind=FindingKind.DATA,
        severity=severity,
        message=message,
        detail=detail,
    )


def validate_metadata(metadata: WorkflowMetadata) -> list[ValidationFinding]:
    """Validate the workflow code, name and target entity type.

    A code outside the recommended ``[a-z0-9_]+`` format is only a warning.
    """
    findings: list[ValidationFinding] = []
    code = (metadata.code or "").strip()

    if not code:
        findings.append(
            _data_finding(
                "missing_code",
                "Workflow code is required",
                "Enter a unique code for the workflow.",
            )
        )
    elif not CODE_PATTERN.fullmatch(metadata.code or ""):
        findings.append(
            _data_finding(
                "code_format",
                "Workflow code has a non-recommended format",
                "Use only lowercase letters, digits and underscores.",
                severity=Severity.WARNING,
            )
        )

    if not (metadata.name or "").strip():
        findings.append(
            _data_finding(
                "missing_name",
                "Workflow name is required",
                "Enter a descriptive name for the workflow.",
            )
        )

    if not (metadata.target_entity_type or "").strip():
        findings.append(
            _data_finding(
                "missing_target_entity_type",
                "Target entity type is required",
                "Select the kind of entity this workflow applies to.",
            )
        )

    return findings
