"""Per-node-type configuration validators.

Each validator receives one node and the shared graph, and attributes every
finding to that node. ``NODE_TYPE_VALIDATORS`` maps a node type to its
validator; start and end nodes carry no configuration and have no entry.
"""

from collections.abc import Callable
from typing import Any

from flowguard.models.finding import FindingKind, Severity, ValidationFinding
from flowguard.models.graph import ActionType, NodeType, WorkflowNode
from flowguard.validation.constants import (
    DECISION_BRANCH_COUNT,
    MIN_APPROVAL_TIMEOUT_HOURS,
    WEBHOOK_URL_PREFIXES,
)
from flowguard.validation.graph import WorkflowGraph

NodeTypeValidator = Callable[[WorkflowNode, WorkflowGraph], list[ValidationFinding]]

KNOWN_NODE_TYPES = {node_type.value for node_type in NodeType}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, tuple, set)):
        return not value
    return False


def _config_finding(
    node: WorkflowNode,
    code: str,
    message: str,
    detail: str,
    severity: Severity = Severity.ERROR,
) -> ValidationFinding:
    return ValidationFinding(
        code=code,
        kind=FindingKind.CONFIGURATION,
        severity=severity,
        message=message,
        detail=detail,
        node_ids=[node.id],
    )


def validate_decision_node(
    node: WorkflowNode, graph: WorkflowGraph
) -> list[ValidationFinding]:
    """Validate branching and conditions of a decision node.

    Args:
        node: The decision node.
        graph: Adjacency of the whole workflow.

    Returns:
        Connectivity findings for a wrong branch count and a configuration
        finding when no condition is configured.
    """
    findings: list[ValidationFinding] = []
    label = node.display_label
    branches = graph.out_degree(node.id)

    if branches == 0:
        findings.append(
            ValidationFinding(
                code="decision_without_branches",
                kind=FindingKind.CONNECTIVITY,
                severity=Severity.ERROR,
                message=f'Decision node "{label}" has no outgoing edges',
                detail="Decision nodes need two outgoing edges: yes and no.",
                node_ids=[node.id],
            )
        )
    elif branches < DECISION_BRANCH_COUNT:
        findings.append(
            ValidationFinding(
                code="decision_single_branch",
                kind=FindingKind.CONNECTIVITY,
                severity=Severity.ERROR,
                message=f'Decision node "{label}" has only {branches} outgoing edge',
                detail="It must have exactly two outgoing edges, one for yes and one for no.",
                node_ids=[node.id],
            )
        )
    elif branches > DECISION_BRANCH_COUNT:
        # Multi-way branches are tolerated but flagged
        findings.append(
            ValidationFinding(
                code="decision_extra_branches",
                kind=FindingKind.CONNECTIVITY,
                severity=Severity.WARNING,
                message=f'Decision node "{label}" has {branches} outgoing edges',
                detail="Decision nodes normally have only two outgoing edges.",
                node_ids=[node.id],
            )
        )

    conditions = node.settings.get("conditions")
    if not isinstance(conditions, list) or not conditions:
        findings.append(
            _config_finding(
                node,
                code="decision_without_conditions",
                message=f'Decision node "{label}" has no conditions',
                detail="Configure at least one condition to evaluate.",
            )
        )

    return findings


def validate_approval_node(
    node: WorkflowNode, graph: WorkflowGraph
) -> list[ValidationFinding]:
    """Validate that an approval node names an approver and a sane timeout.

    The approver is either a plain value (a user or role id) or a mapping in
    the editor's ``{"type": ..., "value": ...}`` shape.
    """
    findings: list[ValidationFinding] = []
    config = node.settings
    label = node.display_label

    approver = config.get("approver")
    if isinstance(approver, dict):
        approver = approver.get("value")
    if _is_blank(approver):
        findings.append(
            _config_finding(
                node,
                code="approval_without_approver",
                message=f'Approval node "{label}" has no approver',
                detail="Select who is allowed to approve this step.",
            )
        )

    timeout = config.get("timeout_hours")
    if (
        isinstance(timeout, (int, float))
        and not isinstance(timeout, bool)
        and timeout < MIN_APPROVAL_TIMEOUT_HOURS
    ):
        findings.append(
            _config_finding(
                node,
                code="approval_timeout_too_low",
                message=f'Approval node "{label}" has a very low timeout',
                detail=f"The timeout should be at least {MIN_APPROVAL_TIMEOUT_HOURS} hour.",
                severity=Severity.WARNING,
            )
        )

    return findings


def _validate_change_status(node: WorkflowNode, config: dict[str, Any]) -> list[ValidationFinding]:
    if not _is_blank(config.get("new_status")):
        return []
    return [
        _config_finding(
            node,
            code="action_missing_status",
            message=f'Node "{node.display_label}" has no target status',
            detail="Select the new status for the entity.",
        )
    ]


def _validate_notify(node: WorkflowNode, config: dict[str, Any]) -> list[ValidationFinding]:
    findings: list[ValidationFinding] = []
    if _is_blank(config.get("recipient")):
        findings.append(
            _config_finding(
                node,
                code="action_missing_recipient",
                message=f'Node "{node.display_label}" has no recipient',
                detail="Select who receives the notification.",
            )
        )
    if _is_blank(config.get("title")):
        findings.append(
            _config_finding(
                node,
                code="action_missing_title",
                message=f'Node "{node.display_label}" has no notification title',
                detail="Adding a title to the notification is recommended.",
                severity=Severity.WARNING,
            )
        )
    return findings


def _validate_webhook(node: WorkflowNode, config: dict[str, Any]) -> list[ValidationFinding]:
    url = config.get("url")
    if _is_blank(url):
        return [
            _config_finding(
                node,
                code="action_missing_url",
                message=f'Node "{node.display_label}" has no webhook URL',
                detail="Enter the URL of the endpoint to call.",
            )
        ]
    if not isinstance(url, str) or not url.startswith(WEBHOOK_URL_PREFIXES):
        return [
            _config_finding(
                node,
                code="action_invalid_url",
                message=f'Node "{node.display_label}" has an invalid URL',
                detail="The URL must start with http:// or https://",
            )
        ]
    return []


ACTION_VALIDATORS: dict[str, Callable[[WorkflowNode, dict[str, Any]], list[ValidationFinding]]] = {
    ActionType.CHANGE_STATUS.value: _validate_change_status,
    ActionType.NOTIFY.value: _validate_notify,
    ActionType.WEBHOOK.value: _validate_webhook,
}


def validate_action_node(
    node: WorkflowNode, graph: WorkflowGraph
) -> list[ValidationFinding]:
    """Validate the action kind and its kind-specific fields.

    Kind-specific fields are only checked for recognized action kinds.
    """
    config = node.settings
    action_type = config.get("action_type")

    if _is_blank(action_type):
        return [
            _config_finding(
                node,
                code="action_without_type",
                message=f'Action node "{node.display_label}" has no action type',
                detail="Select which action this node runs.",
            )
        ]

    kind_validator = ACTION_VALIDATORS.get(action_type) if isinstance(action_type, str) else None
    if kind_validator is None:
        return []
    return kind_validator(node, config)


NODE_TYPE_VALIDATORS: dict[str, NodeTypeValidator] = {
    NodeType.DECISION.value: validate_decision_node,
    NodeType.APPROVAL.value: validate_approval_node,
    NodeType.ACTION.value: validate_action_node,
}


def validate_node_config(node: WorkflowNode, graph: WorkflowGraph) -> list[ValidationFinding]:
    """Dispatch a node to the validator registered for its type.

    Unknown node types are reported as a warning rather than raising.
    """
    validator = NODE_TYPE_VALIDATORS.get(node.type)
    if validator is not None:
        return validator(node, graph)

    if node.type not in KNOWN_NODE_TYPES:
        return [
            _config_finding(
                node,
                code="unknown_node_type",
                message=f'Node "{node.display_label}" has an unknown type',
                detail=(
                    f"Node type '{node.type}' is not one of: "
                    f"{', '.join(sorted(KNOWN_NODE_TYPES))}."
                ),
                severity=Severity.WARNING,
            )
        ]

    return []


def validate_node_configs(graph: WorkflowGraph) -> list[ValidationFinding]:
    """Validate every node's configuration, grouped by node type.

    Findings follow the order of ``NODE_TYPE_VALIDATORS`` (decision, approval,
    action), then unknown node types; within a group, nodes keep input order.
    """
    findings: list[ValidationFinding] = []

    for node_type in NODE_TYPE_VALIDATORS:
        for node in graph.nodes_of_type(node_type):
            findings.extend(validate_node_config(node, graph))

    for node in graph.nodes:
        if node.type not in KNOWN_NODE_TYPES:
            findings.extend(validate_node_config(node, graph))

    return findings
