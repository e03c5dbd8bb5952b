"""Pydantic models for the workflow graph handed over by the visual editor."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class NodeType(str, Enum):
    """Node types the validator knows how to check."""

    START = "start"
    END = "end"
    DECISION = "decision"
    APPROVAL = "approval"
    ACTION = "action"


class ActionType(str, Enum):
    """Action kinds an action node can run."""

    CHANGE_STATUS = "change_status"
    NOTIFY = "notify"
    WEBHOOK = "webhook"


class WorkflowNode(BaseModel):
    """A step in the workflow graph.

    ``type`` stays a plain string so that unknown node types reach the
    validators (and become findings) instead of failing model parsing.
    """

    id: str
    type: str
    label: str | None = None
    config: dict[str, Any] | None = None

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def lift_editor_data(cls, values: Any) -> Any:
        """Accept the editor's nested ``data: {label, config}`` node shape."""
        if not isinstance(values, dict):
            return values
        data = values.get("data")
        if not isinstance(data, dict):
            return values
        lifted = {k: v for k, v in values.items() if k != "data"}
        if lifted.get("label") is None and "label" in data:
            lifted["label"] = data["label"]
        if lifted.get("config") is None and "config" in data:
            lifted["config"] = data["config"]
        return lifted

    @property
    def display_label(self) -> str:
        """Label for human-readable messages, falling back to the id."""
        return self.label or self.id

    @property
    def settings(self) -> dict[str, Any]:
        """The node config, with a missing config read as empty."""
        return self.config or {}


class WorkflowEdge(BaseModel):
    """A directed transition between two nodes.

    ``source``/``target`` may point at ids that are not in the node list.
    """

    id: str
    source: str
    target: str


class WorkflowMetadata(BaseModel):
    """Workflow-level fields validated independently of the graph."""

    code: str | None = None
    name: str | None = None
    target_entity_type: str | None = Field(default=None, alias="targetEntityType")

    model_config = {"populate_by_name": True}
