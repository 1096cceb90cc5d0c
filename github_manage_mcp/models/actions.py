# =============================================================================
# GitHub Manage MCP Server - Actions Models
# =============================================================================
"""Arguments of the ``gh_manage_actions`` tool."""

from enum import Enum
from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import Field

from .common import Requirement, ToolInput

# Run statuses and conclusions accepted by the list-runs ``status`` filter.
RunStatus = Literal[
    "completed",
    "action_required",
    "cancelled",
    "failure",
    "neutral",
    "skipped",
    "stale",
    "success",
    "timed_out",
    "in_progress",
    "queued",
    "requested",
    "waiting",
]


class ActionsOperation(str, Enum):
    """Operations supported by ``gh_manage_actions``."""

    LIST_WORKFLOWS = "list_workflows"
    GET_WORKFLOW = "get_workflow"
    TRIGGER_WORKFLOW = "trigger_workflow"
    LIST_RUNS = "list_runs"
    GET_RUN = "get_run"
    CANCEL_RUN = "cancel_run"
    RERUN_WORKFLOW = "rerun_workflow"
    LIST_ARTIFACTS = "list_artifacts"
    GET_ARTIFACT = "get_artifact"
    DOWNLOAD_ARTIFACT = "download_artifact"
    LIST_SECRETS = "list_secrets"


_REPO = ("owner", "repo")
_WORKFLOW = _REPO + ("workflow_id",)
_RUN = _REPO + ("run_id",)
_ARTIFACT = _REPO + ("artifact_id",)


class ManageActionsInput(ToolInput):
    """
    GitHub Actions management arguments.

    Operations fall into four groups by the identifier they need: repository
    level, workflow level (``workflow_id``), run level (``run_id``) and
    artifact level (``artifact_id``).
    """

    REQUIRED_FIELDS: ClassVar[dict[ActionsOperation, tuple[Requirement, ...]]] = {
        ActionsOperation.LIST_WORKFLOWS: _REPO,
        ActionsOperation.LIST_RUNS: _REPO,
        ActionsOperation.LIST_ARTIFACTS: _REPO,
        ActionsOperation.LIST_SECRETS: _REPO,
        ActionsOperation.GET_WORKFLOW: _WORKFLOW,
        ActionsOperation.TRIGGER_WORKFLOW: _WORKFLOW,
        ActionsOperation.GET_RUN: _RUN,
        ActionsOperation.CANCEL_RUN: _RUN,
        ActionsOperation.RERUN_WORKFLOW: _RUN,
        ActionsOperation.GET_ARTIFACT: _ARTIFACT,
        ActionsOperation.DOWNLOAD_ARTIFACT: _ARTIFACT,
    }

    operation: ActionsOperation = Field(..., description="The GitHub Actions operation to perform")

    owner: Optional[str] = Field(
        default=None, description="Repository owner (required for repo-specific operations)"
    )
    repo: Optional[str] = Field(
        default=None, description="Repository name (required for repo-specific operations)"
    )

    workflow_id: Optional[Union[Annotated[int, Field(ge=1)], str]] = Field(
        default=None,
        description="Workflow ID or filename (required for workflow-specific operations)",
    )
    run_id: Optional[int] = Field(
        default=None, ge=1, description="Workflow run ID (required for run-specific operations)"
    )
    artifact_id: Optional[int] = Field(
        default=None, ge=1, description="Artifact ID (required for artifact-specific operations)"
    )

    ref: Optional[str] = Field(
        default=None,
        description="Git reference (branch/tag) for workflow trigger (defaults to 'main')",
    )
    inputs: Optional[dict[str, Union[str, int, float, bool]]] = Field(
        default=None, description="Workflow inputs for manual triggers"
    )

    status: Optional[RunStatus] = Field(default=None, description="Filter runs by status")
    actor: Optional[str] = Field(default=None, description="Filter runs by actor (username)")
    branch: Optional[str] = Field(default=None, description="Filter runs by branch name")
    event: Optional[str] = Field(default=None, description="Filter runs by trigger event")
    created: Optional[str] = Field(default=None, description="Filter runs by creation date (ISO 8601)")
    per_page: Optional[int] = Field(
        default=None, ge=1, le=100, description="Results per page (for list operations)"
    )
    page: Optional[int] = Field(default=None, ge=1, description="Page number (for list operations)")
