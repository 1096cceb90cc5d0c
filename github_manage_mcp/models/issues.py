# =============================================================================
# GitHub Manage MCP Server - Issue Models
# =============================================================================
"""Arguments of the ``gh_manage_issues`` tool."""

from enum import Enum
from typing import ClassVar, Literal, Optional

from pydantic import Field

from .common import Requirement, ToolInput

StateReason = Literal["completed", "not_planned", "reopened"]


class IssueOperation(str, Enum):
    """Operations supported by ``gh_manage_issues``."""

    CREATE = "create"
    UPDATE = "update"
    CLOSE = "close"
    ASSIGN = "assign"
    LABEL = "label"
    COMMENT = "comment"
    SEARCH = "search"
    LIST = "list"
    GET = "get"


_ISSUE = ("owner", "repo", "issue_number")


class ManageIssuesInput(ToolInput):
    """
    Issue management arguments.

    ``labels`` and ``assignees`` replace the existing values when sent; the
    ``*_filter`` fields only apply to ``list``.
    """

    REQUIRED_FIELDS: ClassVar[dict[IssueOperation, tuple[Requirement, ...]]] = {
        IssueOperation.CREATE: ("owner", "repo", "title"),
        IssueOperation.GET: _ISSUE,
        IssueOperation.UPDATE: _ISSUE,
        IssueOperation.CLOSE: _ISSUE,
        IssueOperation.ASSIGN: _ISSUE,
        IssueOperation.LABEL: _ISSUE,
        IssueOperation.COMMENT: _ISSUE + ("comment_body",),
        IssueOperation.LIST: ("owner", "repo"),
        IssueOperation.SEARCH: ("q",),
    }

    operation: IssueOperation = Field(..., description="The issue operation to perform")

    owner: Optional[str] = Field(
        default=None, description="Repository owner (required for repo-specific operations)"
    )
    repo: Optional[str] = Field(
        default=None, description="Repository name (required for repo-specific operations)"
    )
    issue_number: Optional[int] = Field(
        default=None,
        ge=1,
        description="Issue number (required for get, update, close, assign, label, comment)",
    )

    # create / update
    title: Optional[str] = Field(default=None, description="Issue title (required for create)")
    body: Optional[str] = Field(default=None, description="Issue body/description (for create/update)")
    labels: Optional[list[str]] = Field(default=None, description="Issue labels (for create/update/label)")
    assignees: Optional[list[str]] = Field(
        default=None, description="Issue assignees (for create/update/assign)"
    )
    milestone: Optional[int] = Field(default=None, description="Milestone number (for create/update)")
    state: Optional[Literal["open", "closed"]] = Field(default=None, description="Issue state (for update)")
    state_reason: Optional[StateReason] = Field(
        default=None, description="State reason (for update/close)"
    )

    # comment
    comment_body: Optional[str] = Field(
        default=None, description="Comment text (required for comment operation)"
    )

    # search / list
    q: Optional[str] = Field(default=None, description="Search query (required for search)")
    sort: Optional[Literal["created", "updated", "comments"]] = Field(
        default=None, description="Sort field (for search/list)"
    )
    order: Optional[Literal["asc", "desc"]] = Field(default=None, description="Sort order (for search/list)")
    state_filter: Optional[Literal["open", "closed", "all"]] = Field(
        default=None, description="Issue state filter (for list)"
    )
    labels_filter: Optional[str] = Field(default=None, description="Labels filter (comma-separated, for list)")
    assignee: Optional[str] = Field(default=None, description="Assignee filter (for list)")
    creator: Optional[str] = Field(default=None, description="Creator filter (for list)")
    mentioned: Optional[str] = Field(default=None, description="User mentioned filter (for list)")
    since: Optional[str] = Field(
        default=None, description="Only issues updated after this time (ISO 8601, for list)"
    )
    per_page: Optional[int] = Field(default=None, ge=1, le=100, description="Results per page (for list/search)")
    page: Optional[int] = Field(default=None, ge=1, description="Page number (for list/search)")
