# =============================================================================
# GitHub Manage MCP Server - Pull Request Models
# =============================================================================
"""
Arguments of the ``gh_manage_pulls`` tool.

Merge methods and review events are the literals defined by the GitHub REST
API for ``PUT .../merge`` and ``POST .../reviews``.
"""

from enum import Enum
from typing import ClassVar, Literal, Optional

from pydantic import BaseModel, Field

from .common import Requirement, ToolInput


class PullOperation(str, Enum):
    """Operations supported by ``gh_manage_pulls``."""

    CREATE = "create"
    UPDATE = "update"
    MERGE = "merge"
    REVIEW = "review"
    APPROVE = "approve"
    REQUEST_CHANGES = "request_changes"
    LIST = "list"
    GET = "get"
    CLOSE = "close"


class MergeMethod(str, Enum):
    """
    Available merge methods for pull requests.

    Attributes:
        MERGE: Create a merge commit.
        SQUASH: Squash all commits into one.
        REBASE: Rebase commits onto base branch.
    """

    MERGE = "merge"
    SQUASH = "squash"
    REBASE = "rebase"


class ReviewEvent(str, Enum):
    """
    Review event types for pull request reviews.

    Attributes:
        APPROVE: Approve the pull request.
        REQUEST_CHANGES: Request changes before merging.
        COMMENT: Leave a comment without approval.
    """

    APPROVE = "APPROVE"
    REQUEST_CHANGES = "REQUEST_CHANGES"
    COMMENT = "COMMENT"


class ReviewComment(BaseModel):
    """
    Line-specific review comment.

    Attributes:
        path: File path relative to the repository root.
        line: Line in the diff the comment applies to.
        position: Legacy diff position.
        body: Comment text.
    """

    path: str
    line: Optional[int] = None
    position: Optional[int] = None
    body: str


_PULL = ("owner", "repo", "pull_number")


class ManagePullsInput(ToolInput):
    """Pull request management arguments."""

    REQUIRED_FIELDS: ClassVar[dict[PullOperation, tuple[Requirement, ...]]] = {
        PullOperation.CREATE: ("owner", "repo", "title", "head", "base"),
        PullOperation.GET: _PULL,
        PullOperation.UPDATE: _PULL,
        PullOperation.MERGE: _PULL,
        PullOperation.CLOSE: _PULL,
        PullOperation.REVIEW: _PULL + ("review_event",),
        PullOperation.APPROVE: _PULL,
        PullOperation.REQUEST_CHANGES: _PULL,
        PullOperation.LIST: ("owner", "repo"),
    }

    operation: PullOperation = Field(..., description="The pull request operation to perform")

    owner: Optional[str] = Field(
        default=None, description="Repository owner (required for repo-specific operations)"
    )
    repo: Optional[str] = Field(
        default=None, description="Repository name (required for repo-specific operations)"
    )
    pull_number: Optional[int] = Field(
        default=None,
        ge=1,
        description="Pull request number (required for get, update, merge, review operations)",
    )

    # create / update
    title: Optional[str] = Field(default=None, description="Pull request title (required for create)")
    head: Optional[str] = Field(default=None, description="Branch containing changes (required for create)")
    base: Optional[str] = Field(default=None, description="Branch to merge into (required for create)")
    body: Optional[str] = Field(default=None, description="Pull request description (for create/update)")
    draft: Optional[bool] = Field(default=None, description="Create as draft PR (for create)")
    maintainer_can_modify: Optional[bool] = Field(default=None, description="Allow maintainer edits (for create)")
    state: Optional[Literal["open", "closed"]] = Field(default=None, description="Pull request state (for update)")

    # merge
    commit_title: Optional[str] = Field(default=None, description="Commit title for merge (for merge)")
    commit_message: Optional[str] = Field(default=None, description="Commit message for merge (for merge)")
    merge_method: Optional[MergeMethod] = Field(default=None, description="Merge method (for merge)")

    # review
    review_body: Optional[str] = Field(
        default=None, description="Review comment (for review/approve/request_changes)"
    )
    review_event: Optional[ReviewEvent] = Field(default=None, description="Review type (for review)")
    review_comments: Optional[list[ReviewComment]] = Field(
        default=None, description="Line-specific review comments (for review)"
    )

    # list
    state_filter: Optional[Literal["open", "closed", "all"]] = Field(
        default=None, description="PR state filter (for list)"
    )
    head_filter: Optional[str] = Field(default=None, description="Head branch filter (for list)")
    base_filter: Optional[str] = Field(default=None, description="Base branch filter (for list)")
    sort: Optional[Literal["created", "updated", "popularity", "long-running"]] = Field(
        default=None, description="Sort field (for list)"
    )
    direction: Optional[Literal["asc", "desc"]] = Field(default=None, description="Sort direction (for list)")
    per_page: Optional[int] = Field(default=None, ge=1, le=100, description="Results per page (for list)")
    page: Optional[int] = Field(default=None, ge=1, description="Page number (for list)")
