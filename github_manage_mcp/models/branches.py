# =============================================================================
# GitHub Manage MCP Server - Branch Models
# =============================================================================
"""
Arguments of the ``gh_manage_branches`` tool.

The protection model covers the commonly used subset of the branch
protection API; complex rules are left to the GitHub UI.
"""

from enum import Enum
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field

from .common import Requirement, ToolInput


class BranchOperation(str, Enum):
    """Operations supported by ``gh_manage_branches``."""

    CREATE = "create"
    DELETE = "delete"
    GET = "get"
    LIST = "list"
    PROTECT = "protect"
    GET_PROTECTION = "get_protection"
    UPDATE_PROTECTION = "update_protection"


class RequiredStatusChecks(BaseModel):
    """Status checks that must pass before merging."""

    strict: bool
    contexts: list[str]


class RequiredPullRequestReviews(BaseModel):
    """Pull request review requirements."""

    required_approving_review_count: Optional[int] = Field(default=None, ge=1, le=6)
    dismiss_stale_reviews: Optional[bool] = None
    require_code_owner_reviews: Optional[bool] = None


class PushRestrictions(BaseModel):
    """Users and teams allowed to push."""

    users: list[str]
    teams: list[str]


class BranchProtectionSettings(BaseModel):
    """
    Branch protection settings.

    Every rule left unset is sent as ``null``, which disables it.
    """

    required_status_checks: Optional[RequiredStatusChecks] = None
    enforce_admins: Optional[bool] = None
    required_pull_request_reviews: Optional[RequiredPullRequestReviews] = None
    restrictions: Optional[PushRestrictions] = None

    def to_api(self) -> dict[str, Any]:
        """Render the full PUT body GitHub expects, nulls included."""
        return {
            "required_status_checks": (
                self.required_status_checks.model_dump()
                if self.required_status_checks
                else None
            ),
            "enforce_admins": self.enforce_admins,
            "required_pull_request_reviews": (
                self.required_pull_request_reviews.model_dump(exclude_none=True)
                if self.required_pull_request_reviews
                else None
            ),
            "restrictions": self.restrictions.model_dump() if self.restrictions else None,
        }


_BRANCH = ("owner", "repo", "branch")


class ManageBranchesInput(ToolInput):
    """Branch management arguments."""

    REQUIRED_FIELDS: ClassVar[dict[BranchOperation, tuple[Requirement, ...]]] = {
        BranchOperation.CREATE: _BRANCH,
        BranchOperation.GET: _BRANCH,
        BranchOperation.DELETE: _BRANCH,
        BranchOperation.GET_PROTECTION: _BRANCH,
        BranchOperation.PROTECT: _BRANCH + ("protection",),
        BranchOperation.UPDATE_PROTECTION: _BRANCH + ("protection",),
        BranchOperation.LIST: ("owner", "repo"),
    }

    operation: BranchOperation = Field(..., description="The branch operation to perform")

    owner: Optional[str] = Field(default=None, description="Repository owner (required for all operations)")
    repo: Optional[str] = Field(default=None, description="Repository name (required for all operations)")
    branch: Optional[str] = Field(
        default=None,
        description="Branch name (required for create, get, delete, protect, get_protection, update_protection)",
    )

    sha: Optional[str] = Field(
        default=None,
        description="SHA to create branch from (for create, defaults to the default branch head)",
    )
    protection: Optional[BranchProtectionSettings] = Field(
        default=None, description="Branch protection settings (for protect/update_protection)"
    )

    protected: Optional[bool] = Field(default=None, description="Filter by protection status (for list)")
    per_page: Optional[int] = Field(default=None, ge=1, le=100, description="Results per page (for list)")
    page: Optional[int] = Field(default=None, ge=1, description="Page number (for list)")
