# =============================================================================
# GitHub Manage MCP Server - Repository Models
# =============================================================================
"""Arguments of the ``gh_manage_repos`` tool."""

from enum import Enum
from typing import ClassVar, Literal, Optional

from pydantic import Field

from .common import Requirement, ToolInput


class RepoOperation(str, Enum):
    """Operations supported by ``gh_manage_repos``."""

    CREATE = "create"
    DELETE = "delete"
    UPDATE = "update"
    FORK = "fork"
    GET = "get"
    LIST = "list"
    TRANSFER = "transfer"


class ManageReposInput(ToolInput):
    """
    Repository management arguments.

    Attributes:
        operation: The repository operation to perform.
        owner: Repository owner (get, update, delete, fork, transfer).
        repo: Repository name (get, update, delete, fork, transfer).
        name: Name of the repository to create.
        new_name: New name when updating.
        new_owner: Target owner when transferring.
    """

    REQUIRED_FIELDS: ClassVar[dict[RepoOperation, tuple[Requirement, ...]]] = {
        RepoOperation.CREATE: ("name",),
        RepoOperation.GET: ("owner", "repo"),
        RepoOperation.UPDATE: ("owner", "repo"),
        RepoOperation.DELETE: ("owner", "repo"),
        RepoOperation.FORK: ("owner", "repo"),
        RepoOperation.TRANSFER: ("owner", "repo", "new_owner"),
        RepoOperation.LIST: (),
    }

    operation: RepoOperation = Field(..., description="The repository operation to perform")

    owner: Optional[str] = Field(
        default=None,
        description="Repository owner (required for get, update, delete, fork, transfer)",
    )
    repo: Optional[str] = Field(
        default=None,
        description="Repository name (required for get, update, delete, fork, transfer)",
    )

    # create
    name: Optional[str] = Field(default=None, description="Repository name (required for create)")
    description: Optional[str] = Field(
        default=None, description="Repository description (for create/update)"
    )
    private: Optional[bool] = Field(
        default=None, description="Private repository flag (for create/update)"
    )
    auto_init: Optional[bool] = Field(default=None, description="Initialize with README (for create)")
    gitignore_template: Optional[str] = Field(default=None, description="Gitignore template (for create)")
    license_template: Optional[str] = Field(default=None, description="License template (for create)")

    # update
    new_name: Optional[str] = Field(default=None, description="New repository name (for update)")
    homepage: Optional[str] = Field(default=None, description="Repository homepage URL (for update)")
    has_issues: Optional[bool] = Field(default=None, description="Enable issues (for update)")
    has_projects: Optional[bool] = Field(default=None, description="Enable projects (for update)")
    has_wiki: Optional[bool] = Field(default=None, description="Enable wiki (for update)")

    # transfer
    new_owner: Optional[str] = Field(default=None, description="New owner for transfer operation")

    # list
    type: Optional[Literal["all", "owner", "public", "private", "member"]] = Field(
        default=None, description="Repository type filter (for list)"
    )
    sort: Optional[Literal["created", "updated", "pushed", "full_name"]] = Field(
        default=None, description="Sort field (for list)"
    )
    direction: Optional[Literal["asc", "desc"]] = Field(
        default=None, description="Sort direction (for list)"
    )
    per_page: Optional[int] = Field(default=None, ge=1, le=100, description="Results per page (for list)")
    page: Optional[int] = Field(default=None, ge=1, description="Page number (for list)")
