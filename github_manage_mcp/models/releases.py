# =============================================================================
# GitHub Manage MCP Server - Release Models
# =============================================================================
"""Arguments of the ``gh_manage_releases`` tool."""

from enum import Enum
from typing import ClassVar, Literal, Optional

from pydantic import Field

from .common import Requirement, ToolInput


class ReleaseOperation(str, Enum):
    """Operations supported by ``gh_manage_releases``."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    PUBLISH = "publish"
    GET = "get"
    GET_LATEST = "get_latest"
    LIST = "list"


_RELEASE = ("owner", "repo", "release_id")


class ManageReleasesInput(ToolInput):
    """
    Release management arguments.

    ``get`` accepts either ``release_id`` or ``tag_name``; the ID wins when
    both are given.
    """

    REQUIRED_FIELDS: ClassVar[dict[ReleaseOperation, tuple[Requirement, ...]]] = {
        ReleaseOperation.CREATE: ("owner", "repo", "tag_name"),
        ReleaseOperation.GET: ("owner", "repo", ("release_id", "tag_name")),
        ReleaseOperation.UPDATE: _RELEASE,
        ReleaseOperation.DELETE: _RELEASE,
        ReleaseOperation.PUBLISH: _RELEASE,
        ReleaseOperation.GET_LATEST: ("owner", "repo"),
        ReleaseOperation.LIST: ("owner", "repo"),
    }

    operation: ReleaseOperation = Field(..., description="The release operation to perform")

    owner: Optional[str] = Field(default=None, description="Repository owner (required for all operations)")
    repo: Optional[str] = Field(default=None, description="Repository name (required for all operations)")

    release_id: Optional[int] = Field(
        default=None, ge=1, description="Release ID (required for update, delete, publish operations)"
    )
    tag_name: Optional[str] = Field(
        default=None, description="Tag name (required for create, can be used for get instead of release_id)"
    )

    name: Optional[str] = Field(default=None, description="Release name/title (for create/update)")
    body: Optional[str] = Field(default=None, description="Release description/notes (for create/update)")
    draft: Optional[bool] = Field(default=None, description="Create as draft release (for create, default: false)")
    prerelease: Optional[bool] = Field(
        default=None, description="Mark as prerelease (for create/update, default: false)"
    )
    generate_release_notes: Optional[bool] = Field(
        default=None, description="Auto-generate release notes (for create, default: false)"
    )
    target_commitish: Optional[str] = Field(
        default=None, description="Branch or commit for release (for create, defaults to default branch)"
    )
    discussion_category_name: Optional[str] = Field(
        default=None, description="Discussion category for release (for create/update)"
    )
    make_latest: Optional[Literal["true", "false", "legacy"]] = Field(
        default=None, description="Mark as latest release (for create/update)"
    )

    per_page: Optional[int] = Field(default=None, ge=1, le=100, description="Results per page (for list)")
    page: Optional[int] = Field(default=None, ge=1, description="Page number (for list)")
