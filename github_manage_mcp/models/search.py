# =============================================================================
# GitHub Manage MCP Server - Search Models
# =============================================================================
"""Arguments of the ``gh_search`` tool."""

from enum import Enum
from typing import ClassVar, Literal, Optional, Union

from pydantic import Field

from .common import Requirement, ToolInput

RepoSort = Literal["stars", "forks", "help-wanted-issues", "updated"]
IssueSort = Literal[
    "comments",
    "reactions",
    "reactions-+1",
    "reactions--1",
    "reactions-smile",
    "reactions-thinking_face",
    "reactions-heart",
    "reactions-tada",
    "interactions",
    "created",
    "updated",
]
UserSort = Literal["followers", "repositories", "joined"]
CodeSort = Literal["indexed"]
CommitSort = Literal["author-date", "committer-date"]


class SearchOperation(str, Enum):
    """Search types supported by ``gh_search``."""

    REPOSITORIES = "repositories"
    ISSUES = "issues"
    PULL_REQUESTS = "pull_requests"
    USERS = "users"
    CODE = "code"
    COMMITS = "commits"
    TOPICS = "topics"


class GitHubSearchInput(ToolInput):
    """
    Search arguments.

    Filter fields are appended to ``q`` as GitHub search qualifiers by the
    operations they apply to.
    """

    REQUIRED_FIELDS: ClassVar[dict[SearchOperation, tuple[Requirement, ...]]] = {
        op: ("q",) for op in SearchOperation
    }

    operation: SearchOperation = Field(..., description="The GitHub search operation to perform")

    q: Optional[str] = Field(default=None, description="Search query (required for all search operations)")

    sort: Optional[Union[RepoSort, IssueSort, UserSort, CodeSort, CommitSort]] = Field(
        default=None, description="Sort field (varies by search type)"
    )
    order: Optional[Literal["asc", "desc"]] = Field(default=None, description="Sort order")
    per_page: Optional[int] = Field(
        default=None, ge=1, le=100, description="Results per page (default: 30, max: 100)"
    )
    page: Optional[int] = Field(default=None, ge=1, description="Page number (default: 1)")

    # repositories
    repo_size: Optional[str] = Field(default=None, description='Repository size filter (e.g., ">1000")')
    language: Optional[str] = Field(default=None, description="Programming language filter")

    # issues / pull_requests
    state: Optional[Literal["open", "closed"]] = Field(default=None, description="Issue/PR state filter")
    labels: Optional[str] = Field(default=None, description="Labels filter (comma-separated)")
    assignee: Optional[str] = Field(default=None, description="Assignee filter")

    # code / commits
    repo: Optional[str] = Field(
        default=None, description="Repository filter for code search (format: owner/repo)"
    )
    path: Optional[str] = Field(default=None, description="File path filter for code search")
    extension: Optional[str] = Field(default=None, description="File extension filter for code search")

    # users
    location: Optional[str] = Field(default=None, description="Location filter for user search")

    # commits
    author: Optional[str] = Field(default=None, description="Author filter for commit search")
    committer: Optional[str] = Field(default=None, description="Committer filter for commit search")
