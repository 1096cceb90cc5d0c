# =============================================================================
# GitHub Manage MCP Server - Models Package
# =============================================================================
"""
Pydantic models for tool arguments and results.

Each ``*Input`` model is the schema advertised for one consolidated tool;
``ToolOutput`` is the envelope every tool returns.
"""

from .actions import ActionsOperation, ManageActionsInput
from .branches import BranchOperation, BranchProtectionSettings, ManageBranchesInput
from .common import TextSegment, ToolInput, ToolOutput
from .issues import IssueOperation, ManageIssuesInput
from .pull_requests import (
    ManagePullsInput,
    MergeMethod,
    PullOperation,
    ReviewComment,
    ReviewEvent,
)
from .releases import ManageReleasesInput, ReleaseOperation
from .repos import ManageReposInput, RepoOperation
from .search import GitHubSearchInput, SearchOperation

__all__ = [
    # Common
    "ToolInput",
    "ToolOutput",
    "TextSegment",
    # Repositories
    "RepoOperation",
    "ManageReposInput",
    # Issues
    "IssueOperation",
    "ManageIssuesInput",
    # Pull Requests
    "PullOperation",
    "ManagePullsInput",
    "MergeMethod",
    "ReviewEvent",
    "ReviewComment",
    # Branches
    "BranchOperation",
    "BranchProtectionSettings",
    "ManageBranchesInput",
    # Releases
    "ReleaseOperation",
    "ManageReleasesInput",
    # Actions
    "ActionsOperation",
    "ManageActionsInput",
    # Search
    "SearchOperation",
    "GitHubSearchInput",
]
