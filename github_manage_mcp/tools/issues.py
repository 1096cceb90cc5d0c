# =============================================================================
# GitHub Manage MCP Server - Issue Tool
# =============================================================================
"""
``gh_manage_issues``: create, update, close, assign, label, comment, search,
list and get issues.

``close``, ``assign`` and ``label`` are shorthands over the issue update
endpoint.
"""

from typing import Any

from ..client import GitHubClient
from ..models.issues import IssueOperation, ManageIssuesInput
from .base import GitHubTool, pick

DEFAULT_CLOSE_REASON = "completed"


async def _create(client: GitHubClient, p: ManageIssuesInput) -> Any:
    return await client.create_issue(
        p.owner, p.repo, pick(p, "title", "body", "labels", "assignees", "milestone")
    )


async def _get(client: GitHubClient, p: ManageIssuesInput) -> Any:
    return await client.get_issue(p.owner, p.repo, p.issue_number)


async def _update(client: GitHubClient, p: ManageIssuesInput) -> Any:
    data = pick(p, "title", "body", "state", "state_reason", "labels", "assignees", "milestone")
    return await client.update_issue(p.owner, p.repo, p.issue_number, data)


async def _close(client: GitHubClient, p: ManageIssuesInput) -> Any:
    data = {"state": "closed", "state_reason": p.state_reason or DEFAULT_CLOSE_REASON}
    return await client.update_issue(p.owner, p.repo, p.issue_number, data)


async def _assign(client: GitHubClient, p: ManageIssuesInput) -> Any:
    data = {"assignees": p.assignees or []}
    return await client.update_issue(p.owner, p.repo, p.issue_number, data)


async def _label(client: GitHubClient, p: ManageIssuesInput) -> Any:
    data = {"labels": p.labels or []}
    return await client.update_issue(p.owner, p.repo, p.issue_number, data)


async def _comment(client: GitHubClient, p: ManageIssuesInput) -> Any:
    return await client.add_issue_comment(p.owner, p.repo, p.issue_number, p.comment_body)


async def _list(client: GitHubClient, p: ManageIssuesInput) -> Any:
    params = {
        "state": p.state_filter or "open",
        **pick(
            p,
            "assignee",
            "creator",
            "mentioned",
            "since",
            "sort",
            "per_page",
            "page",
            labels="labels_filter",
            direction="order",
        ),
    }
    return await client.list_issues(p.owner, p.repo, params)


async def _search(client: GitHubClient, p: ManageIssuesInput) -> Any:
    return await client.search("issues", pick(p, "q", "sort", "order", "per_page", "page"))


manage_issues_tool = GitHubTool(
    name="gh_manage_issues",
    description=(
        "Comprehensive GitHub issue management - create, update, close, assign, "
        "label, comment, search, and list issues"
    ),
    label="Issue",
    input_model=ManageIssuesInput,
    handlers={
        IssueOperation.CREATE: _create,
        IssueOperation.GET: _get,
        IssueOperation.UPDATE: _update,
        IssueOperation.CLOSE: _close,
        IssueOperation.ASSIGN: _assign,
        IssueOperation.LABEL: _label,
        IssueOperation.COMMENT: _comment,
        IssueOperation.LIST: _list,
        IssueOperation.SEARCH: _search,
    },
)
