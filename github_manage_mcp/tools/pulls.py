# =============================================================================
# GitHub Manage MCP Server - Pull Request Tool
# =============================================================================
"""``gh_manage_pulls``: pull request lifecycle, reviews and merges."""

from typing import Any

from ..client import GitHubClient
from ..models.pull_requests import ManagePullsInput, PullOperation, ReviewEvent
from .base import GitHubTool, pick


async def _create(client: GitHubClient, p: ManagePullsInput) -> Any:
    return await client.create_pull_request(
        p.owner,
        p.repo,
        pick(p, "title", "head", "base", "body", "draft", "maintainer_can_modify"),
    )


async def _get(client: GitHubClient, p: ManagePullsInput) -> Any:
    return await client.get_pull_request(p.owner, p.repo, p.pull_number)


async def _update(client: GitHubClient, p: ManagePullsInput) -> Any:
    data = pick(p, "title", "body", "state", "base", "maintainer_can_modify")
    return await client.update_pull_request(p.owner, p.repo, p.pull_number, data)


async def _close(client: GitHubClient, p: ManagePullsInput) -> Any:
    return await client.update_pull_request(p.owner, p.repo, p.pull_number, {"state": "closed"})


async def _merge(client: GitHubClient, p: ManagePullsInput) -> Any:
    return await client.merge_pull_request(
        p.owner, p.repo, p.pull_number, pick(p, "commit_title", "commit_message", "merge_method")
    )


async def _review(client: GitHubClient, p: ManagePullsInput) -> Any:
    data = pick(p, body="review_body", event="review_event", comments="review_comments")
    return await client.create_pull_request_review(p.owner, p.repo, p.pull_number, data)


async def _approve(client: GitHubClient, p: ManagePullsInput) -> Any:
    data = {"body": p.review_body or "Approved", "event": ReviewEvent.APPROVE.value}
    return await client.create_pull_request_review(p.owner, p.repo, p.pull_number, data)


async def _request_changes(client: GitHubClient, p: ManagePullsInput) -> Any:
    data = {
        "body": p.review_body or "Changes requested",
        "event": ReviewEvent.REQUEST_CHANGES.value,
    }
    return await client.create_pull_request_review(p.owner, p.repo, p.pull_number, data)


async def _list(client: GitHubClient, p: ManagePullsInput) -> Any:
    params = {
        "state": p.state_filter or "open",
        **pick(
            p,
            "sort",
            "direction",
            "per_page",
            "page",
            head="head_filter",
            base="base_filter",
        ),
    }
    return await client.list_pull_requests(p.owner, p.repo, params)


manage_pulls_tool = GitHubTool(
    name="gh_manage_pulls",
    description=(
        "Comprehensive GitHub pull request management - create, update, merge, "
        "review, approve, request changes, list, and get pull requests"
    ),
    label="Pull request",
    input_model=ManagePullsInput,
    handlers={
        PullOperation.CREATE: _create,
        PullOperation.GET: _get,
        PullOperation.UPDATE: _update,
        PullOperation.CLOSE: _close,
        PullOperation.MERGE: _merge,
        PullOperation.REVIEW: _review,
        PullOperation.APPROVE: _approve,
        PullOperation.REQUEST_CHANGES: _request_changes,
        PullOperation.LIST: _list,
    },
)
