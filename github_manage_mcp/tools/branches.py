# =============================================================================
# GitHub Manage MCP Server - Branch Tool
# =============================================================================
"""``gh_manage_branches``: branches and branch protection."""

from typing import Any

from ..client import GitHubClient
from ..models.branches import BranchOperation, ManageBranchesInput
from .base import GitHubTool, pick


async def _create(client: GitHubClient, p: ManageBranchesInput) -> Any:
    sha = p.sha
    if not sha:
        # Branch from the head of the default branch
        default_branch = await client.get_default_branch(p.owner, p.repo)
        head = await client.get_branch(p.owner, p.repo, default_branch)
        sha = head["commit"]["sha"]
    return await client.create_ref(p.owner, p.repo, f"refs/heads/{p.branch}", sha)


async def _delete(client: GitHubClient, p: ManageBranchesInput) -> Any:
    await client.delete_ref(p.owner, p.repo, f"heads/{p.branch}")
    return {"message": "Branch deleted successfully"}


async def _get(client: GitHubClient, p: ManageBranchesInput) -> Any:
    return await client.get_branch(p.owner, p.repo, p.branch)


async def _list(client: GitHubClient, p: ManageBranchesInput) -> Any:
    return await client.list_branches(p.owner, p.repo, pick(p, "protected", "per_page", "page"))


async def _get_protection(client: GitHubClient, p: ManageBranchesInput) -> Any:
    return await client.get_branch_protection(p.owner, p.repo, p.branch)


async def _update_protection(client: GitHubClient, p: ManageBranchesInput) -> Any:
    return await client.update_branch_protection(p.owner, p.repo, p.branch, p.protection.to_api())


manage_branches_tool = GitHubTool(
    name="gh_manage_branches",
    description=(
        "Comprehensive GitHub branch management - create, delete, get, list, "
        "and manage branch protection rules"
    ),
    label="Branch",
    input_model=ManageBranchesInput,
    handlers={
        BranchOperation.CREATE: _create,
        BranchOperation.DELETE: _delete,
        BranchOperation.GET: _get,
        BranchOperation.LIST: _list,
        BranchOperation.PROTECT: _update_protection,
        BranchOperation.GET_PROTECTION: _get_protection,
        BranchOperation.UPDATE_PROTECTION: _update_protection,
    },
)
