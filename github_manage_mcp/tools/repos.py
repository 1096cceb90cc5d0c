# =============================================================================
# GitHub Manage MCP Server - Repository Tool
# =============================================================================
"""``gh_manage_repos``: create, update, delete, fork, get, list, transfer."""

from typing import Any

from ..client import GitHubClient
from ..models.repos import ManageReposInput, RepoOperation
from .base import GitHubTool, pick


async def _create(client: GitHubClient, p: ManageReposInput) -> Any:
    return await client.create_repository(
        pick(p, "name", "description", "private", "auto_init", "gitignore_template", "license_template")
    )


async def _get(client: GitHubClient, p: ManageReposInput) -> Any:
    return await client.get_repository(p.owner, p.repo)


async def _update(client: GitHubClient, p: ManageReposInput) -> Any:
    data = pick(
        p,
        "description",
        "homepage",
        "private",
        "has_issues",
        "has_projects",
        "has_wiki",
        name="new_name",
    )
    return await client.update_repository(p.owner, p.repo, data)


async def _delete(client: GitHubClient, p: ManageReposInput) -> Any:
    await client.delete_repository(p.owner, p.repo)
    return {"deleted": True, "repository": f"{p.owner}/{p.repo}"}


async def _fork(client: GitHubClient, p: ManageReposInput) -> Any:
    return await client.create_fork(p.owner, p.repo)


async def _transfer(client: GitHubClient, p: ManageReposInput) -> Any:
    return await client.transfer_repository(p.owner, p.repo, p.new_owner)


async def _list(client: GitHubClient, p: ManageReposInput) -> Any:
    return await client.list_repositories(pick(p, "type", "sort", "direction", "per_page", "page"))


manage_repos_tool = GitHubTool(
    name="gh_manage_repos",
    description=(
        "Comprehensive GitHub repository management - create, update, delete, "
        "fork, get, list, and transfer repositories"
    ),
    label="Repository",
    input_model=ManageReposInput,
    handlers={
        RepoOperation.CREATE: _create,
        RepoOperation.GET: _get,
        RepoOperation.UPDATE: _update,
        RepoOperation.DELETE: _delete,
        RepoOperation.FORK: _fork,
        RepoOperation.TRANSFER: _transfer,
        RepoOperation.LIST: _list,
    },
)
