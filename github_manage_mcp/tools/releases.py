# =============================================================================
# GitHub Manage MCP Server - Release Tool
# =============================================================================
"""``gh_manage_releases``: create, update, delete, publish, get and list releases."""

from typing import Any

from ..client import GitHubClient
from ..models.releases import ManageReleasesInput, ReleaseOperation
from .base import GitHubTool, pick

_RELEASE_FIELDS = ("name", "body", "target_commitish", "discussion_category_name", "make_latest")


async def _create(client: GitHubClient, p: ManageReleasesInput) -> Any:
    data = {
        "tag_name": p.tag_name,
        "draft": bool(p.draft),
        "prerelease": bool(p.prerelease),
        "generate_release_notes": bool(p.generate_release_notes),
        **pick(p, *_RELEASE_FIELDS),
    }
    return await client.create_release(p.owner, p.repo, data)


async def _update(client: GitHubClient, p: ManageReleasesInput) -> Any:
    data = pick(p, "tag_name", "draft", "prerelease", *_RELEASE_FIELDS)
    return await client.update_release(p.owner, p.repo, p.release_id, data)


async def _delete(client: GitHubClient, p: ManageReleasesInput) -> Any:
    await client.delete_release(p.owner, p.repo, p.release_id)
    return {"message": "Release deleted successfully"}


async def _publish(client: GitHubClient, p: ManageReleasesInput) -> Any:
    return await client.update_release(p.owner, p.repo, p.release_id, {"draft": False})


async def _get(client: GitHubClient, p: ManageReleasesInput) -> Any:
    if p.release_id is not None:
        return await client.get_release(p.owner, p.repo, p.release_id)
    return await client.get_release_by_tag(p.owner, p.repo, p.tag_name)


async def _get_latest(client: GitHubClient, p: ManageReleasesInput) -> Any:
    return await client.get_latest_release(p.owner, p.repo)


async def _list(client: GitHubClient, p: ManageReleasesInput) -> Any:
    return await client.list_releases(p.owner, p.repo, pick(p, "per_page", "page"))


manage_releases_tool = GitHubTool(
    name="gh_manage_releases",
    description=(
        "Comprehensive GitHub release management - create, update, delete, "
        "publish, get, and list releases"
    ),
    label="Release",
    input_model=ManageReleasesInput,
    handlers={
        ReleaseOperation.CREATE: _create,
        ReleaseOperation.UPDATE: _update,
        ReleaseOperation.DELETE: _delete,
        ReleaseOperation.PUBLISH: _publish,
        ReleaseOperation.GET: _get,
        ReleaseOperation.GET_LATEST: _get_latest,
        ReleaseOperation.LIST: _list,
    },
)
