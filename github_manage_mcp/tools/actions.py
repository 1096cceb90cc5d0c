# =============================================================================
# GitHub Manage MCP Server - Actions Tool
# =============================================================================
"""
``gh_manage_actions``: workflows, runs, artifacts and secret names.

Asynchronous acknowledgements (dispatch, cancel, rerun) carry no body, so
their results report the HTTP status instead. ``download_artifact`` only
resolves the download URL; the archive is never fetched.
"""

from typing import Any

from ..client import GitHubClient
from ..models.actions import ActionsOperation, ManageActionsInput
from .base import GitHubTool, pick

DEFAULT_DISPATCH_REF = "main"

_PAGING = ("per_page", "page")


async def _list_workflows(client: GitHubClient, p: ManageActionsInput) -> Any:
    return await client.list_workflows(p.owner, p.repo, pick(p, *_PAGING))


async def _get_workflow(client: GitHubClient, p: ManageActionsInput) -> Any:
    return await client.get_workflow(p.owner, p.repo, p.workflow_id)


async def _trigger_workflow(client: GitHubClient, p: ManageActionsInput) -> Any:
    # Not the repository's default branch; callers on other defaults must pass ref
    ref = p.ref or DEFAULT_DISPATCH_REF
    status = await client.dispatch_workflow(p.owner, p.repo, p.workflow_id, ref, p.inputs or {})
    return {"message": "Workflow triggered successfully", "status": status}


async def _list_runs(client: GitHubClient, p: ManageActionsInput) -> Any:
    params = pick(p, "actor", "branch", "event", "status", "created", *_PAGING)
    return await client.list_workflow_runs(p.owner, p.repo, p.workflow_id, params)


async def _get_run(client: GitHubClient, p: ManageActionsInput) -> Any:
    return await client.get_workflow_run(p.owner, p.repo, p.run_id)


async def _cancel_run(client: GitHubClient, p: ManageActionsInput) -> Any:
    status = await client.cancel_workflow_run(p.owner, p.repo, p.run_id)
    return {"message": "Workflow run cancelled successfully", "status": status}


async def _rerun_workflow(client: GitHubClient, p: ManageActionsInput) -> Any:
    status = await client.rerun_workflow_run(p.owner, p.repo, p.run_id)
    return {"message": "Workflow rerun triggered successfully", "status": status}


async def _list_artifacts(client: GitHubClient, p: ManageActionsInput) -> Any:
    return await client.list_artifacts(p.owner, p.repo, pick(p, *_PAGING))


async def _get_artifact(client: GitHubClient, p: ManageActionsInput) -> Any:
    return await client.get_artifact(p.owner, p.repo, p.artifact_id)


async def _download_artifact(client: GitHubClient, p: ManageActionsInput) -> Any:
    url, status = await client.get_artifact_download_url(p.owner, p.repo, p.artifact_id)
    return {"message": "Artifact download URL generated", "download_url": url, "status": status}


async def _list_secrets(client: GitHubClient, p: ManageActionsInput) -> Any:
    return await client.list_repo_secrets(p.owner, p.repo, pick(p, *_PAGING))


manage_actions_tool = GitHubTool(
    name="gh_manage_actions",
    description=(
        "Comprehensive GitHub Actions management - workflows, runs, artifacts, "
        "and secrets management"
    ),
    label="GitHub Actions",
    input_model=ManageActionsInput,
    handlers={
        ActionsOperation.LIST_WORKFLOWS: _list_workflows,
        ActionsOperation.GET_WORKFLOW: _get_workflow,
        ActionsOperation.TRIGGER_WORKFLOW: _trigger_workflow,
        ActionsOperation.LIST_RUNS: _list_runs,
        ActionsOperation.GET_RUN: _get_run,
        ActionsOperation.CANCEL_RUN: _cancel_run,
        ActionsOperation.RERUN_WORKFLOW: _rerun_workflow,
        ActionsOperation.LIST_ARTIFACTS: _list_artifacts,
        ActionsOperation.GET_ARTIFACT: _get_artifact,
        ActionsOperation.DOWNLOAD_ARTIFACT: _download_artifact,
        ActionsOperation.LIST_SECRETS: _list_secrets,
    },
)
