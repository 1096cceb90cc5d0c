# =============================================================================
# GitHub Manage MCP Server - API Client
# =============================================================================
"""
Async HTTP client for the GitHub REST API.

One method per upstream endpoint used by the tools. Methods return the
decoded JSON payload unchanged; acknowledgement-only endpoints return the
HTTP status. Redirects (renamed or transferred repositories) are followed.
Every failure, including a redirect that cannot be followed, is raised as
``GitHubApiError`` carrying the status code; classification happens in
``errors.classify_github_error``.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from . import __version__
from .errors import GitHubApiError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
API_VERSION = "2022-11-28"

SEARCH_KINDS = ("repositories", "issues", "users", "code", "commits", "topics")


def _seg(value: Any, safe: str = "") -> str:
    """Percent-encode one URL path segment."""
    return quote(str(value), safe=safe)


def _compact(params: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Drop ``None`` values; GitHub treats absent and null differently."""
    if params is None:
        return None
    return {k: v for k, v in params.items() if v is not None}


def _repo_path(owner: str, repo: str) -> str:
    return f"/repos/{_seg(owner)}/{_seg(repo)}"


# =============================================================================
# GitHub Client
# =============================================================================


class GitHubClient:
    """
    Async client for GitHub REST API.

    Attributes:
        token: GitHub token used as bearer credential.
        base_url: GitHub API base URL.
        timeout: Fixed timeout applied to every request, in seconds.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: GitHub personal access token.
            base_url: GitHub API base URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests use ``httpx.MockTransport``).
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
            follow_redirects=True,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": f"GitHub-Manage-MCP/{__version__}",
            },
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    # -------------------------------------------------------------------------
    # HTTP Request Helpers
    # -------------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
        follow_redirects: bool = True,
    ) -> httpx.Response:
        """
        Send a request and return the successful response.

        Args:
            method: HTTP method (GET, POST, PATCH, PUT, DELETE).
            path: API path (e.g., /repos/owner/repo/issues).
            params: Query parameters; ``None`` values are dropped.
            json: JSON body for POST/PATCH/PUT.
            follow_redirects: When False, a redirect is returned instead of
                followed.

        Returns:
            The raw httpx response (2xx, or a redirect when not following).

        Raises:
            GitHubApiError: For error statuses, timeouts and transport failures.
        """
        try:
            response = await self._client.request(
                method=method,
                url=path,
                params=_compact(params),
                json=json,
                follow_redirects=follow_redirects,
            )
        except httpx.TimeoutException as e:
            raise GitHubApiError(message=f"Request timed out: {e}", status_code=0) from e
        except httpx.RequestError as e:
            raise GitHubApiError(message=f"Request failed: {e}", status_code=0) from e

        if response.is_success or (response.is_redirect and not follow_redirects):
            return response

        error_data: dict = {}
        try:
            decoded = response.json()
            if isinstance(decoded, dict):
                error_data = decoded
        except ValueError:
            pass

        error_message = error_data.get("message") or response.text or response.reason_phrase
        logger.debug("GitHub %s %s -> %s", method, path, response.status_code)
        raise GitHubApiError(
            message=error_message,
            status_code=response.status_code,
            response_data=error_data,
        )

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> Any:
        """
        Make a request and decode its JSON body.

        Returns:
            Parsed JSON response, or None for empty bodies.
        """
        response = await self._send(method, path, params=params, json=json)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise GitHubApiError(
                message="GitHub returned invalid JSON",
                status_code=response.status_code,
            ) from e

    async def _get(self, path: str, params: Optional[dict] = None) -> Any:
        """Make a GET request."""
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, json: Optional[dict] = None) -> Any:
        """Make a POST request."""
        return await self._request("POST", path, json=json)

    async def _patch(self, path: str, json: Optional[dict] = None) -> Any:
        """Make a PATCH request."""
        return await self._request("PATCH", path, json=json)

    async def _put(self, path: str, json: Optional[dict] = None) -> Any:
        """Make a PUT request."""
        return await self._request("PUT", path, json=json)

    async def _delete(self, path: str) -> Any:
        """Make a DELETE request."""
        return await self._request("DELETE", path)

    # -------------------------------------------------------------------------
    # User / Rate Limit Methods
    # -------------------------------------------------------------------------

    async def get_authenticated_user(self) -> dict[str, Any]:
        """
        Get the authenticated user's information.

        Used as the cheap identity check performed on connect.

        Returns:
            User payload.
        """
        return await self._get("/user")

    async def get_token_scopes(self) -> list[str]:
        """
        Get the OAuth scopes granted to the token.

        Returns:
            Scope names from the ``X-OAuth-Scopes`` header (empty for
            fine-grained tokens, which do not report scopes).
        """
        response = await self._send("GET", "/user")
        header = response.headers.get("X-OAuth-Scopes", "")
        return [s.strip() for s in header.split(",") if s.strip()]

    async def get_rate_limit(self) -> dict[str, Any]:
        """Get the current rate limit status."""
        return await self._get("/rate_limit")

    # -------------------------------------------------------------------------
    # Repository Methods
    # -------------------------------------------------------------------------

    async def create_repository(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a repository for the authenticated user."""
        return await self._post("/user/repos", json=_compact(data))

    async def get_repository(self, owner: str, repo: str) -> dict[str, Any]:
        """
        Get repository information.

        Args:
            owner: Repository owner username.
            repo: Repository name.

        Returns:
            Repository payload.
        """
        return await self._get(_repo_path(owner, repo))

    async def update_repository(
        self, owner: str, repo: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Update repository settings; only keys present in ``data`` change."""
        return await self._patch(_repo_path(owner, repo), json=data)

    async def delete_repository(self, owner: str, repo: str) -> None:
        """Delete a repository. This cannot be undone."""
        await self._delete(_repo_path(owner, repo))

    async def create_fork(self, owner: str, repo: str) -> dict[str, Any]:
        """Fork a repository into the authenticated user's account."""
        return await self._post(f"{_repo_path(owner, repo)}/forks")

    async def transfer_repository(
        self, owner: str, repo: str, new_owner: str
    ) -> dict[str, Any]:
        """Transfer a repository to another user or organization."""
        return await self._post(
            f"{_repo_path(owner, repo)}/transfer", json={"new_owner": new_owner}
        )

    async def list_repositories(
        self, params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """
        List repositories for the authenticated user.

        Args:
            params: type, sort, direction, per_page, page.

        Returns:
            List of repository payloads.
        """
        return await self._get("/user/repos", params=params)

    # -------------------------------------------------------------------------
    # Issue Methods
    # -------------------------------------------------------------------------

    async def create_issue(
        self, owner: str, repo: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Create a new issue."""
        return await self._post(f"{_repo_path(owner, repo)}/issues", json=_compact(data))

    async def get_issue(self, owner: str, repo: str, issue_number: int) -> dict[str, Any]:
        """Get a specific issue."""
        return await self._get(f"{_repo_path(owner, repo)}/issues/{issue_number}")

    async def update_issue(
        self, owner: str, repo: str, issue_number: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Update an existing issue.

        Args:
            owner: Repository owner.
            repo: Repository name.
            issue_number: Issue number.
            data: Fields to change; sent as-is.

        Returns:
            Updated issue payload.
        """
        return await self._patch(
            f"{_repo_path(owner, repo)}/issues/{issue_number}", json=data
        )

    async def add_issue_comment(
        self, owner: str, repo: str, issue_number: int, body: str
    ) -> dict[str, Any]:
        """Add a comment to an issue or pull request."""
        return await self._post(
            f"{_repo_path(owner, repo)}/issues/{issue_number}/comments",
            json={"body": body},
        )

    async def list_issues(
        self, owner: str, repo: str, params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """List issues in a repository."""
        return await self._get(f"{_repo_path(owner, repo)}/issues", params=params)

    # -------------------------------------------------------------------------
    # Pull Request Methods
    # -------------------------------------------------------------------------

    async def create_pull_request(
        self, owner: str, repo: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Create a pull request."""
        return await self._post(f"{_repo_path(owner, repo)}/pulls", json=_compact(data))

    async def get_pull_request(
        self, owner: str, repo: str, pull_number: int
    ) -> dict[str, Any]:
        """Get a specific pull request."""
        return await self._get(f"{_repo_path(owner, repo)}/pulls/{pull_number}")

    async def update_pull_request(
        self, owner: str, repo: str, pull_number: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Update a pull request; only keys present in ``data`` change."""
        return await self._patch(
            f"{_repo_path(owner, repo)}/pulls/{pull_number}", json=data
        )

    async def merge_pull_request(
        self, owner: str, repo: str, pull_number: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Merge a pull request.

        Args:
            owner: Repository owner.
            repo: Repository name.
            pull_number: Pull request number.
            data: commit_title, commit_message, merge_method.

        Returns:
            Merge result with ``sha``, ``merged`` and ``message``.
        """
        return await self._put(
            f"{_repo_path(owner, repo)}/pulls/{pull_number}/merge", json=_compact(data)
        )

    async def create_pull_request_review(
        self, owner: str, repo: str, pull_number: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Submit a review on a pull request."""
        return await self._post(
            f"{_repo_path(owner, repo)}/pulls/{pull_number}/reviews",
            json=_compact(data),
        )

    async def list_pull_requests(
        self, owner: str, repo: str, params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """List pull requests in a repository."""
        return await self._get(f"{_repo_path(owner, repo)}/pulls", params=params)

    # -------------------------------------------------------------------------
    # Branch Methods
    # -------------------------------------------------------------------------

    async def get_branch(self, owner: str, repo: str, branch: str) -> dict[str, Any]:
        """Get a branch including its head commit."""
        return await self._get(f"{_repo_path(owner, repo)}/branches/{_seg(branch)}")

    async def list_branches(
        self, owner: str, repo: str, params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """List branches in a repository."""
        return await self._get(f"{_repo_path(owner, repo)}/branches", params=params)

    async def get_default_branch(self, owner: str, repo: str) -> str:
        """
        Get the repository's default branch name.

        Returns:
            Default branch name (e.g., "main" or "master").
        """
        repository = await self.get_repository(owner, repo)
        return repository["default_branch"]

    async def create_ref(
        self, owner: str, repo: str, ref: str, sha: str
    ) -> dict[str, Any]:
        """
        Create a git reference.

        Args:
            owner: Repository owner.
            repo: Repository name.
            ref: Fully qualified ref (e.g., refs/heads/feature).
            sha: Commit SHA the ref points to.

        Returns:
            Created ref payload.
        """
        return await self._post(
            f"{_repo_path(owner, repo)}/git/refs", json={"ref": ref, "sha": sha}
        )

    async def delete_ref(self, owner: str, repo: str, ref: str) -> None:
        """Delete a git reference such as ``heads/feature``."""
        await self._delete(f"{_repo_path(owner, repo)}/git/refs/{_seg(ref, safe='/')}")

    async def get_branch_protection(
        self, owner: str, repo: str, branch: str
    ) -> dict[str, Any]:
        """Get protection settings of a branch."""
        return await self._get(
            f"{_repo_path(owner, repo)}/branches/{_seg(branch)}/protection"
        )

    async def update_branch_protection(
        self, owner: str, repo: str, branch: str, protection: dict[str, Any]
    ) -> dict[str, Any]:
        """Replace protection settings of a branch; nulls disable a rule."""
        return await self._put(
            f"{_repo_path(owner, repo)}/branches/{_seg(branch)}/protection",
            json=protection,
        )

    # -------------------------------------------------------------------------
    # Release Methods
    # -------------------------------------------------------------------------

    async def create_release(
        self, owner: str, repo: str, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Create a release."""
        return await self._post(f"{_repo_path(owner, repo)}/releases", json=_compact(data))

    async def get_release(self, owner: str, repo: str, release_id: int) -> dict[str, Any]:
        """Get a release by ID."""
        return await self._get(f"{_repo_path(owner, repo)}/releases/{release_id}")

    async def get_release_by_tag(self, owner: str, repo: str, tag: str) -> dict[str, Any]:
        """Get a published release by tag name."""
        return await self._get(f"{_repo_path(owner, repo)}/releases/tags/{_seg(tag)}")

    async def update_release(
        self, owner: str, repo: str, release_id: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        """Update a release; only keys present in ``data`` change."""
        return await self._patch(
            f"{_repo_path(owner, repo)}/releases/{release_id}", json=data
        )

    async def delete_release(self, owner: str, repo: str, release_id: int) -> None:
        """Delete a release."""
        await self._delete(f"{_repo_path(owner, repo)}/releases/{release_id}")

    async def get_latest_release(self, owner: str, repo: str) -> dict[str, Any]:
        """Get the latest published full release."""
        return await self._get(f"{_repo_path(owner, repo)}/releases/latest")

    async def list_releases(
        self, owner: str, repo: str, params: Optional[dict[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """List releases in a repository."""
        return await self._get(f"{_repo_path(owner, repo)}/releases", params=params)

    # -------------------------------------------------------------------------
    # Actions Methods
    # -------------------------------------------------------------------------

    async def list_workflows(
        self, owner: str, repo: str, params: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """List workflows defined in a repository."""
        return await self._get(
            f"{_repo_path(owner, repo)}/actions/workflows", params=params
        )

    async def get_workflow(
        self, owner: str, repo: str, workflow_id: int | str
    ) -> dict[str, Any]:
        """Get a workflow by ID or file name."""
        return await self._get(
            f"{_repo_path(owner, repo)}/actions/workflows/{_seg(workflow_id)}"
        )

    async def dispatch_workflow(
        self,
        owner: str,
        repo: str,
        workflow_id: int | str,
        ref: str,
        inputs: dict[str, Any],
    ) -> int:
        """
        Trigger a ``workflow_dispatch`` event.

        Args:
            owner: Repository owner.
            repo: Repository name.
            workflow_id: Workflow ID or file name.
            ref: Branch or tag to run the workflow on.
            inputs: Workflow inputs.

        Returns:
            HTTP status of the acknowledgement (204).
        """
        response = await self._send(
            "POST",
            f"{_repo_path(owner, repo)}/actions/workflows/{_seg(workflow_id)}/dispatches",
            json={"ref": ref, "inputs": inputs},
        )
        return response.status_code

    async def list_workflow_runs(
        self,
        owner: str,
        repo: str,
        workflow_id: Optional[int | str] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        List workflow runs.

        Args:
            owner: Repository owner.
            repo: Repository name.
            workflow_id: Limit to one workflow; repository-wide when omitted.
            params: actor, branch, event, status, created, per_page, page.

        Returns:
            Payload with ``total_count`` and ``workflow_runs``.
        """
        if workflow_id is not None:
            path = f"{_repo_path(owner, repo)}/actions/workflows/{_seg(workflow_id)}/runs"
        else:
            path = f"{_repo_path(owner, repo)}/actions/runs"
        return await self._get(path, params=params)

    async def get_workflow_run(self, owner: str, repo: str, run_id: int) -> dict[str, Any]:
        """Get a workflow run."""
        return await self._get(f"{_repo_path(owner, repo)}/actions/runs/{run_id}")

    async def cancel_workflow_run(self, owner: str, repo: str, run_id: int) -> int:
        """Cancel a workflow run; returns the acknowledgement status (202)."""
        response = await self._send(
            "POST", f"{_repo_path(owner, repo)}/actions/runs/{run_id}/cancel"
        )
        return response.status_code

    async def rerun_workflow_run(self, owner: str, repo: str, run_id: int) -> int:
        """Re-run a workflow run; returns the acknowledgement status (201)."""
        response = await self._send(
            "POST", f"{_repo_path(owner, repo)}/actions/runs/{run_id}/rerun"
        )
        return response.status_code

    async def list_artifacts(
        self, owner: str, repo: str, params: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """List artifacts for a repository."""
        return await self._get(
            f"{_repo_path(owner, repo)}/actions/artifacts", params=params
        )

    async def get_artifact(self, owner: str, repo: str, artifact_id: int) -> dict[str, Any]:
        """Get an artifact."""
        return await self._get(f"{_repo_path(owner, repo)}/actions/artifacts/{artifact_id}")

    async def get_artifact_download_url(
        self, owner: str, repo: str, artifact_id: int
    ) -> tuple[str, int]:
        """
        Resolve the short-lived download URL of an artifact zip.

        The archive itself is not fetched; GitHub answers with a redirect
        whose ``Location`` is the download URL.

        Returns:
            Tuple of (download URL, HTTP status).
        """
        response = await self._send(
            "GET",
            f"{_repo_path(owner, repo)}/actions/artifacts/{artifact_id}/zip",
            follow_redirects=False,
        )
        url = response.headers.get("Location") or str(response.url)
        return url, response.status_code

    async def list_repo_secrets(
        self, owner: str, repo: str, params: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """List repository Actions secret names (values are never returned)."""
        return await self._get(
            f"{_repo_path(owner, repo)}/actions/secrets", params=params
        )

    # -------------------------------------------------------------------------
    # Search Methods
    # -------------------------------------------------------------------------

    async def search(self, kind: str, params: dict[str, Any]) -> dict[str, Any]:
        """
        Run a search query.

        Args:
            kind: One of repositories, issues, users, code, commits, topics.
            params: q, sort, order, per_page, page.

        Returns:
            Payload with ``total_count``, ``incomplete_results`` and ``items``.
        """
        if kind not in SEARCH_KINDS:
            raise ValueError(f"Unsupported search kind: {kind}")
        return await self._get(f"/search/{kind}", params=params)
