# =============================================================================
# GitHub Manage MCP Server - Test Fixtures
# =============================================================================
"""
Shared fixtures.

GitHub is replaced by ``GitHubStub``, an ``httpx.MockTransport`` handler
that answers from a route table and records every request it receives.
"""

import json
from typing import Any, Optional

import httpx
import pytest

from github_manage_mcp.auth import TokenResolver
from github_manage_mcp.gateway import GitHubGateway
from github_manage_mcp.models.common import ToolOutput
from github_manage_mcp.tools.base import GitHubTool

BASE_URL = "https://api.github.com"
USER = {"login": "octocat", "id": 1}


class GitHubStub:
    """
    Route table standing in for the GitHub REST API.

    ``GET /user`` answers with ``USER`` unless overridden; unknown routes
    answer 404.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []
        self.add("GET", "/user", json=USER)

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """Register the response for ``method path``."""
        self.routes[(method, path)] = httpx.Response(status, json=json, headers=headers)

    def redirect(self, method: str, path: str, target: str, status: int = 301) -> None:
        """Answer ``method path`` with a redirect to ``target``, as for a moved repository."""
        location = f"{BASE_URL}{target}"
        self.add(
            method,
            path,
            status=status,
            json={"message": "Moved Permanently", "url": location},
            headers={"Location": location},
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return httpx.Response(
            response.status_code,
            content=response.content,
            headers=response.headers,
        )

    def calls(self, method: Optional[str] = None) -> list[tuple[str, str]]:
        """(method, path) of recorded requests, identity checks excluded."""
        return [
            (r.method, r.url.path)
            for r in self.requests
            if r.url.path != "/user" and (method is None or r.method == method)
        ]

    def last(self, method: str, path: str) -> httpx.Request:
        """Most recent request for ``method path``."""
        for request in reversed(self.requests):
            if request.method == method and request.url.path == path:
                return request
        raise AssertionError(f"No {method} {path} request recorded")

    def body(self, method: str, path: str) -> Any:
        """Decoded JSON body of the most recent ``method path`` request."""
        return json.loads(self.last(method, path).content)

    def query(self, method: str, path: str) -> dict[str, str]:
        """Query parameters of the most recent ``method path`` request."""
        return dict(self.last(method, path).url.params)


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def github() -> GitHubStub:
    """
    Create an empty GitHub stub.

    Returns:
        Stub answering only the identity check.
    """
    return GitHubStub()


@pytest.fixture
def gateway(github: GitHubStub) -> GitHubGateway:
    """
    Create a gateway whose clients talk to the stub.

    Args:
        github: GitHub stub.

    Returns:
        GitHubGateway using ``httpx.MockTransport``.
    """
    return GitHubGateway(base_url=BASE_URL, transport=httpx.MockTransport(github))


@pytest.fixture
def resolver() -> TokenResolver:
    """Token resolver with only an environment token."""
    return TokenResolver(environment_token="env-token")


@pytest.fixture
def run_tool(gateway: GitHubGateway, resolver: TokenResolver):
    """
    Execute a tool against the stub.

    Returns:
        Coroutine function ``(tool, arguments) -> ToolOutput``.
    """

    async def _run(tool: GitHubTool, arguments: dict[str, Any]) -> ToolOutput:
        return await tool.execute(arguments, resolver, gateway)

    return _run


def payload(output: ToolOutput) -> Any:
    """Decode the JSON segment of a success envelope."""
    assert output.is_error is False, output.texts
    return json.loads(output.texts[1])
