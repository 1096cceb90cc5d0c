# =============================================================================
# GitHub Manage MCP Server - Server Surface Tests
# =============================================================================
"""Tests for the MCP result conversion, the HTTP surface and the CLI."""

from importlib.metadata import version

import pytest
from fastapi.testclient import TestClient
from mcp import types

from github_manage_mcp.__main__ import apply_overrides, build_registry, parse_args
from github_manage_mcp.auth import TokenResolver
from github_manage_mcp.config import Settings
from github_manage_mcp.gateway import GitHubGateway
from github_manage_mcp.models.common import ToolOutput
from github_manage_mcp.registry import ToolRegistry
from github_manage_mcp.server import (
    SERVER_NAME,
    call_registered_tool,
    create_http_app,
    create_mcp_server,
    to_call_tool_result,
)
from github_manage_mcp.tools import ALL_TOOLS
from tests.conftest import GitHubStub


@pytest.fixture
def registry(gateway: GitHubGateway, resolver: TokenResolver) -> ToolRegistry:
    """Registry with every tool enabled."""
    return ToolRegistry(ALL_TOOLS, resolver, gateway)


class TestMcpSurface:
    """Tests for the MCP stdio surface."""

    def test_server_registers_handlers(self, registry: ToolRegistry) -> None:
        """Test that list_tools and call_tool are registered."""
        server = create_mcp_server(registry)

        assert server.name == SERVER_NAME
        assert types.ListToolsRequest in server.request_handlers
        assert types.CallToolRequest in server.request_handlers

    def test_sdk_major_version(self) -> None:
        """Test that the installed SDK provides the 1.x decorator API used here."""
        assert version("mcp").split(".")[0] == "1"

    def test_result_conversion(self) -> None:
        """Test that envelope segments and the error flag are preserved."""
        result = to_call_tool_result(ToolOutput.success("done", {"id": 1}))

        assert result.isError is False
        assert [c.text for c in result.content] == ["done", '{\n  "id": 1\n}']

    @pytest.mark.asyncio
    async def test_unknown_tool_becomes_error_envelope(self, registry: ToolRegistry) -> None:
        """Test that routing failures are returned, not raised."""
        output = await call_registered_tool(registry, "gh_manage_gists", {})

        assert output.is_error is True
        assert output.texts == ["Error: Tool 'gh_manage_gists' is not enabled or does not exist."]


class TestHttpSurface:
    """Tests for the FastAPI surface."""

    def test_health(self, registry: ToolRegistry, github: GitHubStub) -> None:
        """Test that health reports the login and rate limit."""
        github.add("GET", "/rate_limit", json={"rate": {"limit": 5000, "remaining": 10, "reset": 0, "used": 4990}})

        with TestClient(create_http_app(registry)) as client:
            response = client.get("/health")

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "healthy"
        assert body["authenticated_as"] == "octocat"
        assert body["rate_limit"]["remaining"] == 10

    def test_health_unconfigured(self, gateway: GitHubGateway) -> None:
        """Test that health reports a missing token without calling GitHub."""
        registry = ToolRegistry(ALL_TOOLS, TokenResolver(), gateway)

        with TestClient(create_http_app(registry)) as client:
            body = client.get("/health").json()

        assert body["status"] == "unconfigured"
        assert "authenticated_as" not in body

    def test_list_tools(self, registry: ToolRegistry) -> None:
        """Test that GET /tools lists the enabled tools."""
        with TestClient(create_http_app(registry)) as client:
            tools = client.get("/tools").json()["tools"]

        assert len(tools) == len(ALL_TOOLS)

    def test_call_tool(self, registry: ToolRegistry, github: GitHubStub) -> None:
        """Test that POST /tools/{name} returns the envelope with isError."""
        github.add("POST", "/user/repos", status=201, json={"id": 123, "name": "demo"})

        with TestClient(create_http_app(registry)) as client:
            response = client.post("/tools/gh_manage_repos", json={"operation": "create", "name": "demo"})

        body = response.json()
        assert body["isError"] is False
        assert body["content"][0]["type"] == "text"

    def test_call_unknown_tool(self, registry: ToolRegistry) -> None:
        """Test that unknown tools answer 404."""
        with TestClient(create_http_app(registry)) as client:
            response = client.post("/tools/gh_manage_gists", json={})

        assert response.status_code == 404


class TestCli:
    """Tests for argument parsing and wiring."""

    def test_flags(self) -> None:
        """Test the short and long flags."""
        args = parse_args(["-t", "cli-token", "-c", "tools.json", "--http", "--port", "9000", "--log-level", "debug"])

        assert args.token == "cli-token"
        assert args.tools_config == "tools.json"
        assert args.http is True
        assert args.port == 9000
        assert args.log_level == "DEBUG"

    def test_overrides_and_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that CLI values override settings and the CLI token beats the environment."""
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        monkeypatch.setenv("GITHUB_MCP_PORT", "8100")
        args = parse_args(["--token", "cli-token", "--host", "0.0.0.0"])

        settings = apply_overrides(Settings(_env_file=None), args)
        registry = build_registry(settings, process_token=args.token)

        assert settings.host == "0.0.0.0"
        assert settings.port == 8100
        assert registry.resolve_token(None) == "cli-token"
        assert registry.resolve_token("call-token") == "call-token"
        assert len(registry.enabled) == len(ALL_TOOLS)
