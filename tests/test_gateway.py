# =============================================================================
# GitHub Manage MCP Server - Gateway Tests
# =============================================================================
"""
Unit tests for the connection gateway.

These tests verify that the gateway correctly:
- Verifies identity before holding a connection
- Falls back to the most recent connection
- Drops every connection on disconnect and after each session
- Classifies connection failures once
"""

import asyncio

import pytest

from github_manage_mcp.errors import AuthenticationError, InternalError
from github_manage_mcp.gateway import CONNECT_CONTEXT, GitHubGateway
from tests.conftest import GitHubStub


class TestConnect:
    """Tests for connect / get_client / disconnect."""

    @pytest.mark.asyncio
    async def test_connect_checks_identity(
        self, gateway: GitHubGateway, github: GitHubStub
    ) -> None:
        """Test that connect performs GET /user before succeeding."""
        await gateway.connect("token-a")

        assert github.requests[-1].url.path == "/user"
        assert gateway.connected_count == 1
        await gateway.disconnect()

    @pytest.mark.asyncio
    async def test_get_client_falls_back_to_latest(self, gateway: GitHubGateway) -> None:
        """Test that an unknown or missing token returns the latest connection."""
        await gateway.connect("token-a")
        await gateway.connect("token-b")

        assert gateway.get_client("token-a").token == "token-a"
        assert gateway.get_client().token == "token-b"
        assert gateway.get_client("unknown").token == "token-b"
        await gateway.disconnect()

    @pytest.mark.asyncio
    async def test_disconnect_drops_everything(self, gateway: GitHubGateway) -> None:
        """Test that nothing is held after disconnect."""
        await gateway.connect("token-a")
        await gateway.disconnect()

        assert gateway.connected_count == 0
        with pytest.raises(InternalError):
            gateway.get_client()

    @pytest.mark.asyncio
    async def test_failed_identity_check_is_classified(
        self, gateway: GitHubGateway, github: GitHubStub
    ) -> None:
        """Test that a rejected token raises AuthenticationError and holds nothing."""
        github.add("GET", "/user", status=401, json={"message": "Bad credentials"})

        with pytest.raises(AuthenticationError) as exc_info:
            await gateway.connect("bad-token")

        assert exc_info.value.message.startswith(CONNECT_CONTEXT)
        assert "invalid or expired" in exc_info.value.message
        assert gateway.connected_count == 0


class TestSession:
    """Tests for the connect -> call -> disconnect session."""

    @pytest.mark.asyncio
    async def test_session_disconnects_after_use(self, gateway: GitHubGateway) -> None:
        """Test that the connection is released when the session ends."""
        async with gateway.session("token-a") as client:
            assert client.token == "token-a"
            assert gateway.connected_count == 1

        assert gateway.connected_count == 0

    @pytest.mark.asyncio
    async def test_session_disconnects_on_error(self, gateway: GitHubGateway) -> None:
        """Test that the connection is released when the call fails."""
        with pytest.raises(RuntimeError):
            async with gateway.session("token-a"):
                raise RuntimeError("boom")

        assert gateway.connected_count == 0

    @pytest.mark.asyncio
    async def test_each_session_reverifies(
        self, gateway: GitHubGateway, github: GitHubStub
    ) -> None:
        """Test that every session performs its own identity check."""
        for _ in range(2):
            async with gateway.session("token-a"):
                pass

        assert [r.url.path for r in github.requests] == ["/user", "/user"]

    @pytest.mark.asyncio
    async def test_concurrent_sessions_are_serialized(self, gateway: GitHubGateway) -> None:
        """Test that overlapping calls never see each other's connection."""
        seen: list[str] = []

        async def use(token: str) -> None:
            async with gateway.session(token) as client:
                await asyncio.sleep(0)
                seen.append(client.token)
                assert gateway.connected_count == 1

        await asyncio.gather(use("token-a"), use("token-b"))

        assert sorted(seen) == ["token-a", "token-b"]
        assert gateway.connected_count == 0


class TestHelpers:
    """Tests for rate limit and scope helpers."""

    @pytest.mark.asyncio
    async def test_rate_limit(self, gateway: GitHubGateway, github: GitHubStub) -> None:
        """Test that the core rate limit is returned with an ISO reset time."""
        github.add(
            "GET",
            "/rate_limit",
            json={"rate": {"limit": 5000, "remaining": 4999, "reset": 0, "used": 1}},
        )

        rate = await gateway.get_rate_limit("token-a")

        assert rate == {
            "limit": 5000,
            "remaining": 4999,
            "reset": "1970-01-01T00:00:00+00:00",
            "used": 1,
        }
        assert gateway.connected_count == 0

    @pytest.mark.asyncio
    async def test_scopes(self, gateway: GitHubGateway, github: GitHubStub) -> None:
        """Test that required scopes are checked against X-OAuth-Scopes."""
        github.add("GET", "/user", json={"login": "octocat"}, headers={"X-OAuth-Scopes": "repo"})

        assert await gateway.check_token_scopes(["repo"], "token-a") is True
        assert await gateway.check_token_scopes(["repo", "workflow"], "token-a") is False

    @pytest.mark.asyncio
    async def test_scopes_false_on_failure(
        self, gateway: GitHubGateway, github: GitHubStub
    ) -> None:
        """Test that a failed check answers False rather than raising."""
        github.add("GET", "/user", status=401, json={"message": "Bad credentials"})

        assert await gateway.check_token_scopes(["repo"], "token-a") is False
