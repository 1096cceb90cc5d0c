# =============================================================================
# GitHub Manage MCP Server - Release Tool Tests
# =============================================================================
"""Tests for gh_manage_releases."""

import pytest

from github_manage_mcp.tools.releases import manage_releases_tool
from tests.conftest import GitHubStub, payload

RELEASE = {"id": 11, "tag_name": "v1.0.0", "draft": True}


class TestReleaseOperations:
    """Tests for each release operation."""

    @pytest.mark.asyncio
    async def test_create_defaults(self, run_tool, github: GitHubStub) -> None:
        """Test that create sends explicit false flags by default."""
        github.add("POST", "/repos/o/r/releases", status=201, json=RELEASE)

        await run_tool(manage_releases_tool, {"operation": "create", "owner": "o", "repo": "r", "tag_name": "v1.0.0"})

        assert github.body("POST", "/repos/o/r/releases") == {
            "tag_name": "v1.0.0",
            "draft": False,
            "prerelease": False,
            "generate_release_notes": False,
        }

    @pytest.mark.asyncio
    async def test_get_by_id_or_tag(self, run_tool, github: GitHubStub) -> None:
        """Test that get uses the ID when given, otherwise the tag."""
        github.add("GET", "/repos/o/r/releases/11", json=RELEASE)
        github.add("GET", "/repos/o/r/releases/tags/v1.0.0", json=RELEASE)

        await run_tool(manage_releases_tool, {"operation": "get", "owner": "o", "repo": "r", "release_id": 11, "tag_name": "v1.0.0"})
        await run_tool(manage_releases_tool, {"operation": "get", "owner": "o", "repo": "r", "tag_name": "v1.0.0"})

        assert github.calls() == [
            ("GET", "/repos/o/r/releases/11"),
            ("GET", "/repos/o/r/releases/tags/v1.0.0"),
        ]

    @pytest.mark.asyncio
    async def test_publish(self, run_tool, github: GitHubStub) -> None:
        """Test that publish clears the draft flag."""
        github.add("PATCH", "/repos/o/r/releases/11", json={**RELEASE, "draft": False})

        output = await run_tool(manage_releases_tool, {"operation": "publish", "owner": "o", "repo": "r", "release_id": 11})

        assert payload(output)["draft"] is False
        assert github.body("PATCH", "/repos/o/r/releases/11") == {"draft": False}

    @pytest.mark.asyncio
    async def test_update_sends_only_given_fields(self, run_tool, github: GitHubStub) -> None:
        """Test that update leaves unspecified fields untouched."""
        github.add("PATCH", "/repos/o/r/releases/11", json=RELEASE)

        await run_tool(
            manage_releases_tool,
            {"operation": "update", "owner": "o", "repo": "r", "release_id": 11, "name": "First", "make_latest": "true"},
        )

        assert github.body("PATCH", "/repos/o/r/releases/11") == {"name": "First", "make_latest": "true"}

    @pytest.mark.asyncio
    async def test_delete(self, run_tool, github: GitHubStub) -> None:
        """Test that delete reports success."""
        github.add("DELETE", "/repos/o/r/releases/11", status=204)

        output = await run_tool(manage_releases_tool, {"operation": "delete", "owner": "o", "repo": "r", "release_id": 11})

        assert payload(output) == {"message": "Release deleted successfully"}

    @pytest.mark.asyncio
    async def test_get_latest(self, run_tool, github: GitHubStub) -> None:
        """Test the latest release endpoint."""
        github.add("GET", "/repos/o/r/releases/latest", json=RELEASE)

        output = await run_tool(manage_releases_tool, {"operation": "get_latest", "owner": "o", "repo": "r"})

        assert output.texts[0] == "Release get_latest operation completed successfully"
