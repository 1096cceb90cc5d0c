# =============================================================================
# GitHub Manage MCP Server - Issue Tool Tests
# =============================================================================
"""Tests for gh_manage_issues."""

import pytest

from github_manage_mcp.tools.issues import manage_issues_tool
from tests.conftest import GitHubStub, payload

ISSUE_PATH = "/repos/o/r/issues/7"
ISSUE = {"number": 7, "title": "Bug", "state": "open"}


class TestIssueOperations:
    """Tests for each issue operation."""

    @pytest.mark.asyncio
    async def test_create(self, run_tool, github: GitHubStub) -> None:
        """Test that create sends title, body and labels."""
        github.add("POST", "/repos/o/r/issues", status=201, json=ISSUE)

        output = await run_tool(
            manage_issues_tool,
            {"operation": "create", "owner": "o", "repo": "r", "title": "Bug", "labels": ["bug"]},
        )

        assert output.texts[0] == "Issue create operation completed successfully"
        assert github.body("POST", "/repos/o/r/issues") == {"title": "Bug", "labels": ["bug"]}

    @pytest.mark.asyncio
    async def test_close_defaults_reason(self, run_tool, github: GitHubStub) -> None:
        """Test that close marks the issue completed unless told otherwise."""
        github.add("PATCH", ISSUE_PATH, json={**ISSUE, "state": "closed"})

        await run_tool(manage_issues_tool, {"operation": "close", "owner": "o", "repo": "r", "issue_number": 7})
        assert github.body("PATCH", ISSUE_PATH) == {"state": "closed", "state_reason": "completed"}

        await run_tool(
            manage_issues_tool,
            {"operation": "close", "owner": "o", "repo": "r", "issue_number": 7, "state_reason": "not_planned"},
        )
        assert github.body("PATCH", ISSUE_PATH) == {"state": "closed", "state_reason": "not_planned"}

    @pytest.mark.asyncio
    async def test_assign_and_label_replace(self, run_tool, github: GitHubStub) -> None:
        """Test that assign and label send full replacement lists."""
        github.add("PATCH", ISSUE_PATH, json=ISSUE)

        await run_tool(
            manage_issues_tool,
            {"operation": "assign", "owner": "o", "repo": "r", "issue_number": 7, "assignees": ["octocat"]},
        )
        assert github.body("PATCH", ISSUE_PATH) == {"assignees": ["octocat"]}

        await run_tool(manage_issues_tool, {"operation": "label", "owner": "o", "repo": "r", "issue_number": 7})
        assert github.body("PATCH", ISSUE_PATH) == {"labels": []}

    @pytest.mark.asyncio
    async def test_comment(self, run_tool, github: GitHubStub) -> None:
        """Test that comment posts the comment body."""
        github.add("POST", f"{ISSUE_PATH}/comments", status=201, json={"id": 1, "body": "Thanks"})

        output = await run_tool(
            manage_issues_tool,
            {"operation": "comment", "owner": "o", "repo": "r", "issue_number": 7, "comment_body": "Thanks"},
        )

        assert payload(output) == {"id": 1, "body": "Thanks"}
        assert github.body("POST", f"{ISSUE_PATH}/comments") == {"body": "Thanks"}

    @pytest.mark.asyncio
    async def test_comment_without_body_is_invalid(self, run_tool, github: GitHubStub) -> None:
        """Test that a comment without comment_body is rejected locally."""
        output = await run_tool(
            manage_issues_tool,
            {"operation": "comment", "owner": "o", "repo": "r", "issue_number": 7},
        )

        assert output.is_error is True
        assert "Invalid input" in output.texts[0]
        assert github.requests == []

    @pytest.mark.asyncio
    async def test_list_filters(self, run_tool, github: GitHubStub) -> None:
        """Test that list filters are renamed to GitHub's query parameters."""
        github.add("GET", "/repos/o/r/issues", json=[ISSUE])

        await run_tool(
            manage_issues_tool,
            {"operation": "list", "owner": "o", "repo": "r", "labels_filter": "bug,ui", "order": "asc"},
        )

        assert github.query("GET", "/repos/o/r/issues") == {
            "state": "open",
            "labels": "bug,ui",
            "direction": "asc",
        }

    @pytest.mark.asyncio
    async def test_search(self, run_tool, github: GitHubStub) -> None:
        """Test that search queries the issue search endpoint."""
        github.add("GET", "/search/issues", json={"total_count": 0, "items": []})

        await run_tool(manage_issues_tool, {"operation": "search", "q": "repo:o/r is:open"})

        assert github.query("GET", "/search/issues") == {"q": "repo:o/r is:open"}
