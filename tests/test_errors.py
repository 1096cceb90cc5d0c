# =============================================================================
# GitHub Manage MCP Server - Error Classification Tests
# =============================================================================
"""Unit tests for mapping upstream failures onto the error taxonomy."""

import pytest

from github_manage_mcp.errors import (
    AuthenticationError,
    AuthorizationError,
    GitHubApiError,
    InternalError,
    MissingCredentialError,
    NotFoundError,
    UpstreamValidationError,
    classify_github_error,
)

CONTEXT = "Repository operation failed"


class TestClassifyGitHubError:
    """Tests for classify_github_error."""

    @pytest.mark.parametrize(
        "status, error_class, fragment",
        [
            (401, AuthenticationError, "invalid or expired"),
            (403, AuthorizationError, "Access forbidden"),
            (404, NotFoundError, "not found"),
            (422, UpstreamValidationError, "Invalid request parameters"),
        ],
    )
    def test_known_statuses(self, status: int, error_class: type, fragment: str) -> None:
        """Test that each well-known status maps to its error class."""
        error = classify_github_error(GitHubApiError("boom", status_code=status), CONTEXT)

        assert isinstance(error, error_class)
        assert error.message.startswith(f"{CONTEXT}: ")
        assert fragment in error.message

    def test_validation_includes_upstream_message(self) -> None:
        """Test that a 422 keeps GitHub's explanation."""
        error = classify_github_error(
            GitHubApiError("Validation Failed", status_code=422), CONTEXT
        )

        assert error.message.endswith("Validation Failed")

    def test_other_status_is_internal(self) -> None:
        """Test that unclassified statuses become InternalError with the code."""
        error = classify_github_error(
            GitHubApiError("Server Error", status_code=502), CONTEXT
        )

        assert isinstance(error, InternalError)
        assert "(502)" in error.message
        assert "Server Error" in error.message

    def test_no_status_is_internal(self) -> None:
        """Test that timeouts (status 0) become InternalError."""
        error = classify_github_error(
            GitHubApiError("Request timed out: read", status_code=0), CONTEXT
        )

        assert isinstance(error, InternalError)
        assert error.message == f"{CONTEXT}: Request timed out: read"

    def test_arbitrary_exception_is_internal(self) -> None:
        """Test that any other exception becomes InternalError."""
        error = classify_github_error(KeyError("commit"), CONTEXT)

        assert isinstance(error, InternalError)
        assert error.message.startswith(CONTEXT)

    def test_classified_errors_pass_through(self) -> None:
        """Test that classification is applied only once."""
        original = MissingCredentialError("No GitHub token provided.")

        assert classify_github_error(original, CONTEXT) is original

        once = classify_github_error(GitHubApiError("x", status_code=404), "first")
        twice = classify_github_error(once, "second")

        assert twice is once
        assert twice.message.startswith("first:")
