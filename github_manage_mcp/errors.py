# =============================================================================
# GitHub Manage MCP Server - Errors
# =============================================================================
"""
Error taxonomy for the GitHub Manage MCP server.

Every failure a tool can surface is one of the classes below. Raw HTTP
failures from the client are raised as ``GitHubApiError`` and converted into
the taxonomy exactly once by ``classify_github_error`` before they reach the
output envelope.
"""

from typing import Optional


class GitHubMcpError(Exception):
    """
    Base class for every error surfaced to MCP callers.

    Attributes:
        message: Human readable, non-secret description.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingCredentialError(GitHubMcpError):
    """Raised when no GitHub token can be resolved."""


class InputValidationError(GitHubMcpError):
    """Raised when tool arguments fail structural or per-operation validation."""


class AuthenticationError(GitHubMcpError):
    """Upstream rejected the credential (401)."""


class AuthorizationError(GitHubMcpError):
    """Upstream refused access (403), permissions or rate limit."""


class NotFoundError(GitHubMcpError):
    """Upstream resource does not exist (404)."""


class UpstreamValidationError(GitHubMcpError):
    """Upstream rejected the request parameters (422)."""


class UnknownToolError(GitHubMcpError):
    """
    Raised when a tool name cannot be routed.

    Attributes:
        tool_name: The requested tool name.
        registered: True if the tool exists but is disabled by configuration.
    """

    def __init__(self, message: str, tool_name: str, registered: bool) -> None:
        super().__init__(message)
        self.tool_name = tool_name
        self.registered = registered


class InternalError(GitHubMcpError):
    """Catch-all for timeouts, transport failures and unclassified statuses."""


class GitHubApiError(Exception):
    """
    Raw failure raised by the HTTP client before classification.

    Attributes:
        message: Error description taken from the upstream response.
        status_code: HTTP status code, 0 when no response was received.
        response_data: Parsed upstream error body, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response_data: Optional[dict] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error description.
            status_code: HTTP status code (0 for timeouts/transport errors).
            response_data: Raw response data.
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}


def classify_github_error(error: Exception, context: str) -> GitHubMcpError:
    """
    Map any failure raised during an upstream call onto the error taxonomy.

    Errors that are already classified pass through untouched so the mapping
    is applied once per failure.

    Args:
        error: The exception raised while talking to GitHub.
        context: Short prefix describing what was being attempted.

    Returns:
        The classified error.
    """
    if isinstance(error, GitHubMcpError):
        return error

    if isinstance(error, GitHubApiError):
        status = error.status_code
        if status == 401:
            return AuthenticationError(
                f"{context}: GitHub token is invalid or expired. "
                "Please check your authentication."
            )
        if status == 403:
            return AuthorizationError(
                f"{context}: Access forbidden. Check your token permissions or rate limits."
            )
        if status == 404:
            return NotFoundError(
                f"{context}: Resource not found. Check repository/organization names."
            )
        if status == 422:
            return UpstreamValidationError(
                f"{context}: Invalid request parameters. {error.message}".rstrip()
            )
        if status:
            return InternalError(
                f"{context}: GitHub API error ({status}): {error.message or 'Unknown error'}"
            )
        return InternalError(f"{context}: {error.message or 'Unknown error occurred'}")

    detail = str(error) or "Unknown error occurred"
    return InternalError(f"{context}: {detail}")
