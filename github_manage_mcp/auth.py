# =============================================================================
# GitHub Manage MCP Server - Token Resolution
# =============================================================================
"""
Resolve the GitHub token used for a single tool call.

Precedence is strict: the ``token`` argument of the call, then the token
given to the process on the command line, then the ``GITHUB_TOKEN``
environment variable.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import MissingCredentialError

MISSING_TOKEN_MESSAGE = (
    "No GitHub token provided. Provide one in the tool arguments, via the "
    "--token CLI option, or set the GITHUB_TOKEN environment variable."
)


@dataclass(frozen=True)
class TokenResolver:
    """
    Token lookup bound to the process-level sources.

    Attributes:
        process_token: Token given on the command line.
        environment_token: Token read from ``GITHUB_TOKEN``.
    """

    process_token: Optional[str] = None
    environment_token: Optional[str] = None

    def resolve(self, explicit: Optional[str] = None) -> str:
        """
        Return the effective token for a call.

        Args:
            explicit: Token supplied in the tool arguments.

        Returns:
            The first non-empty token by precedence.

        Raises:
            MissingCredentialError: If every source is empty.
        """
        for candidate in (explicit, self.process_token, self.environment_token):
            if candidate:
                return candidate
        raise MissingCredentialError(MISSING_TOKEN_MESSAGE)

    __call__ = resolve
