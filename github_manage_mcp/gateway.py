# =============================================================================
# GitHub Manage MCP Server - Connection Gateway
# =============================================================================
"""
Connection pool for authenticated GitHub clients.

The gateway owns every live ``GitHubClient``, keyed by token. A client only
enters the pool after a successful identity check (``GET /user``). Tools use
``session()``, which holds the pool lock for the whole
connect -> call -> disconnect sequence, so a concurrent caller can never see
the pool cleared underneath it.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Optional

import httpx

from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, GitHubClient
from .errors import InternalError, classify_github_error

logger = logging.getLogger(__name__)

CONNECT_CONTEXT = "Failed to connect to GitHub API"


class GitHubGateway:
    """
    Process-wide pool of authenticated GitHub connections.

    Attributes:
        base_url: GitHub API base URL for new clients.
        timeout: Fixed per-request timeout for new clients.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the gateway.

        Args:
            base_url: GitHub API base URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport passed to every client.
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._clients: dict[str, GitHubClient] = {}
        self._default_client: Optional[GitHubClient] = None
        self._lock = asyncio.Lock()

    def _new_client(self, token: str) -> GitHubClient:
        return GitHubClient(
            token=token,
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    @property
    def connected_count(self) -> int:
        """Number of live connections held."""
        return len(self._clients)

    async def connect(self, token: str) -> None:
        """
        Open a connection for ``token`` and verify it.

        The new client becomes the default connection.

        Args:
            token: GitHub token.

        Raises:
            GitHubMcpError: Classified failure of the identity check.
        """
        client = self._new_client(token)
        try:
            await client.get_authenticated_user()
        except Exception as e:
            await client.close()
            raise classify_github_error(e, CONNECT_CONTEXT) from e

        previous = self._clients.get(token)
        if previous is not None and previous is not client:
            await previous.close()
        self._clients[token] = client
        self._default_client = client
        logger.debug("GitHub connection established (%d held)", len(self._clients))

    def get_client(self, token: Optional[str] = None) -> GitHubClient:
        """
        Return the connection for ``token``, else the most recent one.

        Raises:
            InternalError: If nothing is connected.
        """
        if token and token in self._clients:
            return self._clients[token]
        if self._default_client is not None:
            return self._default_client
        raise InternalError("No GitHub client available. Please connect first.")

    async def disconnect(self) -> None:
        """Close and drop every held connection."""
        clients = list(self._clients.values())
        self._clients.clear()
        self._default_client = None
        for client in clients:
            await client.close()

    @asynccontextmanager
    async def session(self, token: str) -> AsyncIterator[GitHubClient]:
        """
        Connect, yield the client, and always disconnect afterwards.

        Args:
            token: GitHub token for this call.

        Yields:
            Authenticated client.
        """
        async with self._lock:
            try:
                await self.connect(token)
                yield self.get_client(token)
            finally:
                await self.disconnect()

    async def get_rate_limit(self, token: str) -> dict[str, Any]:
        """
        Get the core rate limit for ``token``.

        Returns:
            Dictionary with limit, remaining, reset (ISO-8601 UTC) and used.
        """
        async with self.session(token) as client:
            try:
                data = await client.get_rate_limit()
            except Exception as e:
                raise classify_github_error(e, "Failed to get rate limit") from e

        rate = data.get("rate") or data.get("resources", {}).get("core", {})
        reset = datetime.fromtimestamp(int(rate.get("reset", 0)), tz=timezone.utc)
        return {
            "limit": rate.get("limit", 0),
            "remaining": rate.get("remaining", 0),
            "reset": reset.isoformat(),
            "used": rate.get("used", 0),
        }

    async def check_token_scopes(self, required_scopes: list[str], token: str) -> bool:
        """
        Check whether ``token`` carries every scope in ``required_scopes``.

        Any failure (bad token, network) answers False.
        """
        try:
            async with self.session(token) as client:
                scopes = await client.get_token_scopes()
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Token scope check failed: %s", e)
            return False
        return all(scope in scopes for scope in required_scopes)
