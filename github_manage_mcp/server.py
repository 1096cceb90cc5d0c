# =============================================================================
# GitHub Manage MCP Server
# =============================================================================
"""
MCP server exposing seven consolidated GitHub tools.

This server exposes MCP tools for:
- Repository management (gh_manage_repos)
- Issue management (gh_manage_issues)
- Pull request management (gh_manage_pulls)
- Branch and protection management (gh_manage_branches)
- Release management (gh_manage_releases)
- GitHub Actions workflows, runs and artifacts (gh_manage_actions)
- Search across GitHub (gh_search)

The tools are served over MCP stdio by default. ``create_http_app`` exposes
the same registry over HTTP for callers that prefer plain JSON requests.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from fastapi import Body, FastAPI, HTTPException
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .config import Settings
from .errors import MissingCredentialError, UnknownToolError
from .models.common import ToolOutput
from .registry import ToolRegistry

SERVER_NAME = "github-mcp-server"

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging on stderr.

    stdout carries the MCP stdio transport and must stay free of log lines.

    Args:
        level: Logging level name.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


# -----------------------------------------------------------------------------
# Result Conversion
# -----------------------------------------------------------------------------
def to_call_tool_result(output: ToolOutput) -> types.CallToolResult:
    """Convert an output envelope into an MCP ``CallToolResult``."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text) for text in output.texts],
        isError=output.is_error,
    )


async def call_registered_tool(
    registry: ToolRegistry, name: str, arguments: Optional[dict[str, Any]]
) -> ToolOutput:
    """
    Route a call, turning routing failures into an error envelope.

    Args:
        registry: Tool registry.
        name: Requested tool name.
        arguments: Raw tool arguments.

    Returns:
        The tool's envelope, or an ``Error: ...`` envelope for unknown tools.
    """
    try:
        return await registry.route(name, arguments)
    except UnknownToolError as e:
        logger.error("Error handling request for tool %s: %s", name, e.message)
        return ToolOutput.error(f"Error: {e.message}")


# -----------------------------------------------------------------------------
# MCP Server
# -----------------------------------------------------------------------------
def create_mcp_server(registry: ToolRegistry) -> Server:
    """
    Build the MCP server over a registry.

    Args:
        registry: Tool registry.

    Returns:
        Low-level MCP server with ``list_tools`` and ``call_tool`` handlers.
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool["name"],
                description=tool["description"],
                inputSchema=tool["inputSchema"],
            )
            for tool in registry.list_tools()
        ]

    # Arguments are validated by the tool models; the SDK check would
    # pre-empt their "Invalid input" envelopes.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        output = await call_registered_tool(registry, name, arguments)
        return to_call_tool_result(output)

    return server


async def run_stdio(registry: ToolRegistry) -> None:
    """Serve the registry over MCP stdio until the client disconnects."""
    server = create_mcp_server(registry)
    logger.info(
        "GitHub MCP server running on stdio with tools: %s",
        ", ".join(tool.name for tool in registry.enabled),
    )
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await registry.gateway.disconnect()
        logger.info("Shutting down GitHub MCP server...")


# -----------------------------------------------------------------------------
# FastAPI Application
# -----------------------------------------------------------------------------
def create_http_app(registry: ToolRegistry) -> FastAPI:
    """
    Build the HTTP surface over a registry.

    Endpoints:
        GET /health: Token configuration, authenticated login, rate limit.
        GET /tools: Enabled tools with their input schemas.
        POST /tools/{name}: Run a tool; the body is its arguments.

    Args:
        registry: Tool registry.

    Returns:
        FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("GitHub MCP FastAPI application starting")
        yield
        await registry.gateway.disconnect()
        logger.info("GitHub MCP FastAPI application shutdown complete")

    app = FastAPI(
        title="GitHub Manage MCP Server",
        description="MCP server providing consolidated GitHub management tools",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health_check() -> dict[str, Any]:
        """
        Health check endpoint.

        Returns:
            Dictionary with service status.
        """
        try:
            token: Optional[str] = registry.resolve_token(None)
        except MissingCredentialError:
            token = None
        configured = bool(token)

        status_info: dict[str, Any] = {
            "status": "healthy" if configured else "unconfigured",
            "service": SERVER_NAME,
            "version": __version__,
            "api_configured": configured,
            "enabled_tools": [tool.name for tool in registry.enabled],
        }

        if configured:
            try:
                async with registry.gateway.session(token) as client:
                    user = await client.get_authenticated_user()
                status_info["authenticated_as"] = user.get("login")
                status_info["rate_limit"] = await registry.gateway.get_rate_limit(token)
            except Exception as e:  # pylint: disable=broad-exception-caught
                status_info["auth_error"] = str(e)

        return status_info

    @app.get("/tools")
    async def list_tools() -> dict[str, Any]:
        """List the enabled tools."""
        return {"tools": registry.list_tools()}

    @app.post("/tools/{name}")
    async def call_tool(
        name: str, arguments: Optional[dict[str, Any]] = Body(default=None)
    ) -> dict[str, Any]:
        """Run a tool and return its envelope."""
        try:
            output = await registry.route(name, arguments)
        except UnknownToolError as e:
            raise HTTPException(status_code=404, detail=e.message) from e
        return output.model_dump(by_alias=True)

    return app


def run_http(registry: ToolRegistry, settings: Settings) -> None:
    """Serve the HTTP surface with uvicorn."""
    import uvicorn

    logger.info("Starting GitHub Manage MCP Server on %s:%s", settings.host, settings.port)
    uvicorn.run(
        create_http_app(registry),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
