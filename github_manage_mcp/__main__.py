# =============================================================================
# GitHub Manage MCP Server - Entry Point
# =============================================================================
"""
Command line entry point.

Run:
  python -m github_manage_mcp                          # MCP over stdio
  python -m github_manage_mcp --token ghp_xxx          # token for every call
  python -m github_manage_mcp -c tools.json            # enable a tool subset
  python -m github_manage_mcp --http --port 8083       # HTTP surface
"""

import argparse
import asyncio
import logging
import signal
import sys
from typing import Optional

from . import __version__
from .auth import TokenResolver
from .config import Settings
from .gateway import GitHubGateway
from .registry import ToolRegistry
from .server import configure_logging, run_http, run_stdio
from .tools import ALL_TOOLS

logger = logging.getLogger("github_manage_mcp")


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="github-manage-mcp",
        description="MCP server with consolidated GitHub management tools",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-t", "--token", help="GitHub token")
    parser.add_argument(
        "-c",
        "--tools-config",
        dest="tools_config",
        help="Path to tools configuration JSON file",
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Serve the tools over HTTP instead of MCP stdio.",
    )
    parser.add_argument("--host", help="HTTP host (with --http)")
    parser.add_argument("--port", type=int, help="HTTP port (with --http)")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level",
    )
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return ``settings`` with every CLI flag that was given applied on top."""
    overrides = {
        "github_tools_config": args.tools_config,
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    return settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def build_registry(settings: Settings, process_token: Optional[str] = None) -> ToolRegistry:
    """
    Wire the token resolver, gateway and tools together.

    Args:
        settings: Effective settings.
        process_token: Token given on the command line.

    Returns:
        Registry ready to serve.
    """
    resolver = TokenResolver(
        process_token=process_token,
        environment_token=settings.github_token or None,
    )
    gateway = GitHubGateway(
        base_url=settings.github_api_base_url,
        timeout=settings.github_request_timeout,
    )
    return ToolRegistry(
        ALL_TOOLS,
        resolve_token=resolver,
        gateway=gateway,
        tools_config_path=settings.github_tools_config,
    )


def main(argv: Optional[list[str]] = None) -> None:
    """CLI dispatcher for the MCP server."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = apply_overrides(Settings(), args)
    configure_logging(settings.log_level)

    if not (args.token or settings.github_token):
        logger.warning(
            "No GitHub token configured - every call must pass its own token argument"
        )

    registry = build_registry(settings, process_token=args.token)

    try:
        if args.http:
            run_http(registry, settings)
        else:
            # stdio mode: treat SIGTERM like Ctrl+C
            signal.signal(signal.SIGTERM, signal.default_int_handler)
            asyncio.run(run_stdio(registry))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


if __name__ == "__main__":
    main()
