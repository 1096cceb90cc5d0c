# =============================================================================
# GitHub Manage MCP Server - Tools
# =============================================================================
"""The seven consolidated GitHub tools, in advertised order."""

from .actions import manage_actions_tool
from .base import GitHubTool
from .branches import manage_branches_tool
from .issues import manage_issues_tool
from .pulls import manage_pulls_tool
from .releases import manage_releases_tool
from .repos import manage_repos_tool
from .search import search_tool

ALL_TOOLS: list[GitHubTool] = [
    manage_repos_tool,
    manage_issues_tool,
    manage_pulls_tool,
    manage_branches_tool,
    manage_releases_tool,
    manage_actions_tool,
    search_tool,
]

__all__ = [
    "ALL_TOOLS",
    "GitHubTool",
    "manage_actions_tool",
    "manage_branches_tool",
    "manage_issues_tool",
    "manage_pulls_tool",
    "manage_releases_tool",
    "manage_repos_tool",
    "search_tool",
]
