# =============================================================================
# GitHub Manage MCP Server - Package
# =============================================================================
"""
GitHub Manage MCP server package.

Provides consolidated, schema-validated MCP tools for the GitHub REST API.
Each tool groups one domain behind an ``operation`` field:
- Repositories (create, get, update, delete, fork, transfer, list)
- Issues (create, update, close, assign, label, comment, search, list, get)
- Pull requests (create, update, merge, review, approve, request changes, ...)
- Branches and branch protection
- Releases
- GitHub Actions workflows, runs and artifacts
- Search
"""

__version__ = "1.0.0"
