# =============================================================================
# GitHub Manage MCP Server - Search Tool
# =============================================================================
"""
``gh_search``: repositories, issues, pull requests, users, code, commits and
topics.

Structured filters are appended to ``q`` as GitHub search qualifiers, for
example ``language:python`` or ``label:"good first issue"``.
"""

from typing import Any, Callable, Optional

from ..client import GitHubClient
from ..models.search import GitHubSearchInput, SearchOperation
from .base import GitHubTool, pick


def _qualify(query: str, *qualifiers: tuple[str, Optional[str], bool]) -> str:
    """
    Append ``name:value`` qualifiers whose value is set.

    Args:
        query: Free-text query.
        *qualifiers: (name, value, quoted) triples.

    Returns:
        Query with qualifiers appended in order.
    """
    for name, value, quoted in qualifiers:
        if value:
            query += f' {name}:"{value}"' if quoted else f" {name}:{value}"
    return query


def _repositories_query(p: GitHubSearchInput) -> str:
    return _qualify(p.q, ("language", p.language, False), ("size", p.repo_size, False))


def _issue_qualifiers(p: GitHubSearchInput) -> str:
    return _qualify(
        p.q,
        ("state", p.state, False),
        ("label", p.labels, True),
        ("assignee", p.assignee, False),
    )


def _issues_query(p: GitHubSearchInput) -> str:
    return f"{_issue_qualifiers(p)} type:issue"


def _pull_requests_query(p: GitHubSearchInput) -> str:
    return f"{_issue_qualifiers(p)} type:pr"


def _users_query(p: GitHubSearchInput) -> str:
    return _qualify(p.q, ("location", p.location, True))


def _code_query(p: GitHubSearchInput) -> str:
    return _qualify(
        p.q,
        ("repo", p.repo, False),
        ("path", p.path, False),
        ("extension", p.extension, False),
        ("language", p.language, False),
    )


def _commits_query(p: GitHubSearchInput) -> str:
    return _qualify(
        p.q,
        ("author", p.author, False),
        ("committer", p.committer, False),
        ("repo", p.repo, False),
    )


def _searcher(kind: str, build_query: Callable[[GitHubSearchInput], str]):
    async def handler(client: GitHubClient, p: GitHubSearchInput) -> Any:
        params = {"q": build_query(p), **pick(p, "sort", "order", "per_page", "page")}
        return await client.search(kind, params)

    return handler


def search_status_line(operation: SearchOperation, result: Any) -> str:
    """Summary line reporting the total and returned result counts."""
    result = result or {}
    total = result.get("total_count") or 0
    items = result.get("items") or []
    return (
        f"GitHub {operation.value} search completed - "
        f"Found {total} results, showing {len(items)} items"
    )


search_tool = GitHubTool(
    name="gh_search",
    description=(
        "Advanced GitHub search - repositories, issues, PRs, users, code, "
        "commits, and topics"
    ),
    label="GitHub search",
    input_model=GitHubSearchInput,
    handlers={
        SearchOperation.REPOSITORIES: _searcher("repositories", _repositories_query),
        SearchOperation.ISSUES: _searcher("issues", _issues_query),
        SearchOperation.PULL_REQUESTS: _searcher("issues", _pull_requests_query),
        SearchOperation.USERS: _searcher("users", _users_query),
        SearchOperation.CODE: _searcher("code", _code_query),
        SearchOperation.COMMITS: _searcher("commits", _commits_query),
        SearchOperation.TOPICS: _searcher("topics", lambda p: p.q),
    },
    status_line=search_status_line,
)
