# =============================================================================
# GitHub Manage MCP Server - Settings
# =============================================================================
"""
Server settings loaded from environment variables and an optional ``.env``.

Command line flags given to ``python -m github_manage_mcp`` take precedence
over these values; see ``__main__.py``.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Server settings loaded from environment variables.

    Attributes:
        github_token: GitHub token used when a call does not carry one.
        github_api_base_url: GitHub API base URL.
        github_request_timeout: Timeout applied to every upstream request.
        github_tools_config: Path to a JSON file naming the enabled tools.
        host: HTTP server host address (``--http`` mode only).
        port: HTTP server port number (``--http`` mode only).
        log_level: Logging level.
    """

    github_token: str = Field(
        default="",
        description="GitHub personal access token",
    )
    github_api_base_url: str = Field(
        default="https://api.github.com",
        description="GitHub API base URL",
    )
    github_request_timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds",
        gt=0,
    )
    github_tools_config: Optional[str] = Field(
        default=None,
        description="Path to tools configuration JSON file",
    )
    host: str = Field(
        default="127.0.0.1",
        description="Server host address",
        alias="github_mcp_host",
    )
    port: int = Field(
        default=8083,
        description="Server port number",
        alias="github_mcp_port",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v
