# =============================================================================
# GitHub Manage MCP Server - Tool Registry
# =============================================================================
"""
Ordered registry of the available tools and the subset enabled for this
process.

The enabled subset comes from an optional JSON file::

    {"enabledTools": ["gh_manage_repos", "gh_search"]}

Without a file, or when the file cannot be used, every registered tool is
enabled.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import UnknownToolError
from .gateway import GitHubGateway
from .models.common import ToolOutput
from .tools.base import GitHubTool, TokenResolverFn

logger = logging.getLogger(__name__)


class ToolsConfig(BaseModel):
    """
    Contents of the tools configuration file.

    Attributes:
        enabled_tools: Names of the tools to enable.
    """

    enabled_tools: list[str] = Field(..., alias="enabledTools")


def load_tools_config(path: str) -> Optional[ToolsConfig]:
    """
    Read a tools configuration file.

    Args:
        path: Path of the JSON file.

    Returns:
        Parsed configuration, or None if the file cannot be read or is not
        in the expected format.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Could not read tools configuration file at %s: %s", path, e)
        return None

    try:
        return ToolsConfig.model_validate_json(content)
    except ValidationError as e:
        logger.warning(
            "Invalid tools configuration file format at %s: %s", path, e.error_count()
        )
        return None


class ToolRegistry:
    """
    Name-based router over the enabled tools.

    Attributes:
        available: Every registered tool, in advertised order.
        enabled: The enabled subset, in the same order.
    """

    def __init__(
        self,
        available: list[GitHubTool],
        resolve_token: TokenResolverFn,
        gateway: GitHubGateway,
        tools_config_path: Optional[str] = None,
    ) -> None:
        """
        Build the registry.

        Args:
            available: Registered tools.
            resolve_token: Token resolver handed to every tool call.
            gateway: Connection gateway handed to every tool call.
            tools_config_path: Optional JSON file naming the enabled tools.
        """
        self.available = list(available)
        self.resolve_token = resolve_token
        self.gateway = gateway
        self.enabled = self._filter_enabled(tools_config_path)
        self._enabled_by_name = {tool.name: tool for tool in self.enabled}

    def _filter_enabled(self, tools_config_path: Optional[str]) -> list[GitHubTool]:
        if not tools_config_path:
            logger.info("No tools configuration file provided. All available tools will be enabled.")
            return list(self.available)

        config = load_tools_config(tools_config_path)
        if config is None:
            return list(self.available)

        names = set(config.enabled_tools)
        enabled = [tool for tool in self.available if tool.name in names]
        known = {tool.name for tool in self.available}
        for name in config.enabled_tools:
            if name not in known:
                logger.warning(
                    'Tool "%s" specified in config file but not found in available tools.', name
                )

        logger.info(
            "Loaded tools configuration from %s. Enabled tools: %s",
            tools_config_path,
            ", ".join(tool.name for tool in enabled),
        )
        return enabled

    def is_registered(self, name: str) -> bool:
        """True if a tool of that name exists, enabled or not."""
        return any(tool.name == name for tool in self.available)

    def get(self, name: str) -> GitHubTool:
        """
        Look up an enabled tool.

        Args:
            name: Tool name.

        Returns:
            The tool.

        Raises:
            UnknownToolError: If the tool is disabled or does not exist.
        """
        tool = self._enabled_by_name.get(name)
        if tool is not None:
            return tool

        if self.is_registered(name):
            raise UnknownToolError(
                f'Tool "{name}" is available but not enabled by the current server configuration.',
                tool_name=name,
                registered=True,
            )
        raise UnknownToolError(
            f"Tool '{name}' is not enabled or does not exist.",
            tool_name=name,
            registered=False,
        )

    def list_tools(self) -> list[dict[str, Any]]:
        """Describe the enabled tools as name, description and input schema."""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema,
            }
            for tool in self.enabled
        ]

    async def route(self, name: str, arguments: Optional[dict[str, Any]]) -> ToolOutput:
        """
        Run an enabled tool.

        Args:
            name: Tool name.
            arguments: Raw tool arguments.

        Returns:
            The tool's output envelope.

        Raises:
            UnknownToolError: If the tool is disabled or does not exist.
        """
        tool = self.get(name)
        return await tool.execute(arguments, self.resolve_token, self.gateway)
