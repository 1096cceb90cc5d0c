# =============================================================================
# GitHub Manage MCP Server - Tool Base
# =============================================================================
"""
Generic consolidated tool: schema + per-operation predicate + dispatch table.

A ``GitHubTool`` runs every call through the same linear sequence:
validate -> resolve token -> connect -> dispatch -> disconnect -> envelope.
Nothing escapes ``execute`` as an exception; failures become error envelopes.
"""

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel, ValidationError

from ..client import GitHubClient
from ..errors import InputValidationError, classify_github_error
from ..gateway import GitHubGateway
from ..models.common import ToolInput, ToolOutput

logger = logging.getLogger(__name__)

Handler = Callable[[GitHubClient, Any], Awaitable[Any]]
TokenResolverFn = Callable[[Optional[str]], str]
StatusLineFn = Callable[[Enum, Any], str]


def format_validation_error(error: ValidationError) -> str:
    """
    Flatten a pydantic validation error into one line.

    Args:
        error: The pydantic error.

    Returns:
        ``loc: message`` entries joined by ``; ``.
    """
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item.get("loc", ()))
        msg = item.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def _to_json(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, list):
        return [_to_json(v) for v in value]
    return value


def pick(params: ToolInput, *names: str, **renames: str) -> dict[str, Any]:
    """
    Collect the supplied (non-None) fields of ``params``.

    Args:
        params: Validated arguments.
        *names: Fields copied under their own name.
        **renames: ``api_name="field_name"`` pairs copied under a new name.

    Returns:
        JSON-ready dictionary; enums are rendered as their values.
    """
    out: dict[str, Any] = {}
    for api_name, field in [(n, n) for n in names] + list(renames.items()):
        value = getattr(params, field)
        if value is None:
            continue
        out[api_name] = _to_json(value)
    return out


class GitHubTool:
    """
    One consolidated GitHub tool.

    Attributes:
        name: Tool name advertised to MCP clients.
        description: Tool description.
        label: Human label used in status and error lines (e.g., "Repository").
        input_model: Pydantic model validating the arguments.
        handlers: Operation -> coroutine performing the upstream call.
    """

    def __init__(
        self,
        name: str,
        description: str,
        label: str,
        input_model: type[ToolInput],
        handlers: dict[Enum, Handler],
        status_line: Optional[StatusLineFn] = None,
        error_context: Optional[str] = None,
    ) -> None:
        operations = set(input_model.model_fields["operation"].annotation)
        if set(handlers) != operations:
            missing = sorted(op.value for op in operations - set(handlers))
            raise TypeError(f"Tool {name} has no handler for operations: {missing}")

        self.name = name
        self.description = description
        self.label = label
        self.input_model = input_model
        self.handlers = handlers
        self._status_line = status_line
        self.error_context = error_context or f"{label} operation failed"

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the arguments, as advertised over MCP."""
        return self.input_model.model_json_schema()

    def status_line(self, operation: Enum, result: Any) -> str:
        """Human-readable first line of a success envelope."""
        if self._status_line is not None:
            return self._status_line(operation, result)
        return f"{self.label} {operation.value} operation completed successfully"

    def validate(self, arguments: Optional[dict[str, Any]]) -> ToolInput:
        """
        Parse raw arguments into the tool's input model.

        Raises:
            InputValidationError: If a field is malformed or a field required
                by the selected operation is missing.
        """
        try:
            return self.input_model.model_validate(arguments or {})
        except ValidationError as e:
            raise InputValidationError(format_validation_error(e)) from e

    async def dispatch(self, client: GitHubClient, params: ToolInput) -> Any:
        """Run the single upstream call selected by ``params.operation``."""
        return await self.handlers[params.operation](client, params)

    async def execute(
        self,
        arguments: Optional[dict[str, Any]],
        resolve_token: TokenResolverFn,
        gateway: GitHubGateway,
    ) -> ToolOutput:
        """
        Validate and run one call.

        Args:
            arguments: Raw tool arguments.
            resolve_token: Token resolver (explicit > process > environment).
            gateway: Connection gateway.

        Returns:
            Success or error envelope.
        """
        try:
            params = self.validate(arguments)
        except InputValidationError as e:
            logger.info("Rejected %s call: %s", self.name, e.message)
            return ToolOutput.error(f"Invalid input: {e.message}")

        try:
            token = resolve_token(params.token)
            async with gateway.session(token) as client:
                result = await self.dispatch(client, params)
        except Exception as e:  # pylint: disable=broad-exception-caught
            error = classify_github_error(e, self.error_context)
            logger.warning(
                "%s %s failed (%s): %s",
                self.name,
                params.operation.value,
                type(error).__name__,
                error.message,
            )
            return ToolOutput.error(f"Error: {error.message}")

        logger.info("%s %s completed", self.name, params.operation.value)
        return ToolOutput.success(self.status_line(params.operation, result), result)
