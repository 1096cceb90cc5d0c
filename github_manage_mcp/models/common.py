# =============================================================================
# GitHub Manage MCP Server - Common Models
# =============================================================================
"""
Models shared by every tool: the base input model with the per-operation
required-field predicate, and the output envelope.
"""

import json
from enum import Enum
from typing import Any, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# A requirement is a field name, or a tuple of names of which one must be set.
Requirement = Union[str, tuple[str, ...]]


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return True


class ToolInput(BaseModel):
    """
    Base model for consolidated tool arguments.

    Subclasses declare an ``operation`` field typed with their operation
    enum, every other field as optional, and ``REQUIRED_FIELDS`` mapping each
    operation to the fields it needs. Structural parsing accepts any subset
    of fields; the ``after`` validator then enforces the table.
    """

    model_config = ConfigDict(extra="ignore")

    REQUIRED_FIELDS: ClassVar[dict[Enum, tuple[Requirement, ...]]] = {}

    token: Optional[str] = Field(
        default=None, description="GitHub token (optional if set via environment)"
    )

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        field = cls.model_fields.get("operation")
        if field is None:
            return
        operations = set(field.annotation)
        declared = set(cls.REQUIRED_FIELDS)
        if operations != declared:
            missing = sorted(op.value for op in operations - declared)
            extra = sorted(str(op) for op in declared - operations)
            raise TypeError(
                f"{cls.__name__}.REQUIRED_FIELDS does not match its operations "
                f"(missing: {missing}, unexpected: {extra})"
            )

    def missing_requirements(self) -> list[str]:
        """
        List the requirements of the selected operation that are not met.

        Returns:
            Field names, with alternatives rendered as ``a or b``.
        """
        missing: list[str] = []
        for requirement in self.REQUIRED_FIELDS[self.operation]:
            names = (requirement,) if isinstance(requirement, str) else requirement
            if not any(_is_present(getattr(self, name)) for name in names):
                missing.append(" or ".join(names))
        return missing

    @model_validator(mode="after")
    def check_operation_requirements(self) -> "ToolInput":
        """Enforce the required-field table for the selected operation."""
        if "operation" not in type(self).model_fields:
            return self
        missing = self.missing_requirements()
        if missing:
            raise ValueError(
                f"Missing required parameters for the '{self.operation.value}' "
                f"operation: {', '.join(missing)}"
            )
        return self


# =============================================================================
# Output Envelope
# =============================================================================


class TextSegment(BaseModel):
    """One text content item of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolOutput(BaseModel):
    """
    Uniform tool result: status line plus serialized payload, or one error line.

    Attributes:
        content: Ordered text segments.
        is_error: True when the call failed (serialized as ``isError``).
    """

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextSegment] = Field(default_factory=list)
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def success(cls, status: str, payload: Any) -> "ToolOutput":
        """Build a success envelope with a JSON-serialized payload."""
        return cls(
            content=[
                TextSegment(text=status),
                TextSegment(text=json.dumps(payload, indent=2, default=str)),
            ],
            is_error=False,
        )

    @classmethod
    def error(cls, text: str) -> "ToolOutput":
        """Build an error envelope with a single text segment."""
        return cls(content=[TextSegment(text=text)], is_error=True)

    @property
    def texts(self) -> list[str]:
        """Plain text of every segment."""
        return [segment.text for segment in self.content]
