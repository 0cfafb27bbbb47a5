"""Tool substrate — base tool class and side-effect classification."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ValidationError

from introspect.core.errors import QueryValidationError


class SideEffect(StrEnum):
    """Classification of a tool's side effects."""

    PURE = "PURE"
    READ = "READ"
    WRITE = "WRITE"
    DESTRUCTIVE = "DESTRUCTIVE"


class BaseTool(ABC):
    """Abstract base class for tools exposed to an agent runtime.

    Each tool declares typed input/output schemas, a side-effect class, and
    an execute method. ``invoke`` is the loosely typed entry point used by a
    protocol layer: raw dict in, JSON-compatible dict out.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name identifying this tool."""

    @property
    @abstractmethod
    def version(self) -> str:
        """Semantic version of this tool."""

    @property
    def description(self) -> str:
        """Human-readable description shown to the agent."""
        return ""

    @property
    @abstractmethod
    def input_schema(self) -> type[BaseModel]:
        """Pydantic model class for validating input."""

    @property
    @abstractmethod
    def output_schema(self) -> type[BaseModel]:
        """Pydantic model class for validating output."""

    @property
    @abstractmethod
    def side_effect(self) -> SideEffect:
        """Side-effect classification of this tool."""

    @property
    def read_only(self) -> bool:
        return self.side_effect in (SideEffect.PURE, SideEffect.READ)

    @property
    def idempotent(self) -> bool:
        return self.side_effect == SideEffect.PURE

    @abstractmethod
    def execute(self, input_data: BaseModel) -> BaseModel:
        """Execute the tool with validated input. Returns validated output."""

    def validate_input(self, raw: dict[str, Any] | None) -> BaseModel:
        """Validate raw input against the input schema.

        Raises QueryValidationError on malformed input.
        """
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise QueryValidationError(
                f"Input for tool '{self.name}' must be an object, got {type(raw).__name__}"
            )
        try:
            return self.input_schema.model_validate(raw)
        except ValidationError as exc:
            raise QueryValidationError(f"Invalid input for tool '{self.name}': {exc}") from exc

    def validate_output(self, raw: dict[str, Any]) -> BaseModel:
        """Validate raw output dict against the output schema."""
        return self.output_schema.model_validate(raw)

    def invoke(self, raw: dict[str, Any] | None = None) -> dict[str, Any]:
        """Validate, execute, and render the result as JSON-compatible data."""
        output = self.execute(self.validate_input(raw))
        return output.model_dump(mode="json")
