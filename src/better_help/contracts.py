"""Unified tool response envelope contracts.

All tool business payloads are wrapped by this module so response shapes
stay consistent across the help tools.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

HelpAction = Literal[
    "overview",
    "all",
    "script",
    "search",
    "not_found",
    "catch_all",
    "catch_all_empty",
    "ignored",
    "reload",
]


class ToolError(BaseModel):
    """Structured business error for tool payloads."""

    code: str = Field(description="Stable machine-readable error code")
    message: str = Field(description="Human-readable error summary")
    details: dict[str, Any] | None = Field(
        default=None, description="Optional structured error details"
    )


class ToolEnvelope(BaseModel):
    """Unified response shape for all tool business results."""

    ok: bool = Field(description="Business-level success flag")
    data: Any | None = Field(default=None, description="Tool-specific payload")
    error: ToolError | None = Field(default=None, description="Structured error payload")

    @model_validator(mode="after")
    def _validate_coherence(self) -> "ToolEnvelope":
        if self.ok and self.error is not None:
            raise ValueError("ok=true responses must not include error")
        if not self.ok and self.error is None:
            raise ValueError("ok=false responses must include error")
        return self


class HelpData(BaseModel):
    """Unified inner `data` schema for help tools."""

    action: HelpAction
    reply: str | None = None
    entries: list[str] = Field(default_factory=list)
    summary: dict[str, Any] = Field(default_factory=dict)


def build_ok(data: Any) -> dict[str, Any]:
    """Build and validate a success envelope."""
    return ToolEnvelope(ok=True, data=data).model_dump(exclude_none=True)


def build_error(
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
    *,
    data: Any | None = None,
) -> dict[str, Any]:
    """Build and validate an error envelope."""
    return ToolEnvelope(
        ok=False,
        data=data,
        error=ToolError(code=code, message=message, details=details),
    ).model_dump(exclude_none=True)


def build_help_data(
    *,
    action: HelpAction,
    reply: str | None,
    entries: list[str] | None = None,
    summary: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build and validate help tool `data` payloads."""
    return HelpData(
        action=action,
        reply=reply,
        entries=entries or [],
        summary=summary or {},
    ).model_dump(exclude_none=True)
