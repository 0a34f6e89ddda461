"""CommandReport and ReportError — the contract between commands and output.

INVARIANT: Every CLI command emits exactly one CommandReport.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ReportError(BaseModel):
    """Structured error payload within a CommandReport."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class CommandReport(BaseModel):
    """Return type for every CLI command.

    Attributes:
        ok: Whether the command succeeded.
        op: Name of the operation (e.g. ``"inspect"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ReportError | None = None
