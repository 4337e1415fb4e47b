"""
Report component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from freqtable.components.cases import CaseOutcome

# --- Validation Error ---


@dataclass(frozen=True)
class ReportValidationError:
    """Report validation error."""

    code: str
    message: str


# --- Summary Model ---


@dataclass(frozen=True)
class ReportSummary:
    """Totals shown in the table footer."""

    passed: int
    failed: int
    total: int
    success_rate: float  # percent, 0 when total is 0
    total_duration_ms: int
    average_duration_ms: float  # 0 when total is 0


# --- Input Models ---


@dataclass(frozen=True)
class RenderReportInput:
    """Input for rendering outcomes as a text table."""

    outcomes: tuple[CaseOutcome, ...]


# --- Output Models ---


@dataclass(frozen=True)
class RenderReportOutput:
    """Output containing rendered lines and the summary."""

    lines: tuple[str, ...]
    summary: ReportSummary | None
    errors: list[ReportValidationError] = field(default_factory=list)
    success: bool = True
