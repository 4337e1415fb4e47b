"""
Cases component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from freqtable.components.frequency import FrequencyMap

# --- Status ---


class CaseStatus(str, Enum):
    """Outcome status of a single case."""

    PASS = "PASS"
    FAIL = "FAIL"


# --- Errors ---


class CaseAssertionError(AssertionError):
    """A case expectation did not hold."""


@dataclass(frozen=True)
class CaseValidationError:
    """Case definition error."""

    code: str
    message: str
    field: str | None = None


# --- Case Model ---


@dataclass(frozen=True)
class FrequencyCase:
    """
    A named frequency check.

    Exactly one of expected / expected_error is set.
    """

    name: str
    items: Any
    expected: FrequencyMap | None = None
    expected_error: str | None = None


@dataclass(frozen=True)
class CaseOutcome:
    """Result record for one case, consumed by the report component."""

    name: str
    input: Any
    status: CaseStatus
    duration_ms: int
    error_message: str | None = None

    @property
    def passed(self) -> bool:
        return self.status is CaseStatus.PASS


@dataclass(frozen=True)
class RunSummary:
    """Accumulated outcomes of one run."""

    outcomes: tuple[CaseOutcome, ...] = ()
    passed: int = 0
    failed: int = 0
    total: int = 0
    total_duration_ms: int = 0

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


# --- Input Models ---


@dataclass(frozen=True)
class RunCasesInput:
    """Input for running cases. None runs the default catalogue."""

    cases: tuple[FrequencyCase, ...] | None = None


# --- Output Models ---


@dataclass(frozen=True)
class RunCasesOutput:
    """Output containing the run summary."""

    summary: RunSummary | None
    errors: list[CaseValidationError] = field(default_factory=list)
    success: bool = True
