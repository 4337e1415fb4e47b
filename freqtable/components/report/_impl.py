"""
ResultReporter - fixed-width text table of case outcomes.

Pure presentation: takes outcome records, returns lines. Writing the
lines is left to a ReportWriterPort.

Layout:
    ======...
    TEST RESULTS TABLE
    ======...
    | Test Case | Input Data | Status | Duration (ms) | Error Message |
    |----------|-----------|--------|---------------|---------------|
    | <one row per outcome>                                          |
    |----------|-----------|--------|---------------|---------------|
    | SUMMARY | - | passed/total | <avg> avg | <rate>% success |
    ======...
    All tests passed! | <n> test(s) failed
    Total execution time: <ms>ms
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from freqtable.components.cases import CaseOutcome
from freqtable.components.frequency import UNDEFINED, is_ordered_collection, to_canonical_key

from .models import ReportSummary

ELLIPSIS = "..."
PASS_LABEL = "✓ PASS"
FAIL_LABEL = "✗ FAIL"
EMPTY_CELL = "-"

# --- Configuration ---


@dataclass(frozen=True)
class ReportConfig:
    """Report layout configuration from rules."""

    name_width: int = 35
    input_width: int = 30
    status_width: int = 8
    duration_width: int = 13
    error_width: int = 25
    banner_width: int = 130

    # Input summarization
    large_input_threshold: int = 20
    sample_size: int = 3

    @property
    def widths(self) -> tuple[int, int, int, int, int]:
        return (
            self.name_width,
            self.input_width,
            self.status_width,
            self.duration_width,
            self.error_width,
        )


DEFAULT_CONFIG = ReportConfig()


# --- Input Formatting ---


def _json_default(value: Any) -> Any:
    if value is UNDEFINED:
        return None
    return str(value)


def _encode(value: Any) -> str:
    if value is UNDEFINED:
        return "undefined"
    try:
        return json.dumps(
            value,
            ensure_ascii=False,
            separators=(",", ":"),
            default=_json_default,
        )
    except (TypeError, ValueError):
        # Cyclic collections, non-text mapping keys
        return to_canonical_key(value)


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length, ending in "..." when shortened."""
    if len(text) <= max_length:
        return text
    return text[: max(max_length - len(ELLIPSIS), 0)] + ELLIPSIS


def format_input_data(
    value: Any,
    max_length: int = 30,
    config: ReportConfig = DEFAULT_CONFIG,
) -> str:
    """
    Format a case input for the Input Data column.

    Examples:
        [1, 2, 3]        -> [1,2,3]
        []               -> []
        1000-item list   -> [1000 items: 0,1,2...]
        None             -> null
    """
    if is_ordered_collection(value):
        items: Sequence[Any] = value
        if len(items) > config.large_input_threshold:
            sample = ",".join(_encode(item) for item in items[: config.sample_size])
            formatted = f"[{len(items)} items: {sample}{ELLIPSIS}]"
        else:
            formatted = "[" + ",".join(_encode(item) for item in items) + "]"
    else:
        formatted = _encode(value)

    return truncate(formatted, max_length)


# --- Summary ---


def summarize(outcomes: Sequence[CaseOutcome]) -> ReportSummary:
    """Compute footer totals."""
    total = len(outcomes)
    passed = sum(1 for o in outcomes if o.passed)
    total_duration = sum(o.duration_ms for o in outcomes)

    return ReportSummary(
        passed=passed,
        failed=total - passed,
        total=total,
        success_rate=(passed / total) * 100 if total else 0.0,
        total_duration_ms=total_duration,
        average_duration_ms=total_duration / total if total else 0.0,
    )


# --- Table Rendering ---


def _row(cells: Sequence[str], config: ReportConfig) -> str:
    padded = [cell.ljust(width) for cell, width in zip(cells, config.widths, strict=True)]
    return "| " + " | ".join(padded) + " |"


def _separator(config: ReportConfig) -> str:
    return "|" + "|".join("-" * (width + 2) for width in config.widths) + "|"


def _outcome_row(outcome: CaseOutcome, config: ReportConfig) -> str:
    error = outcome.error_message[: config.error_width - 2] if outcome.error_message else EMPTY_CELL
    return _row(
        [
            outcome.name,
            format_input_data(outcome.input, config.input_width - 2, config),
            PASS_LABEL if outcome.passed else FAIL_LABEL,
            str(outcome.duration_ms).rjust(config.duration_width - 2),
            error,
        ],
        config,
    )


def _summary_row(summary: ReportSummary, config: ReportConfig) -> str:
    if summary.total:
        average = f"{summary.average_duration_ms:.2f}"
        rate = f"{summary.success_rate:.1f}"
    else:
        average = rate = "0"

    return _row(
        [
            "SUMMARY",
            EMPTY_CELL,
            f"{summary.passed}/{summary.total}",
            f"{average} avg",
            f"{rate}% success",
        ],
        config,
    )


def render_table(
    outcomes: Sequence[CaseOutcome],
    config: ReportConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Render outcomes as table lines (no trailing newlines)."""
    summary = summarize(outcomes)
    banner = "=" * config.banner_width

    lines = [
        banner,
        "TEST RESULTS TABLE",
        banner,
        _row(["Test Case", "Input Data", "Status", "Duration (ms)", "Error Message"], config),
        _separator(config),
    ]
    lines.extend(_outcome_row(outcome, config) for outcome in outcomes)
    lines.append(_separator(config))
    lines.append(_summary_row(summary, config))
    lines.append(banner)

    if summary.passed == summary.total:
        lines.append("All tests passed!")
    else:
        lines.append(f"{summary.failed} test(s) failed")
    lines.append(f"Total execution time: {summary.total_duration_ms}ms")

    return lines
