"""
CaseRunner - timed pass/fail checks of the frequency counter.

Replaces module-level pass/total counters with a RunSummary returned
from each run.

Key behaviors:
- Each case produces exactly one outcome, in catalogue order
- An exception inside a case becomes a FAIL outcome, later cases still run
- Durations come from the clock port in whole milliseconds
- No state survives between runs
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from freqtable.components.frequency import (
    INPUT_NOT_ARRAY_MESSAGE,
    UNDEFINED,
    FrequencyMap,
    InvalidArgumentError,
    count_frequencies,
)

from .models import (
    CaseAssertionError,
    CaseOutcome,
    CaseStatus,
    CaseValidationError,
    FrequencyCase,
    RunSummary,
)
from .ports import ClockPort, CounterPort

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class CaseRunnerConfig:
    """Case runner configuration from rules."""

    fail_fast: bool = False


DEFAULT_CONFIG = CaseRunnerConfig()


# --- Assertion Helpers ---


def _dump(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def assert_frequencies_equal(
    actual: Any,
    expected: FrequencyMap,
    message: str | None = None,
) -> None:
    """Raise CaseAssertionError unless actual equals expected."""
    if actual != expected:
        raise CaseAssertionError(message or f"Expected {_dump(expected)}, got {_dump(actual)}")


def assert_raises_invalid_argument(
    fn: Callable[[Any], Any],
    items: Any,
    message: str = INPUT_NOT_ARRAY_MESSAGE,
) -> None:
    """Raise CaseAssertionError unless fn(items) raises InvalidArgumentError(message)."""
    expectation = f"Expected InvalidArgumentError with message '{message}'"
    try:
        fn(items)
    except InvalidArgumentError as e:
        if str(e) != message:
            raise CaseAssertionError(f"{expectation}, got InvalidArgumentError: {e}") from e
        return
    except Exception as e:
        raise CaseAssertionError(f"{expectation}, got {type(e).__name__}: {e}") from e

    raise CaseAssertionError(f"{expectation}, but nothing was raised")


# --- Validation ---


def validate_case(case: FrequencyCase) -> list[CaseValidationError]:
    """Validate a case definition."""
    errors: list[CaseValidationError] = []

    if not case.name or not case.name.strip():
        errors.append(
            CaseValidationError(
                code="name_required",
                message="Case name is required",
                field="name",
            )
        )

    if case.expected is not None and case.expected_error is not None:
        errors.append(
            CaseValidationError(
                code="expectation_ambiguous",
                message="Set either expected or expected_error, not both",
                field="expected",
            )
        )
    elif case.expected is None and case.expected_error is None:
        errors.append(
            CaseValidationError(
                code="expectation_missing",
                message="One of expected or expected_error is required",
                field="expected",
            )
        )

    return errors


def validate_cases(cases: Iterable[FrequencyCase]) -> list[CaseValidationError]:
    """Validate every case, plus name uniqueness across the catalogue."""
    errors: list[CaseValidationError] = []
    seen: set[str] = set()

    for case in cases:
        errors.extend(validate_case(case))
        if case.name in seen:
            errors.append(
                CaseValidationError(
                    code="name_duplicate",
                    message=f"Duplicate case name: {case.name}",
                    field="name",
                )
            )
        seen.add(case.name)

    return errors


# --- Runner ---


class CaseRunner:
    """Runs frequency cases and collects outcomes."""

    def __init__(
        self,
        clock: ClockPort,
        counter: CounterPort = count_frequencies,
        config: CaseRunnerConfig = DEFAULT_CONFIG,
    ) -> None:
        self._clock = clock
        self._counter = counter
        self._config = config

    def check(self, case: FrequencyCase) -> None:
        """Run one case's assertion. Raises on failure."""
        if case.expected_error is not None:
            assert_raises_invalid_argument(self._counter, case.items, case.expected_error)
        elif case.expected is not None:
            assert_frequencies_equal(self._counter(case.items), case.expected)
        else:
            raise CaseAssertionError(f"Case has no expectation: {case.name}")

    def _elapsed_ms(self, start: float) -> int:
        return max(0, round(self._clock.monotonic_ms() - start))

    def run_case(self, case: FrequencyCase) -> CaseOutcome:
        """Run one case and record its outcome."""
        start = self._clock.monotonic_ms()
        try:
            self.check(case)
        except Exception as e:
            logger.warning("Case failed: %s: %s", case.name, e)
            return CaseOutcome(
                name=case.name,
                input=case.items,
                status=CaseStatus.FAIL,
                duration_ms=self._elapsed_ms(start),
                error_message=str(e),
            )

        logger.debug("Case passed: %s", case.name)
        return CaseOutcome(
            name=case.name,
            input=case.items,
            status=CaseStatus.PASS,
            duration_ms=self._elapsed_ms(start),
        )

    def run_cases(self, cases: Iterable[FrequencyCase]) -> RunSummary:
        """Run cases in order and summarize."""
        outcomes: list[CaseOutcome] = []

        for case in cases:
            outcome = self.run_case(case)
            outcomes.append(outcome)
            if self._config.fail_fast and not outcome.passed:
                logger.info("Stopping after first failure (fail_fast)")
                break

        passed = sum(1 for o in outcomes if o.passed)
        summary = RunSummary(
            outcomes=tuple(outcomes),
            passed=passed,
            failed=len(outcomes) - passed,
            total=len(outcomes),
            total_duration_ms=sum(o.duration_ms for o in outcomes),
        )
        logger.info(
            "Ran %d cases: %d passed, %d failed",
            summary.total,
            summary.passed,
            summary.failed,
        )
        return summary


# --- Default Catalogue ---


def default_cases() -> tuple[FrequencyCase, ...]:
    """Built-in cases covering types, edge cases and input validation."""
    return (
        FrequencyCase(
            name="TC-001: Array with unique items",
            items=[1, 2, 3, 4],
            expected={"1": 1, "2": 1, "3": 1, "4": 1},
        ),
        FrequencyCase(
            name="TC-002: Array with duplicate items",
            items=[1, 2, 2, 3, 3, 3],
            expected={"1": 1, "2": 2, "3": 3},
        ),
        FrequencyCase(
            name="TC-003: Array with all same items",
            items=[5, 5, 5, 5, 5],
            expected={"5": 5},
        ),
        FrequencyCase(
            name="TC-004: String array",
            items=["a", "b", "a", "c", "b", "a"],
            expected={"a": 3, "b": 2, "c": 1},
        ),
        # 1 and "1" share the key "1"
        FrequencyCase(
            name="TC-005: Mixed types array",
            items=[1, "1", 1, "1", "a"],
            expected={"1": 4, "a": 1},
        ),
        FrequencyCase(
            name="TC-006: Array with null/undefined",
            items=[None, UNDEFINED, None, "test"],
            expected={"null": 2, "undefined": 1, "test": 1},
        ),
        FrequencyCase(
            name="TC-007: Array with boolean values",
            items=[True, False, True, True, False],
            expected={"true": 3, "false": 2},
        ),
        FrequencyCase(
            name="TC-008: Empty array",
            items=[],
            expected={},
        ),
        FrequencyCase(
            name="TC-009: Single item array",
            items=[42],
            expected={"42": 1},
        ),
        FrequencyCase(
            name="TC-010: Unicode characters",
            items=["🚀", "🍌", "🚀", "🍌", "🍌"],
            expected={"🚀": 2, "🍌": 3},
        ),
        FrequencyCase(
            name="TC-011: Special string characters",
            items=["", " ", "  ", "", " "],
            expected={"": 2, " ": 2, "  ": 1},
        ),
        FrequencyCase(
            name="TC-012: Large array",
            items=[i % 10 for i in range(1000)],
            expected={str(i): 100 for i in range(10)},
        ),
        FrequencyCase(
            name="TC-013: Input validation (non-array)",
            items="not-an-array",
            expected_error=INPUT_NOT_ARRAY_MESSAGE,
        ),
        FrequencyCase(
            name="TC-014: Input validation (null)",
            items=None,
            expected_error=INPUT_NOT_ARRAY_MESSAGE,
        ),
        FrequencyCase(
            name="TC-015: Input validation (object)",
            items={"a": 1, "b": 2},
            expected_error=INPUT_NOT_ARRAY_MESSAGE,
        ),
    )
