"""
Cases component - timed pass/fail checks of the frequency counter.
"""

from ._impl import (
    DEFAULT_CONFIG,
    CaseRunner,
    CaseRunnerConfig,
    assert_frequencies_equal,
    assert_raises_invalid_argument,
    default_cases,
    validate_case,
    validate_cases,
)
from .component import run, run_cases
from .models import (
    CaseAssertionError,
    CaseOutcome,
    CaseStatus,
    CaseValidationError,
    FrequencyCase,
    RunCasesInput,
    RunCasesOutput,
    RunSummary,
)
from .ports import ClockPort, CounterPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_cases",
    # Input models
    "FrequencyCase",
    "RunCasesInput",
    # Output models
    "CaseAssertionError",
    "CaseOutcome",
    "CaseStatus",
    "CaseValidationError",
    "RunCasesOutput",
    "RunSummary",
    # Ports
    "ClockPort",
    "CounterPort",
    "RulesPort",
    # _impl re-exports
    "DEFAULT_CONFIG",
    "CaseRunner",
    "CaseRunnerConfig",
    "assert_frequencies_equal",
    "assert_raises_invalid_argument",
    "default_cases",
    "validate_case",
    "validate_cases",
]
