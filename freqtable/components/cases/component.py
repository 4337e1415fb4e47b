"""
Cases component - run frequency cases and collect outcomes.

Invariants:
- I1: One outcome per case unless fail_fast stops the run
- I2: Invalid case definitions are reported before anything runs
- I3: Counters live in the returned summary, never in module state
"""

from __future__ import annotations

from ._impl import (
    DEFAULT_CONFIG,
    CaseRunner,
    CaseRunnerConfig,
    default_cases,
    validate_cases,
)
from .models import RunCasesInput, RunCasesOutput
from .ports import ClockPort, CounterPort, RulesPort


def _build_config(rules: RulesPort | None) -> CaseRunnerConfig:
    """Build runner config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return CaseRunnerConfig(fail_fast=rules.get_fail_fast())


# --- Component Entry Points ---


def run_cases(
    inp: RunCasesInput,
    *,
    clock: ClockPort,
    counter: CounterPort | None = None,
    rules: RulesPort | None = None,
) -> RunCasesOutput:
    """
    Run a case catalogue.

    Args:
        inp: Input containing the cases (None for the default catalogue).
        clock: Clock port used to time each case.
        counter: Function under test (defaults to count_frequencies).
        rules: Optional rules port for configuration.

    Returns:
        RunCasesOutput with the run summary, or validation errors.
    """
    cases = inp.cases if inp.cases is not None else default_cases()

    errors = validate_cases(cases)
    if errors:
        return RunCasesOutput(summary=None, errors=errors, success=False)

    config = _build_config(rules)
    if counter is None:
        runner = CaseRunner(clock=clock, config=config)
    else:
        runner = CaseRunner(clock=clock, counter=counter, config=config)

    return RunCasesOutput(summary=runner.run_cases(cases), errors=[], success=True)


def run(
    inp: RunCasesInput,
    *,
    clock: ClockPort,
    rules: RulesPort | None = None,
) -> RunCasesOutput:
    """
    Main entry point for the cases component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RunCasesInput):
        return run_cases(inp, clock=clock, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
