"""
Cases component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol

from freqtable.components.frequency import FrequencyMap


class ClockPort(Protocol):
    """Port for measuring elapsed time."""

    def monotonic_ms(self) -> float:
        """Milliseconds from an arbitrary fixed point; never goes backwards."""
        ...


class CounterPort(Protocol):
    """Port for the function under test."""

    def __call__(self, items: Any) -> FrequencyMap:
        ...


class RulesPort(Protocol):
    """Port for accessing case runner configuration."""

    def get_fail_fast(self) -> bool:
        """Stop after the first failing case."""
        ...
