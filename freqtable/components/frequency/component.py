"""
Frequency component - count elements by canonical key.

Entry points wrap the pure counter and report invalid input as
validation errors instead of raising.

Invariants:
- I1: Output counts sum to the input length
- I2: Invalid input yields success=False with code "input_not_array"
- I3: No I/O, no state kept between calls
"""

from __future__ import annotations

from ._impl import count_frequencies, to_canonical_key
from .models import (
    CanonicalKeyInput,
    CanonicalKeyOutput,
    CountInput,
    CountOutput,
    FrequencyValidationError,
    InvalidArgumentError,
)

# --- Component Entry Points ---


def run_count(inp: CountInput) -> CountOutput:
    """
    Count element frequencies.

    Args:
        inp: Input containing the collection to count.

    Returns:
        CountOutput with the frequency map, or errors if the input
        is not an ordered collection.
    """
    try:
        frequencies = count_frequencies(inp.items)
    except InvalidArgumentError as e:
        return CountOutput(
            errors=[FrequencyValidationError(code="input_not_array", message=e.message)],
            success=False,
        )

    return CountOutput(
        frequencies=frequencies,
        total=sum(frequencies.values()),
        distinct=len(frequencies),
        errors=[],
        success=True,
    )


def run_canonical_key(inp: CanonicalKeyInput) -> CanonicalKeyOutput:
    """Compute the canonical key of a single value."""
    return CanonicalKeyOutput(key=to_canonical_key(inp.value), errors=[], success=True)


def run(inp: CountInput | CanonicalKeyInput) -> CountOutput | CanonicalKeyOutput:
    """
    Main entry point for the frequency component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, CountInput):
        return run_count(inp)
    elif isinstance(inp, CanonicalKeyInput):
        return run_canonical_key(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
