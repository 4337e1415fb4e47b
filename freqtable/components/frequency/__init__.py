"""
Frequency component - occurrence counts keyed by canonical text.
"""

from ._impl import (
    OBJECT_KEY,
    count_frequencies,
    ensure_ordered_collection,
    format_number,
    is_ordered_collection,
    most_common,
    to_canonical_key,
)
from .component import (
    run,
    run_canonical_key,
    run_count,
)
from .models import (
    INPUT_NOT_ARRAY_MESSAGE,
    UNDEFINED,
    CanonicalKeyInput,
    CanonicalKeyOutput,
    CountInput,
    CountOutput,
    FrequencyMap,
    FrequencyValidationError,
    InvalidArgumentError,
    Undefined,
)

__all__ = [
    # Entry points
    "run",
    "run_canonical_key",
    "run_count",
    # Input models
    "CanonicalKeyInput",
    "CountInput",
    # Output models
    "CanonicalKeyOutput",
    "CountOutput",
    "FrequencyMap",
    "FrequencyValidationError",
    # Errors and markers
    "INPUT_NOT_ARRAY_MESSAGE",
    "InvalidArgumentError",
    "UNDEFINED",
    "Undefined",
    # Core functions
    "OBJECT_KEY",
    "count_frequencies",
    "ensure_ordered_collection",
    "format_number",
    "is_ordered_collection",
    "most_common",
    "to_canonical_key",
]
