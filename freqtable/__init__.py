"""
freqtable - frequency tables over ordered collections.
"""

from freqtable.components.frequency import (
    UNDEFINED,
    InvalidArgumentError,
    count_frequencies,
    to_canonical_key,
)

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "InvalidArgumentError",
    "count_frequencies",
    "to_canonical_key",
]
