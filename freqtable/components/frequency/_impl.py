"""
FrequencyCounter - occurrence counts keyed by canonical text.

Key behaviors:
- Input must be an ordered collection (list, tuple, range, ...), never text
- Every element is reduced to a canonical text key before counting
- Numbers and their text form share a key (1 and "1" both become "1")
- None ("null") and UNDEFINED ("undefined") are distinct keys
- One linear pass, fresh map per call, input never mutated

Invariants:
- I1: sum(counts) == len(items)
- I2: len(keys) == number of distinct canonical keys in items
- I3: key order is first-occurrence order
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from .models import (
    UNDEFINED,
    FrequencyMap,
    InvalidArgumentError,
)

OBJECT_KEY = "[object Object]"

# Integral floats below this magnitude render without an exponent.
_POSITIONAL_LIMIT = 21
# Fractions render positionally down to this many leading zeros.
_SMALL_FRACTION_LIMIT = -6
# Integers from here up render like the equal float (1e+21).
_INT_EXPONENT_LIMIT = 10**21


# --- Input Validation ---


def is_ordered_collection(value: Any) -> bool:
    """Check if value is a finite ordered collection (text excluded)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def ensure_ordered_collection(value: Any) -> Sequence[Any]:
    """Return value unchanged, or raise InvalidArgumentError."""
    if not is_ordered_collection(value):
        raise InvalidArgumentError()
    return value


# --- Canonical Keys ---


def format_number(value: float) -> str:
    """
    Render a float as shortest round-trip decimal text.

    Integral values below 1e21 have no fraction part, fractions stay
    positional down to 1e-6, everything else uses exponent form
    (1e+21, 1.5e-7). Negative zero renders as "0".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = int(exponent) + k  # position of the decimal point relative to the digits

    if k <= n <= _POSITIONAL_LIMIT:
        body = digits + "0" * (n - k)
    elif 0 < n <= _POSITIONAL_LIMIT:
        body = digits[:n] + "." + digits[n:]
    elif _SMALL_FRACTION_LIMIT < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"

    return sign + body


def _format_large_int(value: int) -> str:
    try:
        return format_number(float(value))
    except OverflowError:
        return "Infinity" if value > 0 else "-Infinity"


def _join_items(items: Sequence[Any], seen: set[int]) -> str:
    # Cyclic references render as empty, like missing items.
    if id(items) in seen:
        return ""
    seen = seen | {id(items)}
    parts = []
    for item in items:
        if item is None or item is UNDEFINED:
            parts.append("")
        elif isinstance(item, (list, tuple)):
            parts.append(_join_items(item, seen))
        else:
            parts.append(to_canonical_key(item))
    return ",".join(parts)


def to_canonical_key(value: Any) -> str:
    """
    Convert an element to the text key it is counted under.

    Args:
        value: Any element of the input collection.

    Returns:
        The canonical key:
        - UNDEFINED -> "undefined", None -> "null"
        - bool -> "true" / "false"
        - str -> itself
        - int -> decimal text, float -> see format_number
        - list/tuple -> item keys joined by ",", None/UNDEFINED as ""
        - mappings -> "[object Object]"
        - anything else -> str(value)
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        if abs(value) >= _INT_EXPONENT_LIMIT:
            return _format_large_int(value)
        return str(value)
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return _join_items(value, set())
    if isinstance(value, Mapping):
        return OBJECT_KEY
    return str(value)


# --- Counting ---


def count_frequencies(items: Any) -> FrequencyMap:
    """
    Count occurrences of each distinct element.

    Args:
        items: A finite ordered collection of elements of any type.

    Returns:
        Map of canonical key to count, keys in first-occurrence order.

    Raises:
        InvalidArgumentError: If items is not an ordered collection.
    """
    sequence = ensure_ordered_collection(items)

    freq: FrequencyMap = {}
    for item in sequence:
        key = to_canonical_key(item)
        freq[key] = freq.get(key, 0) + 1

    return freq


def most_common(
    frequencies: FrequencyMap,
    n: int | None = None,
) -> list[tuple[str, int]]:
    """Keys by descending count; ties keep first-occurrence order."""
    ranked = sorted(frequencies.items(), key=lambda kv: -kv[1])
    if n is None:
        return ranked
    return ranked[: max(n, 0)]
