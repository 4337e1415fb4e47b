"""
Frequency component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# A mapping from canonical key to occurrence count, in first-occurrence order.
FrequencyMap = dict[str, int]

INPUT_NOT_ARRAY_MESSAGE = "Input must be an array"


# --- Absent Value Marker ---


class Undefined:
    """
    Marker for an absent value.

    Distinct from None, which stands for an explicit "no value". The two
    canonicalize to different keys ("undefined" vs "null").
    """

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = Undefined()


# --- Errors ---


class InvalidArgumentError(TypeError):
    """Raised when the counter is given something other than an ordered collection."""

    def __init__(self, message: str = INPUT_NOT_ARRAY_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class FrequencyValidationError:
    """Frequency validation error."""

    code: str
    message: str


# --- Input Models ---


@dataclass(frozen=True)
class CountInput:
    """Input for counting element frequencies."""

    items: Any


@dataclass(frozen=True)
class CanonicalKeyInput:
    """Input for computing a single canonical key."""

    value: Any


# --- Output Models ---


@dataclass(frozen=True)
class CountOutput:
    """Output containing the frequency map."""

    frequencies: FrequencyMap = field(default_factory=dict)
    total: int = 0
    distinct: int = 0
    errors: list[FrequencyValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class CanonicalKeyOutput:
    """Output containing a canonical key."""

    key: str
    errors: list[FrequencyValidationError] = field(default_factory=list)
    success: bool = True
