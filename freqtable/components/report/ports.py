"""
Report component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class ReportWriterPort(Protocol):
    """Port for emitting rendered report lines."""

    def write_line(self, line: str) -> None:
        """Write one line of output."""
        ...


class RulesPort(Protocol):
    """Port for accessing report layout configuration."""

    def get_column_widths(self) -> dict[str, int]:
        """Get widths keyed by column: name, input, status, duration, error."""
        ...

    def get_banner_width(self) -> int:
        """Get width of the ===== banner lines."""
        ...

    def get_large_input_threshold(self) -> int:
        """Get collection length above which input is summarized."""
        ...

    def get_sample_size(self) -> int:
        """Get number of leading items shown for summarized input."""
        ...
