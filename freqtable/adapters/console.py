"""
Console adapter for the report component's ReportWriterPort.
"""

from __future__ import annotations

import sys
from typing import TextIO


class ConsoleWriter:
    """Writes report lines to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(line, file=stream)
