"""
Report component - fixed-width text table of case outcomes.
"""

from ._impl import (
    DEFAULT_CONFIG,
    ReportConfig,
    format_input_data,
    render_table,
    summarize,
    truncate,
)
from .component import run, run_render
from .models import (
    RenderReportInput,
    RenderReportOutput,
    ReportSummary,
    ReportValidationError,
)
from .ports import ReportWriterPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    # Input models
    "RenderReportInput",
    # Output models
    "RenderReportOutput",
    "ReportSummary",
    "ReportValidationError",
    # Ports
    "ReportWriterPort",
    "RulesPort",
    # _impl re-exports
    "DEFAULT_CONFIG",
    "ReportConfig",
    "format_input_data",
    "render_table",
    "summarize",
    "truncate",
]
