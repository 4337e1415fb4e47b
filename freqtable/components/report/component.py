"""
Report component - render case outcomes as a text table.

Invariants:
- I1: One table row per outcome, in input order
- I2: Rendering never changes the outcomes
- I3: Lines are written only when a writer is given
"""

from __future__ import annotations

from ._impl import DEFAULT_CONFIG, ReportConfig, render_table, summarize
from .models import RenderReportInput, RenderReportOutput, ReportValidationError
from .ports import ReportWriterPort, RulesPort


def _build_config(rules: RulesPort | None) -> ReportConfig:
    """Build report config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    widths = rules.get_column_widths()
    return ReportConfig(
        name_width=widths.get("name", DEFAULT_CONFIG.name_width),
        input_width=widths.get("input", DEFAULT_CONFIG.input_width),
        status_width=widths.get("status", DEFAULT_CONFIG.status_width),
        duration_width=widths.get("duration", DEFAULT_CONFIG.duration_width),
        error_width=widths.get("error", DEFAULT_CONFIG.error_width),
        banner_width=rules.get_banner_width(),
        large_input_threshold=rules.get_large_input_threshold(),
        sample_size=rules.get_sample_size(),
    )


def _validate_config(config: ReportConfig) -> list[ReportValidationError]:
    errors: list[ReportValidationError] = []
    # Input, duration and error cells are cut to width - 2.
    for name, width in zip(
        ("name", "input", "status", "duration", "error"), config.widths, strict=True
    ):
        if width < 3:
            errors.append(
                ReportValidationError(
                    code="column_too_narrow",
                    message=f"Column '{name}' must be at least 3 characters wide",
                )
            )
    return errors


# --- Component Entry Points ---


def run_render(
    inp: RenderReportInput,
    *,
    writer: ReportWriterPort | None = None,
    rules: RulesPort | None = None,
) -> RenderReportOutput:
    """
    Render outcomes as a text table.

    Args:
        inp: Input containing the outcomes to render.
        writer: Optional writer that receives each line.
        rules: Optional rules port for configuration.

    Returns:
        RenderReportOutput with rendered lines and summary.
    """
    config = _build_config(rules)
    errors = _validate_config(config)
    if errors:
        return RenderReportOutput(lines=(), summary=None, errors=errors, success=False)

    lines = render_table(inp.outcomes, config)
    if writer is not None:
        for line in lines:
            writer.write_line(line)

    return RenderReportOutput(
        lines=tuple(lines),
        summary=summarize(inp.outcomes),
        errors=[],
        success=True,
    )


def run(
    inp: RenderReportInput,
    *,
    writer: ReportWriterPort | None = None,
    rules: RulesPort | None = None,
) -> RenderReportOutput:
    """
    Main entry point for the report component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RenderReportInput):
        return run_render(inp, writer=writer, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
