"""
Run figure scripts only when their artifact is missing.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .checks import check_figure
from .classifier import classify
from .paths import figure_path, output_spec, transcript_path
from .process import run_output_spec
from .render_context import RenderContext
from .results import CheckFailed, ScriptChecksFailed, ScriptResult, ScriptSuccess
from .spec_dataclasses import FigureSpec

log = logging.getLogger(__name__)


def should_run(spec: FigureSpec) -> bool:
    """Create the output directory and report whether the artifact is missing."""
    target = figure_path(spec)
    target.parent.mkdir(parents=True, exist_ok=True)
    return not target.exists()


def write_transcript(spec: FigureSpec, ctx: RenderContext) -> Path:
    """Persist the un-instrumented script next to the artifact."""
    path = transcript_path(figure_path(spec), ctx.config.transcript_extension)
    path.write_bytes(spec.script.encode("utf-8"))
    return path


def run_temp_script(spec: FigureSpec, ctx: RenderContext) -> ScriptResult:
    """Check, instrument and run ``spec``'s script, then classify the outcome."""
    checked = check_figure(spec, ctx)
    if isinstance(checked, CheckFailed):
        return ScriptChecksFailed(checked.message)

    output = output_spec(spec, ctx)
    process = run_output_spec(output, ctx)
    return classify(process.exit_code, process.command, spec.toolkit, ctx)


def run_script_if_necessary(spec: FigureSpec, ctx: RenderContext) -> ScriptResult:
    """
    Render ``spec`` unless its content-addressed artifact already exists.

    On success, including cache hits, the transcript is rewritten so it
    stays in sync with the script.
    """
    if should_run(spec):
        result = run_temp_script(spec, ctx)
    else:
        log.info("Figure %s already exists, skipping execution.", figure_path(spec))
        result = ScriptSuccess()

    if isinstance(result, ScriptSuccess):
        write_transcript(spec, ctx)
    return result
