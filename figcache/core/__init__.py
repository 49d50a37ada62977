"""Core - content-addressed script execution."""

from .spec_dataclasses import FigureSpec, OutputSpec, SaveFormat, Toolkit
from .results import (
    CHECK_PASSED,
    CheckFailed,
    CheckPassed,
    CheckResult,
    ScriptChecksFailed,
    ScriptFailure,
    ScriptResult,
    ScriptSuccess,
    ToolkitNotInstalled,
    combine_checks,
    describe_result,
    fold_checks,
)
from .configs import ExecutablesConfig, MatplotlibConfig, RendererConfig
from .render_context import RenderContext
from .paths import figure_path, output_spec, script_path, transcript_path
from .checks import check_figure, check_format, check_script
from .process import ProcessResult, instrument_script, run_command, run_script
from .classifier import classify
from .cache import run_script_if_necessary, run_temp_script, should_run, write_transcript

__all__ = [
    "FigureSpec",
    "OutputSpec",
    "SaveFormat",
    "Toolkit",
    "CHECK_PASSED",
    "CheckFailed",
    "CheckPassed",
    "CheckResult",
    "ScriptChecksFailed",
    "ScriptFailure",
    "ScriptResult",
    "ScriptSuccess",
    "ToolkitNotInstalled",
    "combine_checks",
    "describe_result",
    "fold_checks",
    "ExecutablesConfig",
    "MatplotlibConfig",
    "RendererConfig",
    "RenderContext",
    "figure_path",
    "output_spec",
    "script_path",
    "transcript_path",
    "check_figure",
    "check_format",
    "check_script",
    "ProcessResult",
    "instrument_script",
    "run_command",
    "run_script",
    "classify",
    "run_script_if_necessary",
    "run_temp_script",
    "should_run",
    "write_transcript",
]
