"""
Map a process outcome to a ScriptResult.
"""

import logging

from .render_context import RenderContext
from .results import ScriptFailure, ScriptResult, ScriptSuccess, ToolkitNotInstalled
from .spec_dataclasses import Toolkit

log = logging.getLogger(__name__)


def classify(exit_code: int, command: str, toolkit: Toolkit, ctx: RenderContext) -> ScriptResult:
    """
    Classify a finished process.

    A non-zero exit is ambiguous on its own, so the toolkit's availability
    is probed again on every failure.
    """
    if exit_code == 0:
        return ScriptSuccess()
    if not ctx.profile(toolkit).is_available(ctx.config):
        log.warning("Toolkit %s is not available in this environment.", toolkit.value)
        return ToolkitNotInstalled(toolkit)
    return ScriptFailure(command=command, exit_code=exit_code)
