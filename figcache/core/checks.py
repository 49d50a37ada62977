"""
Static, pre-execution checks over a figure request.
"""

import logging

from .render_context import RenderContext
from .results import CHECK_PASSED, CheckFailed, CheckResult, fold_checks
from .spec_dataclasses import FigureSpec, Toolkit

log = logging.getLogger(__name__)


def check_script(toolkit: Toolkit, script: str, ctx: RenderContext) -> CheckResult:
    """Run every registered check for ``toolkit`` and fold the results."""
    checks = ctx.profile(toolkit).checks
    result = fold_checks(check(script) for check in checks)
    if isinstance(result, CheckFailed):
        log.warning("Rejected %s script before execution:\n%s", toolkit.value, result.message)
    return result


def check_format(spec: FigureSpec, ctx: RenderContext) -> CheckResult:
    supported = ctx.profile(spec.toolkit).supported_formats
    if spec.save_format in supported:
        return CHECK_PASSED
    return CheckFailed(
        f"Save format '{spec.save_format.value}' is not supported by {spec.toolkit.value}. "
        f"Supported formats: {sorted(item.value for item in supported)}"
    )


def check_figure(spec: FigureSpec, ctx: RenderContext) -> CheckResult:
    """Format check followed by the toolkit's script checks."""
    return fold_checks([check_format(spec, ctx), check_script(spec.toolkit, spec.script, ctx)])
