"""
Instrument a script, write it to its temp path and run it.
"""

from __future__ import annotations

import logging
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from .render_context import RenderContext
from .spec_dataclasses import FigureSpec, OutputSpec
from .paths import output_spec
from ..toolkits.base import CapturePosition

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    command: str
    exit_code: int
    output: bytes
    duration_ms: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def output_text(self) -> str:
        return self.output.decode("utf-8", errors="replace").strip()


def instrument_script(spec: FigureSpec, figure_path: Path, ctx: RenderContext) -> str:
    """User script plus the toolkit's capture fragment, in toolkit order."""
    profile = ctx.profile(spec.toolkit)
    fragment = profile.capture(spec, figure_path, ctx.config)
    if profile.capture_position is CapturePosition.PREPEND:
        return "\n".join([fragment, spec.script])
    return "\n".join([spec.script, fragment])


def run_command(command: str, ctx: RenderContext) -> ProcessResult:
    """
    Run ``command`` through the shell, blocking until it exits.

    stdout and stderr are merged into one stream. Failure to spawn the
    process raises ``OSError``.
    """
    started = time.monotonic()
    proc = subprocess.run(
        command,
        shell=True,
        cwd=ctx.config.cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        check=False,
    )
    duration_ms = int((time.monotonic() - started) * 1000)
    return ProcessResult(
        command=command,
        exit_code=proc.returncode,
        output=proc.stdout or b"",
        duration_ms=duration_ms,
    )


def run_script(spec: FigureSpec, ctx: RenderContext) -> ProcessResult:
    """Write the instrumented script for ``spec`` and execute it once."""
    output = output_spec(spec, ctx)
    return run_output_spec(output, ctx)


def run_output_spec(output: OutputSpec, ctx: RenderContext) -> ProcessResult:
    profile = ctx.profile(output.spec.toolkit)
    instrumented = instrument_script(output.spec, output.figure_path, ctx)
    output.script_path.parent.mkdir(parents=True, exist_ok=True)
    output.script_path.write_bytes(instrumented.encode("utf-8"))

    command = profile.command(output, ctx.config)
    log.info("Running %s script: %s", output.spec.toolkit.value, command)
    result = run_command(command, ctx)

    text = result.output_text()
    if text:
        if not result.succeeded and ctx.config.log_output:
            log.warning("Output of `%s` (exit code %d):\n%s", command, result.exit_code, text)
        else:
            log.debug("Output of `%s`:\n%s", command, text)
    log.debug("`%s` finished in %d ms", command, result.duration_ms)
    return result
