from pathlib import Path

from ..core.configs import RendererConfig
from ..core.spec_dataclasses import FigureSpec, OutputSpec, Toolkit
from .base import ToolkitProfile, executable_on_path, quoted, single_quoted


def capture(spec: FigureSpec, figure_path: Path, config: RendererConfig) -> str:
    return f"saveas(gcf, {single_quoted(figure_path)})"


def command(output: OutputSpec, config: RendererConfig) -> str:
    statement = f"run({single_quoted(output.script_path)})"
    return f"{config.executables.matlab} -batch {quoted(statement)}"


def is_available(config: RendererConfig) -> bool:
    return executable_on_path(config.executables.matlab)


PROFILE = ToolkitProfile(
    toolkit=Toolkit.MATLAB,
    script_extension=".m",
    checks=(),
    capture=capture,
    command=command,
    is_available=is_available,
)
