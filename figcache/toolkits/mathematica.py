from pathlib import Path

from ..core.configs import RendererConfig
from ..core.spec_dataclasses import FigureSpec, OutputSpec, Toolkit
from .base import ToolkitProfile, double_quoted, executable_on_path, quoted


def capture(spec: FigureSpec, figure_path: Path, config: RendererConfig) -> str:
    return f"Export[{double_quoted(figure_path)}, %, ImageResolution -> {spec.dpi}]"


def command(output: OutputSpec, config: RendererConfig) -> str:
    return f"{config.executables.mathematica} -script {quoted(output.script_path)}"


def is_available(config: RendererConfig) -> bool:
    return executable_on_path(config.executables.mathematica)


PROFILE = ToolkitProfile(
    toolkit=Toolkit.MATHEMATICA,
    script_extension=".m",
    checks=(),
    capture=capture,
    command=command,
    is_available=is_available,
)
