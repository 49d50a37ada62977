"""
ggplot2 (R) toolkit profile.
"""

from pathlib import Path

from ..core.configs import RendererConfig
from ..core.spec_dataclasses import FigureSpec, OutputSpec, Toolkit
from .base import ToolkitProfile, command_succeeds, double_quoted, forbid_pattern, quoted


def capture(spec: FigureSpec, figure_path: Path, config: RendererConfig) -> str:
    # R wants forward slashes even on Windows.
    target = double_quoted(figure_path.as_posix())
    return f"ggsave({target}, plot = last_plot(), dpi = {spec.dpi})"


def command(output: OutputSpec, config: RendererConfig) -> str:
    return f"{config.executables.rscript} {quoted(output.script_path)}"


def is_available(config: RendererConfig) -> bool:
    return command_succeeds(f'{config.executables.rscript} -e "library(ggplot2)"')


PROFILE = ToolkitProfile(
    toolkit=Toolkit.GGPLOT2,
    script_extension=".r",
    checks=(
        forbid_pattern(
            r"\bggsave\s*\(",
            "The script calls `ggsave()`. Remove it; the figure is saved automatically.",
        ),
    ),
    capture=capture,
    command=command,
    is_available=is_available,
)
