"""
gnuplot toolkit profile.

gnuplot only writes to the output declared before plotting, so the capture
fragment is prepended to the user script. Formats without a gnuplot
terminal (tif, webp) are rejected before the script runs.
"""

from pathlib import Path

from ..core.configs import RendererConfig
from ..core.spec_dataclasses import FigureSpec, OutputSpec, SaveFormat, Toolkit
from .base import CapturePosition, ToolkitProfile, executable_on_path, quoted, single_quoted

_TERMINALS = {
    SaveFormat.PNG: "pngcairo",
    SaveFormat.PDF: "pdfcairo",
    SaveFormat.SVG: "svg",
    SaveFormat.JPG: "jpeg",
    SaveFormat.EPS: "postscript eps",
    SaveFormat.GIF: "gif",
}


def capture(spec: FigureSpec, figure_path: Path, config: RendererConfig) -> str:
    terminal = _TERMINALS[spec.save_format]
    return "\n".join(
        [
            f"set terminal {terminal}",
            f"set output {single_quoted(figure_path)}",
        ]
    )


def command(output: OutputSpec, config: RendererConfig) -> str:
    return f"{config.executables.gnuplot} -c {quoted(output.script_path)}"


def is_available(config: RendererConfig) -> bool:
    return executable_on_path(config.executables.gnuplot)


PROFILE = ToolkitProfile(
    toolkit=Toolkit.GNUPLOT,
    script_extension=".gp",
    checks=(),
    capture=capture,
    command=command,
    is_available=is_available,
    capture_position=CapturePosition.PREPEND,
    supported_formats=frozenset(_TERMINALS),
)
