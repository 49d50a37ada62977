"""
Plotly (Python) toolkit profile.
"""

from pathlib import Path

from ..core.configs import RendererConfig
from ..core.spec_dataclasses import FigureSpec, OutputSpec, SaveFormat, Toolkit
from .base import ToolkitProfile, command_succeeds, forbid_pattern, quoted


def capture(spec: FigureSpec, figure_path: Path, config: RendererConfig) -> str:
    # plotly has no global "current figure"; grab the last Figure defined.
    return "\n".join(
        [
            "import plotly.graph_objects as go",
            "__figcache_figs = [v for v in globals().values() if isinstance(v, go.Figure)]",
            f"__figcache_figs[-1].write_image({str(figure_path)!r}, format={spec.save_format.value!r})",
        ]
    )


def command(output: OutputSpec, config: RendererConfig) -> str:
    return f"{config.executables.python} {quoted(output.script_path)}"


def is_available(config: RendererConfig) -> bool:
    return command_succeeds(f'{config.executables.python} -c "import plotly.graph_objects"')


PROFILE = ToolkitProfile(
    toolkit=Toolkit.PLOTLY_PYTHON,
    script_extension=".py",
    checks=(
        forbid_pattern(
            r"\.show\(\s*\)",
            "The script calls `show()`, which opens a browser. Remove it; "
            "the figure is saved automatically.",
        ),
    ),
    capture=capture,
    command=command,
    is_available=is_available,
    supported_formats=frozenset(
        {SaveFormat.PNG, SaveFormat.JPG, SaveFormat.WEBP, SaveFormat.SVG, SaveFormat.PDF}
    ),
)
