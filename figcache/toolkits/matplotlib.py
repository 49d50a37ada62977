"""
matplotlib toolkit profile.
"""

from pathlib import Path
from typing import Mapping

from ..core.configs import RendererConfig
from ..core.spec_dataclasses import FigureSpec, OutputSpec, SaveFormat, Toolkit
from .base import ALL_FORMATS, ToolkitProfile, command_succeeds, forbid_pattern, quoted

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(spec: FigureSpec, key: str) -> bool:
    return str(spec.attr(key, "false")).strip().lower() in _TRUTHY


def default_attrs(config: RendererConfig) -> Mapping[str, str]:
    return {
        "tight_bbox": str(config.matplotlib.tight_bbox).lower(),
        "transparent": str(config.matplotlib.transparent).lower(),
    }


def capture(spec: FigureSpec, figure_path: Path, config: RendererConfig) -> str:
    bbox = repr("tight") if _flag(spec, "tight_bbox") else "None"
    return "\n".join(
        [
            "import matplotlib.pyplot as plt",
            f"plt.savefig({str(figure_path)!r}, dpi={spec.dpi}, "
            f"bbox_inches={bbox}, transparent={_flag(spec, 'transparent')})",
        ]
    )


def command(output: OutputSpec, config: RendererConfig) -> str:
    return f"{config.executables.python} {quoted(output.script_path)}"


def is_available(config: RendererConfig) -> bool:
    return command_succeeds(f'{config.executables.python} -c "import matplotlib"')


PROFILE = ToolkitProfile(
    toolkit=Toolkit.MATPLOTLIB,
    script_extension=".py",
    checks=(
        forbid_pattern(
            r"\.show\(\s*\)",
            "The script calls `show()`, which blocks rendering. Remove it; "
            "the figure is saved automatically.",
        ),
    ),
    capture=capture,
    command=command,
    is_available=is_available,
    supported_formats=ALL_FORMATS - {SaveFormat.GIF},
    default_attrs=default_attrs,
)
