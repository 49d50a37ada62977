"""
Renderer configuration dataclasses.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class ExecutablesConfig:
    """
    Executables used to run each toolkit.

    Attributes:
        python: Interpreter for matplotlib and plotly scripts
        matlab: MATLAB executable
        mathematica: Mathematica kernel (``math`` or ``wolframscript``)
        octave: GNU Octave executable
        rscript: Rscript executable for ggplot2
        gnuplot: gnuplot executable
    """
    python: str = "python"
    matlab: str = "matlab"
    mathematica: str = "math"
    octave: str = "octave"
    rscript: str = "Rscript"
    gnuplot: str = "gnuplot"


@dataclass
class MatplotlibConfig:
    tight_bbox: bool = False
    transparent: bool = False


@dataclass
class RendererConfig:
    """
    Renderer configuration

    Attributes:
        tmp_dir: Directory for instrumented scripts; system temp dir when None
        script_prefix: File name prefix of instrumented scripts
        transcript_extension: Extension of the persisted source transcript
        working_dir: Working directory of spawned processes; cwd when None
        log_output: Log captured process output on failure
        default_directory: Output directory when a figure does not name one
        default_format: Save format when a figure does not name one
        default_dpi: Resolution when a figure does not name one
    """
    tmp_dir: Optional[str] = None
    script_prefix: str = "figcache_"
    transcript_extension: str = ".txt"
    working_dir: Optional[str] = None
    log_output: bool = True
    default_directory: str = "plots"
    default_format: str = "png"
    default_dpi: int = 80
    executables: ExecutablesConfig = field(default_factory=ExecutablesConfig)
    matplotlib: MatplotlibConfig = field(default_factory=MatplotlibConfig)

    def __post_init__(self) -> None:
        if not self.script_prefix:
            raise ValueError("script_prefix must not be empty")
        if not self.transcript_extension.startswith("."):
            raise ValueError(
                f"transcript_extension must start with '.', got {self.transcript_extension!r}"
            )
        if self.default_dpi <= 0:
            raise ValueError(f"default_dpi must be > 0, got {self.default_dpi}")
        if isinstance(self.executables, dict):
            self.executables = ExecutablesConfig(**self.executables)
        if isinstance(self.matplotlib, dict):
            self.matplotlib = MatplotlibConfig(**self.matplotlib)

    @property
    def cwd(self) -> Optional[Path]:
        return Path(self.working_dir) if self.working_dir else None
