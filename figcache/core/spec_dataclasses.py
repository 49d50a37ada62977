"""
Figure request dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Mapping, Optional, Tuple, Union


class Toolkit(str, Enum):
    """Supported plotting engines."""
    MATPLOTLIB = "matplotlib"
    PLOTLY_PYTHON = "plotly_python"
    MATLAB = "matlab"
    MATHEMATICA = "mathematica"
    OCTAVE = "octave"
    GGPLOT2 = "ggplot2"
    GNUPLOT = "gnuplot"

    @classmethod
    def from_name(cls, name: str) -> "Toolkit":
        key = str(name).strip().lower()
        for item in cls:
            if item.value == key:
                return item
        raise ValueError(
            f"Unknown toolkit '{name}'. Supported toolkits: {[item.value for item in cls]}"
        )


_FORMAT_ALIASES = {"jpeg": "jpg", "tiff": "tif"}


class SaveFormat(str, Enum):
    """Output image formats."""
    PNG = "png"
    PDF = "pdf"
    SVG = "svg"
    JPG = "jpg"
    EPS = "eps"
    GIF = "gif"
    TIF = "tif"
    WEBP = "webp"

    @property
    def extension(self) -> str:
        return "." + self.value

    @classmethod
    def from_name(cls, name: str) -> "SaveFormat":
        key = str(name).strip().lower().lstrip(".")
        key = _FORMAT_ALIASES.get(key, key)
        for item in cls:
            if item.value == key:
                return item
        raise ValueError(
            f"Unknown save format '{name}'. Supported formats: {[item.value for item in cls]}"
        )


Attrs = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def _as_attr_pairs(attrs: Attrs) -> Tuple[Tuple[str, str], ...]:
    items = attrs.items() if isinstance(attrs, Mapping) else attrs
    return tuple(sorted((str(k), str(v)) for k, v in items))


@dataclass(frozen=True)
class FigureSpec:
    """
    One figure request.

    Attributes:
        toolkit: Plotting engine that runs ``script``
        script: Raw user script text
        save_format: Output image format
        directory: Output directory for the rendered artifact
        dpi: Render resolution, part of the content hash
        extra_attrs: Toolkit-specific render options as sorted (key, value) pairs,
            part of the content hash
        caption: Presentation only
        with_source: Presentation only
        block_attrs: Presentation only
    """
    toolkit: Toolkit
    script: str
    save_format: SaveFormat
    directory: Path
    dpi: int = 80
    extra_attrs: Tuple[Tuple[str, str], ...] = ()
    caption: str = ""
    with_source: bool = False
    block_attrs: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "toolkit", Toolkit(self.toolkit))
        object.__setattr__(self, "save_format", SaveFormat(self.save_format))
        object.__setattr__(self, "directory", Path(self.directory))
        object.__setattr__(self, "extra_attrs", _as_attr_pairs(self.extra_attrs))
        object.__setattr__(self, "block_attrs", tuple((str(k), str(v)) for k, v in self.block_attrs))
        if self.dpi <= 0:
            raise ValueError(f"dpi must be > 0, got {self.dpi}")

    def attr(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Value of one render option, or ``default`` when unset."""
        return dict(self.extra_attrs).get(key, default)

    def hash_fields(self) -> dict:
        """Fields that determine the rendered artifact."""
        return {
            "toolkit": self.toolkit.value,
            "script": self.script,
            "save_format": self.save_format.value,
            "dpi": int(self.dpi),
            "extra_attrs": dict(self.extra_attrs),
        }


@dataclass(frozen=True)
class OutputSpec:
    """FigureSpec together with its computed script and figure paths."""
    spec: FigureSpec
    script_path: Path
    figure_path: Path
