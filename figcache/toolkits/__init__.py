"""
Toolkit profiles - one static profile per supported toolkit.
"""
from typing import Mapping

from ..core.spec_dataclasses import Toolkit
from .base import CapturePosition, ToolkitProfile
from . import ggplot2, gnuplot, mathematica, matlab, matplotlib, octave, plotly

DEFAULT_PROFILES: Mapping[Toolkit, ToolkitProfile] = {
    profile.toolkit: profile
    for profile in (
        matplotlib.PROFILE,
        plotly.PROFILE,
        matlab.PROFILE,
        mathematica.PROFILE,
        octave.PROFILE,
        ggplot2.PROFILE,
        gnuplot.PROFILE,
    )
}

__all__ = [
    "CapturePosition",
    "DEFAULT_PROFILES",
    "ToolkitProfile",
]
