"""
figcache - content-addressed execution of plotting scripts.
"""
from .core import (
    FigureSpec,
    OutputSpec,
    RenderContext,
    RendererConfig,
    SaveFormat,
    ScriptChecksFailed,
    ScriptFailure,
    ScriptResult,
    ScriptSuccess,
    Toolkit,
    ToolkitNotInstalled,
    figure_path,
    run_script_if_necessary,
    transcript_path,
)
from .toolkits import DEFAULT_PROFILES, ToolkitProfile

__all__ = [
    "FigureSpec",
    "OutputSpec",
    "RenderContext",
    "RendererConfig",
    "SaveFormat",
    "ScriptChecksFailed",
    "ScriptFailure",
    "ScriptResult",
    "ScriptSuccess",
    "Toolkit",
    "ToolkitNotInstalled",
    "figure_path",
    "run_script_if_necessary",
    "transcript_path",
    "DEFAULT_PROFILES",
    "ToolkitProfile",
]
