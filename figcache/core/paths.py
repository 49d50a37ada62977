"""
Content-addressed paths for scripts, figures and transcripts.

All functions here are pure: no I/O and no randomness, so identical
inputs map to identical paths in every process.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..utils.hash_utils import hash_fields, hash_text
from .configs import RendererConfig
from .render_context import RenderContext
from .spec_dataclasses import FigureSpec, OutputSpec


def _normalize(path: Path) -> Path:
    return Path(os.path.normpath(str(path)))


def figure_hash(spec: FigureSpec) -> str:
    return hash_fields(spec.hash_fields())


def figure_path(spec: FigureSpec) -> Path:
    """``<directory>/<content hash>.<format extension>``"""
    return _normalize(spec.directory / (figure_hash(spec) + spec.save_format.extension))


def temp_dir(config: RendererConfig) -> Path:
    if config.tmp_dir:
        return Path(config.tmp_dir)
    return Path(os.path.realpath(tempfile.gettempdir()))


def script_path(spec: FigureSpec, ctx: RenderContext) -> Path:
    """
    Path of the instrumented script for ``spec``.

    Named from the script hash so that identical scripts share one file
    and unrelated concurrent requests never collide.
    """
    ext = ctx.profile(spec.toolkit).script_extension
    name = f"{ctx.config.script_prefix}{hash_text(spec.script)}{ext}"
    return temp_dir(ctx.config) / name


def transcript_path(fig_path: Path, extension: str = ".txt") -> Path:
    return _normalize(Path(fig_path).with_suffix(extension))


def output_spec(spec: FigureSpec, ctx: RenderContext) -> OutputSpec:
    return OutputSpec(
        spec=spec,
        script_path=script_path(spec, ctx),
        figure_path=figure_path(spec),
    )
