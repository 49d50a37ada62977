"""Batch - rendering many figures and reporting on them."""

from .executor import BaseExecutor, LocalExecutor, RayExecutor, build_executor
from .report import (
    RenderRecord,
    build_report_frame,
    summarize,
    toolkit_availability,
    write_manifest,
    write_report,
)

__all__ = [
    "BaseExecutor",
    "LocalExecutor",
    "RayExecutor",
    "build_executor",
    "RenderRecord",
    "build_report_frame",
    "summarize",
    "toolkit_availability",
    "write_manifest",
    "write_report",
]
