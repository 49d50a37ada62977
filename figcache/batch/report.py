"""
Render reports: a polars summary table plus a JSON manifest.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Sequence

import polars as pl

from ..core.paths import figure_path, transcript_path
from ..core.render_context import RenderContext
from ..core.results import (
    SCRIPT_RESULT_STATUSES,
    ScriptFailure,
    ScriptResult,
    describe_result,
)
from ..core.spec_dataclasses import FigureSpec

log = logging.getLogger(__name__)

REPORT_SCHEMA = {
    "figure_path": pl.Utf8,
    "transcript_path": pl.Utf8,
    "toolkit": pl.Utf8,
    "save_format": pl.Utf8,
    "status": pl.Utf8,
    "message": pl.Utf8,
    "command": pl.Utf8,
    "exit_code": pl.Int64,
}


@dataclass(frozen=True)
class RenderRecord:
    spec: FigureSpec
    result: ScriptResult

    def to_dict(self, transcript_extension: str = ".txt") -> dict:
        fig_path = figure_path(self.spec)
        command: Optional[str] = None
        exit_code: Optional[int] = None
        if isinstance(self.result, ScriptFailure):
            command = self.result.command
            exit_code = self.result.exit_code
        return {
            "figure_path": str(fig_path),
            "transcript_path": str(transcript_path(fig_path, transcript_extension)),
            "toolkit": self.spec.toolkit.value,
            "save_format": self.spec.save_format.value,
            "status": self.result.status,
            "message": describe_result(self.result),
            "command": command,
            "exit_code": exit_code,
        }


def build_report_frame(records: Sequence[RenderRecord], transcript_extension: str = ".txt") -> pl.DataFrame:
    rows = [record.to_dict(transcript_extension) for record in records]
    if not rows:
        return pl.DataFrame(schema=REPORT_SCHEMA)
    return pl.DataFrame(rows, schema=REPORT_SCHEMA)


def summarize(records: Sequence[RenderRecord]) -> Dict[str, int]:
    counts = {status: 0 for status in SCRIPT_RESULT_STATUSES}
    for record in records:
        counts[record.result.status] += 1
    return counts


def write_manifest(output_path: Path, records: Sequence[RenderRecord], transcript_extension: str = ".txt") -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "generated_at_utc": datetime.now(timezone.utc).isoformat(),
        "summary": summarize(records),
        "figures": [record.to_dict(transcript_extension) for record in records],
    }
    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return output_path


def write_report(records: Sequence[RenderRecord], output_dir: Path, ctx: RenderContext) -> list[Path]:
    """Write ``render_summary.csv`` and ``manifest.json`` into ``output_dir``."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    ext = ctx.config.transcript_extension

    csv_path = output_dir / "render_summary.csv"
    build_report_frame(records, ext).write_csv(csv_path)
    log.info("  - Saved: %s", csv_path)

    manifest_path = write_manifest(output_dir / "manifest.json", records, ext)
    log.info("  - Saved: %s", manifest_path)

    counts = summarize(records)
    log.info(
        "  Figures: %d success, %d checks failed, %d failed, %d toolkit missing",
        counts["success"],
        counts["checks_failed"],
        counts["failure"],
        counts["toolkit_not_installed"],
    )
    return [csv_path, manifest_path]


def toolkit_availability(ctx: RenderContext) -> Dict[str, bool]:
    return {
        toolkit.value: bool(profile.is_available(ctx.config))
        for toolkit, profile in ctx.profiles.items()
    }
