import json
import shutil
import sys
import unittest
import uuid
from pathlib import Path

import polars as pl

from figcache.batch.executor import LocalExecutor, build_executor
from figcache.batch.report import (
    RenderRecord,
    build_report_frame,
    summarize,
    toolkit_availability,
    write_report,
)
from figcache.core.configs import RendererConfig
from figcache.core.paths import figure_path
from figcache.core.render_context import RenderContext
from figcache.core.results import ScriptChecksFailed, ScriptFailure, ScriptSuccess, ToolkitNotInstalled
from figcache.core.spec_dataclasses import FigureSpec, SaveFormat, Toolkit
from figcache.toolkits.base import ToolkitProfile


def _python_profile() -> ToolkitProfile:
    def capture(spec, fig_path, config):
        return f"open(r\"{fig_path}\", \"wb\").write(b\"figure\")"

    def command(output, config):
        return f'"{sys.executable}" "{output.script_path}"'

    return ToolkitProfile(
        toolkit=Toolkit.MATPLOTLIB,
        script_extension=".py",
        checks=(),
        capture=capture,
        command=command,
        is_available=lambda config: True,
    )


class TestRenderReport(unittest.TestCase):
    def _records(self, directory: Path) -> list[RenderRecord]:
        spec = FigureSpec(Toolkit.OCTAVE, "plot(1)", SaveFormat.PNG, directory)
        return [
            RenderRecord(spec, ScriptSuccess()),
            RenderRecord(spec, ScriptChecksFailed("bad")),
            RenderRecord(spec, ScriptFailure("octave x.m", 1)),
            RenderRecord(spec, ToolkitNotInstalled(Toolkit.OCTAVE)),
        ]

    def test_report_frame_columns(self) -> None:
        df = build_report_frame(self._records(Path("out")))
        self.assertEqual(df.height, 4)
        self.assertEqual(
            df["status"].to_list(),
            ["success", "checks_failed", "failure", "toolkit_not_installed"],
        )
        failure = df.filter(pl.col("status") == "failure")
        self.assertEqual(failure["exit_code"].to_list(), [1])
        self.assertEqual(failure["command"].to_list(), ["octave x.m"])
        self.assertTrue(df["transcript_path"][0].endswith(".txt"))

    def test_empty_report_has_schema(self) -> None:
        df = build_report_frame([])
        self.assertEqual(df.height, 0)
        self.assertIn("figure_path", df.columns)

    def test_write_report_outputs_csv_and_manifest(self) -> None:
        output_dir = Path("outputs") / f"test_tmp_{uuid.uuid4().hex}"
        try:
            paths = write_report(self._records(output_dir), output_dir, RenderContext())
            self.assertEqual([path.name for path in paths], ["render_summary.csv", "manifest.json"])
            payload = json.loads((output_dir / "manifest.json").read_text(encoding="utf-8"))
            self.assertEqual(
                payload["summary"],
                {"success": 1, "checks_failed": 1, "failure": 1, "toolkit_not_installed": 1},
            )
            self.assertEqual(len(payload["figures"]), 4)
            self.assertEqual(pl.read_csv(output_dir / "render_summary.csv").height, 4)
        finally:
            shutil.rmtree(output_dir, ignore_errors=True)

    def test_toolkit_availability(self) -> None:
        ctx = RenderContext(profiles={Toolkit.MATPLOTLIB: _python_profile()})
        self.assertEqual(toolkit_availability(ctx), {"matplotlib": True})


class TestExecutor(unittest.TestCase):
    def test_local_executor_renders_in_order(self) -> None:
        tmp_dir = Path("outputs") / f"test_tmp_{uuid.uuid4().hex}"
        try:
            ctx = RenderContext(
                config=RendererConfig(tmp_dir=str(tmp_dir / "scripts")),
                profiles={Toolkit.MATPLOTLIB: _python_profile()},
            )
            specs = [
                FigureSpec(Toolkit.MATPLOTLIB, "a = 1", SaveFormat.PNG, tmp_dir),
                FigureSpec(Toolkit.MATPLOTLIB, "raise SystemExit(5)", SaveFormat.PNG, tmp_dir),
            ]
            results = LocalExecutor().map(specs, ctx)
            self.assertEqual(results[0], ScriptSuccess())
            self.assertIsInstance(results[1], ScriptFailure)
            self.assertEqual(results[1].exit_code, 5)
            self.assertTrue(figure_path(specs[0]).exists())
            self.assertEqual(summarize([RenderRecord(s, r) for s, r in zip(specs, results)])["failure"], 1)
        finally:
            shutil.rmtree(tmp_dir, ignore_errors=True)

    def test_unknown_executor_raises(self) -> None:
        with self.assertRaises(ValueError):
            build_executor("dask")


if __name__ == "__main__":
    unittest.main()
