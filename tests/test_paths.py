import unittest
from dataclasses import replace
from pathlib import Path

from figcache.core.configs import RendererConfig
from figcache.core.paths import figure_path, output_spec, script_path, temp_dir, transcript_path
from figcache.core.render_context import RenderContext
from figcache.core.spec_dataclasses import FigureSpec, SaveFormat, Toolkit


def _spec(**overrides) -> FigureSpec:
    base = FigureSpec(
        toolkit=Toolkit.MATPLOTLIB,
        script="plot(1,2)",
        save_format=SaveFormat.PNG,
        directory=Path("out"),
    )
    return replace(base, **overrides)


class TestFigurePath(unittest.TestCase):
    def test_figure_path_is_deterministic(self) -> None:
        spec = _spec()
        self.assertEqual(figure_path(spec), figure_path(spec))
        self.assertEqual(figure_path(spec), figure_path(_spec()))

    def test_figure_path_layout(self) -> None:
        path = figure_path(_spec())
        self.assertEqual(path.parent, Path("out"))
        self.assertEqual(path.suffix, ".png")
        self.assertEqual(len(path.stem), 64)

    def test_figure_path_is_normalized(self) -> None:
        self.assertEqual(
            figure_path(_spec(directory=Path("out/sub/../"))),
            figure_path(_spec()),
        )

    def test_different_scripts_map_to_different_paths(self) -> None:
        self.assertNotEqual(
            figure_path(_spec(script="plot(1,2)")),
            figure_path(_spec(script="plot(1,3)")),
        )

    def test_render_fields_change_the_hash(self) -> None:
        reference = figure_path(_spec())
        self.assertNotEqual(reference.stem, figure_path(_spec(toolkit=Toolkit.OCTAVE)).stem)
        self.assertNotEqual(reference.stem, figure_path(_spec(dpi=300)).stem)
        self.assertNotEqual(reference.stem, figure_path(_spec(save_format=SaveFormat.SVG)).stem)
        self.assertNotEqual(reference.stem, figure_path(_spec(extra_attrs={"transparent": "true"})).stem)

    def test_presentation_fields_do_not_change_the_path(self) -> None:
        reference = figure_path(_spec())
        self.assertEqual(reference, figure_path(_spec(caption="A caption", with_source=True)))
        self.assertEqual(reference, figure_path(_spec(block_attrs=(("width", "50%"),))))


class TestScriptAndTranscriptPath(unittest.TestCase):
    def test_transcript_path_replaces_extension(self) -> None:
        fig = figure_path(_spec())
        self.assertEqual(transcript_path(fig), fig.with_suffix(".txt"))
        self.assertEqual(transcript_path(fig, ".src").suffix, ".src")

    def test_script_path_uses_prefix_hash_and_toolkit_extension(self) -> None:
        ctx = RenderContext(config=RendererConfig(tmp_dir="scratch", script_prefix="pre_"))
        path = script_path(_spec(), ctx)
        self.assertEqual(path.parent, Path("scratch"))
        self.assertTrue(path.name.startswith("pre_"))
        self.assertEqual(path.suffix, ".py")

        gnuplot_path = script_path(_spec(toolkit=Toolkit.GNUPLOT), ctx)
        self.assertEqual(gnuplot_path.suffix, ".gp")

    def test_script_path_depends_only_on_script_text(self) -> None:
        ctx = RenderContext()
        self.assertEqual(
            script_path(_spec(dpi=80), ctx),
            script_path(_spec(dpi=200, directory=Path("elsewhere")), ctx),
        )
        self.assertNotEqual(
            script_path(_spec(script="a"), ctx),
            script_path(_spec(script="b"), ctx),
        )

    def test_default_temp_dir_is_system_temp(self) -> None:
        self.assertTrue(temp_dir(RendererConfig()).is_absolute())

    def test_output_spec_combines_paths(self) -> None:
        ctx = RenderContext()
        spec = _spec()
        output = output_spec(spec, ctx)
        self.assertIs(output.spec, spec)
        self.assertEqual(output.figure_path, figure_path(spec))
        self.assertEqual(output.script_path, script_path(spec, ctx))


class TestSpecDataclasses(unittest.TestCase):
    def test_enum_lookup_by_name(self) -> None:
        self.assertIs(Toolkit.from_name("GNUPlot"), Toolkit.GNUPLOT)
        self.assertIs(SaveFormat.from_name("jpeg"), SaveFormat.JPG)
        self.assertIs(SaveFormat.from_name(".svg"), SaveFormat.SVG)
        self.assertEqual(SaveFormat.PDF.extension, ".pdf")

    def test_unknown_names_raise(self) -> None:
        with self.assertRaises(ValueError):
            Toolkit.from_name("bokeh")
        with self.assertRaises(ValueError):
            SaveFormat.from_name("bmp")

    def test_spec_is_hashable_and_immutable(self) -> None:
        spec = _spec(extra_attrs={"transparent": "true", "tight_bbox": "false"})
        self.assertEqual(hash(spec), hash(_spec(extra_attrs={"tight_bbox": "false", "transparent": "true"})))
        self.assertEqual(len({spec, _spec(extra_attrs=[("transparent", "true"), ("tight_bbox", "false")])}), 1)
        self.assertEqual(spec.extra_attrs, (("tight_bbox", "false"), ("transparent", "true")))
        self.assertEqual(spec.attr("transparent"), "true")
        self.assertIsNone(spec.attr("missing"))
        with self.assertRaises(TypeError):
            spec.extra_attrs["dpi"] = "10"  # type: ignore[index]

    def test_invalid_dpi_raises(self) -> None:
        with self.assertRaises(ValueError):
            _spec(dpi=0)


if __name__ == "__main__":
    unittest.main()
