import unittest
from dataclasses import replace

from figcache.core.classifier import classify
from figcache.core.render_context import RenderContext
from figcache.core.results import ScriptFailure, ScriptSuccess, ToolkitNotInstalled
from figcache.core.spec_dataclasses import Toolkit
from figcache.toolkits import DEFAULT_PROFILES


def _ctx(available: bool, calls: list) -> RenderContext:
    def probe(config) -> bool:
        calls.append(1)
        return available

    profile = replace(DEFAULT_PROFILES[Toolkit.OCTAVE], is_available=probe)
    return RenderContext(profiles={Toolkit.OCTAVE: profile})


class TestClassify(unittest.TestCase):
    def test_zero_exit_is_success_without_probing(self) -> None:
        calls: list = []
        self.assertEqual(classify(0, "octave x.m", Toolkit.OCTAVE, _ctx(False, calls)), ScriptSuccess())
        self.assertEqual(calls, [])

    def test_failure_with_available_toolkit(self) -> None:
        calls: list = []
        result = classify(4, "octave x.m", Toolkit.OCTAVE, _ctx(True, calls))
        self.assertEqual(result, ScriptFailure(command="octave x.m", exit_code=4))
        self.assertEqual(len(calls), 1)

    def test_failure_with_missing_toolkit(self) -> None:
        calls: list = []
        result = classify(127, "octave x.m", Toolkit.OCTAVE, _ctx(False, calls))
        self.assertEqual(result, ToolkitNotInstalled(Toolkit.OCTAVE))

    def test_availability_is_probed_on_every_failure(self) -> None:
        calls: list = []
        ctx = _ctx(True, calls)
        classify(1, "cmd", Toolkit.OCTAVE, ctx)
        classify(1, "cmd", Toolkit.OCTAVE, ctx)
        self.assertEqual(len(calls), 2)


if __name__ == "__main__":
    unittest.main()
