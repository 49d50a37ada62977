"""
Execution backends for rendering many figures.
"""


from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from ..core.cache import run_script_if_necessary
from ..core.render_context import RenderContext
from ..core.results import ScriptResult
from ..core.spec_dataclasses import FigureSpec


class BaseExecutor(ABC):
    @abstractmethod
    def map(self, specs: Sequence[FigureSpec], ctx: RenderContext) -> List[ScriptResult]:
        pass


class LocalExecutor(BaseExecutor):
    """In-process, sequential execution backend."""

    def map(self, specs: Sequence[FigureSpec], ctx: RenderContext) -> List[ScriptResult]:
        return [run_script_if_necessary(spec, ctx) for spec in specs]


class RayExecutor(BaseExecutor):
    """Ray-based distributed execution backend."""

    def __init__(self, address: Optional[str] = None, num_cpus: Optional[int] = None):
        self.address = address
        self.num_cpus = num_cpus
        self._ray = None
        self._render_remote: Any = None

    def init_ray(self) -> None:
        try:
            import ray
        except ImportError as exc:
            raise ImportError("ray is required. Install with: pip install ray") from exc

        self._ray = ray
        init_kwargs = {k: v for k, v in {"num_cpus": self.num_cpus}.items() if v is not None}
        if not ray.is_initialized():
            ray.init(address=self.address, **init_kwargs)

        @ray.remote
        def render_remote(spec, ctx):
            return run_script_if_necessary(spec, ctx)

        self._render_remote = render_remote

    def map(self, specs: Sequence[FigureSpec], ctx: RenderContext) -> List[ScriptResult]:
        if self._ray is None:
            self.init_ray()
        ctx_ref = self._ray.put(ctx)
        refs = [self._render_remote.remote(spec, ctx_ref) for spec in specs]
        return list(self._ray.get(refs))


def build_executor(kind: str, **kwargs: Any) -> BaseExecutor:
    kind = str(kind).strip().lower()
    if kind == "local":
        return LocalExecutor()
    if kind == "ray":
        return RayExecutor(**kwargs)
    raise ValueError(f"Unknown executor '{kind}'. Use 'local' or 'ray'.")
