"""
Runtime bootstrap utilities for Hydra configuration instantiation.
"""


from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping

from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

from .batch.executor import BaseExecutor, build_executor
from .core.configs import RendererConfig
from .core.render_context import RenderContext
from .core.spec_dataclasses import FigureSpec, SaveFormat, Toolkit

TASKS = ("render", "toolkits")


@dataclass(frozen=True)
class RuntimeBundle:
    task: str
    context: RenderContext
    executor: BaseExecutor
    figures: List[FigureSpec]


def _require_config_nodes(cfg: DictConfig, paths: list[str]) -> None:
    missing = [path for path in paths if OmegaConf.select(cfg, path, default=None) is None]
    if missing:
        raise ValueError(f"Missing required Hydra config nodes: {missing}")


def _require_task(cfg: DictConfig) -> str:
    task = str(OmegaConf.select(cfg, "task", default="render") or "render").strip().lower()
    if task not in TASKS:
        raise ValueError(f"Unknown task '{task}'. Supported tasks: {list(TASKS)}")
    return task


def _read_script(entry: Mapping[str, Any], index: int) -> str:
    script = entry.get("script")
    script_file = entry.get("script_file")
    if script is not None and script_file is not None:
        raise ValueError(f"figures[{index}] sets both 'script' and 'script_file'; use one.")
    if script_file is not None:
        return Path(str(script_file)).read_text(encoding="utf-8")
    if script is None or not str(script).strip():
        raise ValueError(f"figures[{index}] needs a non-empty 'script' or a 'script_file'.")
    return str(script)


def _attr_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def build_figure_spec(entry: Mapping[str, Any], ctx: RenderContext, index: int = 0) -> FigureSpec:
    """
    Build a FigureSpec from one ``figures`` entry, filling renderer defaults.

    Configured render options become part of ``extra_attrs`` so that they
    are hashed into the figure path.
    """
    config = ctx.config
    if entry.get("toolkit") is None:
        raise ValueError(f"figures[{index}] is missing required key 'toolkit'.")
    toolkit = Toolkit.from_name(entry["toolkit"])
    extra_attrs = dict(ctx.profile(toolkit).default_attrs(config))
    extra_attrs.update(
        {str(k): _attr_value(v) for k, v in dict(entry.get("extra_attrs") or {}).items()}
    )
    return FigureSpec(
        toolkit=toolkit,
        script=_read_script(entry, index),
        save_format=SaveFormat.from_name(entry.get("format") or config.default_format),
        directory=Path(str(entry.get("directory") or config.default_directory)),
        dpi=int(entry.get("dpi") or config.default_dpi),
        extra_attrs=extra_attrs,
        caption=str(entry.get("caption") or ""),
        with_source=bool(entry.get("with_source", False)),
    )


def build_runtime(cfg: DictConfig) -> RuntimeBundle:
    _require_config_nodes(cfg, ["renderer", "executor", "figures"])
    task = _require_task(cfg)

    config: RendererConfig = instantiate(cfg.renderer, _convert_="all")
    context = RenderContext(config=config)

    executor_cfg = OmegaConf.to_container(cfg.executor, resolve=True)
    kind = executor_cfg.pop("kind", "local")
    executor = build_executor(kind, **{k: v for k, v in executor_cfg.items() if v is not None})

    figures_cfg = OmegaConf.to_container(cfg.figures, resolve=True)
    if not isinstance(figures_cfg, list):
        raise ValueError("Hydra config value 'figures' must be a list.")
    figures = [build_figure_spec(entry, context, index) for index, entry in enumerate(figures_cfg)]
    if task == "render" and not figures:
        raise ValueError("Nothing to render: 'figures' is empty.")

    return RuntimeBundle(task=task, context=context, executor=executor, figures=figures)
