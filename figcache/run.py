import logging
from pathlib import Path

import hydra
from omegaconf import DictConfig, OmegaConf
from hydra.core.hydra_config import HydraConfig

from .batch.report import RenderRecord, toolkit_availability, write_report
from .bootstrap import build_runtime
from .core.results import ScriptSuccess, describe_result


log = logging.getLogger(__name__)


def _report_toolkits(runtime) -> None:
    for name, available in sorted(toolkit_availability(runtime.context).items()):
        log.info("  %-14s %s", name, "available" if available else "not available")


def _render(runtime, output_dir: Path) -> list[RenderRecord]:
    results = runtime.executor.map(runtime.figures, runtime.context)
    records = [RenderRecord(spec=spec, result=result) for spec, result in zip(runtime.figures, results)]
    for record in records:
        if not isinstance(record.result, ScriptSuccess):
            log.warning("%s figure failed: %s", record.spec.toolkit.value, describe_result(record.result))
    write_report(records, output_dir, runtime.context)
    return records


@hydra.main(config_path="configs", config_name="config", version_base="1.2")
def main(cfg: DictConfig) -> None:
    log.info("Configuration:\n%s", OmegaConf.to_yaml(cfg))

    runtime = build_runtime(cfg)
    if runtime.task == "toolkits":
        _report_toolkits(runtime)
        return

    log.info("Rendering %d figure(s)", len(runtime.figures))
    output_dir = Path(HydraConfig.get().runtime.output_dir)
    _render(runtime, output_dir)


if __name__ == "__main__":
    main()
