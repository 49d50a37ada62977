"""
Toolkit profile record and shared helpers.
"""

from __future__ import annotations

import json
import logging
import re
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, FrozenSet, Mapping, Tuple

from ..core.configs import RendererConfig
from ..core.results import CHECK_PASSED, CheckFailed, CheckResult
from ..core.spec_dataclasses import FigureSpec, OutputSpec, SaveFormat, Toolkit

log = logging.getLogger(__name__)

CheckFunc = Callable[[str], CheckResult]
CaptureFunc = Callable[[FigureSpec, Path, RendererConfig], str]
CommandFunc = Callable[[OutputSpec, RendererConfig], str]
ProbeFunc = Callable[[RendererConfig], bool]
DefaultAttrsFunc = Callable[[RendererConfig], Mapping[str, str]]

ALL_FORMATS: FrozenSet[SaveFormat] = frozenset(SaveFormat)


class CapturePosition(Enum):
    APPEND = "append"
    PREPEND = "prepend"


def no_default_attrs(config: RendererConfig) -> Mapping[str, str]:
    return {}


@dataclass(frozen=True)
class ToolkitProfile:
    """
    Everything the renderer needs to know about one toolkit.

    Attributes:
        toolkit: Toolkit this profile describes
        script_extension: Extension the interpreter expects, leading dot included
        checks: Static validations over raw script text
        capture: Builds the fragment that saves the plot to the figure path
        capture_position: Whether the fragment goes before or after the user script
        command: Builds the shell command line for an OutputSpec
        is_available: Probes whether the toolkit can be run right now
        supported_formats: Save formats the toolkit can write
        default_attrs: Configured render options, merged into a spec's
            ``extra_attrs`` when the spec is built so they are hashed
    """
    toolkit: Toolkit
    script_extension: str
    checks: Tuple[CheckFunc, ...]
    capture: CaptureFunc
    command: CommandFunc
    is_available: ProbeFunc
    capture_position: CapturePosition = CapturePosition.APPEND
    supported_formats: FrozenSet[SaveFormat] = ALL_FORMATS
    default_attrs: DefaultAttrsFunc = no_default_attrs

    def __post_init__(self) -> None:
        if not self.script_extension.startswith("."):
            raise ValueError(
                f"script_extension must start with '.', got {self.script_extension!r}"
            )


def forbid_pattern(pattern: str, message: str) -> CheckFunc:
    """Check that fails with ``message`` when ``pattern`` matches anywhere in the script."""
    compiled = re.compile(pattern, re.MULTILINE)

    def check(script: str) -> CheckResult:
        if compiled.search(script):
            return CheckFailed(message)
        return CHECK_PASSED

    check.__name__ = f"forbid_{compiled.pattern}"
    return check


def quoted(path: Path) -> str:
    """Path quoted as a single shell word."""
    return shlex.quote(str(path))


def single_quoted(text: str) -> str:
    """String literal for languages that escape a quote by doubling it (MATLAB, Octave, gnuplot)."""
    return "'" + str(text).replace("'", "''") + "'"


def double_quoted(text: str) -> str:
    """Backslash-escaped double-quoted literal (R, Mathematica)."""
    return json.dumps(str(text), ensure_ascii=False)


def executable_on_path(executable: str) -> bool:
    return shutil.which(executable) is not None


def command_succeeds(command: str) -> bool:
    """Run ``command`` in a shell and report whether it exits with status 0."""
    try:
        proc = subprocess.run(
            command,
            shell=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        log.debug("Availability probe `%s` could not be spawned: %s", command, exc)
        return False
    return proc.returncode == 0
