"""
Check and script result types.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Union

from .spec_dataclasses import Toolkit


@dataclass(frozen=True)
class CheckPassed:
    """Identity of check combination."""


@dataclass(frozen=True)
class CheckFailed:
    message: str


CheckResult = Union[CheckPassed, CheckFailed]

CHECK_PASSED = CheckPassed()


def combine_checks(left: CheckResult, right: CheckResult) -> CheckResult:
    """
    Combine two check results.

    ``CheckPassed`` is the identity. Two failures accumulate their messages
    in order, separated by a newline.
    """
    if isinstance(left, CheckPassed):
        return right
    if isinstance(right, CheckPassed):
        return left
    return CheckFailed(f"{left.message}\n{right.message}")


def fold_checks(results: Iterable[CheckResult]) -> CheckResult:
    return reduce(combine_checks, results, CHECK_PASSED)


@dataclass(frozen=True)
class ScriptSuccess:
    status = "success"


@dataclass(frozen=True)
class ScriptChecksFailed:
    message: str
    status = "checks_failed"


@dataclass(frozen=True)
class ScriptFailure:
    command: str
    exit_code: int
    status = "failure"


@dataclass(frozen=True)
class ToolkitNotInstalled:
    toolkit: Toolkit
    status = "toolkit_not_installed"


ScriptResult = Union[ScriptSuccess, ScriptChecksFailed, ScriptFailure, ToolkitNotInstalled]

SCRIPT_RESULT_STATUSES = (
    ScriptSuccess.status,
    ScriptChecksFailed.status,
    ScriptFailure.status,
    ToolkitNotInstalled.status,
)


def describe_result(result: ScriptResult) -> str:
    """Human-readable one-line description of a script result."""
    if isinstance(result, ScriptSuccess):
        return "Figure rendered."
    if isinstance(result, ScriptChecksFailed):
        return f"Script checks failed: {result.message}"
    if isinstance(result, ScriptFailure):
        return f"Command `{result.command}` exited with code {result.exit_code}."
    if isinstance(result, ToolkitNotInstalled):
        return f"Toolkit '{result.toolkit.value}' is not installed or not reachable."
    raise TypeError(f"Unsupported script result: {result!r}")
