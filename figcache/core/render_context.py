"""
Render context passed through every pipeline step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping

from .configs import RendererConfig
from .spec_dataclasses import Toolkit

if TYPE_CHECKING:
    from ..toolkits.base import ToolkitProfile


def _default_profiles() -> Mapping[Toolkit, "ToolkitProfile"]:
    from ..toolkits import DEFAULT_PROFILES

    return DEFAULT_PROFILES


@dataclass(frozen=True)
class RenderContext:
    config: RendererConfig = field(default_factory=RendererConfig)
    profiles: Mapping[Toolkit, "ToolkitProfile"] = field(default_factory=_default_profiles)

    def profile(self, toolkit: Toolkit) -> "ToolkitProfile":
        try:
            return self.profiles[Toolkit(toolkit)]
        except KeyError:
            raise KeyError(f"No toolkit profile registered for '{Toolkit(toolkit).value}'") from None
