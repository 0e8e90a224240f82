from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from abskernel.core.config.settings import AppSettings


class KernelConfig(BaseModel):
    """
    Immutable construction config of a single kernel.

    max_units / max_depth / pulse_size are the constraints enforced for the
    whole lifetime of the kernel; seed feeds the deterministic generator.
    Defaults never read the environment, so two kernels built from
    KernelConfig() always behave identically.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_units: int = Field(default=1000, gt=0, description="Lifetime unit budget")
    max_depth: int = Field(default=32, ge=0, description="Excitation depth ceiling (reserved)")
    pulse_size: int = Field(default=1, gt=0, description="Pulse rounds per excite call")
    seed: int = Field(default=0, ge=0, le=0xFFFFFFFF, description="Unsigned 32-bit generator seed")

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "KernelConfig":
        return cls(
            max_units=settings.max_units,
            max_depth=settings.max_depth,
            pulse_size=settings.pulse_size,
            seed=settings.default_seed,
        )

    def config_hash(self) -> str:
        """
        Deterministic hash of the config. Two kernels with the same hash and
        the same call sequence produce the same trace.
        """
        blob = json.dumps(self.model_dump(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(blob.encode("utf-8")).hexdigest()
