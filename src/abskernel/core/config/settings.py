from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Global application-level configuration.

    This class is the single source of truth for:
    - environment selection
    - logging behavior
    - default kernel constraints
    - reproducibility defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="ABSK_",
        env_file=".env",
        extra="ignore",
    )

    # ---- Environment -------------------------------------------------

    env: Literal["local", "staging", "prod"] = "local"

    # ---- Logging -----------------------------------------------------

    log_level: str = "INFO"

    # ---- Kernel constraints -----------------------------------------

    max_units: int = Field(
        default=1000,
        gt=0,
        description="Lifetime unit budget of a kernel",
    )

    max_depth: int = Field(
        default=32,
        ge=0,
        description="Excitation depth ceiling",
    )

    pulse_size: int = Field(
        default=1,
        gt=0,
        description="Pulse rounds per excite call",
    )

    # ---- Reproducibility --------------------------------------------

    # Default seed (can be overridden per kernel)
    default_seed: int = Field(
        default=0,
        ge=0,
        le=0xFFFFFFFF,
        description="Default generator seed for reproducibility",
    )


# Singleton settings object
settings = AppSettings()
