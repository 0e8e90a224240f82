from __future__ import annotations

import pytest
from pydantic import ValidationError

from abskernel.core.config.settings import AppSettings
from abskernel.core.kernel.config import KernelConfig


def test_defaults() -> None:
    cfg = KernelConfig()
    assert (cfg.max_units, cfg.max_depth, cfg.pulse_size, cfg.seed) == (1000, 32, 1, 0)


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_units": 0},
        {"max_depth": -1},
        {"pulse_size": 0},
        {"seed": -1},
        {"seed": 2**32},
        {"unknown": 1},
    ],
)
def test_invalid_config_is_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        KernelConfig(**overrides)


def test_config_is_frozen() -> None:
    cfg = KernelConfig()
    with pytest.raises(ValidationError):
        cfg.max_units = 5  # type: ignore[misc]


def test_config_hash_is_stable_and_sensitive() -> None:
    assert KernelConfig(seed=42).config_hash() == KernelConfig(seed=42).config_hash()
    assert KernelConfig(seed=42).config_hash() != KernelConfig(seed=43).config_hash()


def test_from_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ABSK_MAX_UNITS", "50")
    monkeypatch.setenv("ABSK_PULSE_SIZE", "3")
    monkeypatch.setenv("ABSK_DEFAULT_SEED", "42")

    cfg = KernelConfig.from_settings(AppSettings(_env_file=None))

    assert cfg.max_units == 50
    assert cfg.pulse_size == 3
    assert cfg.seed == 42
    assert cfg.max_depth == 32
