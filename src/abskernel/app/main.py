from __future__ import annotations

from typing import Any

import structlog

from abskernel.core.config.settings import settings
from abskernel.core.history.codec import trace_digest
from abskernel.core.kernel.config import KernelConfig
from abskernel.core.kernel.kernel import Kernel
from abskernel.core.kernel.signals import NO_UPDATE, Draw
from abskernel.core.logging.setup import bind_context, clear_context, configure_logging

log = structlog.get_logger()

DEMO_CONFIG = KernelConfig(max_units=200, pulse_size=1, seed=42)


def _accumulate(a: Any, b: Any, draw: Draw) -> Any:
    # constrained, deterministic transition
    if draw() > 0.5:
        return a + b
    return NO_UPDATE


def run_demo(config: KernelConfig = DEMO_CONFIG) -> tuple[dict[str, Any], list[dict[str, Any]]]:
    """
    Two states, one relation, two excitations, one observation.

    Returns (observation, history).
    """
    kernel = Kernel(config)

    kernel.define_state("A", 1)
    kernel.define_state("B", 2)

    kernel.relate("A", "B", _accumulate)

    kernel.excite()
    kernel.excite()

    observation = kernel.observe()
    return observation, kernel.replay()


def main() -> None:
    configure_logging(level=settings.log_level)
    bind_context(component="demo", env=settings.env)

    try:
        observation, history = run_demo()

        log.info("demo.observation", observation=observation)
        log.info("demo.history", history=history, digest=trace_digest(history))
    finally:
        clear_context()


if __name__ == "__main__":
    main()
