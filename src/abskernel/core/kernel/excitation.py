from __future__ import annotations

import structlog

from abskernel.core.history.log import HistoryLog
from abskernel.core.kernel.clock import LogicalClock
from abskernel.core.kernel.config import KernelConfig
from abskernel.core.kernel.density import DensityStore
from abskernel.core.kernel.errors import ConstraintViolation
from abskernel.core.kernel.meter import UnitMeter
from abskernel.core.kernel.relations import RelationRegistry
from abskernel.core.kernel.rng import DeterministicGenerator
from abskernel.core.kernel.signals import ABSENT, NO_UPDATE

log = structlog.get_logger()


class ExcitationEngine:
    """
    Stepping algorithm of the kernel.

    One excite() call runs pulse_size rounds. Each round is charged one unit
    up front, then applies every relation in registration order:
      - relations with an undefined side are skipped silently
      - a NO_UPDATE result changes nothing and records nothing
      - any other result overwrites the left state and records an excite entry

    The clock advances once per call, after the rounds. A budget failure
    still advances it; an exception raised by a transition does not.
    """

    def __init__(
        self,
        *,
        config: KernelConfig,
        density: DensityStore,
        relations: RelationRegistry,
        meter: UnitMeter,
        generator: DeterministicGenerator,
        history: HistoryLog,
        clock: LogicalClock,
    ) -> None:
        self._config = config
        self._density = density
        self._relations = relations
        self._meter = meter
        self._generator = generator
        self._history = history
        self._clock = clock

    def excite(self, depth: int = 0) -> None:
        if depth < 0:
            raise ValueError("depth must be >= 0")

        # reserved for recursive excitation
        if depth > self._config.max_depth:
            log.debug("excitation.depth_exceeded", depth=depth, max_depth=self._config.max_depth)
            return

        updates = 0
        try:
            for _ in range(self._config.pulse_size):
                self._meter.consume(1)
                updates += self._pulse()
        except ConstraintViolation:
            self._clock.advance()
            raise

        tick = self._clock.advance()
        log.debug(
            "excitation.completed",
            clock=tick,
            updates=updates,
            units_used=self._meter.used,
        )

    def _pulse(self) -> int:
        applied = 0
        for relation in self._relations:
            left = self._density.get(relation.left)
            right = self._density.get(relation.right)
            if left is ABSENT or right is ABSENT:
                continue

            result = relation.transition(left, right, self._generator)
            if result is NO_UPDATE:
                continue

            self._density.define(relation.left, result)
            self._history.record("excite", {"a": relation.left, "from": left, "to": result})
            applied += 1
        return applied
