from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from abskernel.core.history.log import HistoryLog
from abskernel.core.kernel.clock import LogicalClock
from abskernel.core.kernel.config import KernelConfig
from abskernel.core.kernel.density import DensityStore
from abskernel.core.kernel.excitation import ExcitationEngine
from abskernel.core.kernel.meter import UnitMeter
from abskernel.core.kernel.relations import Relation, RelationRegistry
from abskernel.core.kernel.rng import DeterministicGenerator
from abskernel.core.kernel.signals import Transition

if TYPE_CHECKING:
    from abskernel.core.config.settings import AppSettings

log = structlog.get_logger()


class Kernel:
    """
    Deterministic, budget-bounded state-transition kernel.

    Every consuming operation charges the meter before it touches state or
    history, so a call rejected with ConstraintViolation leaves no trace.
    Each instance owns its store, relations, meter, generator, clock and log.
    """

    def __init__(self, config: KernelConfig | None = None) -> None:
        self._config = config if config is not None else KernelConfig()

        self._clock = LogicalClock()
        self._meter = UnitMeter(ceiling=self._config.max_units)
        self._density = DensityStore()
        self._relations = RelationRegistry()
        self._history = HistoryLog(clock=self._clock)
        self._generator = DeterministicGenerator(self._config.seed)

        self._excitation = ExcitationEngine(
            config=self._config,
            density=self._density,
            relations=self._relations,
            meter=self._meter,
            generator=self._generator,
            history=self._history,
            clock=self._clock,
        )

        log.debug("kernel.created", config_hash=self._config.config_hash())

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "Kernel":
        return cls(KernelConfig.from_settings(settings))

    @property
    def config(self) -> KernelConfig:
        return self._config

    @property
    def clock(self) -> int:
        return self._clock.value

    @property
    def units_used(self) -> int:
        return self._meter.used

    @property
    def units_remaining(self) -> int:
        return self._meter.remaining

    # ---- Density -----------------------------------------------------

    def define_state(self, state_id: str, value: Any) -> None:
        self._meter.consume(1)
        self._density.define(state_id, value)
        self._history.record("define", {"id": state_id, "value": value})
        log.debug("kernel.state_defined", state_id=state_id, units_used=self._meter.used)

    def get_state(self, state_id: str) -> Any:
        return self._density.get(state_id)

    # ---- Relations ---------------------------------------------------

    def relate(self, left: str, right: str, transition: Transition) -> None:
        if not callable(transition):
            raise TypeError("transition must be callable")

        self._meter.consume(1)
        self._relations.add(Relation(left=left, right=right, transition=transition))
        self._history.record("relate", {"a": left, "b": right})
        log.debug("kernel.relation_added", left=left, right=right, relations=len(self._relations))

    # ---- Excitation --------------------------------------------------

    def excite(self, depth: int = 0) -> None:
        self._excitation.excite(depth)

    # ---- Observation -------------------------------------------------

    def observe(self) -> dict[str, Any]:
        self._meter.consume(1)
        snapshot = self._density.snapshot()
        self._history.record("observe", snapshot)
        log.debug("kernel.observed", states=len(snapshot), clock=self._clock.value)
        return snapshot

    # ---- Replay ------------------------------------------------------

    def replay(self) -> list[dict[str, Any]]:
        return self._history.replay()
