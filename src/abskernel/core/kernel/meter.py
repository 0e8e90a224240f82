from __future__ import annotations

import structlog

from abskernel.core.kernel.errors import ConstraintViolation

log = structlog.get_logger()


class UnitMeter:
    """
    Lifetime unit budget.

    consume() charges first and checks second: the total is never rolled
    back, so once the ceiling is crossed every later charge fails as well.
    Callers must consume before mutating anything for the same operation.
    """

    def __init__(self, *, ceiling: int) -> None:
        if ceiling <= 0:
            raise ValueError("ceiling must be > 0")
        self._ceiling = ceiling
        self._used = 0

    @property
    def ceiling(self) -> int:
        return self._ceiling

    @property
    def used(self) -> int:
        return self._used

    @property
    def remaining(self) -> int:
        return max(0, self._ceiling - self._used)

    @property
    def exhausted(self) -> bool:
        return self._used >= self._ceiling

    def consume(self, units: int = 1) -> None:
        if units <= 0:
            raise ValueError("units must be > 0")

        self._used += units
        if self._used > self._ceiling:
            log.warning("meter.exhausted", used=self._used, ceiling=self._ceiling)
            raise ConstraintViolation(used=self._used, ceiling=self._ceiling)
