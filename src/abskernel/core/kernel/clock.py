from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class LogicalClock:
    """
    Logical step counter of a kernel.

    Advanced once per excite call, never per pulse round. History entries
    are stamped with the value current at recording time.
    """

    value: int = 0

    def advance(self) -> int:
        self.value += 1
        return self.value
