from __future__ import annotations

from enum import Enum
from typing import Any, Callable, TypeAlias


class Signal(Enum):
    """
    Explicit markers used where a plain value would be ambiguous.

    - ABSENT: returned by lookups for identifiers that were never defined
    - NO_UPDATE: returned by a transition to leave the left state untouched
    """

    ABSENT = "absent"
    NO_UPDATE = "no_update"

    def __repr__(self) -> str:
        return self.name


ABSENT = Signal.ABSENT
NO_UPDATE = Signal.NO_UPDATE

# Draw function handed to transitions: each call yields a float in [0, 1)
Draw: TypeAlias = Callable[[], float]

# (left value, right value, draw) -> new left value | NO_UPDATE
Transition: TypeAlias = Callable[[Any, Any, Draw], Any]
