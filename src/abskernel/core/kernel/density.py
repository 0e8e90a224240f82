from __future__ import annotations

from typing import Any, Iterator

from abskernel.core.kernel.signals import ABSENT


class DensityStore:
    """
    Current value of every defined state identifier.

    - define() inserts or replaces
    - get() returns ABSENT for identifiers never defined (no defaults)
    - there is no removal
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def define(self, state_id: str, value: Any) -> None:
        self._values[state_id] = value

    def get(self, state_id: str) -> Any:
        return self._values.get(state_id, ABSENT)

    def ids(self) -> Iterator[str]:
        return iter(tuple(self._values))

    def snapshot(self) -> dict[str, Any]:
        return dict(self._values)

    def __contains__(self, state_id: object) -> bool:
        return state_id in self._values

    def __len__(self) -> int:
        return len(self._values)
