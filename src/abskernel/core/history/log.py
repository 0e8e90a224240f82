from __future__ import annotations

import copy
from typing import Any

from abskernel.core.history.entries import EntryType, HistoryEntry
from abskernel.core.kernel.clock import LogicalClock


def clone_value(value: Any) -> Any:
    """
    Structural clone of plain trace data.

    dicts and lists are rebuilt recursively, tuples come back as lists
    (trace data is JSON-shaped). Scalars are returned as-is; anything else
    is deep-copied.
    """
    if isinstance(value, dict):
        return {k: clone_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [clone_value(v) for v in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return copy.deepcopy(value)


class HistoryLog:
    """
    Append-only trace of kernel operations.

    Payloads are cloned on the way in and on the way out, so neither the
    recording caller nor a replay consumer can alter recorded entries.
    """

    def __init__(self, *, clock: LogicalClock) -> None:
        self._clock = clock
        self._entries: list[HistoryEntry] = []

    def record(self, entry_type: EntryType, payload: Any) -> HistoryEntry:
        entry = HistoryEntry(t=self._clock.value, type=entry_type, payload=clone_value(payload))
        self._entries.append(entry)
        return entry

    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def replay(self) -> list[dict[str, Any]]:
        return [clone_value(e.to_dict()) for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)
