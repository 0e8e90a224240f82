from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

EntryType = Literal["define", "relate", "excite", "observe"]


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """
    One recorded kernel operation.

    - t: clock value at recording time
    - type: operation kind
    - payload: operation-specific plain data (owned by the log)
    """

    t: int
    type: EntryType
    payload: Any

    def to_dict(self) -> dict[str, Any]:
        return {"t": self.t, "type": self.type, "payload": self.payload}
