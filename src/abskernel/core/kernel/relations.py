from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from abskernel.core.kernel.signals import Transition


@dataclass(frozen=True, slots=True, eq=False)
class Relation:
    """
    Pairwise transition rule: the transition reads (left, right) and may
    overwrite left.

    Equality is identity: two structurally identical relations are still
    two relations.
    """

    left: str
    right: str
    transition: Transition


class RelationRegistry:
    """
    Registered relations in registration order.

    Iteration order is the application order during excitation.
    """

    def __init__(self) -> None:
        self._relations: list[Relation] = []

    def add(self, relation: Relation) -> Relation:
        self._relations.append(relation)
        return relation

    def __iter__(self) -> Iterator[Relation]:
        return iter(self._relations)

    def __len__(self) -> int:
        return len(self._relations)
