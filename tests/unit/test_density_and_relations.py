from __future__ import annotations

from abskernel.core.kernel.density import DensityStore
from abskernel.core.kernel.relations import Relation, RelationRegistry
from abskernel.core.kernel.signals import ABSENT, NO_UPDATE


def test_get_undefined_returns_absent() -> None:
    store = DensityStore()
    assert store.get("missing") is ABSENT
    assert "missing" not in store


def test_define_overwrites_and_keeps_insertion_order() -> None:
    store = DensityStore()
    store.define("A", 1)
    store.define("B", 2)
    store.define("A", 5)

    assert store.get("A") == 5
    assert list(store.ids()) == ["A", "B"]
    assert len(store) == 2


def test_none_is_a_defined_value() -> None:
    store = DensityStore()
    store.define("A", None)
    assert store.get("A") is None
    assert "A" in store


def test_snapshot_is_a_detached_copy() -> None:
    store = DensityStore()
    store.define("A", 1)

    snap = store.snapshot()
    snap["A"] = 99
    snap["Z"] = 0

    assert store.get("A") == 1
    assert "Z" not in store


def test_structurally_identical_relations_are_distinct() -> None:
    def fn(a, b, draw):
        return NO_UPDATE

    registry = RelationRegistry()
    r1 = registry.add(Relation(left="A", right="B", transition=fn))
    r2 = registry.add(Relation(left="A", right="B", transition=fn))

    assert r1 is not r2
    assert r1 != r2
    assert len(registry) == 2
    assert list(registry) == [r1, r2]


def test_registry_iterates_in_registration_order() -> None:
    registry = RelationRegistry()
    added = [
        registry.add(Relation(left=name, right="X", transition=lambda a, b, d: a))
        for name in ("C", "A", "B")
    ]
    assert [r.left for r in registry] == ["C", "A", "B"]
    assert list(registry) == added


def test_signals_have_readable_repr() -> None:
    assert repr(ABSENT) == "ABSENT"
    assert repr(NO_UPDATE) == "NO_UPDATE"
