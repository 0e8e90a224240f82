"""
Seeded pseudorandom source for excitation.

The mixing steps must stay bit-exact: traces recorded by other ports of the
kernel are only comparable when every implementation draws the same sequence
for the same seed. All arithmetic is unsigned 32-bit (mod 2**32):

    s = s + 0x6D2B79F5
    t = (s ^ (s >> 15)) * (s | 1)
    t = t ^ (t + (t ^ (t >> 7)) * (t | 61))
    u = (t ^ (t >> 14)) / 2**32
"""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_SCALE = 4294967296.0  # 2**32


class DeterministicGenerator:
    """
    Deterministic uniform generator over [0, 1).

    Instances are callable so they can be handed to transitions directly
    as the draw function.
    """

    __slots__ = ("_state", "_draws")

    def __init__(self, seed: int = 0) -> None:
        self._state = seed & _MASK32
        self._draws = 0

    @property
    def draws(self) -> int:
        return self._draws

    def next_float(self) -> float:
        s = (self._state + _INCREMENT) & _MASK32
        self._state = s

        t = ((s ^ (s >> 15)) * (s | 1)) & _MASK32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32

        self._draws += 1
        return ((t ^ (t >> 14)) & _MASK32) / _SCALE

    def __call__(self) -> float:
        return self.next_float()
