from __future__ import annotations


class ConstraintViolation(RuntimeError):
    """
    Raised when a kernel operation would push unit consumption past max_units.

    Fatal for the kernel instance: the meter is never rolled back, so every
    later consuming call raises again. Read-only calls keep working.
    """

    def __init__(self, *, used: int, ceiling: int) -> None:
        super().__init__("Execution constraint violated: maxUnits exceeded")
        self.used = used
        self.ceiling = ceiling
