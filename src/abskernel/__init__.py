"""
Deterministic, budget-bounded state-transition kernel.

States evolve under pairwise relations driven by a seeded generator; every
operation is charged against a fixed unit budget and recorded in an
append-only, replayable history.
"""

from abskernel.core.history.codec import encode_trace, trace_digest
from abskernel.core.kernel.config import KernelConfig
from abskernel.core.kernel.errors import ConstraintViolation
from abskernel.core.kernel.kernel import Kernel
from abskernel.core.kernel.signals import ABSENT, NO_UPDATE

__all__ = [
    "ABSENT",
    "NO_UPDATE",
    "ConstraintViolation",
    "Kernel",
    "KernelConfig",
    "encode_trace",
    "trace_digest",
]
