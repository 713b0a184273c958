"""Arithmetic kernel: own iterative implementations and numpy pass-throughs."""

from easekit.core.math.kernel import get_kernel
from easekit.core.math.numeric import (
    REAL_TYPES,
    epsilon,
    euler,
    infinity,
    quiet_nan,
    real_type,
    resolve_real_type,
)
from easekit.core.math.own import equal_fp, fabs
from easekit.core.math.protocols import MathBackend, MathKernel

__all__ = [
    "REAL_TYPES",
    "MathBackend",
    "MathKernel",
    "epsilon",
    "equal_fp",
    "euler",
    "fabs",
    "get_kernel",
    "infinity",
    "quiet_nan",
    "real_type",
    "resolve_real_type",
]
