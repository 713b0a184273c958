"""Arithmetic primitives delegated to numpy.

numpy's ufuncs keep single, double and extended precision scalars in their
own type, which makes them the platform routines of choice here. Results are
cast back to the input type so Python ``float`` inputs return ``float``.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from easekit.core.math.numeric import real_type
from easekit.core.math.protocols import MathBackend


def sqrt(x: Any) -> Any:
    """Square root; NaN for negative input."""
    real = real_type(x)
    with np.errstate(invalid="ignore"):
        return real(np.sqrt(x))


def pow(x: Any, y: Any) -> Any:  # noqa: A001
    """Raise ``x`` to the integral or real power ``y``."""
    real = real_type(x)
    with np.errstate(invalid="ignore", divide="ignore"):
        return real(np.power(x, y))


def sin(x: Any) -> Any:
    """Sine of ``x`` radians."""
    real = real_type(x)
    with np.errstate(invalid="ignore"):
        return real(np.sin(x))


def cos(x: Any) -> Any:
    """Cosine of ``x`` radians."""
    real = real_type(x)
    with np.errstate(invalid="ignore"):
        return real(np.cos(x))


class NativeMathKernel:
    """Kernel backed by numpy ufuncs."""

    backend = MathBackend.NATIVE

    sqrt = staticmethod(sqrt)
    pow = staticmethod(pow)
    sin = staticmethod(sin)
    cos = staticmethod(cos)

    @staticmethod
    def series_type(real: type) -> type:
        return real

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
