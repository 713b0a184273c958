"""Protocol definitions for arithmetic kernels.

A kernel supplies the transcendental primitives the easing catalog needs.
Two implementations exist: the iterative ``own`` kernel and the ``native``
pass-through to numpy. Both honour the same contract, so the catalog never
knows which one it is using.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class MathBackend(str, Enum):
    """Available arithmetic kernel implementations."""

    OWN = "own"
    NATIVE = "native"


@runtime_checkable
class MathKernel(Protocol):
    """Arithmetic primitives over a generic real type.

    Every method returns a value of the same type as its (first) argument.

    Example:
        >>> kernel: MathKernel = get_kernel(MathBackend.OWN)
        >>> kernel.sqrt(np.float32(4.0))
        np.float32(2.0)
    """

    backend: MathBackend

    def sqrt(self, x: Any) -> Any:
        """Square root; NaN for negative input, +inf for +inf."""
        ...

    def pow(self, x: Any, y: Any) -> Any:
        """Raise ``x`` to an integral or real exponent ``y``."""
        ...

    def sin(self, x: Any) -> Any:
        """Sine of ``x`` radians."""
        ...

    def cos(self, x: Any) -> Any:
        """Cosine of ``x`` radians."""
        ...

    def series_type(self, real: type) -> type:
        """Type in which oscillating terms should be evaluated for ``real`` inputs."""
        ...
