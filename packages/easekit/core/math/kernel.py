"""Kernel selection."""

from __future__ import annotations

from easekit.core.math.native import NativeMathKernel
from easekit.core.math.own import OwnMathKernel
from easekit.core.math.protocols import MathBackend, MathKernel

_KERNELS: dict[MathBackend, MathKernel] = {
    MathBackend.OWN: OwnMathKernel(),
    MathBackend.NATIVE: NativeMathKernel(),
}


def get_kernel(backend: MathBackend | str) -> MathKernel:
    """Return the kernel implementing ``backend``.

    Args:
        backend: A MathBackend or its value ("own" or "native").

    Returns:
        The shared kernel instance for that backend.

    Raises:
        ValueError: If the backend name is unknown.

    Example:
        >>> get_kernel("own").backend
        <MathBackend.OWN: 'own'>
    """
    return _KERNELS[MathBackend(backend)]
