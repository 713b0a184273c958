"""Real-type helpers shared by both math kernels.

Every kernel primitive and easing curve is generic over the caller's floating
representation. The representation is simply the type of the value passed in:
Python ``float`` or a numpy floating scalar (``float32``, ``float64``,
``longdouble``). Constants and limits are materialised in that same type so
no operation silently widens or narrows the result.
"""

from __future__ import annotations

import functools
from typing import Any

import numpy as np

# Decimal literal so extended precision types get every digit
_E = "2.71828182845904523536028747135266250"

REAL_TYPES: dict[str, type] = {
    "float": float,
    "float32": np.float32,
    "float64": np.float64,
    "longdouble": np.longdouble,
}


def real_type(value: Any) -> type:
    """Return the floating type of ``value``.

    Args:
        value: A Python float or numpy floating scalar.

    Returns:
        The type of ``value``.

    Raises:
        TypeError: If ``value`` is not a floating-point scalar.

    Example:
        >>> real_type(np.float32(0.5))
        <class 'numpy.float32'>
    """
    cls = type(value)
    if cls is float or issubclass(cls, np.floating):
        return cls
    raise TypeError(f"expected a floating point number, got {cls.__name__}")


def resolve_real_type(name: str) -> type:
    """Resolve a real type from its name (``float``, ``float32``, ``float64``, ``longdouble``).

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return REAL_TYPES[name]
    except KeyError:
        valid = ", ".join(REAL_TYPES)
        raise ValueError(f"Unknown real type '{name}' (expected one of: {valid})") from None


@functools.cache
def epsilon(real: type) -> Any:
    """Machine epsilon of ``real``."""
    return real(np.finfo(real).eps)


@functools.cache
def infinity(real: type) -> Any:
    """Positive infinity of ``real``."""
    return real("inf")


@functools.cache
def quiet_nan(real: type) -> Any:
    """Quiet NaN of ``real``."""
    return real("nan")


@functools.cache
def euler(real: type) -> Any:
    """Euler's number in ``real``."""
    return real(_E)


def is_nan(x: Any) -> bool:
    # NaN is the only value that compares unequal to itself
    return x != x


def is_inf(x: Any) -> bool:
    inf = infinity(type(x))
    return x == inf or x == -inf
