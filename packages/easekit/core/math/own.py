"""Arithmetic primitives implemented from first principles.

No platform math routine is called here: square root uses Newton-Raphson,
the exponential and the trigonometric functions sum their Maclaurin series,
the logarithm iterates on the exponential and the real power reduces to
``exp(log(x) * y)``. Each iteration runs until two successive values agree
within the machine epsilon of the input's type (see ``equal_fp``), or until
an earlier iterate comes back. Once one ulp of the result exceeds epsilon,
the last bits can keep cycling without ever passing ``equal_fp``.

All arithmetic stays in the caller's real type. Literal operands are Python
numbers, which numpy >= 2 treats as weakly typed, so they never widen a
``float32`` computation.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any

import numpy as np

from easekit.core.math.numeric import (
    epsilon,
    euler,
    infinity,
    is_inf,
    is_nan,
    quiet_nan,
    real_type,
)
from easekit.core.math.protocols import MathBackend


def fabs(x: Any) -> Any:
    """Absolute value of ``x`` in its own type."""
    return x if x >= 0 else -x


def equal_fp(x: Any, y: Any) -> bool:
    """Return True when ``x`` and ``y`` differ by at most the type's epsilon.

    This is the convergence predicate of every iteration in this module.
    """
    diff = x - y
    return fabs(diff) <= epsilon(type(diff))


def sqrt(x: Any) -> Any:
    """Square root by Newton-Raphson iteration on ``y**2 - x``.

    The iteration is seeded with ``x`` and compared against a previous
    iterate of 0, so ``sqrt(0)`` and ``sqrt(-0.0)`` return their input.

    Args:
        x: Real value.

    Returns:
        The square root, NaN when ``x`` is negative or NaN, +inf for +inf.

    Example:
        >>> sqrt(2.0)
        1.414213562373095
    """
    real = real_type(x)
    if is_nan(x) or x < 0:
        return quiet_nan(real)
    if x == infinity(real):
        return x

    curr, prev, seen = x, real(0), set()
    while not (equal_fp(curr, prev) or curr in seen):
        seen.add(curr)
        curr, prev = 0.5 * (curr + x / curr), curr
    return curr


def exp(x: Any) -> Any:
    """Natural exponential by Maclaurin series summation.

    Terms ``x**i / i!`` are derived incrementally and accumulated until the
    next one no longer changes the running sum. If the series overflows into
    NaN the last partial sum (typically +inf) is returned. Negative arguments
    are evaluated as ``1 / exp(-x)``; summing alternating terms directly
    loses most of the significant digits.

    Args:
        x: Real value.

    Returns:
        ``e**x`` in the type of ``x``.
    """
    real = real_type(x)
    if is_nan(x):
        return x
    if is_inf(x):
        return x if x > 0 else real(0)
    if x < 0:
        return 1 / exp(-x)

    total, denom, index, term = real(1), real(1), 2, x
    while True:
        nxt = total + term / denom
        if is_nan(nxt) or equal_fp(total, nxt):
            return total
        total = nxt
        denom = denom * index
        index += 1
        term = term * x


def log(x: Any, y: Any) -> Any:
    """Natural logarithm of ``x`` by Halley iteration from the seed ``y``.

    Each step applies ``y + 2 * (x - exp(y)) / (x + exp(y))`` and the
    iteration stops once successive values agree or an earlier value comes
    back. This is a building block of ``pow`` and expects a sensible seed;
    it does not pick one itself.

    Args:
        x: Positive real value.
        y: Initial guess for ``log(x)``.

    Returns:
        The converged logarithm, in the type of ``y``.
    """
    seen = set()
    while True:
        ey = exp(y)
        nxt = y + 2 * (x - ey) / (x + ey)
        if is_nan(nxt):
            return nxt
        if equal_fp(y, nxt) or nxt in seen:
            return y
        seen.add(y)
        y = nxt


def _ipow(x: Any, n: int) -> Any:
    if n == 0:
        return type(x)(1)
    if n == 1:
        return x
    if n < 0:
        return 1 / _ipow(x, -n)
    if n & 1:
        return x * _ipow(x, n - 1)
    half = _ipow(x, n // 2)
    return half * half


def pow(x: Any, y: Any) -> Any:  # noqa: A001
    """Raise ``x`` to the power ``y``.

    Integral exponents use exponentiation by squaring. Real exponents are
    reduced to ``exp(log(x, e) * y)``, with ``y = +inf`` giving +inf and
    ``y = -inf`` giving 0 regardless of the base. A negative or zero base
    with a non-integral exponent is not defined.

    Args:
        x: Real base.
        y: Integral or real exponent.

    Returns:
        ``x**y`` in the type of ``x``.

    Example:
        >>> pow(2.0, 10)
        1024.0
    """
    real = real_type(x)
    if isinstance(y, Integral):
        return _ipow(x, int(y))

    inf = infinity(real)
    if y == inf:
        return inf
    if y == -inf:
        return real(0)
    return real(exp(log(x, euler(real)) * y))


def _sincos(x: Any, total: Any, denom: Any, index: int, sign: int, term: Any) -> Any:
    while True:
        nxt = total + term * sign / denom
        if is_nan(nxt) or equal_fp(total, nxt):
            return total
        total = nxt
        denom = denom * index * (index + 1)
        index += 2
        sign = -sign
        term = term * x * x


def sin(x: Any) -> Any:
    """Sine of ``x`` radians by Taylor series around 0."""
    real = real_type(x)
    if is_nan(x) or is_inf(x):
        return quiet_nan(real)
    return _sincos(x, x, real(6), 4, -1, x * x * x)


def cos(x: Any) -> Any:
    """Cosine of ``x`` radians by Taylor series around 0."""
    real = real_type(x)
    if is_nan(x) or is_inf(x):
        return quiet_nan(real)
    return _sincos(x, real(1), real(2), 3, -1, x * x)


class OwnMathKernel:
    """Kernel backed by the iterative implementations of this module.

    The series used for ``sin`` overflows single precision for the arguments
    the elastic curves produce, so oscillations are evaluated in at least
    double precision.
    """

    backend = MathBackend.OWN

    sqrt = staticmethod(sqrt)
    pow = staticmethod(pow)
    sin = staticmethod(sin)
    cos = staticmethod(cos)

    @staticmethod
    def series_type(real: type) -> type:
        if real is float or np.finfo(real).bits >= 64:
            return real
        return np.float64

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
