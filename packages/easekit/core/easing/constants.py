"""Per-family easing constants.

Each constant is a function of the real type so it is materialised in the
caller's representation, then memoised for that type.
"""

from __future__ import annotations

import functools
from typing import Any

from easekit.core.math.numeric import euler

_PI = "3.14159265358979323846264338327950288"


@functools.cache
def pi(real: type) -> Any:
    return real(_PI)


@functools.cache
def half_pi(real: type) -> Any:
    return pi(real) * real(0.5)


@functools.cache
def pi2(real: type) -> Any:
    return pi(real) * real(2.0)


def e(real: type) -> Any:
    return euler(real)


@functools.cache
def back_factor(real: type) -> Any:
    """Overshoot of the back in/out curves."""
    return real(1.70158)


@functools.cache
def back_factor2(real: type) -> Any:
    """Overshoot of the back in-out curve."""
    return back_factor(real) * real(1.525)


@functools.cache
def elastic_factor(real: type) -> Any:
    """Angular frequency of the elastic in/out curves."""
    return pi2(real) / real(3.0)


@functools.cache
def elastic_factor2(real: type) -> Any:
    """Angular frequency of the elastic in-out curve."""
    return pi2(real) / real(4.5)


@functools.cache
def bounce_factor(real: type) -> Any:
    return real(2.75)


@functools.cache
def bounce_factor2(real: type) -> Any:
    return real(7.5625)
