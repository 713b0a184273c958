"""Easing curve catalog.

Every curve maps a progress value ``t`` (conventionally in [0, 1]) to an eased
value of the same real type. No range check is performed: values outside
[0, 1] are extrapolated by the same formula, so callers wanting clamping must
clamp before calling. All curves satisfy ``f(0) == 0`` and ``f(1) == 1``; the
back, elastic and bounce families overshoot [0, 1] in between.

Formulas follow https://easings.net/.
"""

from __future__ import annotations

from typing import Any

from easekit.core.easing import constants
from easekit.core.math.numeric import real_type
from easekit.core.math.own import equal_fp
from easekit.core.math.protocols import MathKernel

CURVE_NAMES: tuple[str, ...] = (
    "linear",
    "in_sinusoidal",
    "out_sinusoidal",
    "in_out_sinusoidal",
    "in_quadratic",
    "out_quadratic",
    "in_out_quadratic",
    "in_cubic",
    "out_cubic",
    "in_out_cubic",
    "in_quartic",
    "out_quartic",
    "in_out_quartic",
    "in_quintic",
    "out_quintic",
    "in_out_quintic",
    "in_exponential",
    "out_exponential",
    "in_out_exponential",
    "in_circular",
    "out_circular",
    "in_out_circular",
    "in_back",
    "out_back",
    "in_out_back",
    "in_elastic",
    "out_elastic",
    "in_out_elastic",
    "in_bounce",
    "out_bounce",
    "in_out_bounce",
)


class EasingCatalog:
    """The easing curves evaluated with one arithmetic kernel.

    Args:
        kernel: Supplies sqrt, pow, sin and cos to the curves.

    Example:
        >>> catalog = EasingCatalog(get_kernel("own"))
        >>> catalog.in_quadratic(0.5)
        0.25
    """

    def __init__(self, kernel: MathKernel) -> None:
        self._kernel = kernel

    @property
    def kernel(self) -> MathKernel:
        return self._kernel

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._kernel!r})"

    # Linear ----------------------------------------------------------
    def linear(self, t: Any) -> Any:
        real_type(t)
        return t

    # Sinusoidal ------------------------------------------------------
    def in_sinusoidal(self, t: Any) -> Any:
        """https://easings.net/#easeInSine"""
        real = real_type(t)
        return -self._kernel.cos(t * constants.half_pi(real)) + 1

    def out_sinusoidal(self, t: Any) -> Any:
        """https://easings.net/#easeOutSine"""
        real = real_type(t)
        return self._kernel.sin(t * constants.half_pi(real))

    def in_out_sinusoidal(self, t: Any) -> Any:
        """https://easings.net/#easeInOutSine"""
        real = real_type(t)
        return -0.5 * (self._kernel.cos(t * constants.pi(real)) - 1)

    # Polynomial ------------------------------------------------------
    def in_quadratic(self, t: Any) -> Any:
        """https://easings.net/#easeInQuad"""
        real_type(t)
        return t * t

    def out_quadratic(self, t: Any) -> Any:
        """https://easings.net/#easeOutQuad"""
        real_type(t)
        return -t * (t - 2)

    def in_out_quadratic(self, t: Any) -> Any:
        """https://easings.net/#easeInOutQuad"""
        real_type(t)
        t2 = t * 2
        if t2 < 1:
            return 0.5 * t2 * t2
        return -0.5 * ((t2 - 1) * ((t2 - 1) - 2) - 1)

    def in_cubic(self, t: Any) -> Any:
        """https://easings.net/#easeInCubic"""
        real_type(t)
        return t * t * t

    def out_cubic(self, t: Any) -> Any:
        """https://easings.net/#easeOutCubic"""
        real_type(t)
        return (t - 1) * (t - 1) * (t - 1) + 1

    def in_out_cubic(self, t: Any) -> Any:
        """https://easings.net/#easeInOutCubic"""
        real_type(t)
        t2 = t * 2
        if t2 < 1:
            return 0.5 * t2 * t2 * t2
        return 0.5 * ((t2 - 2) * (t2 - 2) * (t2 - 2) + 2)

    def in_quartic(self, t: Any) -> Any:
        """https://easings.net/#easeInQuart"""
        real_type(t)
        return t * t * t * t

    def out_quartic(self, t: Any) -> Any:
        """https://easings.net/#easeOutQuart"""
        real_type(t)
        return -((t - 1) * (t - 1) * (t - 1) * (t - 1) - 1)

    def in_out_quartic(self, t: Any) -> Any:
        """https://easings.net/#easeInOutQuart"""
        real_type(t)
        t2 = t * 2
        if t2 < 1:
            return 0.5 * t2 * t2 * t2 * t2
        return -0.5 * ((t2 - 2) * (t2 - 2) * (t2 - 2) * (t2 - 2) - 2)

    def in_quintic(self, t: Any) -> Any:
        """https://easings.net/#easeInQuint"""
        real_type(t)
        return t * t * t * t * t

    def out_quintic(self, t: Any) -> Any:
        """https://easings.net/#easeOutQuint"""
        real_type(t)
        return (t - 1) * (t - 1) * (t - 1) * (t - 1) * (t - 1) + 1

    def in_out_quintic(self, t: Any) -> Any:
        """https://easings.net/#easeInOutQuint"""
        real_type(t)
        t2 = t * 2
        if t2 < 1:
            return 0.5 * t2 * t2 * t2 * t2 * t2
        return 0.5 * ((t2 - 2) * (t2 - 2) * (t2 - 2) * (t2 - 2) * (t2 - 2) + 2)

    # Exponential -----------------------------------------------------
    # The endpoints are matched explicitly: pow(2, -10) is not exactly 0.
    def in_exponential(self, t: Any) -> Any:
        """https://easings.net/#easeInExpo"""
        real = real_type(t)
        if equal_fp(t, real(0)):
            return real(0)
        return self._kernel.pow(real(2), 10 * (t - 1))

    def out_exponential(self, t: Any) -> Any:
        """https://easings.net/#easeOutExpo"""
        real = real_type(t)
        if equal_fp(t, real(1)):
            return real(1)
        return -self._kernel.pow(real(2), -10 * t) + 1

    def in_out_exponential(self, t: Any) -> Any:
        """https://easings.net/#easeInOutExpo"""
        real = real_type(t)
        if equal_fp(t, real(0)):
            return real(0)
        if equal_fp(t, real(1)):
            return real(1)
        t2 = t * 2
        if t2 < 1:
            return 0.5 * self._kernel.pow(real(2), 10 * (t2 - 1))
        return 0.5 * (-self._kernel.pow(real(2), -10 * (t2 - 1)) + 2)

    # Circular --------------------------------------------------------
    def in_circular(self, t: Any) -> Any:
        """https://easings.net/#easeInCirc"""
        real_type(t)
        return -(self._kernel.sqrt(1 - t * t) - 1)

    def out_circular(self, t: Any) -> Any:
        """https://easings.net/#easeOutCirc"""
        real_type(t)
        return self._kernel.sqrt(1 - (t - 1) * (t - 1))

    def in_out_circular(self, t: Any) -> Any:
        """https://easings.net/#easeInOutCirc"""
        real_type(t)
        t2 = t * 2
        if t2 < 1:
            return -0.5 * (self._kernel.sqrt(1 - t2 * t2) - 1)
        return 0.5 * (self._kernel.sqrt(1 - (t2 - 2) * (t2 - 2)) + 1)

    # Back ------------------------------------------------------------
    def in_back(self, t: Any) -> Any:
        """https://easings.net/#easeInBack"""
        c = constants.back_factor(real_type(t))
        return t * t * ((c + 1) * t - c)

    def out_back(self, t: Any) -> Any:
        """https://easings.net/#easeOutBack"""
        c = constants.back_factor(real_type(t))
        u = t - 1
        return u * u * ((c + 1) * u + c) + 1

    def in_out_back(self, t: Any) -> Any:
        """https://easings.net/#easeInOutBack"""
        c = constants.back_factor2(real_type(t))
        t2 = t * 2
        if t2 < 1:
            return 0.5 * (t2 * t2 * ((c + 1) * t2 - c))
        u = t2 - 2
        return 0.5 * (u * u * ((c + 1) * u + c) + 2)

    # Elastic ---------------------------------------------------------
    # The oscillation is evaluated in the kernel's series type and the
    # result narrowed back to the input type.
    def in_elastic(self, t: Any) -> Any:
        """https://easings.net/#easeInElastic"""
        real = real_type(t)
        if t <= 0:
            return real(0)
        if t >= 1:
            return real(1)
        wide = self._kernel.series_type(real)
        wave = self._kernel.sin(wide(t * 10 - 10.75) * constants.elastic_factor(real))
        return real(-self._kernel.pow(real(2), t * 10 - 10) * wave)

    def out_elastic(self, t: Any) -> Any:
        """https://easings.net/#easeOutElastic"""
        real = real_type(t)
        if t <= 0:
            return real(0)
        if t >= 1:
            return real(1)
        wide = self._kernel.series_type(real)
        wave = self._kernel.sin(wide(t * 10 - 0.75) * constants.elastic_factor(real))
        return real(self._kernel.pow(real(2), -10 * t) * wave + 1)

    def in_out_elastic(self, t: Any) -> Any:
        """https://easings.net/#easeInOutElastic"""
        real = real_type(t)
        if t <= 0:
            return real(0)
        if t >= 1:
            return real(1)
        wide = self._kernel.series_type(real)
        wave = self._kernel.sin(wide(20 * t - 11.125) * constants.elastic_factor2(real))
        if t < 0.5:
            return real(-0.5 * (self._kernel.pow(real(2), 20 * t - 10) * wave))
        return real(0.5 * (self._kernel.pow(real(2), -20 * t + 10) * wave) + 1)

    # Bounce ----------------------------------------------------------
    def out_bounce(self, t: Any) -> Any:
        """https://easings.net/#easeOutBounce"""
        real = real_type(t)
        f = constants.bounce_factor(real)
        f2 = constants.bounce_factor2(real)
        if t < 1 / f:
            return f2 * t * t
        if t < 2 / f:
            u = t - 1.5 / f
            return f2 * u * u + 0.75
        if t < 2.5 / f:
            u = t - 2.25 / f
            return f2 * u * u + 0.9375
        u = t - 2.625 / f
        return f2 * u * u + 0.984375

    def in_bounce(self, t: Any) -> Any:
        """https://easings.net/#easeInBounce"""
        real_type(t)
        return 1 - self.out_bounce(1 - t)

    def in_out_bounce(self, t: Any) -> Any:
        """https://easings.net/#easeInOutBounce"""
        real_type(t)
        if t < 0.5:
            return (1 - self.out_bounce(1 - 2 * t)) * 0.5
        return (1 + self.out_bounce(2 * t - 1)) * 0.5
