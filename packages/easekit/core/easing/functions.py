"""Module-level easing curves bound to the configured kernel.

The kernel is chosen once, on the first call, from
``EasingConfig.math_backend`` (or forced to the own kernel by
``$EASEKIT_FORCE_OWN_MATH``). Importing this module reads no configuration.
Code that needs a specific kernel regardless of configuration builds its own
:class:`EasingCatalog`.

Example:
    >>> from easekit.core.easing.functions import in_quadratic
    >>> in_quadratic(0.5)
    0.25
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from easekit.core.config.loader import load_easing_config
from easekit.core.easing.catalog import CURVE_NAMES, EasingCatalog
from easekit.core.easing.sampling import EasingFn
from easekit.core.math.kernel import get_kernel

logger = logging.getLogger(__name__)


@functools.cache
def default_catalog() -> EasingCatalog:
    """Return the catalog behind the module-level curves.

    Built on first use from ``load_easing_config()`` and kept for the life of
    the process; ``default_catalog.cache_clear()`` rebinds it.

    Raises:
        ValueError: If the default config file cannot be parsed
        ValidationError: If the default config is invalid
    """
    catalog = EasingCatalog(get_kernel(load_easing_config().math_backend))
    logger.debug("Default easing catalog bound to %r", catalog.kernel)
    return catalog


def _bind(name: str) -> EasingFn:
    def curve(t: Any) -> Any:
        return getattr(default_catalog(), name)(t)

    curve.__name__ = curve.__qualname__ = name
    curve.__doc__ = getattr(EasingCatalog, name).__doc__
    return curve


linear = _bind("linear")

in_sinusoidal = _bind("in_sinusoidal")
out_sinusoidal = _bind("out_sinusoidal")
in_out_sinusoidal = _bind("in_out_sinusoidal")

in_quadratic = _bind("in_quadratic")
out_quadratic = _bind("out_quadratic")
in_out_quadratic = _bind("in_out_quadratic")

in_cubic = _bind("in_cubic")
out_cubic = _bind("out_cubic")
in_out_cubic = _bind("in_out_cubic")

in_quartic = _bind("in_quartic")
out_quartic = _bind("out_quartic")
in_out_quartic = _bind("in_out_quartic")

in_quintic = _bind("in_quintic")
out_quintic = _bind("out_quintic")
in_out_quintic = _bind("in_out_quintic")

in_exponential = _bind("in_exponential")
out_exponential = _bind("out_exponential")
in_out_exponential = _bind("in_out_exponential")

in_circular = _bind("in_circular")
out_circular = _bind("out_circular")
in_out_circular = _bind("in_out_circular")

in_back = _bind("in_back")
out_back = _bind("out_back")
in_out_back = _bind("in_out_back")

in_elastic = _bind("in_elastic")
out_elastic = _bind("out_elastic")
in_out_elastic = _bind("in_out_elastic")

in_bounce = _bind("in_bounce")
out_bounce = _bind("out_bounce")
in_out_bounce = _bind("in_out_bounce")


def get_curve(name: str, catalog: EasingCatalog | None = None) -> EasingFn:
    """Look up a curve by name.

    Args:
        name: One of ``CURVE_NAMES`` (e.g. ``"in_out_cubic"``).
        catalog: Catalog to take the curve from; defaults to
            ``default_catalog()``.

    Returns:
        The bound curve.

    Raises:
        ValueError: If the name is not a known curve.
    """
    if name not in CURVE_NAMES:
        raise ValueError(f"Unknown easing curve '{name}'. Available: {', '.join(CURVE_NAMES)}")
    return getattr(catalog or default_catalog(), name)
