"""Easing curves, their constants and sampling helpers."""

from easekit.core.easing import constants
from easekit.core.easing.catalog import CURVE_NAMES, EasingCatalog
from easekit.core.easing.functions import (
    default_catalog,
    get_curve,
    in_back,
    in_bounce,
    in_circular,
    in_cubic,
    in_elastic,
    in_exponential,
    in_out_back,
    in_out_bounce,
    in_out_circular,
    in_out_cubic,
    in_out_elastic,
    in_out_exponential,
    in_out_quadratic,
    in_out_quartic,
    in_out_quintic,
    in_out_sinusoidal,
    in_quadratic,
    in_quartic,
    in_quintic,
    in_sinusoidal,
    linear,
    out_back,
    out_bounce,
    out_circular,
    out_cubic,
    out_elastic,
    out_exponential,
    out_quadratic,
    out_quartic,
    out_quintic,
    out_sinusoidal,
)
from easekit.core.easing.sampling import (
    EasedSample,
    EasingFn,
    build_lookup_table,
    sample_curve,
    sample_uniform_grid,
)

__all__ = [
    "CURVE_NAMES",
    "EasedSample",
    "EasingCatalog",
    "EasingFn",
    "build_lookup_table",
    "constants",
    "default_catalog",
    "get_curve",
    "in_back",
    "in_bounce",
    "in_circular",
    "in_cubic",
    "in_elastic",
    "in_exponential",
    "in_out_back",
    "in_out_bounce",
    "in_out_circular",
    "in_out_cubic",
    "in_out_elastic",
    "in_out_exponential",
    "in_out_quadratic",
    "in_out_quartic",
    "in_out_quintic",
    "in_out_sinusoidal",
    "in_quadratic",
    "in_quartic",
    "in_quintic",
    "in_sinusoidal",
    "linear",
    "out_back",
    "out_bounce",
    "out_circular",
    "out_cubic",
    "out_elastic",
    "out_exponential",
    "out_quadratic",
    "out_quartic",
    "out_quintic",
    "out_sinusoidal",
    "sample_curve",
    "sample_uniform_grid",
]
