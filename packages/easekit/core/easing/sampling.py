"""Curve sampling and lookup tables.

Evaluating a curve once per frame is cheap, but targets that cannot afford
the transcendental curves at runtime precompute them into a table instead.
This module samples curves over a uniform grid of progress values.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

EasingFn = Callable[[Any], Any]


class EasedSample(BaseModel):
    """A single sample of an easing curve.

    ``v`` is unconstrained because back, elastic and bounce curves overshoot.

    Attributes:
        t: Progress value in [0, 1].
        v: Eased value.

    Example:
        >>> EasedSample(t=0.5, v=0.25).v
        0.25
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Progress value [0,1]")
    v: float = Field(..., description="Eased value")


def sample_uniform_grid(n: int, real: type = float) -> list[Any]:
    """Generate N evenly-spaced progress values in [0, 1].

    Returns N samples: [0, 1/(N-1), 2/(N-1), ..., 1], each computed in ``real``.

    Args:
        n: Number of samples to generate. Must be >= 2.
        real: Real type of the samples.

    Returns:
        List of N evenly-spaced values, both endpoints included.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    last = real(n - 1)
    return [real(i) / last for i in range(n)]


def build_lookup_table(curve: EasingFn, n_samples: int, real: type = np.float64) -> np.ndarray:
    """Precompute ``curve`` over a uniform grid.

    Args:
        curve: Easing function taking and returning ``real`` values.
        n_samples: Number of table entries (must be >= 2).
        real: Real type used for evaluation; also the table's dtype.

    Returns:
        1-D array where entry ``i`` is ``curve(i / (n_samples - 1))``.

    Raises:
        ValueError: If n_samples < 2.

    Example:
        >>> build_lookup_table(catalog.in_quadratic, 3)
        array([0.  , 0.25, 1.  ])
    """
    grid = sample_uniform_grid(n_samples, real)
    return np.fromiter((curve(t) for t in grid), dtype=np.dtype(real), count=n_samples)


def sample_curve(curve: EasingFn, n_samples: int, real: type = float) -> list[EasedSample]:
    """Sample ``curve`` into a list of EasedSample.

    Args:
        curve: Easing function.
        n_samples: Number of samples (must be >= 2).
        real: Real type used for evaluation.

    Returns:
        Samples in increasing ``t`` order.

    Raises:
        ValueError: If n_samples < 2.
    """
    grid = sample_uniform_grid(n_samples, real)
    return [EasedSample(t=float(t), v=float(curve(t))) for t in grid]
