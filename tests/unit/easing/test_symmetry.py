"""Symmetry and continuity properties of the easing families."""

from __future__ import annotations

import pytest

from easekit.core.easing.catalog import EasingCatalog
from easekit.core.easing.sampling import sample_uniform_grid

MIRRORED_FAMILIES = ["quadratic", "cubic", "quartic", "quintic", "bounce"]
ALL_FAMILIES = [
    "sinusoidal",
    "quadratic",
    "cubic",
    "quartic",
    "quintic",
    "exponential",
    "circular",
    "back",
    "elastic",
    "bounce",
]


class TestPointReflection:
    """out_X(t) == 1 - in_X(1 - t)."""

    @pytest.mark.parametrize("family", MIRRORED_FAMILIES)
    def test_out_mirrors_in(self, catalog: EasingCatalog, family: str) -> None:
        """The out variant is the point reflection of the in variant."""
        ease_in = getattr(catalog, f"in_{family}")
        ease_out = getattr(catalog, f"out_{family}")
        for t in sample_uniform_grid(64):
            assert ease_out(t) == pytest.approx(1 - ease_in(1 - t), abs=1e-12)


class TestSplice:
    """in-out variants are continuous where the halves meet."""

    @pytest.mark.parametrize("family", ALL_FAMILIES)
    def test_midpoint_is_half(self, catalog: EasingCatalog, family: str) -> None:
        """in_out_X(0.5) == 0.5."""
        ease = getattr(catalog, f"in_out_{family}")
        assert ease(0.5) == pytest.approx(0.5, abs=1e-9)

    @pytest.mark.parametrize("family", ALL_FAMILIES)
    def test_halves_meet(self, catalog: EasingCatalog, family: str) -> None:
        """Values just either side of 0.5 are close to 0.5.

        Circular has a vertical tangent at the splice, hence the loose bound.
        """
        ease = getattr(catalog, f"in_out_{family}")
        delta = 1e-9
        assert ease(0.5 - delta) == pytest.approx(0.5, abs=1e-4)
        assert ease(0.5 + delta) == pytest.approx(0.5, abs=1e-4)

    @pytest.mark.parametrize("family", ["quadratic", "cubic", "quartic", "quintic", "sinusoidal"])
    def test_in_out_is_point_symmetric(self, catalog: EasingCatalog, family: str) -> None:
        """in_out_X(t) == 1 - in_out_X(1 - t) for the polynomial and sine families."""
        ease = getattr(catalog, f"in_out_{family}")
        for t in sample_uniform_grid(33):
            assert ease(t) == pytest.approx(1 - ease(1 - t), abs=1e-12)
