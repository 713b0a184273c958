"""Shared pytest fixtures for easekit tests."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import pytest

from easekit.core.config.loader import CONFIG_PATH_ENV, FORCE_OWN_MATH_ENV, reset_config_cache
from easekit.core.easing.catalog import EasingCatalog
from easekit.core.easing.functions import default_catalog
from easekit.core.math.kernel import get_kernel
from easekit.core.math.protocols import MathBackend

REAL_TYPE_PARAMS = [
    pytest.param(float, id="float"),
    pytest.param(np.float32, id="float32"),
    pytest.param(np.float64, id="float64"),
    pytest.param(np.longdouble, id="longdouble"),
]

BACKEND_PARAMS = [
    pytest.param(MathBackend.OWN, id="own"),
    pytest.param(MathBackend.NATIVE, id="native"),
]


# ============================================================================
# Configuration Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test without config env overrides or a cached config or catalog."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.delenv(FORCE_OWN_MATH_ENV, raising=False)
    reset_config_cache()
    default_catalog.cache_clear()
    yield
    reset_config_cache()
    default_catalog.cache_clear()


# ============================================================================
# Numeric Fixtures
# ============================================================================


@pytest.fixture(params=REAL_TYPE_PARAMS)
def real(request: pytest.FixtureRequest) -> type:
    """Each supported real type."""
    return request.param


@pytest.fixture(params=BACKEND_PARAMS)
def backend(request: pytest.FixtureRequest) -> MathBackend:
    """Each arithmetic kernel."""
    return request.param


@pytest.fixture
def catalog(backend: MathBackend) -> EasingCatalog:
    """Easing catalog bound to each kernel."""
    return EasingCatalog(get_kernel(backend))


@pytest.fixture
def own_catalog() -> EasingCatalog:
    """Easing catalog bound to the iterative kernel."""
    return EasingCatalog(get_kernel(MathBackend.OWN))


@pytest.fixture
def native_catalog() -> EasingCatalog:
    """Easing catalog bound to the numpy kernel."""
    return EasingCatalog(get_kernel(MathBackend.NATIVE))
