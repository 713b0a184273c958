"""Tests for kernel selection."""

from __future__ import annotations

import pytest

from easekit.core.math import MathBackend, MathKernel, get_kernel
from easekit.core.math.native import NativeMathKernel
from easekit.core.math.own import OwnMathKernel


class TestGetKernel:
    """Tests for get_kernel."""

    def test_own_by_enum(self) -> None:
        """MathBackend.OWN selects the iterative kernel."""
        assert isinstance(get_kernel(MathBackend.OWN), OwnMathKernel)

    def test_native_by_name(self) -> None:
        """The string value is accepted."""
        assert isinstance(get_kernel("native"), NativeMathKernel)

    def test_singleton(self) -> None:
        """Each backend has a single shared kernel."""
        assert get_kernel("own") is get_kernel(MathBackend.OWN)

    def test_unknown_backend(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            get_kernel("fast")

    def test_backend_attribute(self, backend: MathBackend) -> None:
        """Kernels report their backend."""
        assert get_kernel(backend).backend is backend

    def test_satisfies_protocol(self, backend: MathBackend) -> None:
        """Both kernels satisfy MathKernel."""
        assert isinstance(get_kernel(backend), MathKernel)

    def test_backends_agree(self, backend: MathBackend) -> None:
        """Either kernel computes the same primitives."""
        kernel = get_kernel(backend)
        assert kernel.sqrt(2.0) == pytest.approx(1.4142135623730951)
        assert kernel.pow(2.0, 0.5) == pytest.approx(1.4142135623730951)
        assert kernel.sin(1.0) == pytest.approx(0.8414709848078965)
        assert kernel.cos(1.0) == pytest.approx(0.5403023058681398)
