"""Tests for the module-level curves of the default catalog."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

import easekit.core.easing as easing
from easekit.core.config.loader import FORCE_OWN_MATH_ENV
from easekit.core.easing import catalog as catalog_module
from easekit.core.easing import functions
from easekit.core.easing.catalog import CURVE_NAMES, EasingCatalog
from easekit.core.math.kernel import get_kernel
from easekit.core.math.protocols import MathBackend

PACKAGES_DIR = Path(catalog_module.__file__).resolve().parents[3]


def _run_in(cwd: Path, code: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PACKAGES_DIR), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-c", code], cwd=cwd, env=env, capture_output=True, text=True
    )


class TestModuleLevelCurves:
    """The 31 curves are importable as plain functions."""

    @pytest.mark.parametrize("name", CURVE_NAMES)
    def test_exported(self, name: str) -> None:
        """Each curve is exported and evaluates like the default catalog."""
        curve = getattr(easing, name)
        assert curve.__name__ == name
        assert name in easing.__all__
        assert curve(0.3) == getattr(easing.default_catalog(), name)(0.3)

    def test_in_quadratic(self) -> None:
        """Module-level curves evaluate like catalog methods."""
        assert easing.in_quadratic(0.5) == 0.25

    def test_docstring_from_catalog(self) -> None:
        """Module-level curves carry the catalog method's docstring."""
        assert easing.in_out_bounce.__doc__ == EasingCatalog.in_out_bounce.__doc__


class TestDefaultCatalog:
    """The default catalog is built on first use and then reused."""

    def test_is_catalog(self) -> None:
        """default_catalog() returns an EasingCatalog."""
        assert isinstance(easing.default_catalog(), EasingCatalog)

    def test_cached(self) -> None:
        """Repeated calls return the same catalog."""
        assert functions.default_catalog() is functions.default_catalog()

    def test_bad_config_fails_on_use(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """A malformed easekit.yaml only surfaces when the default catalog is needed."""
        (tmp_path / "easekit.yaml").write_text("[own, native\n")
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ValueError, match="Invalid YAML"):
            functions.default_catalog()
        explicit = EasingCatalog(get_kernel(MathBackend.OWN))
        assert functions.get_curve("in_quadratic", explicit)(0.5) == 0.25

    @pytest.mark.parametrize(
        "content",
        [
            pytest.param("[own, native\n", id="malformed"),
            pytest.param("math_backend: gpu\n", id="invalid"),
        ],
    )
    def test_import_reads_no_config(self, tmp_path: Path, content: str) -> None:
        """The package imports in a directory whose easekit.yaml is unusable."""
        (tmp_path / "easekit.yaml").write_text(content)
        result = _run_in(
            tmp_path,
            "from easekit.core.easing import EasingCatalog\n"
            "from easekit.core.math.kernel import get_kernel\n"
            "print(EasingCatalog(get_kernel('own')).in_quadratic(0.5))\n",
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "0.25"


class TestGetCurve:
    """Tests for lookup by name."""

    def test_default_catalog(self) -> None:
        """Without a catalog the default one is used."""
        assert functions.get_curve("out_bounce") == functions.default_catalog().out_bounce

    def test_explicit_catalog(self) -> None:
        """A catalog may be given."""
        catalog = EasingCatalog(get_kernel(MathBackend.OWN))
        curve = functions.get_curve("in_sinusoidal", catalog)
        assert curve == catalog.in_sinusoidal

    def test_unknown_name(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown easing curve 'ease_in'"):
            functions.get_curve("ease_in")

    def test_private_attribute_is_not_a_curve(self) -> None:
        """Only catalog curves resolve."""
        with pytest.raises(ValueError):
            functions.get_curve("kernel")


class TestKernelBinding:
    """The default catalog's kernel comes from configuration."""

    def test_force_own_math(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """EASEKIT_FORCE_OWN_MATH binds the own kernel."""
        monkeypatch.setenv(FORCE_OWN_MATH_ENV, "1")
        assert functions.default_catalog().kernel.backend is MathBackend.OWN
        assert functions.in_quadratic(0.5) == 0.25

    def test_config_file_backend(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """easekit.yaml in the working directory selects the kernel."""
        (tmp_path / "easekit.yaml").write_text("math_backend: own\n")
        monkeypatch.chdir(tmp_path)
        assert functions.default_catalog().kernel.backend is MathBackend.OWN

    def test_bound_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Later environment changes do not rebind an existing default catalog."""
        first = functions.default_catalog()
        monkeypatch.setenv(FORCE_OWN_MATH_ENV, "1")
        assert functions.default_catalog() is first
