"""Command-line interface for easekit.

Lists the easing curves, samples one of them, or checks the catalog's
endpoint and finiteness properties for a real type and arithmetic kernel.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

import numpy as np
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from easekit.core.config.loader import load_easing_config
from easekit.core.config.models import EasingConfig
from easekit.core.easing.catalog import CURVE_NAMES, EasingCatalog
from easekit.core.easing.functions import get_curve
from easekit.core.easing.sampling import EasedSample, sample_curve, sample_uniform_grid
from easekit.core.math.kernel import get_kernel
from easekit.core.math.numeric import REAL_TYPES, epsilon, resolve_real_type
from easekit.core.math.protocols import MathBackend
from easekit.core.utils.json import dumps_json, write_json
from easekit.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_CHECK_SAMPLES = 12345


def endpoint_tolerance(real: type, backend: MathBackend) -> Any:
    """Allowed distance of f(0) from 0 and f(1) from 1.

    The machine epsilon of ``real``. The own kernel on extended precision
    types gets two epsilons: its cosine series can land one ulp short of the
    exact value at the end of ``in_out_sinusoidal``.
    """
    if backend == MathBackend.OWN and np.finfo(real).bits > 64:
        return 2 * epsilon(real)
    return epsilon(real)


def _build_catalog(config: EasingConfig, backend: str | None) -> EasingCatalog:
    return EasingCatalog(get_kernel(backend or config.math_backend))


def cmd_list(args: argparse.Namespace, config: EasingConfig) -> int:
    """Print every curve with its value at 0, 0.5 and 1."""
    catalog = _build_catalog(config, None)

    table = Table(title=f"Easing curves ({catalog.kernel.backend.value} kernel)")
    table.add_column("Curve", style="cyan")
    table.add_column("f(0)", justify="right")
    table.add_column("f(0.5)", justify="right")
    table.add_column("f(1)", justify="right")

    for name in CURVE_NAMES:
        curve = getattr(catalog, name)
        table.add_row(name, *(f"{curve(t):.6f}" for t in (0.0, 0.5, 1.0)))

    console.print(table)
    return 0


def _render_samples(samples: list[EasedSample], fmt: str) -> None:
    if fmt == "json":
        payload = dumps_json([s.model_dump() for s in samples])
        console.print(payload, soft_wrap=True, markup=False, emoji=False, highlight=False)
    elif fmt == "csv":
        lines = ["t,v", *(f"{s.t!r},{s.v!r}" for s in samples)]
        console.print("\n".join(lines), soft_wrap=True, markup=False, emoji=False, highlight=False)
    else:
        table = Table()
        table.add_column("t", justify="right")
        table.add_column("v", justify="right")
        for s in samples:
            table.add_row(f"{s.t:.6f}", f"{s.v:.6f}")
        console.print(table)


def cmd_sample(args: argparse.Namespace, config: EasingConfig) -> int:
    """Sample one curve over a uniform grid."""
    real = resolve_real_type(args.real)
    catalog = _build_catalog(config, args.backend)
    curve = get_curve(args.name, catalog)

    logger.debug("Sampling %s at %d points (%s, %r)", args.name, args.samples, args.real, catalog)
    samples = sample_curve(curve, args.samples, real)

    if args.out:
        write_json(args.out, [s.model_dump() for s in samples])
        console.print(f"[green]Wrote {len(samples)} samples to[/green] {args.out}")
        return 0

    _render_samples(samples, args.format)
    return 0


def cmd_check(args: argparse.Namespace, config: EasingConfig) -> int:
    """Check endpoints and finiteness of every curve."""
    real = resolve_real_type(args.real)
    catalog = _build_catalog(config, args.backend)
    backend = catalog.kernel.backend
    tol = endpoint_tolerance(real, backend)
    grid = sample_uniform_grid(args.samples, real)
    zero, one = real(0), real(1)

    table = Table(title=f"Checks: {args.real}, {backend.value} kernel, {args.samples} samples")
    table.add_column("Curve", style="cyan")
    table.add_column("f(0)")
    table.add_column("f(1)")
    table.add_column("Non-finite", justify="right")

    failures = 0
    for name in CURVE_NAMES:
        curve = getattr(catalog, name)
        start_ok = abs(curve(zero) - zero) <= tol
        end_ok = abs(curve(one) - one) <= tol
        non_finite = sum(1 for t in grid if not np.isfinite(curve(t)))

        if not (start_ok and end_ok) or non_finite:
            failures += 1
            logger.debug(
                "%s failed: start=%s end=%s non_finite=%d", name, start_ok, end_ok, non_finite
            )

        table.add_row(
            name,
            "[green]ok[/green]" if start_ok else "[red]FAIL[/red]",
            "[green]ok[/green]" if end_ok else "[red]FAIL[/red]",
            f"[red]{non_finite}[/red]" if non_finite else "0",
        )

    console.print(table)
    if failures:
        console.print(f"[red]{failures} of {len(CURVE_NAMES)} curves failed[/red]")
        return 1

    console.print(f"[green]All {len(CURVE_NAMES)} curves passed[/green]")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="easekit",
        description="easekit - easing curves with a portable arithmetic kernel",
    )
    p.add_argument("--config", help="Path to config file (.yaml, .yml or .json)")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    p.add_argument("--log-json", action="store_true", help="Emit structured JSON logs")
    p.add_argument("--log-file", type=Path, help="Write logs to this file instead of stdout")

    sub = p.add_subparsers(dest="cmd", required=True)
    backends = [b.value for b in MathBackend]
    reals = list(REAL_TYPES)

    sub.add_parser("list", help="List the easing curves")

    sample = sub.add_parser("sample", help="Sample one curve over [0, 1]")
    sample.add_argument("name", help="Curve name (see 'easekit list')")
    sample.add_argument(
        "-n", "--samples", type=int, default=11, help="Number of samples (default: 11)"
    )
    sample.add_argument(
        "--real", default="float", help=f"Real type: {', '.join(reals)} (default: float)"
    )
    sample.add_argument(
        "--backend", choices=backends, help="Arithmetic kernel (default: configured)"
    )
    sample.add_argument(
        "--format", choices=["table", "json", "csv"], default="table", help="Output format"
    )
    sample.add_argument("--out", type=Path, help="Write samples as JSON to this path instead")

    check = sub.add_parser("check", help="Check endpoints and finiteness of every curve")
    check.add_argument(
        "--samples",
        type=int,
        default=DEFAULT_CHECK_SAMPLES,
        help=f"Grid size for the finiteness check (default: {DEFAULT_CHECK_SAMPLES})",
    )
    check.add_argument(
        "--real", default="float", help=f"Real type: {', '.join(reals)} (default: float)"
    )
    check.add_argument(
        "--backend", choices=backends, help="Arithmetic kernel (default: configured)"
    )

    return p


_COMMANDS = {
    "list": cmd_list,
    "sample": cmd_sample,
    "check": cmd_check,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code: 0 on success, 1 on configuration errors or failed checks,
        2 for unknown curve names, real types or invalid sample counts.
    """
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_easing_config(args.config)
    except (OSError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    configure_logging(
        level=args.log_level or config.logging.level,
        format_string=config.logging.format,
        filename=str(args.log_file) if args.log_file else None,
        structured=args.log_json,
    )

    try:
        return _COMMANDS[args.cmd](args, config)
    except ValueError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 2
