"""Command-line interface for tabulating local pressure coefficients."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version

import numpy as np

from ..common import AIR_GAMMA
from ..core.errors import PressureModelError
from ..core.panel_pressure import PRESSURE_METHOD_VALUES, resolve_pressure_method, sweep_pressure_coefficients

try:
    PACKAGE_VERSION = version("hypaero")
except PackageNotFoundError:
    PACKAGE_VERSION = "dev"


def _parse_methods(values: list[str] | None) -> list[str]:
    """Parse ``--methods`` values into an ordered list of method keywords."""
    if not values:
        return ["newtonian"]
    methods: list[str] = []
    for value in values:
        for token in value.split(","):
            token = token.strip()
            if token and token not in methods:
                methods.append(token)
    return methods or ["newtonian"]


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="hypaero-cli",
        description="Tabulate local surface pressure coefficients versus inclination angle.",
    )
    parser.add_argument(
        "-m",
        "--mach",
        type=float,
        required=True,
        help="Freestream Mach number",
    )
    parser.add_argument(
        "-g",
        "--gamma",
        type=float,
        default=AIR_GAMMA,
        help=f"Ratio of specific heats (default: {AIR_GAMMA})",
    )
    parser.add_argument(
        "--methods",
        nargs="*",
        default=None,
        help=f"Pressure methods (space/comma separated). Choices: {', '.join(PRESSURE_METHOD_VALUES)}",
    )
    parser.add_argument(
        "--theta-min",
        type=float,
        default=0.0,
        help="First inclination angle [deg] (default: 0)",
    )
    parser.add_argument(
        "--theta-max",
        type=float,
        default=90.0,
        help="Last inclination angle [deg] (default: 90)",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=19,
        help="Number of inclination samples (default: 19)",
    )
    parser.add_argument(
        "--skip-undefined",
        action="store_true",
        help="Leave undefined points as NaN instead of stopping.",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Print the table as CSV.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {PACKAGE_VERSION}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print a Cp-versus-inclination table for the selected methods."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.steps < 1:
        parser.error("--steps must be >= 1")
    if args.theta_min > args.theta_max:
        parser.error("--theta-min must be <= --theta-max")
    try:
        methods = [resolve_pressure_method(m) for m in _parse_methods(args.methods)]
    except ValueError as exc:
        parser.error(str(exc))

    def logfn(msg: str):
        print(msg, file=sys.stderr, flush=True)

    logfn(
        f"[RUN] Mach={args.mach:g} gamma={args.gamma:g} methods={','.join(methods)} "
        f"theta=[{args.theta_min:g}, {args.theta_max:g}] deg steps={args.steps}"
    )
    angles = np.linspace(args.theta_min, args.theta_max, args.steps)
    try:
        df = sweep_pressure_coefficients(
            methods,
            angles,
            args.mach,
            args.gamma,
            on_error="skip" if args.skip_undefined else "raise",
            logfn=logfn,
        )
    except PressureModelError as exc:
        logfn(f"[ERROR] {exc}")
        return 2

    if args.csv:
        print(df.to_csv(index=False), end="", flush=True)
    else:
        print(df.to_string(index=False, float_format=lambda v: f"{v:.6f}"), flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
