"""
CLI entry-point for inspecting a configured scheme.

Usage::

    python -m pycoulomb config.yaml
    python -m pycoulomb config.yaml --points 21 --verbose
"""
from __future__ import annotations

import argparse
import logging
import sys

import numpy as np
from pydantic import ValidationError

import pycoulomb
from pycoulomb.config import build_from_config, load_config
from pycoulomb.exceptions import CoulombError
from pycoulomb.pairwise import ShortRangeFunction

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m pycoulomb",
        description="Tabulate the short-range function of a configured scheme.",
    )
    parser.add_argument("config", help="YAML configuration file")
    parser.add_argument(
        "--points", type=int, default=11, help="Number of reduced distances (default: 11)"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version", action="version", version=f"pycoulomb {pycoulomb.__version__}"
    )
    return parser


def format_table(scheme: ShortRangeFunction, points: int) -> str:
    """Tabulate S, S', S'' and S''' on an even grid in q = [0, 1]."""
    lines = [f"{'q':>8} {'S':>14} {'dS':>14} {'d2S':>14} {'d3S':>14}"]
    for q in np.linspace(0.0, 1.0, points):
        lines.append(
            f"{q:8.4f} "
            f"{scheme.short_range_f0(q):14.6e} "
            f"{scheme.short_range_f1(q):14.6e} "
            f"{scheme.short_range_f2(q):14.6e} "
            f"{scheme.short_range_f3(q):14.6e}"
        )
    return "\n".join(lines)


def run(config_path: str, points: int) -> None:
    config = load_config(config_path)
    scheme, medium, units = build_from_config(config)
    prefactors = scheme.self_energy_prefactors()

    print(f"pycoulomb {pycoulomb.__version__}")
    print(f"Scheme:  {scheme}")
    print(f"Units:   {units.length_unit}, {units.energy_unit}")
    if medium is not None:
        print(f"Medium:  {medium}")
    print(f"kappa:   {scheme.kappa}")
    print(f"Self-energy prefactors: monopole={prefactors.monopole}, dipole={prefactors.dipole}")
    print()
    print(format_table(scheme, points))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.points < 2:
        parser.error("--points must be at least 2")
    try:
        run(args.config, args.points)
        return 0
    except (OSError, ValidationError, ValueError, CoulombError) as exc:
        logger.debug("Failed to load configuration", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
